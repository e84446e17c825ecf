"""
solmap utility functions.
"""

from solmap.utils.artifacts import (
    load_combined_json,
    get_contract,
    get_bytecode_and_source_map,
    source_names,
    read_source_codes
)

__all__ = [
    'load_combined_json',
    'get_contract',
    'get_bytecode_and_source_map',
    'source_names',
    'read_source_codes'
]
