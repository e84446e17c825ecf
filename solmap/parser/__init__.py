"""
Source map parsing for Solidity compiler output.
"""

from solmap.parser.types import Position, Location, SourceRange, RawEntry, SourceLocation
from solmap.parser.instructions import get_pc_to_instruction_index_mapping, hex_to_bytes
from solmap.parser.source_mapper import (
    get_location_by_offset,
    parse_entry,
    parse_entries,
    resolve_entries,
    resolve_source_range,
    parse_source_map
)

__all__ = [
    'Position',
    'Location',
    'SourceRange',
    'RawEntry',
    'SourceLocation',
    'get_pc_to_instruction_index_mapping',
    'hex_to_bytes',
    'get_location_by_offset',
    'parse_entry',
    'parse_entries',
    'resolve_entries',
    'resolve_source_range',
    'parse_source_map'
]
