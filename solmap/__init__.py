"""
solmap - Solidity source map decoder.

solmap translates the compressed source maps emitted by the Solidity
compiler into source file ranges keyed by bytecode program counter, for use
in debuggers, coverage and tracing tools.
"""

__version__ = '0.1.0'

from solmap.errors import SolmapError, RangeOutOfBoundsError, BytecodeDecodeError, ArtifactError
from solmap.parser import Position, SourceRange, get_location_by_offset, parse_source_map

__all__ = [
    'SolmapError',
    'RangeOutOfBoundsError',
    'BytecodeDecodeError',
    'ArtifactError',
    'Position',
    'SourceRange',
    'get_location_by_offset',
    'parse_source_map'
]
