"""
Decoding of Solidity compiler source maps into per program counter source ranges.

The source map format is documented at
https://docs.soliditylang.org/en/latest/internals/source_mappings.html
"""

import logging
import re

from solmap.errors import RangeOutOfBoundsError
from solmap.parser.instructions import get_pc_to_instruction_index_mapping, hex_to_bytes
from solmap.parser.types import Location, Position, RawEntry, SourceLocation, SourceRange

logger = logging.getLogger(__name__)

RADIX = 10
INTEGER_PREFIX = re.compile(r"\s*[+-]?[0-9]+")
NO_SOURCE_FILE_INDEX = -1


def get_location_by_offset(text):
    """
    Build a table from character offset to line/column position.

    Args:
        text (str): The full source text

    Returns:
        dict: Offsets 0..len(text) (inclusive) mapped to Position
    """
    location_by_offset = {0: Position(line=1, column=0)}
    location = location_by_offset[0]
    for offset, char in enumerate(text):
        if char == "\n":
            location = Position(line=location.line + 1, column=0)
        else:
            location = Position(line=location.line, column=location.column + 1)
        location_by_offset[offset + 1] = location
    return location_by_offset


def build_offset_tables(source_codes):
    """
    Index every supplied source text.

    Args:
        source_codes (dict): File index to source text. Indices with no text
            (None) get no table.

    Returns:
        dict: File index to offset table
    """
    return {
        file_index: get_location_by_offset(source_code)
        for file_index, source_code in source_codes.items()
        if source_code is not None
    }


def _parse_int(field):
    # Leading digits only, so "12abc" is 12
    match = INTEGER_PREFIX.match(field or "")
    if match is None:
        return None
    return int(match.group(0), RADIX)


def parse_entry(raw):
    """
    Split one source map segment into its fields.

    Empty and malformed numeric fields are both treated as absent.

    Args:
        raw (str): A segment such as "10:5:0:-"

    Returns:
        RawEntry: The parsed fields
    """
    fields = raw.split(":")
    fields += [None] * (4 - len(fields))
    jump_type = fields[3] or None
    return RawEntry(
        offset=_parse_int(fields[0]),
        length=_parse_int(fields[1]),
        file_index=_parse_int(fields[2]),
        jump_type=jump_type,
    )


def _inherit(raw, previous):
    return SourceLocation(
        offset=previous.offset if raw.offset is None else raw.offset,
        length=previous.length if raw.length is None else raw.length,
        file_index=previous.file_index if raw.file_index is None else raw.file_index,
    )


def resolve_entries(raw_entries):
    """
    Apply delta inheritance to parsed entries.

    Each absent field takes the value of the previous resolved entry. Before
    any entry has supplied a field it stays None.

    Args:
        raw_entries (iterable): RawEntry objects in map order

    Returns:
        list: SourceLocation objects, one per input, in the same order
    """
    resolved = []
    previous = SourceLocation()
    for raw in raw_entries:
        previous = _inherit(raw, previous)
        resolved.append(previous)
    return resolved


def parse_entries(src_map):
    """
    Parse and resolve a full source map string.

    Args:
        src_map (str): Entries separated by ";"

    Returns:
        list: Resolved SourceLocation objects indexed by instruction index
    """
    return resolve_entries(parse_entry(raw) for raw in src_map.split(";"))


def resolve_source_range(entry, location_by_offset_by_file_index, sources):
    """
    Turn a resolved entry into a source range.

    Args:
        entry (SourceLocation): The resolved entry
        location_by_offset_by_file_index (dict): Offset tables by file index
        sources (dict): File names by file index

    Returns:
        SourceRange: The range, or None when the entry has no source

    Raises:
        RangeOutOfBoundsError: If the entry points outside the source text
    """
    if entry.file_index is None or entry.file_index == NO_SOURCE_FILE_INDEX:
        return None
    location_by_offset = location_by_offset_by_file_index.get(entry.file_index)
    if location_by_offset is None:
        return None
    if entry.offset is None or entry.length is None:
        return None

    file_name = sources.get(entry.file_index)
    start = location_by_offset.get(entry.offset)
    end = location_by_offset.get(entry.offset + entry.length)
    if start is None or end is None:
        raise RangeOutOfBoundsError(file_name, entry.offset, entry.length)
    return SourceRange(file_name=file_name, location=Location(start=start, end=end))


def map_instruction_indices(entries, location_by_offset_by_file_index, sources):
    """
    Resolve every entry, keyed by its instruction index.

    Entries without a source are left out of the result.

    Returns:
        dict: Instruction index to SourceRange
    """
    instruction_index_to_source_range = {}
    for instruction_index, entry in enumerate(entries):
        source_range = resolve_source_range(entry, location_by_offset_by_file_index, sources)
        # Some compiler generated code has no source, see solidity issue #3629
        if source_range is not None:
            instruction_index_to_source_range[instruction_index] = source_range
    logger.debug(
        "Mapped %d of %d source map entries",
        len(instruction_index_to_source_range),
        len(entries),
    )
    return instruction_index_to_source_range


def rekey_by_program_counter(pc_to_instruction_index, instruction_index_to_source_range):
    """
    Re-key source ranges by program counter.

    Every program counter is kept; those without a range map to None.

    Returns:
        dict: Program counter to SourceRange or None, in ascending pc order
    """
    return {
        pc: instruction_index_to_source_range.get(pc_to_instruction_index[pc])
        for pc in sorted(pc_to_instruction_index)
    }


def parse_source_map(source_codes, src_map, bytecode_hex, sources,
                     pc_mapper=get_pc_to_instruction_index_mapping):
    """
    Decode a source map into source ranges by program counter.

    Args:
        source_codes (dict): Source text by file index
        src_map (str): The compiler's source map string
        bytecode_hex (str): Hex encoded bytecode the map was produced for
        sources (dict): File names by file index
        pc_mapper (callable): Maps bytecode bytes to a dict of program
            counter to instruction index

    Returns:
        dict: Program counter to SourceRange, or None where no source applies

    Raises:
        RangeOutOfBoundsError: If an entry points outside its source text
        BytecodeDecodeError: If bytecode_hex is not valid hex
    """
    bytecode = hex_to_bytes(bytecode_hex)
    pc_to_instruction_index = pc_mapper(bytecode)
    location_by_offset_by_file_index = build_offset_tables(source_codes)
    entries = parse_entries(src_map)
    instruction_index_to_source_range = map_instruction_indices(
        entries, location_by_offset_by_file_index, sources
    )
    logger.debug(
        "Decoded %d program counters from %d bytes of bytecode",
        len(pc_to_instruction_index),
        len(bytecode),
    )
    return rekey_by_program_counter(pc_to_instruction_index, instruction_index_to_source_range)
