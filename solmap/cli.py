"""
solmap CLI.

This module provides the command-line interface for solmap, which prints the
source range behind every program counter of a compiled contract.
"""

import json
import logging
import os
import sys

import click

from solmap.errors import SolmapError
from solmap.parser.source_mapper import parse_source_map
from solmap.utils.artifacts import (
    load_combined_json,
    get_contract,
    get_bytecode_and_source_map,
    source_names,
    read_source_codes
)


def format_mapping(pc_to_source_range):
    """
    Format decoded ranges as one line per program counter.

    Args:
        pc_to_source_range (dict): Program counter to SourceRange or None

    Returns:
        list: Output lines
    """
    lines = []
    for pc, source_range in pc_to_source_range.items():
        target = str(source_range) if source_range is not None else "<unmapped>"
        lines.append(f"pc {pc}: {target}")
    return lines


def mapping_to_json(pc_to_source_range):
    """Convert decoded ranges to a JSON string keyed by program counter."""
    return json.dumps(
        {
            str(pc): source_range.to_dict() if source_range is not None else None
            for pc, source_range in pc_to_source_range.items()
        },
        indent=2,
    )


@click.command()
@click.argument("combined_json", type=click.Path(exists=True, dir_okay=False))
@click.argument("contract")
@click.option("--root", type=click.Path(file_okay=False), default=None,
              help="Directory source file names are relative to. Defaults to the JSON file's directory.")
@click.option("--runtime", is_flag=True, help="Decode the runtime (deployed) bytecode map.")
@click.option("--json", "as_json", is_flag=True, help="Print the mapping as JSON.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(combined_json, contract, root, runtime, as_json, verbose):
    """
    Decode the source map of CONTRACT from a solc COMBINED_JSON output file.

    CONTRACT is either "File.sol:Name" or a bare contract name.
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    if root is None:
        root = os.path.dirname(os.path.abspath(combined_json))

    try:
        data = load_combined_json(combined_json)
        bytecode_hex, src_map = get_bytecode_and_source_map(get_contract(data, contract), runtime=runtime)
        names = source_names(data)
        source_codes = read_source_codes(names, root)
        pc_to_source_range = parse_source_map(source_codes, src_map, bytecode_hex, names)
    except SolmapError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if as_json:
        print(mapping_to_json(pc_to_source_range))
    else:
        for line in format_mapping(pc_to_source_range):
            print(line)


if __name__ == "__main__":
    main()
