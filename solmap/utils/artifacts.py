"""
Utilities for loading Solidity compiler output and the sources it refers to.

Compiler output is the JSON written by
`solc --combined-json bin,srcmap,bin-runtime,srcmap-runtime`.
"""

import json
import logging
import os

from solmap.errors import ArtifactError

logger = logging.getLogger(__name__)


def load_combined_json(path):
    """
    Load a combined-json compiler output file.

    Args:
        path (str): Path to the JSON file

    Returns:
        dict: The parsed compiler output

    Raises:
        ArtifactError: If the file is not valid JSON or has no contracts
    """
    with open(path, "r") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ArtifactError(f"Invalid compiler output {path}: {e}") from e

    if not isinstance(data, dict) or not data.get("contracts"):
        raise ArtifactError(f"No contracts found in {path}")
    return data


def get_contract(data, name):
    """
    Find a contract in compiler output.

    Args:
        data (dict): Compiler output from load_combined_json
        name (str): Either a full "File.sol:Name" key or a bare contract name

    Returns:
        dict: The contract's output entry

    Raises:
        ArtifactError: If no contract or more than one contract matches
    """
    contracts = data.get("contracts", {})
    if name in contracts:
        return contracts[name]

    matches = [key for key in contracts if key.rsplit(":", 1)[-1] == name]
    if not matches:
        raise ArtifactError(f"Contract '{name}' not found")
    if len(matches) > 1:
        raise ArtifactError(f"Contract name '{name}' is ambiguous: {', '.join(sorted(matches))}")
    return contracts[matches[0]]


def get_bytecode_and_source_map(contract, runtime=False):
    """
    Get the bytecode hex and source map for a contract.

    Args:
        contract (dict): A contract entry from get_contract
        runtime (bool): Use the deployed (runtime) code instead of creation code

    Returns:
        tuple: (bytecode_hex, src_map)

    Raises:
        ArtifactError: If either field is missing
    """
    bytecode_key, src_map_key = ("bin-runtime", "srcmap-runtime") if runtime else ("bin", "srcmap")
    bytecode_hex = contract.get(bytecode_key)
    src_map = contract.get(src_map_key)
    if not bytecode_hex:
        raise ArtifactError(f"Compiler output has no '{bytecode_key}' for this contract")
    if src_map is None:
        raise ArtifactError(f"Compiler output has no '{src_map_key}' for this contract")
    return bytecode_hex, src_map


def source_names(data):
    """
    Get the file name table from compiler output.

    Returns:
        dict: File index to file name, from the output's sourceList
    """
    return dict(enumerate(data.get("sourceList", [])))


def read_source_codes(names, root):
    """
    Read the source file for every file index.

    Files that cannot be found are left out, so entries that refer to them
    decode as unmapped. Files are decoded as latin-1 so that each character
    stands for one byte, matching the byte offsets the compiler emits.

    Args:
        names (dict): File index to file name
        root (str): Directory the file names are relative to

    Returns:
        dict: File index to source text, one character per byte
    """
    source_codes = {}
    for file_index, name in names.items():
        file_path = os.path.join(root, name)
        if not os.path.isfile(file_path):
            logger.warning("Source file not found, its ranges will be unmapped: %s", file_path)
            continue
        with open(file_path, "rb") as f:
            source_codes[file_index] = f.read().decode("latin-1")
    return source_codes
