"""
Shared compiler output fixtures for solmap tests.
"""

import json
import os

C_SOURCE = "contract C {\n  uint x;\n}"
D_SOURCE = "library D {}\n"

COMBINED_JSON = {
    "contracts": {
        "C.sol:C": {
            "bin": "6080604052",
            "srcmap": "0:24:0:-;15:6:0:-;:::-",
            "bin-runtime": "600000",
            "srcmap-runtime": "0:24:0:-;0:0:-1",
        },
        "lib/D.sol:D": {
            "bin": "00",
            "srcmap": "0:1:1:-",
            "bin-runtime": "00",
            "srcmap-runtime": "0:1:1:-",
        },
    },
    "sourceList": ["C.sol", "lib/D.sol"],
    "version": "0.8.24+commit.e11b9ed9",
}


def write_project(directory, data=None, with_sources=True):
    """
    Write a combined-json file and its sources into a directory.

    Args:
        directory (str): Target directory
        data (dict, optional): Compiler output. Defaults to COMBINED_JSON.
        with_sources (bool): Whether to write the source files

    Returns:
        str: Path to the combined-json file
    """
    path = os.path.join(directory, "combined.json")
    with open(path, "w") as f:
        json.dump(COMBINED_JSON if data is None else data, f)
    if with_sources:
        os.makedirs(os.path.join(directory, "lib"), exist_ok=True)
        for name, text in (("C.sol", C_SOURCE), ("lib/D.sol", D_SOURCE)):
            with open(os.path.join(directory, name), "w", newline="") as f:
                f.write(text)
    return path
