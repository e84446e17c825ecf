"""
Exceptions raised while decoding Solidity source maps.
"""


class SolmapError(Exception):
    """Base class for all solmap errors."""


class RangeOutOfBoundsError(SolmapError, ValueError):
    """A source map entry points outside the source text it was given.

    This means the source text, source map and bytecode do not belong
    together; it is never retried or partially recovered from.
    """

    def __init__(self, file_name, offset=None, length=None):
        self.file_name = file_name
        self.offset = offset
        self.length = length
        super().__init__(f"Error while processing sourcemap: location out of range in {file_name}")


class BytecodeDecodeError(SolmapError, ValueError):
    """The bytecode hex string could not be turned into bytes."""


class ArtifactError(SolmapError):
    """Compiler output is missing data needed for decoding."""
