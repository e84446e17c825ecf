"""
Value types produced by the source map decoder.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Position:
    """A line/column pair. Lines start at 1, columns at 0."""

    line: int
    column: int


@dataclass(frozen=True)
class Location:
    start: Position
    end: Position


@dataclass(frozen=True)
class SourceRange:
    """A span of source text inside a named file."""

    file_name: str
    location: Location

    def __str__(self):
        start, end = self.location.start, self.location.end
        return f"{self.file_name}:{start.line}:{start.column}-{end.line}:{end.column}"

    def to_dict(self):
        """
        Convert the range to plain JSON-compatible data.

        Returns:
            dict: {"fileName": ..., "location": {"start": ..., "end": ...}}
        """
        start, end = self.location.start, self.location.end
        return {
            "fileName": self.file_name,
            "location": {
                "start": {"line": start.line, "column": start.column},
                "end": {"line": end.line, "column": end.column},
            },
        }


@dataclass(frozen=True)
class RawEntry:
    """The fields of one `;` separated segment, before inheritance.

    A field is None when it was empty or not a base-10 integer.
    """

    offset: Optional[int] = None
    length: Optional[int] = None
    file_index: Optional[int] = None
    jump_type: Optional[str] = None


@dataclass(frozen=True)
class SourceLocation:
    """A source map entry after delta resolution.

    Fields stay None until some entry in the map supplies a value.
    A file_index of -1 marks code with no source.
    """

    offset: Optional[int] = None
    length: Optional[int] = None
    file_index: Optional[int] = None
