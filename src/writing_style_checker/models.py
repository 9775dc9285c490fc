from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List

from .textutils import utf16_column, utf16_length

# str.splitlines() also breaks on form feeds and unicode separators; editors don't.
LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")

DIAGNOSTIC_SOURCE = "writing-style"


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """A zero-based (line, character) location; ``character`` counts UTF-16 code units."""

    line: int
    character: int


@dataclass(frozen=True, slots=True)
class Range:
    """An ordered pair of positions; may span several lines."""

    start: Position
    end: Position

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError(f"Range end {self.end} precedes start {self.start}.")

    @classmethod
    def on_line(cls, line: int, start: int, end: int) -> "Range":
        return cls(Position(line, start), Position(line, end))

    @property
    def is_single_line(self) -> bool:
        return self.start.line == self.end.line


@dataclass(frozen=True, slots=True)
class LineFragment:
    """A contiguous run of one source line plus the range it covers in the document."""

    line_number: int
    text: str
    range: Range

    @classmethod
    def whole_line(cls, line_number: int, text: str) -> "LineFragment":
        return cls(line_number, text, Range.on_line(line_number, 0, utf16_length(text)))

    def column_of(self, index: int) -> int:
        """Document column of the code-point ``index`` into this fragment's text."""
        return self.start + utf16_column(self.text, index)

    @property
    def start(self) -> int:
        return self.range.start.character

    @property
    def end(self) -> int:
        return self.range.end.character

    @property
    def is_empty_or_whitespace(self) -> bool:
        return not self.text.strip()


Sentence = List[LineFragment]


class Severity(str, Enum):
    INFORMATION = "information"
    WARNING = "warning"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A single style finding anchored to a document range."""

    range: Range
    message: str
    severity: Severity = Severity.INFORMATION
    code: str = ""
    source: str = DIAGNOSTIC_SOURCE


@dataclass(slots=True)
class Document:
    """Represents an input document as an editor sees it: a list of lines."""

    doc_id: str
    text: str
    _lines: List[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._lines = LINE_BREAK_RE.split(self.text)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def line_at(self, index: int) -> LineFragment:
        """Return line ``index`` (0-based) as a fragment covering the whole line."""
        return LineFragment.whole_line(index, self._lines[index])

    def lines(self) -> List[LineFragment]:
        return [self.line_at(index) for index in range(self.line_count)]
