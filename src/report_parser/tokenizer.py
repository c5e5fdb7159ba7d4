"""Line tokenizer for pasted tabular reports.

Splits raw text into lines, lines into cells, and classifies every line by
the number of non-empty cells it holds:

- ``BLANK``: nothing but whitespace (visual separator only)
- ``GROUP``: exactly one non-empty cell (a group name, e.g. a moon)
- ``DATA``: two or more non-empty cells (a header or a data row)

Lines break on CR, LF, CRLF and the Unicode line and paragraph
separators.  Cell delimiters are any whitespace run containing a tab, or a
run of two or more spaces.  A single space never splits, so multi-word
values such as ``Moon Product`` or ``Glossy Scordite`` survive intact.

Known ambiguity: a value that itself contains two consecutive spaces is
split in two.  There is no grammar to tell the cases apart in pasted text.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from report_parser.normalize import normalize_text

log = logging.getLogger(__name__)

_LINE_BREAK_RE = re.compile(r"\r\n|[\r\n\u2028\u2029]")

_DELIMITER_RE = re.compile(r"[ ]*\t[\t ]*|[ ]{2,}")


class LineKind(Enum):
    """Structural classification of a single input line."""

    BLANK = "blank"
    GROUP = "group"
    DATA = "data"


@dataclass(frozen=True)
class Line:
    """A classified input line.

    Attributes:
        number: 1-based line number in the input text.
        kind: Structural classification.
        cells: Trimmed cells in source order, empty cells included.
    """

    number: int
    kind: LineKind
    cells: tuple[str, ...]

    @property
    def values(self) -> list[str]:
        """Non-empty cells only."""
        return [c for c in self.cells if c]


def split_lines(text: str) -> list[str]:
    """Split *text* on any line-break convention."""
    return _LINE_BREAK_RE.split(text)


def split_cells(line: str) -> list[str]:
    """Split a line into trimmed cells.

    A leading delimiter produces a leading empty cell, which keeps data
    rows aligned with their header (EVE rows start with a tab under the
    empty ``Moon`` column).

    >>> split_cells("\\tGlossy Scordite\\t0.3")
    ['', 'Glossy Scordite', '0.3']
    >>> split_cells("Moon Product    Quantity")
    ['Moon Product', 'Quantity']
    """
    if not line.strip():
        return []
    line = line.rstrip()
    return [cell.strip() for cell in _DELIMITER_RE.split(line)]


def classify_cells(cells: list[str] | tuple[str, ...]) -> LineKind:
    """Classify a line from the count of its non-empty cells."""
    filled = sum(1 for c in cells if c)
    if filled == 0:
        return LineKind.BLANK
    if filled == 1:
        return LineKind.GROUP
    return LineKind.DATA


def tokenize(text: str) -> Iterator[Line]:
    """Yield a classified :class:`Line` for every line of *text*.

    The generator is consumed once; call again to re-tokenize.
    """
    for number, raw in enumerate(split_lines(normalize_text(text)), start=1):
        cells = tuple(split_cells(raw))
        kind = classify_cells(cells)
        log.debug("Line %d: %s (%d cells)", number, kind.value, len(cells))
        yield Line(number=number, kind=kind, cells=cells)
