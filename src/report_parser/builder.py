"""Document builder: assemble classified lines into a report tree.

The builder is a small state machine fed one :class:`Line` at a time:

``AWAITING_HEADER``
    Blank lines are skipped.  The first content line, when it is a DATA
    line, becomes the header.  When it is a GROUP line the header slot is
    forfeited (a report pasted without its header must fail validation as
    headerless, not have its first data row promoted) and the line is
    handled as below.

``AWAITING_GROUP_OR_DATA``
    No group seen yet.  GROUP lines open a group; DATA lines are recorded
    as ungrouped elements.

``IN_GROUP``
    GROUP lines open a new group; DATA lines are appended to the current
    group.

Blank lines never close a group: the game client inserts them purely as
visual separators.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from report_parser.elements import Element, Group, Header
from report_parser.shapes import ReportShape
from report_parser.tokenizer import Line, LineKind

log = logging.getLogger(__name__)


class BuilderState(Enum):
    AWAITING_HEADER = "awaiting_header"
    AWAITING_GROUP_OR_DATA = "awaiting_group_or_data"
    IN_GROUP = "in_group"


@dataclass
class Document:
    """Snapshot of a built report tree.

    Attributes:
        header: Captured header, or None.
        groups: Groups in source order.
        elements: Data rows seen before any group line.
    """

    header: Header | None = None
    groups: list[Group] = field(default_factory=list)
    elements: list[Element] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.header is None and not self.groups and not self.elements


class DocumentBuilder:
    """Incrementally build a :class:`Document` for a given shape."""

    def __init__(self, shape: ReportShape):
        self.shape = shape
        self._keys = shape.keys
        self.state = BuilderState.AWAITING_HEADER
        self.document = Document()
        self._current: Group | None = None

    def _transition(self, state: BuilderState, line: Line) -> None:
        if state is not self.state:
            log.debug("Line %d: %s -> %s", line.number, self.state.value, state.value)
            self.state = state

    def feed(self, line: Line) -> None:
        if line.kind is LineKind.BLANK:
            return

        if self.state is BuilderState.AWAITING_HEADER:
            if line.kind is LineKind.DATA:
                self._set_header(line)
                self._transition(BuilderState.AWAITING_GROUP_OR_DATA, line)
                return
            log.debug("Line %d: group line before any header, report has no header", line.number)
            self._transition(BuilderState.AWAITING_GROUP_OR_DATA, line)

        if line.kind is LineKind.GROUP:
            self._current = Group(name=line.values[0])
            self.document.groups.append(self._current)
            self._transition(BuilderState.IN_GROUP, line)
            return

        element = self._decode(line)
        if self._current is None:
            log.debug("Line %d: data line outside any group", line.number)
            self.document.elements.append(element)
        else:
            self._current.add(element)

    def _set_header(self, line: Line) -> None:
        names = list(line.cells)
        while names and not names[-1]:
            names.pop()
        header = Header(names=tuple(names))
        if not self.shape.matches_header(header):
            log.warning(
                "Header %s does not match %s report columns %s",
                header.fields(), self.shape.name, self.shape.names,
            )
        self.document.header = header

    def _decode(self, line: Line) -> Element:
        filled = len(line.cells)
        while filled and not line.cells[filled - 1]:
            filled -= 1
        if filled > len(self._keys):
            log.warning(
                "Line %d: %d cells for %d columns, dropping the surplus",
                line.number, filled, len(self._keys),
            )
        return Element.from_cells(self._keys, line.cells)

    def finish(self) -> Document:
        return self.document


def build_document(lines: Iterable[Line], shape: ReportShape) -> Document:
    """Run the grouping state machine over *lines* and return the result."""
    builder = DocumentBuilder(shape)
    for line in lines:
        builder.feed(line)
    return builder.finish()
