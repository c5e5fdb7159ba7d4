"""Report facade: parse pasted text, validate it, read it back.

Usage::

    from report_parser import MoonReport

    report = MoonReport()
    report.parse(text)
    report.validate()
    for group in report.get_groups():
        print(group.get_name(), [e.fields() for e in group.get_elements()])

A report instance is single-owner: ``parse`` replaces all state, so callers
sharing an instance across threads must serialize parse, validate and reads.
"""

from __future__ import annotations

import logging

from report_parser.builder import Document, build_document
from report_parser.elements import Element, Group, Header
from report_parser.exceptions import ReportViolation
from report_parser.shapes import ReportShape
from report_parser.tokenizer import tokenize
from report_parser.validate import check_report, validate_report

log = logging.getLogger(__name__)


class Report:
    """A pasted tabular report bound to a :class:`ReportShape`.

    Subclasses for a specific flavor set the class attribute ``shape``;
    otherwise a shape is passed to the constructor.
    """

    shape: ReportShape

    def __init__(self, shape: ReportShape | None = None):
        if shape is not None:
            self.shape = shape
        elif getattr(self, "shape", None) is None:
            raise TypeError(f"{type(self).__name__} needs a report shape")
        self._document = Document()

    # ─── Parsing ─────────────────────────────────────────────────────────────

    def parse(self, text: str) -> None:
        """Parse *text*, replacing whatever a previous call built.

        Never raises on malformed content; call :meth:`validate` afterwards.
        """
        self._document = build_document(tokenize(text), self.shape)
        log.info(
            "Parsed %s report: header=%s, %d group(s), %d ungrouped element(s)",
            self.shape.name,
            self.has_header(),
            len(self._document.groups),
            len(self._document.elements),
        )

    def check(self) -> ReportViolation | None:
        """Return the first structural violation, or None when valid."""
        return check_report(self._document)

    def validate(self) -> None:
        """Raise on the first structural violation (see :mod:`report_parser.validate`)."""
        validate_report(self._document)

    # ─── Accessors ───────────────────────────────────────────────────────────

    def is_empty(self) -> bool:
        return self._document.is_empty

    def has_header(self) -> bool:
        return self._document.header is not None

    def has_groups(self) -> bool:
        return bool(self._document.groups)

    def has_elements(self) -> bool:
        """True if a data row appeared before any group line."""
        return bool(self._document.elements)

    def get_header(self) -> Header | None:
        return self._document.header

    def get_groups(self) -> list[Group]:
        return list(self._document.groups)

    def get_elements(self) -> list[Element]:
        """Data rows not attached to any group."""
        return list(self._document.elements)

    @property
    def header(self) -> Header | None:
        return self.get_header()

    @property
    def groups(self) -> list[Group]:
        return self.get_groups()

    @property
    def elements(self) -> list[Element]:
        return self.get_elements()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(header={self.has_header()}, "
            f"groups={len(self._document.groups)})"
        )
