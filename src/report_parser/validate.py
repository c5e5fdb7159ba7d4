"""Structural validation of a built report.

Checks, in order, and stops at the first failure:

1. the report is not empty
2. it has a header
3. it has at least one group
4. every group has at least one element

Only the shape of the tree is checked; field values are never inspected.
"""

from __future__ import annotations

from report_parser.builder import Document
from report_parser.exceptions import (
    VIOLATION_ERRORS,
    InvalidReportGroupException,
    ReportViolation,
)


def find_empty_group(document: Document) -> str | None:
    """Return the name of the first group without elements, if any."""
    for group in document.groups:
        if not group.has_elements():
            return group.name
    return None


def check_report(document: Document) -> ReportViolation | None:
    """Return the first structural violation of *document*, or None."""
    if document.is_empty:
        return ReportViolation.EMPTY
    if document.header is None:
        return ReportViolation.MISSING_HEADER
    if not document.groups:
        return ReportViolation.MISSING_GROUP
    if find_empty_group(document) is not None:
        return ReportViolation.INVALID_GROUP
    return None


def validate_report(document: Document) -> None:
    """Raise the exception matching the first violation of *document*.

    Raises:
        EmptyReportException: Nothing was recognized.
        MissingReportHeaderException: Content without a header.
        MissingReportGroupException: Header without any group.
        InvalidReportGroupException: A group without elements.
    """
    violation = check_report(document)
    if violation is None:
        return
    if violation is ReportViolation.INVALID_GROUP:
        raise InvalidReportGroupException(group=find_empty_group(document))
    raise VIOLATION_ERRORS[violation]()
