"""Structural validation failures raised by :meth:`Report.validate`.

Each failure names the shape violation it detects and carries a
:class:`ReportViolation` discriminator, so callers can either catch the
specific class or switch on ``exc.violation``.
"""

from __future__ import annotations

from enum import Enum


class ReportViolation(Enum):
    """Structural violations, in the order the validator checks them."""

    EMPTY = "empty"
    MISSING_HEADER = "missing_header"
    MISSING_GROUP = "missing_group"
    INVALID_GROUP = "invalid_group"


class ReportValidationError(Exception):
    """Base class for structural report failures."""

    violation: ReportViolation
    default_message = "Report is malformed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class EmptyReportException(ReportValidationError):
    """No header, group or element was recognized."""

    violation = ReportViolation.EMPTY
    default_message = "Report is empty"


class MissingReportHeaderException(ReportValidationError):
    """Content exists but no header line was found."""

    violation = ReportViolation.MISSING_HEADER
    default_message = "Report has no header"


class MissingReportGroupException(ReportValidationError):
    """A header was found but no group line follows it."""

    violation = ReportViolation.MISSING_GROUP
    default_message = "Report has no group"


class InvalidReportGroupException(ReportValidationError):
    """A group exists with no elements under it."""

    violation = ReportViolation.INVALID_GROUP
    default_message = "Report group has no elements"

    def __init__(self, message: str | None = None, group: str | None = None):
        if message is None and group is not None:
            message = f"Report group {group!r} has no elements"
        super().__init__(message)
        self.group = group


class ShapeError(ValueError):
    """Raised when a report shape definition is malformed."""


VIOLATION_ERRORS: dict[ReportViolation, type[ReportValidationError]] = {
    ReportViolation.EMPTY: EmptyReportException,
    ReportViolation.MISSING_HEADER: MissingReportHeaderException,
    ReportViolation.MISSING_GROUP: MissingReportGroupException,
    ReportViolation.INVALID_GROUP: InvalidReportGroupException,
}
