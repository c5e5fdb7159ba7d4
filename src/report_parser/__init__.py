"""report_parser: Parse pasted tabular game reports into validated documents."""

from report_parser.builder import BuilderState, Document, DocumentBuilder, build_document
from report_parser.elements import Element, Group, Header
from report_parser.exceptions import (
    EmptyReportException,
    InvalidReportGroupException,
    MissingReportGroupException,
    MissingReportHeaderException,
    ReportValidationError,
    ReportViolation,
    ShapeError,
)
from report_parser.normalize import normalize_text
from report_parser.parsers.moon import MOON_REPORT_SHAPE, MoonReport
from report_parser.report import Report
from report_parser.shapes import ColumnSpec, ReportShape, load_shape
from report_parser.tokenizer import Line, LineKind, classify_cells, split_cells, tokenize
from report_parser.validate import check_report, validate_report


# Serialization (lazy import keeps pydantic model building off the parse path)
def to_records(*args, **kwargs):
    """Flatten a validated report into one dict per element."""
    from report_parser.serialize import to_records as _to_records
    return _to_records(*args, **kwargs)


def to_pandas(*args, **kwargs):
    """Flatten a validated report into a DataFrame. Requires: pip install report-parser[pandas]"""
    from report_parser.serialize import to_pandas as _to_pandas
    return _to_pandas(*args, **kwargs)


__all__ = [
    # Reports
    "MOON_REPORT_SHAPE",
    "MoonReport",
    "Report",
    # Shapes
    "ColumnSpec",
    "ReportShape",
    "load_shape",
    # Document tree
    "Document",
    "Element",
    "Group",
    "Header",
    # Pipeline stages
    "BuilderState",
    "DocumentBuilder",
    "Line",
    "LineKind",
    "build_document",
    "check_report",
    "classify_cells",
    "normalize_text",
    "split_cells",
    "tokenize",
    "validate_report",
    # Errors
    "EmptyReportException",
    "InvalidReportGroupException",
    "MissingReportGroupException",
    "MissingReportHeaderException",
    "ReportValidationError",
    "ReportViolation",
    "ShapeError",
    # Serialization
    "to_pandas",
    "to_records",
]
