"""Serialization: flatten a validated report into records or a DataFrame.

Every element becomes one record carrying its group name plus the shape's
keys, in source order::

    from report_parser import MoonReport, to_records, to_pandas

    report = MoonReport()
    report.parse(text)
    rows = to_records(report)      # [{"group": "OP9L-F II - Moon 10", "moon": "", ...}, ...]
    df = to_pandas(report)         # requires: pip install report-parser[pandas]

Both functions validate the report first, so a malformed paste raises the
same structural exceptions as :meth:`Report.validate`.  Values stay strings;
typing them is left to the consumer.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, create_model

from report_parser.exceptions import ShapeError
from report_parser.report import Report
from report_parser.shapes import ReportShape

if TYPE_CHECKING:
    import pandas as pd

GROUP_COLUMN = "group"


@lru_cache(maxsize=32)
def record_model(shape: ReportShape) -> type[BaseModel]:
    """Build a Pydantic model for one flattened record of *shape*.

    Fields are declared under positional names and aliased to the shape
    keys, so keys that are not Python identifiers still work.

    Raises:
        ShapeError: If a shape key collides with the group column.
    """
    if GROUP_COLUMN in shape.keys:
        raise ShapeError(f"Report shape {shape.name!r} uses the reserved key {GROUP_COLUMN!r}")
    fields = {
        f"field_{i}": (str, Field(default="", alias=key))
        for i, key in enumerate(shape.keys)
    }
    return create_model(
        f"{shape.name.title().replace(' ', '')}Record",
        __config__=ConfigDict(populate_by_name=True, extra="forbid", frozen=True),
        group=(str, Field(alias=GROUP_COLUMN)),
        **fields,
    )


def to_models(report: Report) -> list[BaseModel]:
    """Validate *report* and return one record model per element."""
    report.validate()
    model = record_model(report.shape)
    return [
        model.model_validate({GROUP_COLUMN: group.name, **element.fields()})
        for group in report.get_groups()
        for element in group.get_elements()
    ]


def to_records(report: Report) -> list[dict[str, str]]:
    """Validate *report* and return one flat dict per element."""
    return [m.model_dump(by_alias=True) for m in to_models(report)]


def to_pandas(report: Report) -> pd.DataFrame:
    """Validate *report* and return its records as a string-typed DataFrame.

    Raises:
        ImportError: If pandas is not installed.
    """
    try:
        import pandas as pd
    except ImportError:
        raise ImportError(
            "pandas is required for to_pandas(). "
            "Install with: pip install report-parser[pandas]"
        ) from None

    columns = [GROUP_COLUMN, *report.shape.keys]
    return pd.DataFrame(to_records(report), columns=columns).astype("string")
