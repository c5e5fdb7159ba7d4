"""Report shapes: the column table of one report flavor.

A shape lists, in column order, each column's display name as it appears
in the pasted header and the semantic key its values are stored under.
The tokenizer, builder and validator know nothing about a particular
flavor; they only consume a :class:`ReportShape`.

Shapes can be declared in code or loaded from JSON::

    {
      "name": "moon",
      "columns": [
        {"name": "Moon", "key": "moon"},
        {"name": "Moon Product", "key": "moonProduct"}
      ]
    }
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from report_parser.elements import Header
from report_parser.exceptions import ShapeError


class ColumnSpec(BaseModel):
    """A single column: display *name* and semantic *key*."""

    model_config = ConfigDict(frozen=True)

    name: str
    key: str


class ReportShape(BaseModel):
    """Ordered column table for a report flavor."""

    model_config = ConfigDict(frozen=True)

    name: str
    columns: tuple[ColumnSpec, ...]

    @field_validator("columns")
    @classmethod
    def _check_columns(cls, columns: tuple[ColumnSpec, ...]) -> tuple[ColumnSpec, ...]:
        if not columns:
            raise ValueError("a report shape needs at least one column")
        seen: set[str] = set()
        for col in columns:
            if not col.key:
                raise ValueError(f"column {col.name!r} has an empty key")
            if col.key in seen:
                raise ValueError(f"duplicate column key {col.key!r}")
            seen.add(col.key)
        return columns

    @classmethod
    def from_pairs(cls, name: str, pairs: list[tuple[str, str]]) -> ReportShape:
        """Build a shape from ``(display name, key)`` pairs."""
        try:
            return cls(name=name, columns=tuple(ColumnSpec(name=n, key=k) for n, k in pairs))
        except ValidationError as exc:
            raise ShapeError(f"Invalid report shape {name!r}: {exc}") from exc

    @property
    def keys(self) -> list[str]:
        return [c.key for c in self.columns]

    @property
    def names(self) -> list[str]:
        return [c.name for c in self.columns]

    def key_for(self, name: str) -> str | None:
        """Return the key for a display *name*, or None if unknown."""
        for col in self.columns:
            if col.name == name:
                return col.key
        return None

    def matches_header(self, header: Header) -> bool:
        """True when *header* lists exactly this shape's display names."""
        return header.fields() == self.names


def load_shape(path: str | Path) -> ReportShape:
    """Load a JSON shape file into a :class:`ReportShape`.

    Raises:
        ShapeError: If the file is not valid JSON or does not describe a
            valid shape.
    """
    with open(path, encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as exc:
            raise ShapeError(f"{path}: not valid JSON ({exc})") from exc

    try:
        return ReportShape.model_validate(raw)
    except ValidationError as exc:
        raise ShapeError(f"{path}: invalid report shape: {exc}") from exc
