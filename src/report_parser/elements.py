"""Document tree nodes: header, groups and their elements."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Header:
    """Column display names, in source order, as captured from the report."""

    names: tuple[str, ...]

    def fields(self) -> list[str]:
        return list(self.names)


@dataclass(frozen=True)
class Element:
    """One data row decoded onto a report shape's field keys."""

    values: dict[str, str]

    @classmethod
    def from_cells(cls, keys: list[str], cells: list[str] | tuple[str, ...]) -> Element:
        """Map *cells* positionally onto *keys*.

        Short rows are padded with empty strings, surplus cells are dropped,
        so the result always carries exactly *keys*.
        """
        values = {key: (cells[i] if i < len(cells) else "") for i, key in enumerate(keys)}
        return cls(values=values)

    def fields(self) -> dict[str, str]:
        return dict(self.values)

    def __getitem__(self, key: str) -> str:
        return self.values[key]

    def __hash__(self) -> int:
        return hash(tuple(self.values.items()))


@dataclass
class Group:
    """A named cluster of data rows (e.g. a single moon).

    Attributes:
        name: Text of the group-name line.
        elements: Rows under the group, in source order.
    """

    name: str
    elements: list[Element] = field(default_factory=list)

    def add(self, element: Element) -> None:
        self.elements.append(element)

    def get_name(self) -> str:
        return self.name

    def get_elements(self) -> list[Element]:
        return list(self.elements)

    def has_elements(self) -> bool:
        return bool(self.elements)
