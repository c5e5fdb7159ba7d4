"""Tests for report_parser.elements — header, element and group nodes."""

from __future__ import annotations

from report_parser.elements import Element, Group, Header

KEYS = ["ore", "amount", "id"]


class TestElement:
    def test_from_cells_pads(self):
        assert Element.from_cells(KEYS, ["Sylvite"]).fields() == {"ore": "Sylvite", "amount": "", "id": ""}

    def test_fields_is_a_copy(self):
        element = Element.from_cells(KEYS, ["Sylvite", "0.1", "1"])
        element.fields()["ore"] = "changed"
        assert element["ore"] == "Sylvite"

    def test_hashable(self):
        a = Element.from_cells(KEYS, ["Sylvite", "0.1", "1"])
        b = Element.from_cells(KEYS, ["Sylvite", "0.1", "1"])
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_distinct_rows_differ(self):
        a = Element.from_cells(KEYS, ["Sylvite", "0.1", "1"])
        b = Element.from_cells(KEYS, ["Cobaltite", "0.1", "1"])
        assert a != b
        assert len({a, b}) == 2


class TestHeaderAndGroup:
    def test_header_fields(self):
        assert Header(names=("Ore", "Amount")).fields() == ["Ore", "Amount"]

    def test_group_accessors(self):
        group = Group("Moon 1")
        assert not group.has_elements()
        group.add(Element.from_cells(KEYS, ["Sylvite"]))
        assert group.get_name() == "Moon 1"
        assert group.has_elements()
        assert len(group.get_elements()) == 1
