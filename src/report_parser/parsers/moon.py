"""Moon mining survey report, as copied from the game client's moon probe window."""

from __future__ import annotations

from report_parser.report import Report
from report_parser.shapes import ReportShape

MOON_REPORT_SHAPE = ReportShape.from_pairs("moon", [
    ("Moon", "moon"),
    ("Moon Product", "moonProduct"),
    ("Quantity", "quantity"),
    ("Ore TypeID", "oreTypeID"),
    ("SolarSystemID", "solarSystemID"),
    ("PlanetID", "planetID"),
    ("MoonID", "moonID"),
])


class MoonReport(Report):
    """Moon survey: one group per moon, one element per ore product."""

    shape = MOON_REPORT_SHAPE
