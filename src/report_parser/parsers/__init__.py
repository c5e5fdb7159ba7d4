"""Report flavors built on the generic parser."""

from report_parser.parsers.moon import MOON_REPORT_SHAPE, MoonReport

__all__ = ["MOON_REPORT_SHAPE", "MoonReport"]
