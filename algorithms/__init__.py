from .chart_types import Bounds, TrendLine, Point, Segment, DEGENERATE_SEGMENT
from .chart_math import ChartMath
from .unit_converter import UnitConverter, InvalidUnitError

__all__ = [
    "Bounds",
    "TrendLine",
    "Point",
    "Segment",
    "DEGENERATE_SEGMENT",
    "ChartMath",
    "UnitConverter",
    "InvalidUnitError",
]
