from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Tuple


@dataclass(frozen=True)
class Bounds:
    """Rectangular range covering two numeric fields of a dataset."""

    x_min: float = 0.0
    x_max: float = 0.0
    y_min: float = 0.0
    y_max: float = 0.0

    @classmethod
    def empty(cls) -> "Bounds":
        return cls(0.0, 0.0, 0.0, 0.0)

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class TrendLine:
    """Least-squares line ``y = slope * x + intercept``."""

    slope: float = 0.0
    intercept: float = 0.0
    can_show_line: bool = False

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def as_dict(self) -> dict:
        return asdict(self)


Segment = Tuple[Point, Point]

DEGENERATE_SEGMENT: Segment = (Point(0.0, 0.0), Point(0.0, 0.0))


def segment_as_dicts(segment: Segment) -> list[dict]:
    return [segment[0].as_dict(), segment[1].as_dict()]
