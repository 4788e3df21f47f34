import logging
import math
import numbers
from collections.abc import Mapping
from typing import Any, Callable, Iterable, List, Tuple, Union

import numpy as np

from .chart_types import DEGENERATE_SEGMENT, Bounds, Point, Segment, TrendLine

logger = logging.getLogger(__name__)

FieldSelector = Union[str, Callable[[Any], Any]]


class ChartMath:
    """Numeric helpers that turn activity records into chart geometry."""

    MAX_TICK_DECIMALS: int = 12

    @staticmethod
    def clamp(value: float, min_value: float, max_value: float) -> float:
        """Clamp ``value`` to the inclusive range [min_value, max_value]."""
        if min_value > max_value:
            raise ValueError("min_value must not exceed max_value")
        return max(min_value, min(value, max_value))

    @staticmethod
    def round_half_up(value: float) -> int:
        """Round to the nearest integer with halves going up."""
        return int(math.floor(value + 0.5))

    @staticmethod
    def field_value(record: Any, field: FieldSelector) -> Any:
        """Return ``field`` from ``record`` or ``None`` when it is absent."""
        if callable(field):
            return field(record)
        if isinstance(record, Mapping):
            return record.get(field)
        return getattr(record, field, None)

    @staticmethod
    def is_number(value: Any) -> bool:
        """Return True for finite real numbers, excluding booleans."""
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            return False
        try:
            return math.isfinite(value)
        except OverflowError:
            return False

    @staticmethod
    def valid_pairs(
        data: Iterable[Any], x_field: FieldSelector, y_field: FieldSelector
    ) -> Tuple[np.ndarray, np.ndarray]:
        """Return x and y arrays for records where both fields are numeric."""
        xs: List[float] = []
        ys: List[float] = []
        for record in data or ():
            if record is None:
                continue
            x = ChartMath.field_value(record, x_field)
            y = ChartMath.field_value(record, y_field)
            if ChartMath.is_number(x) and ChartMath.is_number(y):
                xs.append(float(x))
                ys.append(float(y))
        return np.array(xs, dtype=float), np.array(ys, dtype=float)

    @staticmethod
    def data_bounds(
        data: Iterable[Any], x_field: FieldSelector, y_field: FieldSelector
    ) -> Bounds:
        """Return the min/max of both fields, or zero bounds when nothing is valid."""
        xs, ys = ChartMath.valid_pairs(data, x_field, y_field)
        if xs.size == 0:
            return Bounds.empty()
        return Bounds(
            x_min=float(xs.min()),
            x_max=float(xs.max()),
            y_min=float(ys.min()),
            y_max=float(ys.max()),
        )

    @staticmethod
    def _tick_decimals(step: float) -> int:
        if step >= 1:
            return 0
        decimals = int(math.ceil(-math.log10(step))) + 1
        return min(decimals, ChartMath.MAX_TICK_DECIMALS)

    @staticmethod
    def calculate_ticks(min_value: float, max_value: float, count: int) -> list[float]:
        """Return ``count`` evenly spaced ticks from ``min_value`` to ``max_value``.

        Interior ticks are rounded to whole numbers when the step is at least
        one, otherwise to the precision of the step. The first and last tick
        are always exactly ``min_value`` and ``max_value``, which must be in
        ascending order.
        """
        if isinstance(count, bool) or not isinstance(count, numbers.Integral):
            raise ValueError("count must be an integer")
        if not (ChartMath.is_number(min_value) and ChartMath.is_number(max_value)):
            raise ValueError("tick range must be finite numbers")
        if min_value > max_value:
            raise ValueError("min_value must not exceed max_value")
        lo = float(min_value)
        hi = float(max_value)
        if count <= 1:
            return [lo]
        if lo == hi:
            return [lo] * int(count)
        step = hi / (count - 1) - lo / (count - 1)
        decimals = ChartMath._tick_decimals(step)
        frac = np.arange(int(count)) / (count - 1)
        ticks = [float(t) for t in np.round(lo * (1 - frac) + hi * frac, decimals)]
        ticks[0] = lo
        ticks[-1] = hi
        return ticks

    @staticmethod
    def trend_line(
        data: Iterable[Any], x_field: FieldSelector, y_field: FieldSelector
    ) -> TrendLine:
        """Fit ``y_field`` against ``x_field`` with ordinary least squares."""
        xs, ys = ChartMath.valid_pairs(data, x_field, y_field)
        if xs.size < 2 or np.ptp(xs) == 0:
            return TrendLine()
        x_mean = float(np.mean(xs))
        y_mean = float(np.mean(ys))
        dx = xs - x_mean
        sxx = float(np.sum(dx * dx))
        if sxx == 0:
            return TrendLine()
        slope = float(np.sum(dx * (ys - y_mean))) / sxx
        intercept = y_mean - slope * x_mean
        return TrendLine(slope=slope, intercept=intercept, can_show_line=True)

    @staticmethod
    def _as_bounds(viewport: Union[Bounds, Mapping]) -> Bounds:
        if isinstance(viewport, Bounds):
            return viewport
        return Bounds(
            x_min=float(viewport["x_min"]),
            x_max=float(viewport["x_max"]),
            y_min=float(viewport["y_min"]),
            y_max=float(viewport["y_max"]),
        )

    @staticmethod
    def _clip_end(slope: float, intercept: float, x: float, viewport: Bounds) -> Point:
        y = slope * x + intercept
        clamped = ChartMath.clamp(y, viewport.y_min, viewport.y_max)
        if clamped == y:
            return Point(x, y)
        return Point((clamped - intercept) / slope, clamped)

    @staticmethod
    def trend_line_points(trend: TrendLine, viewport: Union[Bounds, Mapping]) -> Segment:
        """Return the part of ``trend`` that lies inside ``viewport``.

        Callers should only ask for points when ``trend.can_show_line`` is
        set; otherwise, and when the line never crosses the viewport, the
        zero segment is returned.
        """
        if not trend.can_show_line:
            return DEGENERATE_SEGMENT
        vp = ChartMath._as_bounds(viewport)
        if vp.x_min > vp.x_max or vp.y_min > vp.y_max:
            raise ValueError("viewport minimum must not exceed maximum")

        slope, intercept = trend.slope, trend.intercept
        if slope == 0:
            if not vp.y_min <= intercept <= vp.y_max:
                logger.debug("horizontal trend line at %s outside viewport", intercept)
                return DEGENERATE_SEGMENT
            return (Point(vp.x_min, intercept), Point(vp.x_max, intercept))

        start = ChartMath._clip_end(slope, intercept, vp.x_min, vp)
        end = ChartMath._clip_end(slope, intercept, vp.x_max, vp)
        if start.x > vp.x_max or end.x < vp.x_min:
            logger.debug("trend line y=%sx+%s misses viewport %s", slope, intercept, vp)
            return DEGENERATE_SEGMENT
        return (
            Point(ChartMath.clamp(start.x, vp.x_min, vp.x_max), start.y),
            Point(ChartMath.clamp(end.x, vp.x_min, vp.x_max), end.y),
        )
