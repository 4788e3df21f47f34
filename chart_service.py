from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

from algorithms import (
    Bounds,
    ChartMath,
    DEGENERATE_SEGMENT,
    InvalidUnitError,
    TrendLine,
    UnitConverter,
)
from algorithms.chart_types import segment_as_dicts
from config import YamlConfig

logger = logging.getLogger(__name__)

ACTIVITY_URL = "https://www.strava.com/activities/{id}"


class ActivityChartService:
    """Prepare chart geometry from raw activity records."""

    def __init__(
        self,
        units: str = UnitConverter.METRIC,
        tick_count: int = 5,
        x_offset: float = 2.0,
        y_offset: float = 5.0,
        trend_viewport_scale: float = 10.0,
    ) -> None:
        self.units = units
        self.tick_count = tick_count
        self.x_offset = x_offset
        self.y_offset = y_offset
        self.trend_viewport_scale = trend_viewport_scale

    @classmethod
    def from_config(cls, path: str = "settings.yaml") -> "ActivityChartService":
        """Build a service from a YAML settings file."""
        settings = YamlConfig(path).load_settings()
        return cls(
            units=settings.units,
            tick_count=settings.tick_count,
            x_offset=settings.x_offset,
            y_offset=settings.y_offset,
            trend_viewport_scale=settings.trend_viewport_scale,
        )

    @staticmethod
    def no_data_chart() -> Dict[str, Any]:
        """Return the chart state the UI renders as a "no data" placeholder."""
        return {
            "has_data": False,
            "points": [],
            "bounds": Bounds.empty().as_dict(),
            "domain": {"x": [0.0, 0.0], "y": [0.0, 0.0]},
            "ticks": {"x": [], "y": []},
            "trend": TrendLine().as_dict(),
            "reference_line": segment_as_dicts(DEGENERATE_SEGMENT),
        }

    @staticmethod
    def heart_rate_points(activities: Optional[Iterable[Any]]) -> List[Dict[str, Any]]:
        """Return scatter points for activities with heart rate, speed and sport."""
        points: List[Dict[str, Any]] = []
        for act in activities or ():
            if act is None:
                continue
            heartrate = ChartMath.field_value(act, "average_heartrate")
            speed = ChartMath.field_value(act, "average_speed")
            sport_type = ChartMath.field_value(act, "sport_type")
            if not heartrate or not speed or not sport_type:
                continue
            if not (ChartMath.is_number(heartrate) and ChartMath.is_number(speed)):
                continue
            points.append(
                {
                    "heartrate": heartrate,
                    "speed": speed,
                    "url": ACTIVITY_URL.format(id=ChartMath.field_value(act, "id")),
                    "name": ChartMath.field_value(act, "name") or "",
                    "sport_type": sport_type,
                }
            )
        return points

    def _viewport(self, bounds: Bounds) -> Bounds:
        # reference line runs past the plotted points
        return Bounds(
            x_min=min(0.0, bounds.x_min),
            x_max=max(bounds.x_max, bounds.x_max * self.trend_viewport_scale),
            y_min=bounds.y_min - self.y_offset,
            y_max=max(bounds.y_max, bounds.y_max * self.trend_viewport_scale),
        )

    def scatter_chart(
        self, points: List[Dict[str, Any]], x_field: str, y_field: str
    ) -> Dict[str, Any]:
        """Return bounds, ticks, domains and trend line for a scatter chart."""
        xs, _ = ChartMath.valid_pairs(points, x_field, y_field)
        if xs.size == 0:
            return self.no_data_chart()

        bounds = ChartMath.data_bounds(points, x_field, y_field)
        ticks = {
            "x": ChartMath.calculate_ticks(
                min(0, ChartMath.round_half_up(bounds.x_min)),
                ChartMath.round_half_up(bounds.x_max),
                self.tick_count,
            ),
            "y": ChartMath.calculate_ticks(
                ChartMath.round_half_up(bounds.y_min),
                ChartMath.round_half_up(bounds.y_max),
                self.tick_count,
            ),
        }
        trend = ChartMath.trend_line(points, x_field, y_field)
        segment = (
            ChartMath.trend_line_points(trend, self._viewport(bounds))
            if trend.can_show_line
            else DEGENERATE_SEGMENT
        )
        return {
            "has_data": True,
            "points": points,
            "bounds": bounds.as_dict(),
            "domain": {
                "x": [bounds.x_min - self.x_offset, bounds.x_max + self.x_offset],
                "y": [bounds.y_min - self.y_offset, bounds.y_max + self.y_offset],
            },
            "ticks": ticks,
            "trend": trend.as_dict(),
            "reference_line": segment_as_dicts(segment),
        }

    def heart_rate_vs_speed(self, activities: Optional[Iterable[Any]]) -> Dict[str, Any]:
        """Return the heart rate vs. speed scatter chart in the configured units."""
        try:
            speed_label = UnitConverter.unit_label("speed", self.units)
            points = [
                dict(p, speed=round(UnitConverter.convert_speed(p["speed"], self.units), 2))
                for p in self.heart_rate_points(activities)
            ]
        except InvalidUnitError as exc:
            logger.warning("Heart rate chart unavailable: %s", exc)
            return self.no_data_chart()
        chart = self.scatter_chart(points, "speed", "heartrate")
        chart["units"] = {"x": speed_label, "y": "bpm"}
        return chart

    @staticmethod
    def start_times(activities: Optional[Iterable[Any]]) -> List[Dict[str, Any]]:
        """Count activities per start hour, always returning 24 buckets."""
        stamps: List[Optional[str]] = []
        for act in activities or ():
            if act is None:
                continue
            value = ChartMath.field_value(act, "start_date_local") or ChartMath.field_value(
                act, "start_date"
            )
            stamps.append(value if isinstance(value, str) else None)
        parsed = pd.to_datetime(
            pd.Series(stamps, dtype="object"), errors="coerce", utc=True, format="ISO8601"
        )
        skipped = int(parsed.isna().sum())
        if skipped:
            logger.info("Skipped %d activities without a usable start date", skipped)
        counts = parsed.dropna().dt.hour.value_counts().reindex(range(24), fill_value=0)
        return [{"hour": str(hour), "activities": int(counts[hour])} for hour in range(24)]
