from typing import Literal

from pydantic import BaseModel, Field, ValidationError


class ChartSettingsSchema(BaseModel):
    units: Literal["metric", "imperial"] = "metric"
    tick_count: int = Field(5, ge=1)
    x_offset: float = Field(2.0, ge=0)
    y_offset: float = Field(5.0, ge=0)
    trend_viewport_scale: float = Field(10.0, gt=0)


def validate_settings(data: dict) -> ChartSettingsSchema:
    try:
        return ChartSettingsSchema(**data)
    except ValidationError as e:
        raise ValueError(str(e))
