class InvalidUnitError(ValueError):
    """Raised when a unit system or time unit is not recognised."""


class UnitConverter:
    """Utility for converting stored SI values to display units."""

    METRIC = "metric"
    IMPERIAL = "imperial"
    UNIT_SYSTEMS = (METRIC, IMPERIAL)
    TIME_UNITS = ("minutes", "hours")

    M_TO_KM = 0.001
    M_TO_MI = 0.000621371
    M_TO_FT = 3.28084
    MPS_TO_KMH = 3.6
    MPS_TO_MPH = 2.23694

    LABELS = {
        METRIC: {"distance": "km", "elevation": "m", "speed": "km/h"},
        IMPERIAL: {"distance": "mi", "elevation": "ft", "speed": "mph"},
    }

    @staticmethod
    def _unsupported(unit) -> InvalidUnitError:
        return InvalidUnitError(f"Unsupported unit type: {unit}")

    @staticmethod
    def convert_distance(value: float, unit: str) -> float:
        """Convert metres to kilometres or miles."""
        if unit == UnitConverter.METRIC:
            return value * UnitConverter.M_TO_KM
        if unit == UnitConverter.IMPERIAL:
            return value * UnitConverter.M_TO_MI
        raise UnitConverter._unsupported(unit)

    @staticmethod
    def convert_elevation(value: float, unit: str) -> float:
        """Convert metres to metres or feet."""
        if unit == UnitConverter.METRIC:
            return value
        if unit == UnitConverter.IMPERIAL:
            return value * UnitConverter.M_TO_FT
        raise UnitConverter._unsupported(unit)

    @staticmethod
    def convert_time(value: float, unit: str) -> float:
        """Convert seconds to ``minutes`` or ``hours``."""
        if unit == "minutes":
            return value / 60
        if unit == "hours":
            return value / 3600
        raise UnitConverter._unsupported(unit)

    @staticmethod
    def convert_speed(value: float, unit: str) -> float:
        """Convert metres per second to km/h or mph."""
        if unit == UnitConverter.METRIC:
            return value * UnitConverter.MPS_TO_KMH
        if unit == UnitConverter.IMPERIAL:
            return value * UnitConverter.MPS_TO_MPH
        raise UnitConverter._unsupported(unit)

    @staticmethod
    def unit_label(quantity: str, unit: str) -> str:
        """Return the axis label for ``quantity`` in the given unit system."""
        if unit not in UnitConverter.LABELS:
            raise UnitConverter._unsupported(unit)
        labels = UnitConverter.LABELS[unit]
        if quantity not in labels:
            raise ValueError(f"Unknown quantity: {quantity}")
        return labels[quantity]
