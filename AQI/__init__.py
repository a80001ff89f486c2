"""US EPA Air Quality Index for PM2.5 and PM10."""

from .aqi import (
    AQIResult,
    Breakpoint,
    CategoryBand,
    Pollutant,
    calculate_overall_aqi,
    calculate_pm10_aqi,
    calculate_pm25_aqi,
    classify,
    evaluate,
    interpolate,
    overall,
)

__all__ = [
    "AQIResult",
    "Breakpoint",
    "CategoryBand",
    "Pollutant",
    "calculate_overall_aqi",
    "calculate_pm10_aqi",
    "calculate_pm25_aqi",
    "classify",
    "evaluate",
    "interpolate",
    "overall",
]
