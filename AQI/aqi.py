"""US EPA AQI calculation for particulate matter.

Concentrations are converted with the EPA piecewise-linear equation

    I = (I_hi - I_lo) / (C_hi - C_lo) * (C - C_lo) + I_lo

after truncating the reading to the precision the pollutant is reported at.
Readings above the last breakpoint keep that band's slope, so the index is
unbounded above (600 µg/m³ of PM2.5 gives 566).
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Dict, NamedTuple, Tuple

from AQI.constants.aqi_const import (
    AQI_CATEGORIES,
    PM10_BREAKPOINTS,
    PM10_DECIMALS,
    PM25_BREAKPOINTS,
    PM25_DECIMALS,
    SENSITIVE_GROUPS_NOTE,
    SENSITIVE_GROUPS_THRESHOLD,
    TRUNCATION_TOLERANCE,
)

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


class Breakpoint(NamedTuple):
    """One EPA band mapping ``[concentration_low, concentration_high]`` to ``[aqi_low, aqi_high]``."""

    concentration_low: float
    concentration_high: float
    aqi_low: int
    aqi_high: int


class CategoryBand(NamedTuple):
    aqi_threshold: int
    category_name: str
    color: str
    color_rgb: str


PM25_TABLE: Tuple[Breakpoint, ...] = tuple(Breakpoint(*row) for row in PM25_BREAKPOINTS)
PM10_TABLE: Tuple[Breakpoint, ...] = tuple(Breakpoint(*row) for row in PM10_BREAKPOINTS)
CATEGORY_TABLE: Tuple[CategoryBand, ...] = tuple(CategoryBand(*row) for row in AQI_CATEGORIES)


class Pollutant(str, Enum):
    """Pollutants with an EPA breakpoint table."""

    PM25 = "pm25"
    PM10 = "pm10"

    @property
    def breakpoints(self) -> Tuple[Breakpoint, ...]:
        return _TABLES[self][0]

    @property
    def decimals(self) -> int:
        """Number of decimal places kept when truncating a reading."""
        return _TABLES[self][1]


_TABLES = {
    Pollutant.PM25: (PM25_TABLE, PM25_DECIMALS),
    Pollutant.PM10: (PM10_TABLE, PM10_DECIMALS),
}


@dataclass(frozen=True)
class AQIResult:
    """Index value and its display annotation for a single pollutant."""

    aqi: int
    category: str
    color: str
    color_rgb: str
    sensitive_group_note: str
    pollutant: Pollutant

    def as_dict(self) -> Dict[str, object]:
        result = asdict(self)
        result["pollutant"] = self.pollutant.value
        return result


def truncate_concentration(concentration: float, decimals: int) -> float:
    """Truncate (not round) ``concentration`` to ``decimals`` places.

    Only float noise within a relative ``TRUNCATION_TOLERANCE`` of the next
    step is lifted onto it. Readings too large to scale are returned as is;
    they lie far beyond the top band anyway.
    """
    scale = 10**decimals
    scaled = concentration * scale
    lifted = scaled + abs(scaled) * TRUNCATION_TOLERANCE
    if not math.isfinite(lifted):
        return concentration
    return math.floor(lifted) / scale


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def find_breakpoint(concentration: float, table: Tuple[Breakpoint, ...]) -> Breakpoint:
    """Return the first band containing ``concentration``, or the top band when above the table."""
    for band in table:
        if band.concentration_low <= concentration <= band.concentration_high:
            return band
    return table[-1]


def interpolate(concentration: float, pollutant: Pollutant) -> int:
    """Convert a concentration (µg/m³) to an integer AQI for ``pollutant``."""
    if not math.isfinite(concentration):
        raise ValueError(f"Concentration must be a finite number, got {concentration!r}")

    table = pollutant.breakpoints
    truncated = truncate_concentration(concentration, pollutant.decimals)

    if truncated < table[0].concentration_low:
        logger.debug(
            "%s reading %s below the first breakpoint, clamping to %s",
            pollutant.value,
            concentration,
            table[0].concentration_low,
        )
        truncated = table[0].concentration_low

    band = find_breakpoint(truncated, table)
    if truncated > band.concentration_high:
        logger.debug(
            "%s reading %s beyond the last breakpoint, extrapolating",
            pollutant.value,
            concentration,
        )

    aqi = (band.aqi_high - band.aqi_low) / (
        band.concentration_high - band.concentration_low
    ) * (truncated - band.concentration_low) + band.aqi_low
    return round_half_away(aqi)


def classify(aqi: int) -> CategoryBand:
    """Return the category band for an AQI value."""
    for band in CATEGORY_TABLE:
        if aqi <= band.aqi_threshold:
            return band
    # Hazardous has no upper bound
    return CATEGORY_TABLE[-1]


def sensitive_group_note(aqi: int) -> str:
    return SENSITIVE_GROUPS_NOTE if aqi > SENSITIVE_GROUPS_THRESHOLD else ""


def evaluate(concentration: float, pollutant: Pollutant) -> AQIResult:
    """Compute the AQI for one pollutant and annotate it with category, color and advisory."""
    aqi = interpolate(concentration, pollutant)
    band = classify(aqi)
    return AQIResult(
        aqi=aqi,
        category=band.category_name,
        color=band.color,
        color_rgb=band.color_rgb,
        sensitive_group_note=sensitive_group_note(aqi),
        pollutant=pollutant,
    )


def overall(pm25: float, pm10: float) -> AQIResult:
    """Reporting AQI: the more severe of the PM2.5 and PM10 results.

    Ties are reported as PM2.5.
    """
    pm25_result = evaluate(pm25, Pollutant.PM25)
    pm10_result = evaluate(pm10, Pollutant.PM10)
    if pm25_result.aqi >= pm10_result.aqi:
        return pm25_result
    return pm10_result


def calculate_pm25_aqi(concentration: float) -> AQIResult:
    """Calculate the AQI from a PM2.5 concentration (µg/m³)."""
    return evaluate(concentration, Pollutant.PM25)


def calculate_pm10_aqi(concentration: float) -> AQIResult:
    """Calculate the AQI from a PM10 concentration (µg/m³)."""
    return evaluate(concentration, Pollutant.PM10)


def calculate_overall_aqi(pm25: float, pm10: float) -> AQIResult:
    """Calculate the overall AQI (highest of PM2.5 and PM10)."""
    return overall(pm25, pm10)
