"""Vectorized AQI evaluation for gridded or time-series concentrations.

Uses the same truncation, clamping, band selection, extrapolation and
rounding as :func:`AQI.aqi.interpolate`, so element-wise results match the
scalar path for every finite input. Missing values (NaN) stay NaN.
"""

from __future__ import annotations

import numpy as np

from AQI.aqi import Pollutant
from AQI.constants.aqi_const import TRUNCATION_TOLERANCE


def truncate_array(values: np.ndarray, decimals: int) -> np.ndarray:
    """Truncate every element to ``decimals`` places.

    Elements too large to scale are passed through unchanged.
    """
    scale = 10**decimals
    with np.errstate(over="ignore", invalid="ignore"):
        scaled = values * scale
        lifted = scaled + np.abs(scaled) * TRUNCATION_TOLERANCE
    return np.where(np.isinf(lifted) & np.isfinite(values), values, np.floor(lifted) / scale)


def round_half_away_array(values: np.ndarray) -> np.ndarray:
    """Element-wise round to nearest, ties away from zero."""
    return np.copysign(np.floor(np.abs(values) + 0.5), values)


def calculate_aqi_array(concentrations, pollutant: Pollutant) -> np.ndarray:
    """
    Convert an array of concentrations (µg/m³) to AQI values.

    Args:
        concentrations: Array-like of concentrations, any shape
        pollutant: Pollutant whose breakpoint table applies

    Returns:
        Float array of the same shape holding integral AQI values, NaN where
        the input was NaN
    """
    values = np.asarray(concentrations, dtype=np.float64)
    table = np.asarray(pollutant.breakpoints, dtype=np.float64)
    c_lo, c_hi, i_lo, i_hi = table.T

    truncated = truncate_array(values, pollutant.decimals)
    # Negative readings fall into the first band; np.maximum keeps NaN
    truncated = np.maximum(truncated, c_lo[0])

    # Bands are contiguous on the truncation grid, so the first band whose
    # upper bound is >= the value is the containing one. Index len(table)
    # means above the table and is folded onto the top band.
    idx = np.searchsorted(c_hi, truncated, side="left")
    idx = np.minimum(idx, len(table) - 1)

    aqi = (i_hi[idx] - i_lo[idx]) / (c_hi[idx] - c_lo[idx]) * (
        truncated - c_lo[idx]
    ) + i_lo[idx]
    return round_half_away_array(aqi)


def calculate_overall_aqi_array(pm25, pm10) -> np.ndarray:
    """Element-wise reporting AQI, the larger of the PM2.5 and PM10 values.

    A NaN in one pollutant yields the other pollutant's AQI.
    """
    pm25_aqi = calculate_aqi_array(pm25, Pollutant.PM25)
    pm10_aqi = calculate_aqi_array(pm10, Pollutant.PM10)
    return np.fmax(pm25_aqi, pm10_aqi)
