"""US EPA AQI fields for PurpleAir sensor status payloads.

A PurpleAir unit reports two laser counters (channel A and channel B). The
EPA fields are computed per channel and for the sensor as a whole, where the
whole-sensor reading is the mean of the channels that reported.
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass
from typing import Dict, Mapping, Optional

from AQI.aqi import calculate_overall_aqi, calculate_pm10_aqi, calculate_pm25_aqi
from AQI.constants.sensor_const import SENSOR_CHANNELS

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


class InvalidReadingError(ValueError):
    """Raised when a payload field holds something that is not a number."""

    def __init__(self, key: str, value):
        super().__init__(f"Field {key!r} is not a numeric concentration: {value!r}")
        self.key = key
        self.value = value


@dataclass(frozen=True)
class EPAFields:
    """EPA AQI values published alongside a sensor reading."""

    aqi: int
    pm25_aqi: int
    pm10_aqi: int
    category: str
    color: str

    def as_dict(self, prefix: str = "epa_") -> Dict[str, object]:
        return {f"{prefix}{key}": value for key, value in asdict(self).items()}


def read_concentration(status: Mapping, key: str) -> Optional[float]:
    """Return the concentration stored under ``key``, or None when absent."""
    value = status.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidReadingError(key, value)
    try:
        concentration = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidReadingError(key, value) from e
    if not math.isfinite(concentration):
        raise InvalidReadingError(key, value)
    return concentration


def epa_fields(pm25: Optional[float], pm10: Optional[float]) -> Optional[EPAFields]:
    """
    Compute the EPA fields for one pair of readings.

    Returns None when neither pollutant has a positive reading, which is how
    an idle or disconnected counter shows up in the payload.
    """
    pm25 = pm25 if pm25 is not None else 0.0
    pm10 = pm10 if pm10 is not None else 0.0
    if pm25 <= 0 and pm10 <= 0:
        return None

    combined = calculate_overall_aqi(pm25, pm10)
    return EPAFields(
        aqi=combined.aqi,
        pm25_aqi=calculate_pm25_aqi(pm25).aqi,
        pm10_aqi=calculate_pm10_aqi(pm10).aqi,
        category=combined.category,
        color=combined.color,
    )


def _mean(values) -> Optional[float]:
    present = [v for v in values if v is not None]
    if not present:
        return None
    return sum(present) / len(present)


def annotate_status(status: Mapping) -> Dict[str, Optional[EPAFields]]:
    """
    Compute EPA fields for each channel and for the whole sensor.

    Args:
        status: Decoded sensor status payload

    Returns:
        Mapping with keys ``"a"``, ``"b"`` and ``"overall"``; a value is None
        when that channel had nothing to report. The payload is not modified.
    """
    readings = {
        channel: (read_concentration(status, pm25_key), read_concentration(status, pm10_key))
        for channel, (pm25_key, pm10_key) in SENSOR_CHANNELS.items()
    }

    annotated: Dict[str, Optional[EPAFields]] = {}
    for channel, (pm25, pm10) in readings.items():
        annotated[channel] = epa_fields(pm25, pm10)
        if annotated[channel] is None:
            logger.debug("Channel %s has no particulate reading, skipping", channel)

    # Idle channels do not contribute to the whole-sensor reading
    reporting = [readings[channel] for channel in SENSOR_CHANNELS if annotated[channel] is not None]
    annotated["overall"] = epa_fields(
        _mean(pm25 for pm25, _ in reporting),
        _mean(pm10 for _, pm10 in reporting),
    )
    return annotated
