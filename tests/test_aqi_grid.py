"""Tests for the vectorized AQI calculation used on gridded data."""

import sys
from pathlib import Path

import numpy as np
import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from AQI import Pollutant, calculate_overall_aqi, interpolate
from AQI.grid import (
    calculate_aqi_array,
    calculate_overall_aqi_array,
    round_half_away_array,
    truncate_array,
)


class TestAQIArray:
    """The array path must agree with the scalar interpolator."""

    @pytest.mark.parametrize("pollutant", list(Pollutant))
    def test_matches_scalar(self, pollutant):
        values = np.concatenate(
            [
                np.arange(0, 7000) / 10,
                np.linspace(-5.0, 1500.0, 2001),
                np.array([23.75, 12.05, 54.9, 154.99]),
            ]
        )
        expected = np.array([interpolate(float(v), pollutant) for v in values])
        result = calculate_aqi_array(values, pollutant)
        np.testing.assert_array_equal(result, expected)

    def test_known_values(self):
        result = calculate_aqi_array([5.0, 12.0, 12.1, 23.75, 35.5, 600.0], Pollutant.PM25)
        np.testing.assert_array_equal(result, [21, 50, 51, 75, 101, 566])

    def test_preserves_shape(self):
        grid = np.full((4, 3, 2), 100.0)
        result = calculate_aqi_array(grid, Pollutant.PM10)
        assert result.shape == grid.shape
        assert np.all(result == 73)

    def test_negative_values_clamped(self):
        result = calculate_aqi_array([-10.0, -0.01, 0.0], Pollutant.PM25)
        np.testing.assert_array_equal(result, [0, 0, 0])

    def test_nan_propagates(self):
        data = np.array([[25.0, np.nan], [np.nan, 55.0]])
        result = calculate_aqi_array(data, Pollutant.PM10)
        assert np.isnan(result[0, 1]) and np.isnan(result[1, 0])
        assert result[0, 0] == 23
        assert result[1, 1] == 51

    @pytest.mark.parametrize("pollutant", list(Pollutant))
    def test_huge_values_match_scalar(self, pollutant):
        values = np.array([1e6, 1e300, 1e308, sys.float_info.max])
        expected = [float(interpolate(float(v), pollutant)) for v in values]
        result = calculate_aqi_array(values, pollutant)
        assert np.all(np.isfinite(result))
        np.testing.assert_array_equal(result, expected)

    def test_non_numeric_rejected(self):
        with pytest.raises(ValueError):
            calculate_aqi_array(["abc"], Pollutant.PM25)


class TestOverallArray:
    def test_matches_scalar(self):
        pm25 = np.array([10.0, 35.5, 20.0, 100.0, 12.0])
        pm10 = np.array([40.0, 100.0, 200.0, 300.0, 54.0])
        expected = [calculate_overall_aqi(a, b).aqi for a, b in zip(pm25, pm10)]
        np.testing.assert_array_equal(calculate_overall_aqi_array(pm25, pm10), expected)

    def test_nan_in_one_pollutant(self):
        result = calculate_overall_aqi_array([np.nan, 35.5, np.nan], [200.0, np.nan, np.nan])
        assert result[0] == 123
        assert result[1] == 101
        assert np.isnan(result[2])


def test_truncate_array():
    np.testing.assert_array_equal(
        truncate_array(np.array([23.75, 12.05, 0.7]), 1), [23.7, 12.0, 0.7]
    )
    np.testing.assert_array_equal(truncate_array(np.array([54.9, 0.2]), 0), [54.0, 0.0])


def test_round_half_away_array():
    np.testing.assert_array_equal(
        round_half_away_array(np.array([0.5, 1.5, 2.5, 2.49, -2.5])), [1, 2, 3, 2, -3]
    )
