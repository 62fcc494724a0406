from __future__ import annotations

import math
from collections.abc import Iterable

from weather_report.models.weather import AnalysisReport, DimensionStats, Observation

TEMPERATURE_BANDS: list[tuple[float, str]] = [
    (30, "Very hot."),
    (20, "Warm."),
    (10, "Mild."),
]
HUMIDITY_BANDS: list[tuple[float, str]] = [
    (80, "Very humid."),
    (60, "Humid."),
]
WIND_BANDS: list[tuple[float, str]] = [
    (30, "Very windy."),
    (15, "Windy."),
]


class _Accumulator:
    def __init__(self) -> None:
        self.high = -math.inf
        self.low = math.inf
        self.total = 0.0
        self.count = 0

    def add(self, value: object) -> None:
        # The store keeps readings verbatim; anything non-numeric counts as NaN.
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            value = math.nan
        if value > self.high:
            self.high = value
        if value < self.low:
            self.low = value
        self.total += value
        self.count += 1

    def stats(self) -> DimensionStats:
        average = self.total / self.count if self.count else math.nan
        return DimensionStats(high=self.high, low=self.low, average=average)


def _band(value: float, bands: list[tuple[float, str]], fallback: str) -> str:
    for threshold, phrase in bands:
        if value > threshold:
            return phrase
    return fallback


def summarize_conditions(
    avg_temperature: float, avg_humidity: float, avg_wind_speed: float
) -> str:
    """Describe averaged conditions, e.g. ``"Warm. Humid. Calm winds."``.

    Thresholds are strict, so a value sitting on a boundary falls into the
    lower band. NaN fails every comparison and lands in the lowest band.
    """
    return " ".join(
        [
            _band(avg_temperature, TEMPERATURE_BANDS, "Cold."),
            _band(avg_humidity, HUMIDITY_BANDS, "Dry."),
            _band(avg_wind_speed, WIND_BANDS, "Calm winds."),
        ]
    )


def analyze_observations(observations: Iterable[Observation]) -> AnalysisReport:
    """Reduce observations to high/low/average per dimension plus a summary.

    Empty input is not an error: highs are ``-inf``, lows ``+inf`` and
    averages NaN.
    """
    temperature = _Accumulator()
    humidity = _Accumulator()
    wind_speed = _Accumulator()

    for obs in observations:
        temperature.add(obs.temperature)
        humidity.add(obs.humidity)
        wind_speed.add(obs.wind_speed)

    temperature_stats = temperature.stats()
    humidity_stats = humidity.stats()
    wind_stats = wind_speed.stats()
    return AnalysisReport(
        temperature=temperature_stats,
        humidity=humidity_stats,
        wind_speed=wind_stats,
        summary=summarize_conditions(
            temperature_stats.average, humidity_stats.average, wind_stats.average
        ),
    )
