from __future__ import annotations

import math
import random

import pytest

from weather_report.models.weather import Observation, ObservationFields
from weather_report.repositories.memory import InMemoryRecordStore
from weather_report.services.analysis import analyze_observations, summarize_conditions


def _obs(temperature: float, humidity: float = 50, wind_speed: float = 5.0) -> Observation:
    return Observation(
        id=0,
        city="Jakarta",
        temperature=temperature,
        conditions="Sunny",
        humidity=humidity,
        wind_speed=wind_speed,
        date_recorded="2026-01-01",
    )


def test_reference_readings() -> None:
    report = analyze_observations([_obs(32, 65, 8), _obs(30, 70, 6), _obs(28, 80, 12)])

    assert report.temperature.average == 30
    assert report.temperature.high == 32
    assert report.temperature.low == 28
    assert report.humidity.average == pytest.approx(71.67, abs=0.01)
    assert report.humidity.high == 80
    assert report.humidity.low == 65
    assert report.wind_speed.average == pytest.approx(8.67, abs=0.01)
    assert report.summary == "Warm. Humid. Calm winds."


def test_negative_temperatures() -> None:
    report = analyze_observations([_obs(-10), _obs(-5)])
    assert report.temperature.average == -7.5
    assert "Cold." in report.summary


def test_empty_input_uses_sentinels() -> None:
    report = analyze_observations([])
    for stats in (report.temperature, report.humidity, report.wind_speed):
        assert stats.high == -math.inf
        assert stats.low == math.inf
        assert math.isnan(stats.average)
    assert report.summary == "Cold. Dry. Calm winds."


def test_accepts_any_iterable() -> None:
    report = analyze_observations(_obs(t) for t in (1, 2, 3))
    assert report.temperature.average == 2


def test_bounds_hold_for_random_inputs() -> None:
    rng = random.Random(1234)
    for _ in range(50):
        rows = [
            _obs(rng.uniform(-40, 45), rng.randint(0, 100), rng.uniform(0, 60))
            for _ in range(rng.randint(1, 25))
        ]
        report = analyze_observations(rows)
        for name in ("temperature", "humidity", "wind_speed"):
            stats = getattr(report, name)
            for row in rows:
                assert stats.low <= getattr(row, name) <= stats.high
            assert stats.low <= stats.average <= stats.high


def test_nan_reading_poisons_only_the_average() -> None:
    report = analyze_observations([_obs(10, math.nan), _obs(20, 40)])
    assert report.humidity.high == 40
    assert report.humidity.low == 40
    assert math.isnan(report.humidity.average)
    assert "Dry." in report.summary


def test_tampered_readings_do_not_raise() -> None:
    store = InMemoryRecordStore()
    store.insert(
        ObservationFields(
            city="Test",
            temperature="DROP TABLE",
            conditions="<script>",
            humidity="SELECT *",
            wind_speed=None,
            date_recorded="2026",
        )
    )
    store.insert(ObservationFields("Test", 12.0, "Sunny", 40, 3.0, "2026"))

    report = analyze_observations(store.select_by_city("test"))
    for stats in (report.temperature, report.humidity, report.wind_speed):
        assert math.isnan(stats.average)
    assert report.temperature.high == 12.0
    assert report.temperature.low == 12.0
    assert report.humidity.high == 40
    assert report.wind_speed.low == 3.0
    assert report.summary == "Cold. Dry. Calm winds."


@pytest.mark.parametrize(
    ("temperature", "expected"),
    [(30.5, "Very hot."), (30, "Warm."), (20.1, "Warm."), (20, "Mild."), (10, "Cold."), (-3, "Cold.")],
)
def test_temperature_bands(temperature: float, expected: str) -> None:
    assert summarize_conditions(temperature, 0, 0).startswith(expected + " ")


@pytest.mark.parametrize(
    ("humidity", "expected"),
    [(81, "Very humid."), (80, "Humid."), (61, "Humid."), (60, "Dry.")],
)
def test_humidity_bands(humidity: float, expected: str) -> None:
    assert expected in summarize_conditions(0, humidity, 0)
    assert summarize_conditions(0, humidity, 0).startswith("Cold. ")


@pytest.mark.parametrize(
    ("wind_speed", "expected"),
    [(31, "Very windy."), (30, "Windy."), (15.5, "Windy."), (15, "Calm winds.")],
)
def test_wind_bands(wind_speed: float, expected: str) -> None:
    assert summarize_conditions(0, 0, wind_speed).endswith(" " + expected)


def test_summary_phrase_order() -> None:
    assert summarize_conditions(35, 90, 40) == "Very hot. Very humid. Very windy."
