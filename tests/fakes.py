from __future__ import annotations

from weather_report.models.weather import Observation, ObservationFields
from weather_report.repositories.base import StoreUnavailable


class FixedObservationGenerator:
    """Hands out queued readings, then repeats a deterministic default."""

    def __init__(self) -> None:
        self.queued: list[tuple[float, int, float]] = []
        self.calls = 0

    def generate(self, city: str) -> ObservationFields:
        self.calls += 1
        if self.queued:
            temperature, humidity, wind_speed = self.queued.pop(0)
        else:
            temperature, humidity, wind_speed = 21.0, 55, 4.0
        return ObservationFields(
            city=city,
            temperature=temperature,
            conditions="Cloudy",
            humidity=humidity,
            wind_speed=wind_speed,
            date_recorded=f"2026-01-{self.calls:02d}T12:00:00.000Z",
        )


class UnavailableRecordStore:
    def ping(self) -> None:
        raise StoreUnavailable("store offline")

    def insert(self, fields: ObservationFields) -> int:
        raise StoreUnavailable("store offline")

    def select_by_city(self, city_filter: str) -> list[Observation]:
        raise StoreUnavailable("store offline")

    def select_all(self) -> list[Observation]:
        raise StoreUnavailable("store offline")


def fields(
    city: str = "Oslo",
    *,
    temperature: float = 10.0,
    humidity: float = 50,
    wind_speed: float = 5.0,
    conditions: str = "Sunny",
    date_recorded: str = "2026-01-01",
) -> ObservationFields:
    return ObservationFields(
        city=city,
        temperature=temperature,
        conditions=conditions,
        humidity=humidity,
        wind_speed=wind_speed,
        date_recorded=date_recorded,
    )
