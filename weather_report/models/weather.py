from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ObservationFields:
    city: str
    temperature: float
    conditions: str
    humidity: float
    wind_speed: float
    date_recorded: str


@dataclass(frozen=True)
class Observation:
    id: int
    city: str
    temperature: float
    conditions: str
    humidity: float
    wind_speed: float
    date_recorded: str

    @classmethod
    def from_fields(cls, id: int, fields: ObservationFields) -> Observation:
        return cls(
            id=id,
            city=fields.city,
            temperature=fields.temperature,
            conditions=fields.conditions,
            humidity=fields.humidity,
            wind_speed=fields.wind_speed,
            date_recorded=fields.date_recorded,
        )


@dataclass(frozen=True)
class DimensionStats:
    high: float
    low: float
    average: float


@dataclass(frozen=True)
class AnalysisReport:
    temperature: DimensionStats
    humidity: DimensionStats
    wind_speed: DimensionStats
    summary: str


@dataclass(frozen=True)
class CityAnalysis:
    city: str
    data_points: int
    report: AnalysisReport
