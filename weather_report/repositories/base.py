from __future__ import annotations

from typing import Protocol

from weather_report.models.weather import Observation, ObservationFields


class StoreUnavailable(Exception):
    """The record store could not be reached or locked; the caller may retry."""


class RecordStore(Protocol):
    def ping(self) -> None: ...

    def insert(self, fields: ObservationFields) -> int: ...

    def select_by_city(self, city_filter: str) -> list[Observation]: ...

    def select_all(self) -> list[Observation]: ...
