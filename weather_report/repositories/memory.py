from __future__ import annotations

import itertools
import threading
from collections.abc import Iterator
from contextlib import contextmanager

import structlog

from weather_report.models.weather import Observation, ObservationFields
from weather_report.repositories.base import StoreUnavailable

logger = structlog.get_logger(__name__)


class InMemoryRecordStore:
    """Append-only observation store living for the lifetime of the process.

    Ids come from a counter starting at 1 and are never reused. Every insert
    and select holds the store lock; acquiring it is bounded by
    ``lock_timeout_seconds`` and a timeout surfaces as ``StoreUnavailable``.
    """

    def __init__(self, *, lock_timeout_seconds: float = 5.0) -> None:
        self._lock_timeout_seconds = lock_timeout_seconds
        self._lock = threading.Lock()
        self._ids = itertools.count(1)
        self._records: list[Observation] = []

    @contextmanager
    def _locked(self) -> Iterator[None]:
        if not self._lock.acquire(timeout=self._lock_timeout_seconds):
            logger.warning("store.lock_timeout", timeout_seconds=self._lock_timeout_seconds)
            raise StoreUnavailable("Timed out waiting for the record store lock")
        try:
            yield
        finally:
            self._lock.release()

    def ping(self) -> None:
        with self._locked():
            return None

    def insert(self, fields: ObservationFields) -> int:
        with self._locked():
            record = Observation.from_fields(next(self._ids), fields)
            self._records.append(record)
        return record.id

    def select_by_city(self, city_filter: str) -> list[Observation]:
        needle = city_filter.lower()
        with self._locked():
            return [r for r in self._records if needle in r.city.lower()]

    def select_all(self) -> list[Observation]:
        with self._locked():
            return list(self._records)

    def __len__(self) -> int:
        with self._locked():
            return len(self._records)
