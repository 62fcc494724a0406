from __future__ import annotations

import random
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Protocol

from weather_report.models.weather import ObservationFields

CONDITIONS = ["Sunny", "Cloudy", "Rainy", "Stormy"]


def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


def _isoformat(dt: datetime) -> str:
    # Example: "2026-01-30T22:00:00.123Z"
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ObservationGenerator(Protocol):
    def generate(self, city: str) -> ObservationFields: ...


class RandomObservationGenerator:
    """Stands in for a weather provider by making up plausible readings."""

    def __init__(
        self,
        *,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._rng = rng or random.Random()
        self._clock = clock

    def generate(self, city: str) -> ObservationFields:
        return ObservationFields(
            city=city,
            temperature=float(self._rng.randint(5, 39)),
            conditions=self._rng.choice(CONDITIONS),
            humidity=self._rng.randint(0, 99),
            wind_speed=float(self._rng.randint(0, 49)),
            date_recorded=_isoformat(self._clock()),
        )
