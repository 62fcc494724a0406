from __future__ import annotations

import random
from datetime import datetime, timezone

from weather_report.clients.synthetic import CONDITIONS, RandomObservationGenerator


def test_generated_values_stay_in_range() -> None:
    generator = RandomObservationGenerator(rng=random.Random(7))
    for _ in range(200):
        fields = generator.generate("Oslo")
        assert fields.city == "Oslo"
        assert 5 <= fields.temperature <= 39
        assert fields.conditions in CONDITIONS
        assert 0 <= fields.humidity <= 99
        assert 0 <= fields.wind_speed <= 49


def test_date_recorded_is_sortable_utc() -> None:
    generator = RandomObservationGenerator(
        rng=random.Random(1),
        clock=lambda: datetime(2026, 1, 30, 22, 0, tzinfo=timezone.utc),
    )
    assert generator.generate("Oslo").date_recorded == "2026-01-30T22:00:00.000Z"
