from __future__ import annotations

import structlog

from weather_report.clients.synthetic import ObservationGenerator
from weather_report.models.weather import CityAnalysis, Observation
from weather_report.repositories.query import InsertInstruction, QueryEngine
from weather_report.repositories.sql import InterpolationMode
from weather_report.services.analysis import analyze_observations

logger = structlog.get_logger(__name__)


class WeatherService:
    def __init__(
        self,
        *,
        engine: QueryEngine,
        generator: ObservationGenerator,
        insert_mode: InterpolationMode = InterpolationMode.PARAMETERIZED,
        history_mode: InterpolationMode = InterpolationMode.RAW,
        analysis_mode: InterpolationMode = InterpolationMode.ESCAPED,
    ) -> None:
        self._engine = engine
        self._generator = generator
        self._insert_mode = insert_mode
        self._history_mode = history_mode
        self._analysis_mode = analysis_mode

    def current(self, city: str) -> Observation:
        result = self._engine.insert_observation(
            self._generator.generate(city), mode=self._insert_mode
        )
        if result.last_id is None or not isinstance(result.instruction, InsertInstruction):
            raise RuntimeError(f"Failed to store weather for {city}")
        logger.info("weather.current", city=city, id=result.last_id)
        # Report what was stored, which differs from the generated fields when
        # the insert text escapes quotes.
        return Observation.from_fields(result.last_id, result.instruction.fields)

    def history(self, city: str, from_date: str | None = None) -> list[Observation]:
        result = self._engine.select_observations(
            city, from_date, mode=self._history_mode
        )
        return result.rows

    def analysis(self, city: str) -> CityAnalysis | None:
        rows = self._engine.select_observations(city, mode=self._analysis_mode).rows
        if not rows:
            logger.info("weather.analysis_no_data", city=city)
            return None
        return CityAnalysis(
            city=city, data_points=len(rows), report=analyze_observations(rows)
        )
