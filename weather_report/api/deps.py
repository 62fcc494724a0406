from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from weather_report.clients.synthetic import ObservationGenerator
from weather_report.core.config import Settings
from weather_report.core.security import verify_password
from weather_report.repositories.base import RecordStore
from weather_report.repositories.query import QueryEngine
from weather_report.services.weather import WeatherService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_record_store(request: Request) -> RecordStore:
    return request.app.state.record_store


def get_observation_generator(request: Request) -> ObservationGenerator:
    return request.app.state.observation_generator


def get_query_engine(
    store: Annotated[RecordStore, Depends(get_record_store)],
) -> QueryEngine:
    return QueryEngine(store)


def get_weather_service(
    engine: Annotated[QueryEngine, Depends(get_query_engine)],
    generator: Annotated[ObservationGenerator, Depends(get_observation_generator)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> WeatherService:
    return WeatherService(
        engine=engine,
        generator=generator,
        insert_mode=settings.insert_query_mode,
        history_mode=settings.history_query_mode,
        analysis_mode=settings.analysis_query_mode,
    )


def authenticate_admin(*, username: str, password: str, settings: Settings) -> bool:
    if username != settings.admin_username:
        return False
    return verify_password(password, settings.admin_password_hash)
