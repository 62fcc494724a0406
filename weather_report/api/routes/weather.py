from __future__ import annotations

import dataclasses
from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from weather_report.api.deps import get_weather_service
from weather_report.repositories.base import StoreUnavailable
from weather_report.schemas.weather import (
    CITY_PATTERN,
    CurrentWeatherResponse,
    ObservationRead,
    WeatherAnalysis,
    WeatherAnalysisResponse,
    WeatherHistoryResponse,
)
from weather_report.services.weather import WeatherService

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/weather")

CityQuery = Annotated[str, Query(min_length=1, max_length=64, pattern=CITY_PATTERN)]
CityPath = Annotated[str, Path(min_length=1, max_length=64, pattern=CITY_PATTERN)]


def _store_unavailable(e: StoreUnavailable) -> HTTPException:
    logger.warning("weather.store_unavailable", error=str(e))
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="Weather store unavailable",
    )


@router.get("/current", response_model=CurrentWeatherResponse)
def current_weather(
    city: CityQuery,
    service: Annotated[WeatherService, Depends(get_weather_service)],
) -> CurrentWeatherResponse:
    try:
        observation = service.current(city)
    except StoreUnavailable as e:
        raise _store_unavailable(e) from e
    except Exception as e:  # noqa: BLE001
        logger.exception("weather.current_failed", city=city)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch weather data",
        ) from e
    return CurrentWeatherResponse(data=ObservationRead.model_validate(observation.__dict__))


@router.get("/history/{city}", response_model=WeatherHistoryResponse)
def weather_history(
    city: CityPath,
    service: Annotated[WeatherService, Depends(get_weather_service)],
    from_date: Annotated[str | None, Query(alias="from", max_length=64)] = None,
) -> WeatherHistoryResponse:
    try:
        rows = service.history(city, from_date)
    except StoreUnavailable as e:
        raise _store_unavailable(e) from e
    return WeatherHistoryResponse(
        data=[ObservationRead.model_validate(r.__dict__) for r in rows]
    )


@router.get("/analysis/{city}", response_model=WeatherAnalysisResponse)
def weather_analysis(
    city: CityPath,
    service: Annotated[WeatherService, Depends(get_weather_service)],
) -> WeatherAnalysisResponse:
    try:
        result = service.analysis(city)
    except StoreUnavailable as e:
        raise _store_unavailable(e) from e
    if result is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No data found for this city",
        )
    return WeatherAnalysisResponse(
        city=result.city,
        data_points=result.data_points,
        analysis=WeatherAnalysis.model_validate(dataclasses.asdict(result.report)),
    )
