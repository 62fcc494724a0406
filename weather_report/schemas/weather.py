from __future__ import annotations

from pydantic import BaseModel, Field

CITY_PATTERN = r"^[a-zA-Z\s\-']+$"


class ObservationRead(BaseModel):
    id: int
    city: str
    temperature: float
    conditions: str
    humidity: float
    wind_speed: float
    date_recorded: str


class CurrentWeatherResponse(BaseModel):
    success: bool = True
    data: ObservationRead


class WeatherHistoryResponse(BaseModel):
    success: bool = True
    data: list[ObservationRead] = Field(default_factory=list)


class DimensionSummary(BaseModel):
    high: float
    low: float
    average: float


class WeatherAnalysis(BaseModel):
    temperature: DimensionSummary
    humidity: DimensionSummary
    wind_speed: DimensionSummary
    summary: str


class WeatherAnalysisResponse(BaseModel):
    success: bool = True
    city: str = Field(min_length=1, max_length=64)
    data_points: int = Field(ge=1)
    analysis: WeatherAnalysis
