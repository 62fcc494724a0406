from fastapi import APIRouter

from weather_report.api.routes import admin, health, weather

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(admin.router, tags=["admin"])
api_router.include_router(health.router)
api_router.include_router(weather.router, tags=["weather"])
