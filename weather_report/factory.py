from __future__ import annotations

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from starlette.middleware.trustedhost import TrustedHostMiddleware

from weather_report.api.router import api_router
from weather_report.clients.synthetic import ObservationGenerator, RandomObservationGenerator
from weather_report.core.config import Settings, load_settings
from weather_report.core.logging_config import configure_logging
from weather_report.repositories.base import RecordStore
from weather_report.repositories.memory import InMemoryRecordStore

logger = structlog.get_logger(__name__)


def create_app(
    settings: Settings | None = None,
    *,
    store: RecordStore | None = None,
    generator: ObservationGenerator | None = None,
) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "app.startup",
            env=settings.env,
            insert_mode=settings.insert_query_mode.value,
            history_mode=settings.history_query_mode.value,
            analysis_mode=settings.analysis_query_mode.value,
        )
        yield
        logger.info("app.shutdown")

    docs_enabled = settings.docs_enabled and not settings.is_production
    app = FastAPI(
        title="Weather Report API",
        version="0.1.0",
        debug=settings.debug,
        docs_url="/docs" if docs_enabled else None,
        redoc_url=None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    # The store lives as long as the process; nothing is persisted.
    if store is None:
        store = InMemoryRecordStore(lock_timeout_seconds=settings.store_lock_timeout_seconds)
    if generator is None:
        generator = RandomObservationGenerator()
    app.state.record_store = store
    app.state.observation_generator = generator

    app.add_middleware(GZipMiddleware, minimum_size=1024)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
    )
    if settings.trusted_hosts:
        app.add_middleware(TrustedHostMiddleware, allowed_hosts=settings.trusted_hosts)

    @app.middleware("http")
    async def security_headers(request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        if settings.is_production:
            response.headers.setdefault(
                "Strict-Transport-Security", "max-age=31536000; includeSubDomains"
            )
        return response

    @app.get("/", tags=["meta"])
    def root():
        return {"name": "weather-report", "status": "ok"}

    app.include_router(api_router)
    return app
