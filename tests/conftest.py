from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from weather_report.core.config import Settings
from weather_report.core.security import get_password_hash
from weather_report.factory import create_app
from weather_report.repositories.memory import InMemoryRecordStore
from weather_report.repositories.query import QueryEngine
from tests.fakes import FixedObservationGenerator


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        _env_file=None,
        env="test",
        debug=True,
        docs_enabled=False,
        secret_key="test_secret_key_must_be_32_chars_minimum",
        admin_username="admin",
        admin_password_hash=get_password_hash("password"),
        cors_origins=["http://localhost"],
        trusted_hosts=["testserver", "localhost"],
        log_level="WARNING",
        store_lock_timeout_seconds=1.0,
    )


@pytest.fixture()
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore(lock_timeout_seconds=0.5)


@pytest.fixture()
def engine(store: InMemoryRecordStore) -> QueryEngine:
    return QueryEngine(store)


@pytest.fixture()
def generator() -> FixedObservationGenerator:
    return FixedObservationGenerator()


@pytest.fixture()
def client(
    settings: Settings, store: InMemoryRecordStore, generator: FixedObservationGenerator
) -> TestClient:
    app = create_app(settings, store=store, generator=generator)
    with TestClient(app) as client:
        yield client
