# tests/conftest.py
from __future__ import annotations
import pytest
from sqlalchemy.engine import Engine

from personhub.common import settings as settings_mod
from personhub.database.core.handle import StorageHandle
from personhub.database.core.main import build_engine
from personhub.database.models import Base  # <-- imports the models/metadata


@pytest.fixture(autouse=True)
def _fresh_settings():
    # tests may tweak env vars; never leak a cached Settings between them
    settings_mod.get_settings.cache_clear()
    yield
    settings_mod.get_settings.cache_clear()


@pytest.fixture()
def db_engine() -> Engine:
    # One private in-memory SQLite database per test (StaticPool, thread-shareable)
    engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def handle(db_engine) -> StorageHandle:
    return StorageHandle(db_engine)
