# tests/services/conftest.py
from __future__ import annotations
import pytest
from starlette.testclient import TestClient

from personhub.services.api.app import create_app


@pytest.fixture()
def api_client(handle):
    """
    A TestClient over an app wired to the per-test StorageHandle, so
    POST -> GET in one test sees the same in-memory database.
    """
    app = create_app(handle=handle)
    with TestClient(app) as client:
        yield client
