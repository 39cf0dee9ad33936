# personhub/services/api/deps.py
from __future__ import annotations

from fastapi import HTTPException, Request
from http import HTTPStatus

from personhub.database.core.handle import StorageHandle


def get_handle(request: Request) -> StorageHandle:
    """
    Provide the StorageHandle opened at startup via DI.
    Tests override this dependency with their own handle.
    """
    handle = getattr(request.app.state, "storage", None)
    if handle is None:
        raise HTTPException(status_code=HTTPStatus.SERVICE_UNAVAILABLE, detail="storage not connected")
    return handle
