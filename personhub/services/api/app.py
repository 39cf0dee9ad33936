from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from personhub.common.logging import get_logger
from personhub.common.settings import get_settings
from personhub.database.core.connector import connect
from personhub.database.core.handle import StorageHandle
from personhub.services.api.errors import register_error_handlers
from personhub.services.api.routers import health, people

logger = get_logger()


def create_app(handle: Optional[StorageHandle] = None) -> FastAPI:
    """
    Build the API. With no handle, one is opened (with retry) during startup
    and a connection or schema failure aborts startup; a supplied handle is
    used as-is and left open.
    """
    cfg = get_settings()
    dev = cfg.app_env.lower() == "development"

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = handle is None
        app.state.storage = connect() if owned else handle
        try:
            yield
        finally:
            if owned:
                app.state.storage.close()
            app.state.storage = None

    app = FastAPI(
        title="Personhub API",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.storage = handle

    allow_origins = ["*"] if dev else cfg.api.cors_allow_origins
    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_methods=cfg.api.cors_allow_methods,
        allow_headers=cfg.api.cors_allow_headers,
        allow_credentials=cfg.api.cors_allow_credentials,
    )

    register_error_handlers(app)

    # Routers
    app.include_router(health.router)
    app.include_router(people.router)
    return app

app = create_app()
