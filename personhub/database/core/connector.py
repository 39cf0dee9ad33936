# personhub/database/core/connector.py
from __future__ import annotations

import time
from typing import Callable, Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from personhub.common.logging import get_logger
from personhub.common.settings import get_settings
from personhub.database.core.handle import StorageHandle
from personhub.database.core.main import Base, build_engine
from personhub.domain.errors import SchemaError, StorageConnectionError

# registers the people table on Base.metadata
from personhub.database import models  # noqa: F401

logger = get_logger()

EngineFactory = Callable[[str], Engine]


def backoff_delays(max_attempts: int, delay: float, *, backoff: str = "fixed", factor: float = 2.0) -> list[float]:
    """
    Waits between consecutive attempts (len == max_attempts - 1).
        fixed:       delay, delay, ...
        exponential: delay, delay*factor, delay*factor**2, ...
    """
    if backoff not in ("fixed", "exponential"):
        raise ValueError(f"unknown backoff policy: {backoff!r}")
    if backoff == "fixed":
        return [delay] * (max_attempts - 1)
    return [delay * (factor ** i) for i in range(max_attempts - 1)]


def _open(url: str, engine_factory: EngineFactory) -> Engine:
    engine = engine_factory(url)
    try:
        # create_engine is lazy; make one real round trip
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except Exception:
        engine.dispose()
        raise
    return engine


def ensure_schema(engine: Engine) -> None:
    """Create the people table if missing. Safe to repeat."""
    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as exc:
        raise SchemaError(f"failed to prepare schema: {exc}") from exc


def connect(
    max_attempts: Optional[int] = None,
    delay: Optional[float] = None,
    *,
    url: Optional[str] = None,
    backoff: Optional[str] = None,
    backoff_factor: Optional[float] = None,
    engine_factory: Optional[EngineFactory] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> StorageHandle:
    """
    Open the database with bounded retry, then ensure the schema exists.

    Returns on the first successful attempt. Raises StorageConnectionError
    once every attempt failed (no sleep after the last one) and SchemaError
    when the backend was reached but the table could not be created.
    Unset arguments come from settings (``DB__CONNECT_*``, ``DATABASE_URL``).
    """
    cfg = get_settings()
    max_attempts = cfg.db.connect_attempts if max_attempts is None else max_attempts
    delay = cfg.db.connect_delay_sec if delay is None else delay
    url = url or cfg.database_url
    backoff = backoff or cfg.db.connect_backoff
    backoff_factor = cfg.db.connect_backoff_factor if backoff_factor is None else backoff_factor
    engine_factory = engine_factory or (lambda u: build_engine(u, cfg.db))

    if max_attempts < 1:
        raise ValueError("max_attempts must be >= 1")
    if delay < 0:
        raise ValueError("delay must be >= 0")

    waits = backoff_delays(max_attempts, delay, backoff=backoff, factor=backoff_factor)
    last_exc: Optional[BaseException] = None
    engine: Optional[Engine] = None

    for attempt in range(1, max_attempts + 1):
        try:
            engine = _open(url, engine_factory)
            break
        except (SQLAlchemyError, OSError) as e:
            last_exc = e
            if attempt < max_attempts:
                wait = waits[attempt - 1]
                logger.warning(
                    "Failed to connect to database. Retrying in %.2fs... (%d/%d): %s",
                    wait, attempt, max_attempts, e,
                )
                sleep(wait)
            else:
                logger.error("Failed to connect to database after %d attempts: %s", max_attempts, e)

    if engine is None:
        raise StorageConnectionError(
            f"could not connect to database after {max_attempts} attempts: {last_exc}",
            attempts=max_attempts,
            cause=last_exc,
        ) from last_exc

    try:
        ensure_schema(engine)
    except SchemaError:
        engine.dispose()
        raise

    logger.info("Connected to database %s", engine.url.render_as_string(hide_password=True))
    return StorageHandle(engine)
