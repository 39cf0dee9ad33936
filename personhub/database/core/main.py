# personhub/database/core/main.py
from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

from sqlalchemy import MetaData, create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from personhub.common.settings import DBConfig, get_settings

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


def engine_options(url: str, cfg: Optional[DBConfig] = None) -> Dict[str, Any]:
    """
    create_engine kwargs for a URL. SQLite gets a thread-shareable connection
    (FastAPI runs sync endpoints on a threadpool); in-memory SQLite is pinned
    to a single StaticPool connection so every thread sees the same database.
    """
    cfg = cfg or get_settings().db
    opts: Dict[str, Any] = {"echo": cfg.echo, "future": True}
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite":
        opts["connect_args"] = {"check_same_thread": False}
        if parsed.database in (None, "", ":memory:"):
            opts["poolclass"] = StaticPool
        return opts
    opts.update(
        pool_size=cfg.pool_size,
        max_overflow=cfg.max_overflow,
        pool_pre_ping=cfg.pool_pre_ping,
        pool_recycle=cfg.pool_recycle,
    )
    return opts


def build_engine(url: str, cfg: Optional[DBConfig] = None) -> Engine:
    return create_engine(url, **engine_options(url, cfg))


def make_sessionmaker(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, expire_on_commit=False, future=True, autoflush=False)


@contextmanager
def session_scope(factory: sessionmaker[Session]) -> Iterator[Session]:
    """
    Transaction-scoped Session.
    Commits on success, rolls back on error.
    """
    session: Session = factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
