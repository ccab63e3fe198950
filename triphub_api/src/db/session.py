from __future__ import annotations

import logging
from typing import Any, Dict, Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from .base import Base
from .config import get_settings

logger = logging.getLogger(__name__)

_ENGINE: Engine | None = None
_SESSION_MAKER: sessionmaker[Session] | None = None


def _ensure_engine_initialized() -> None:
    """
    Lazily initialize the Engine and session maker.
    """
    global _ENGINE, _SESSION_MAKER
    if _ENGINE is None:
        settings = get_settings()
        kwargs: Dict[str, Any] = {"echo": settings.SQL_ECHO, "pool_pre_ping": True}
        if settings.is_sqlite:
            # Sessions are used from FastAPI's threadpool.
            kwargs["connect_args"] = {"check_same_thread": False}
            if settings.is_sqlite_memory:
                kwargs["poolclass"] = StaticPool
        _ENGINE = create_engine(settings.DATABASE_URL, **kwargs)
    if _SESSION_MAKER is None:
        _SESSION_MAKER = sessionmaker(
            bind=_ENGINE, expire_on_commit=False, autoflush=False, autocommit=False
        )


# PUBLIC_INTERFACE
def get_engine() -> Engine:
    """Return the global Engine instance."""
    _ensure_engine_initialized()
    assert _ENGINE is not None
    return _ENGINE


# PUBLIC_INTERFACE
def get_session() -> Generator[Session, None, None]:
    """
    Yield a Session suitable for FastAPI dependency injection.
    Ensures engine/session factory is initialized.
    """
    _ensure_engine_initialized()
    assert _SESSION_MAKER is not None
    with _SESSION_MAKER() as session:
        yield session


# PUBLIC_INTERFACE
def create_schema() -> None:
    """Create all tables registered on Base.metadata that do not exist yet."""
    from . import models  # noqa: F401

    engine = get_engine()
    logger.info("Creating database schema on %s", engine.url.render_as_string(hide_password=True))
    Base.metadata.create_all(bind=engine)
