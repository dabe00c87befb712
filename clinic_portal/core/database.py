# clinic_portal/core/database.py
"""
Engine/session helpers for the per-domain stores.

Each domain service owns its own database, so there is no shared engine:
seed runs open a short-lived engine per domain and dispose it afterwards.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Iterable

from sqlalchemy import Table, create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import NullPool


def sqlite_file(database_url: str) -> Path | None:
    """Database file behind a SQLite URL; None for other backends and in-memory stores."""
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return None
    if not url.database or url.database == ":memory:":
        return None
    return Path(url.database)


def _ensure_sqlite_dir(database_url: str) -> None:
    path = sqlite_file(database_url)
    if path is not None:
        path.parent.mkdir(parents=True, exist_ok=True)


def create_domain_engine(database_url: str) -> Engine:
    _ensure_sqlite_dir(database_url)
    # NullPool: no connection outlives the run.
    return create_engine(
        database_url,
        future=True,
        pool_pre_ping=True,
        poolclass=NullPool,
    )


def ensure_tables(engine: Engine, tables: Iterable[Table]) -> None:
    with engine.begin() as conn:
        for table in tables:
            table.create(bind=conn, checkfirst=True)


@contextmanager
def domain_session(
    database_url: str,
    tables: Iterable[Table] = (),
) -> Generator[Session, None, None]:
    """
    Open one domain store for the duration of a block.

    Usage:
        with domain_session(settings.hr_database_url, HR_TABLES) as db:
            db.add(...)

    Commits on success, rolls back on error; the session and the engine are
    released either way.
    """
    engine = create_domain_engine(database_url)
    try:
        ensure_tables(engine, tables)
        SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=engine,
            future=True,
            expire_on_commit=False,
        )
        db = SessionLocal()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()
    finally:
        engine.dispose()
