"""
Shared fixtures: every test gets its own throw-away SQLite domain stores.
"""
from datetime import date
from pathlib import Path

import pytest
from sqlalchemy import create_engine, inspect
from sqlalchemy.orm import Session

from clinic_portal.core.config import Settings, get_settings
from clinic_portal.seed.fixtures import build_fixture_set
from clinic_portal.seed.orchestrator import SeedOrchestrator

SEED_DAY = date(2025, 3, 14)

DOMAINS = ("auth", "hr", "inventory", "marketing")


def _store_urls(root: Path) -> dict[str, str]:
    return {f"{domain}_database_url": f"sqlite:///{root / f'{domain}.db'}" for domain in DOMAINS}


@pytest.fixture
def store_dir(tmp_path) -> Path:
    path = tmp_path / "stores"
    path.mkdir()
    return path


@pytest.fixture
def settings(store_dir) -> Settings:
    return Settings(_env_file=None, app_env="test", **_store_urls(store_dir))


@pytest.fixture
def production_settings(store_dir) -> Settings:
    return Settings(_env_file=None, app_env="production", **_store_urls(store_dir))


@pytest.fixture
def fixtures():
    return build_fixture_set(SEED_DAY)


@pytest.fixture
def orchestrator(settings) -> SeedOrchestrator:
    return SeedOrchestrator(settings, today=SEED_DAY)


@pytest.fixture
def count_rows():
    """count_rows(database_url, Model) -> number of rows (0 if the table is missing)."""

    def _count(database_url: str, model) -> int:
        engine = create_engine(database_url)
        try:
            if not inspect(engine).has_table(model.__tablename__):
                return 0
            with Session(engine) as db:
                return db.query(model).count()
        finally:
            engine.dispose()

    return _count


@pytest.fixture
def cli_env(monkeypatch, store_dir):
    """Point get_settings() at the per-test stores (the CLI reads settings from env)."""
    for key, url in _store_urls(store_dir).items():
        monkeypatch.setenv(key.upper(), url)
    monkeypatch.setenv("APP_ENV", "test")
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
