# clinic_portal/seed/base.py
"""
Shared machinery for the per-domain seeders.

Master data is upserted: insert-if-absent on its natural key, existing rows
are left exactly as they are. Ledger data (stock movements, expenses,
performance snapshots, patient sources) is appended on every run, so a
second run duplicates it.
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Iterable, Mapping, TypeVar

from sqlalchemy import Table, inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from clinic_portal.core.config import Settings
from clinic_portal.core.database import create_domain_engine, domain_session, sqlite_file
from clinic_portal.core.exceptions import (
    DomainSeedError,
    ReferenceIntegrityError,
    SeedError,
)
from clinic_portal.models.auth import Clinic
from clinic_portal.seed.fixtures import TenantFixtureSet

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")

ClinicLookup = Callable[[str], bool]

CLINIC_ID_RE = re.compile(r"^[A-Za-z0-9_-]+$")


@dataclass
class SeedResult:
    """
    Per-entity counters for one domain run.

    - created:  master rows inserted because they were missing
    - skipped:  master rows already present (left untouched)
    - appended: ledger rows inserted (always, on every run)
    """

    domain: str
    created: Counter = field(default_factory=Counter)
    skipped: Counter = field(default_factory=Counter)
    appended: Counter = field(default_factory=Counter)

    @property
    def total_created(self) -> int:
        return sum(self.created.values())

    @property
    def total_skipped(self) -> int:
        return sum(self.skipped.values())

    @property
    def total_appended(self) -> int:
        return sum(self.appended.values())

    def summary(self) -> str:
        return (
            f"{self.domain}: created={self.total_created} "
            f"skipped={self.total_skipped} appended={self.total_appended}"
        )


class AuthClinicDirectory:
    """
    Resolves clinic ids against the auth store.

    Dependent domains hold clinic_id as a plain reference (no cross-database
    foreign key), so this lookup is the only thing tying them to a tenant.
    """

    def __init__(self, database_url: str):
        self.database_url = database_url

    def __call__(self, clinic_id: str) -> bool:
        path = sqlite_file(self.database_url)
        if path is not None and not path.exists():
            return False

        engine = create_domain_engine(self.database_url)
        try:
            if not inspect(engine).has_table(Clinic.__tablename__):
                return False
            with Session(engine) as db:
                return db.get(Clinic, clinic_id) is not None
        finally:
            engine.dispose()


def _log_db_error(domain: str, e: Exception) -> None:
    logger.error("Seed failed for %s: %s", domain, e, exc_info=True)
    if isinstance(e, SQLAlchemyError) and getattr(e, "orig", None) is not None:
        logger.error("DBAPI orig: %r", e.orig)


class DomainSeeder:
    """
    Makes one domain store match the fixture set.

    Subclasses set ``name``/``tables`` and implement ``populate``; everything
    runs in a single transaction that is rolled back on any failure, so a
    domain never reports partial success.
    """

    name: ClassVar[str]
    tables: ClassVar[list[Table]]
    requires_clinic: ClassVar[bool] = True

    def __init__(
        self,
        settings: Settings,
        fixtures: TenantFixtureSet,
        clinic_lookup: ClinicLookup | None = None,
    ):
        self.settings = settings
        self.fixtures = fixtures
        self.clinic_lookup = clinic_lookup or AuthClinicDirectory(settings.auth_database_url)

    @property
    def database_url(self) -> str:
        return self.settings.database_url_for(self.name)

    def seed(self) -> SeedResult:
        result = SeedResult(domain=self.name)
        logger.info("Seeding %s database (fixtures %s)...", self.name, self.fixtures.version)

        try:
            if self.requires_clinic:
                for clinic_id in self.referenced_clinics():
                    self.require_clinic(clinic_id)

            with domain_session(self.database_url, self.tables) as db:
                self.populate(db, result)
        except SeedError:
            raise
        except (SQLAlchemyError, OSError) as e:
            _log_db_error(self.name, e)
            raise DomainSeedError(self.name, e) from e

        logger.info("%s database seeded successfully (%s)", self.name, result.summary())
        return result

    def populate(self, db: Session, result: SeedResult) -> None:
        raise NotImplementedError

    def referenced_clinics(self) -> set[str]:
        return set()

    def require_clinic(self, clinic_id: Any) -> None:
        if not isinstance(clinic_id, str) or not CLINIC_ID_RE.match(clinic_id):
            raise ReferenceIntegrityError(self.name, "Clinic", str(clinic_id), "malformed id")
        if not self.clinic_lookup(clinic_id):
            raise ReferenceIntegrityError(self.name, "Clinic", clinic_id, "seed auth first")

    def require_row(self, db: Session, model: type, ref_id: Any) -> None:
        """Referenced row must already exist in this store."""
        if db.get(model, ref_id) is None:
            raise ReferenceIntegrityError(self.name, model.__name__, str(ref_id))

    def upsert(
        self,
        db: Session,
        result: SeedResult,
        model: type[ModelT],
        key: Mapping[str, Any],
        values: Mapping[str, Any],
    ) -> tuple[ModelT, bool]:
        """
        Insert ``values`` unless a row matching ``key`` exists.

        Returns (row, created). An existing row is returned unchanged.
        """
        entity = model.__name__
        existing = db.query(model).filter_by(**key).first()
        if existing is not None:
            result.skipped[entity] += 1
            logger.debug("  - %s %s exists, skipped", entity, dict(key))
            return existing, False

        row = model(**{**values, **key})
        db.add(row)
        db.flush()
        result.created[entity] += 1
        return row, True

    def append(
        self,
        db: Session,
        result: SeedResult,
        model: type[ModelT],
        rows: Iterable[Mapping[str, Any]],
    ) -> list[ModelT]:
        """Insert ledger rows unconditionally."""
        out = []
        for values in rows:
            row = model(**values)
            db.add(row)
            out.append(row)
        db.flush()
        result.appended[model.__name__] += len(out)
        return out
