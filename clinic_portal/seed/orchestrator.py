# clinic_portal/seed/orchestrator.py
"""
Runs the domain seeders in dependency order.

auth must run first (it owns the clinic every other store references);
hr, inventory and marketing do not depend on each other but keep a fixed
order for reproducible logs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date

from clinic_portal.core.config import Settings
from clinic_portal.core.exceptions import (
    KNOWN_DOMAINS,
    ProductionEnvironmentError,
    SeedError,
    UnknownDomainError,
)
from clinic_portal.seed.auth import AuthSeeder
from clinic_portal.seed.base import ClinicLookup, DomainSeeder, SeedResult
from clinic_portal.seed.fixtures import TenantFixtureSet, build_fixture_set
from clinic_portal.seed.hr import HrSeeder
from clinic_portal.seed.inventory import InventorySeeder
from clinic_portal.seed.marketing import MarketingSeeder

logger = logging.getLogger(__name__)

SEED_ORDER = KNOWN_DOMAINS

SEEDERS: dict[str, type[DomainSeeder]] = {
    "auth": AuthSeeder,
    "hr": HrSeeder,
    "inventory": InventorySeeder,
    "marketing": MarketingSeeder,
}


@dataclass
class OverallResult:
    results: list[SeedResult] = field(default_factory=list)
    failed_domain: str | None = None
    error: SeedError | None = None

    @property
    def success(self) -> bool:
        return self.failed_domain is None

    @property
    def seeded_domains(self) -> list[str]:
        return [r.domain for r in self.results]


class SeedOrchestrator:
    def __init__(
        self,
        settings: Settings,
        today: date | None = None,
        clinic_lookup: ClinicLookup | None = None,
    ):
        self.settings = settings
        self.today = today
        self.clinic_lookup = clinic_lookup
        self._fixtures: TenantFixtureSet | None = None

    @property
    def fixtures(self) -> TenantFixtureSet:
        if self._fixtures is None:
            self._fixtures = build_fixture_set(self.today)
        return self._fixtures

    def ensure_not_production(self) -> None:
        if self.settings.is_production:
            logger.error("Cannot run seeds in production environment!")
            raise ProductionEnvironmentError(self.settings.app_env)

    def seeder_for(self, domain: str) -> DomainSeeder:
        seeder_cls = SEEDERS.get(domain)
        if seeder_cls is None:
            raise UnknownDomainError(domain)
        return seeder_cls(self.settings, self.fixtures, self.clinic_lookup)

    def run_one(self, domain: str) -> SeedResult:
        """
        Seed a single domain. Raises on guard violation, unknown domain or
        seeding failure.
        """
        self.ensure_not_production()
        seeder = self.seeder_for(domain)
        return seeder.seed()

    def run_all(self) -> OverallResult:
        """
        Seed every domain in SEED_ORDER, stopping at the first failure.

        Domains seeded before the failure are not rolled back.
        """
        self.ensure_not_production()
        overall = OverallResult()

        logger.info("Seeding all domains: %s", " -> ".join(SEED_ORDER))
        for domain in SEED_ORDER:
            try:
                overall.results.append(self.run_one(domain))
            except SeedError as e:
                logger.error("Failed to seed %s: %s", domain, e)
                overall.failed_domain = domain
                overall.error = e
                break

        return overall
