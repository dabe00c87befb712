"""
Tenant bootstrap: fixture set, per-domain seeders and the orchestrator.

Usage:
    python -m scripts.seed run             # every domain, in order
    python -m scripts.seed run inventory   # a single domain
"""
from .fixtures import TenantFixtureSet, build_fixture_set
from .base import DomainSeeder, SeedResult
from .orchestrator import SEED_ORDER, OverallResult, SeedOrchestrator

__all__ = [
    "TenantFixtureSet",
    "build_fixture_set",
    "DomainSeeder",
    "SeedResult",
    "SEED_ORDER",
    "OverallResult",
    "SeedOrchestrator",
]
