# clinic_portal/core/exceptions.py
"""
Errors raised while bootstrapping tenant data.

Every failure on the seed path either aborts the run or surfaces as one of
these; the API client never raises them (it returns failure envelopes).
"""

from __future__ import annotations

KNOWN_DOMAINS = ("auth", "hr", "inventory", "marketing")


class SeedError(Exception):
    """Base class for seed-time failures."""

    def __init__(self, message: str, domain: str | None = None):
        super().__init__(message)
        self.domain = domain


class ProductionEnvironmentError(SeedError):
    def __init__(self, app_env: str):
        super().__init__(f"Refusing to seed: environment is '{app_env}'.")
        self.app_env = app_env


class UnknownDomainError(SeedError):
    def __init__(self, domain: str):
        super().__init__(
            f"Unknown domain: {domain!r}. Available domains: {', '.join(KNOWN_DOMAINS)}",
            domain=domain,
        )


class ReferenceIntegrityError(SeedError):
    """A referenced row (clinic, product, employee, ...) does not exist."""

    def __init__(self, domain: str, entity: str, ref_id: str, detail: str | None = None):
        message = f"{entity} '{ref_id}' referenced by {domain} seed does not exist"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message, domain=domain)
        self.entity = entity
        self.ref_id = ref_id


class DomainSeedError(SeedError):
    """Wraps a database or filesystem failure raised while seeding one domain store."""

    def __init__(self, domain: str, cause: Exception):
        super().__init__(f"Failed to seed {domain} store: {cause}", domain=domain)
