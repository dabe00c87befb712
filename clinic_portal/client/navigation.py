from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

logger = logging.getLogger(__name__)

LOGIN_PATH = "/auth/login"


class Navigator(Protocol):
    """Performs a client-side navigation (e.g. to the login page)."""

    def redirect(self, path: str) -> None: ...


class LoggingNavigator:
    """Default navigator for non-browser callers: records the intent only."""

    def redirect(self, path: str) -> None:
        logger.warning("Session expired, redirecting to %s", path)


@dataclass
class ClientSession:
    """
    Client-held session state. clinic_id scopes every request to a tenant.
    """

    clinic_id: str | None = None
    user: dict | None = None

    def clear(self) -> None:
        self.clinic_id = None
        self.user = None
