"""
Portal API client: one ApiClient shared by the per-domain wrappers.

Usage:
    with PortalClient.from_settings(get_settings(), session=ClientSession("clinic-001")) as api:
        resp = api.hr.get_employees({"page": 1})
        if resp.success:
            ...
"""
from __future__ import annotations

from typing import Any

from clinic_portal.client.apis import AuthApi, HrApi, InventoryApi, MarketingApi, RevenueApi
from clinic_portal.client.http import CLINIC_HEADER, NETWORK_ERROR, ApiClient
from clinic_portal.client.navigation import LOGIN_PATH, ClientSession, LoggingNavigator, Navigator
from clinic_portal.core.config import Settings


class PortalClient:
    def __init__(self, client: ApiClient):
        self.client = client
        self.auth = AuthApi(client)
        self.revenue = RevenueApi(client)
        self.hr = HrApi(client)
        self.inventory = InventoryApi(client)
        self.marketing = MarketingApi(client)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        session: ClientSession | None = None,
        navigator: Navigator | None = None,
        **kwargs: Any,
    ) -> "PortalClient":
        return cls(
            ApiClient(
                settings.api_base_url,
                session=session,
                navigator=navigator,
                timeout=settings.api_timeout_seconds,
                **kwargs,
            )
        )

    @property
    def session(self) -> ClientSession:
        return self.client.session

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "PortalClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


__all__ = [
    "ApiClient",
    "AuthApi",
    "CLINIC_HEADER",
    "ClientSession",
    "HrApi",
    "InventoryApi",
    "LOGIN_PATH",
    "LoggingNavigator",
    "MarketingApi",
    "NETWORK_ERROR",
    "Navigator",
    "PortalClient",
    "RevenueApi",
]
