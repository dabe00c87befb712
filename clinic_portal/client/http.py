# clinic_portal/client/http.py
"""
HTTP plumbing shared by every domain wrapper.

- Every outgoing request gets ``x-clinic-id`` from the client session
  (omitted when no clinic is selected).
- Every 401 triggers one navigation to the login page.
- Callers always receive an ApiResponse; transport failures become
  ``{"success": False, "error": "Network error"}``.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx
from pydantic import ValidationError

from clinic_portal.client.navigation import LOGIN_PATH, ClientSession, LoggingNavigator, Navigator
from clinic_portal.schemas.envelope import ApiResponse

logger = logging.getLogger(__name__)

CLINIC_HEADER = "x-clinic-id"
NETWORK_ERROR = "Network error"


def _drop_none(params: Mapping[str, Any] | None) -> dict[str, Any] | None:
    if params is None:
        return None
    return {k: v for k, v in params.items() if v is not None}


class ApiClient:
    def __init__(
        self,
        base_url: str,
        *,
        session: ClientSession | None = None,
        navigator: Navigator | None = None,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.session = session if session is not None else ClientSession()
        self.navigator = navigator if navigator is not None else LoggingNavigator()
        self._http = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
            headers={"Content-Type": "application/json"},
            event_hooks={
                "request": [self._inject_clinic_header],
                "response": [self._handle_unauthorized],
            },
        )

    def _inject_clinic_header(self, request: httpx.Request) -> None:
        clinic_id = self.session.clinic_id
        if clinic_id:
            request.headers[CLINIC_HEADER] = clinic_id

    def _handle_unauthorized(self, response: httpx.Response) -> None:
        if response.status_code == httpx.codes.UNAUTHORIZED:
            self.navigator.redirect(LOGIN_PATH)

    def request(
        self,
        method: str,
        url: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        response_model: Any = Any,
    ) -> ApiResponse[Any]:
        try:
            response = self._http.request(method, url, params=_drop_none(params), json=json)
        except httpx.RequestError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            return ApiResponse.failure(NETWORK_ERROR)

        return self._to_envelope(response, response_model)

    def _to_envelope(self, response: httpx.Response, response_model: Any) -> ApiResponse[Any]:
        try:
            return ApiResponse[response_model].model_validate(response.json())
        except (ValueError, ValidationError):
            # ValueError covers bodies that are not JSON at all.
            logger.warning(
                "Unexpected response body for %s %s (status %s)",
                response.request.method,
                response.request.url,
                response.status_code,
            )
        reason = response.reason_phrase or f"HTTP {response.status_code}"
        if response.is_success:
            return ApiResponse.failure("Invalid response", message=reason)
        return ApiResponse.failure(reason)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
