"""
Tests for the portal HTTP client (tenant header, 401 redirect, envelopes).

All traffic goes through httpx.MockTransport; nothing leaves the process.
"""
import httpx
import pytest

from clinic_portal.client import (
    CLINIC_HEADER,
    LOGIN_PATH,
    ApiClient,
    ClientSession,
    PortalClient,
)
from clinic_portal.core.config import Settings
from clinic_portal.models.auth import UserRole
from clinic_portal.schemas.envelope import AccountRole, ApiResponse, Page

BASE_URL = "http://portal.test/api"


class RecordingNavigator:
    def __init__(self):
        self.paths: list[str] = []

    def redirect(self, path: str) -> None:
        self.paths.append(path)


class Recorder:
    """MockTransport handler that records requests and replays one response."""

    def __init__(self, status_code=200, json=None, content=None):
        self.requests: list[httpx.Request] = []
        self.status_code = status_code
        self.json = {"success": True, "data": None} if json is None and content is None else json
        self.content = content

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.json)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def navigator():
    return RecordingNavigator()


@pytest.fixture
def make_client(navigator):
    clients = []

    def _make(handler, clinic_id="clinic-001"):
        client = ApiClient(
            BASE_URL,
            session=ClientSession(clinic_id=clinic_id),
            navigator=navigator,
            transport=httpx.MockTransport(handler),
        )
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.close()


class TestTenantHeader:
    @pytest.mark.unit
    def test_header_injected_when_clinic_selected(self, make_client):
        recorder = Recorder()
        make_client(recorder).request("GET", "/hr/employees")

        assert recorder.last.headers[CLINIC_HEADER] == "clinic-001"
        assert recorder.last.headers["content-type"] == "application/json"

    @pytest.mark.unit
    def test_header_omitted_without_clinic(self, make_client):
        recorder = Recorder()
        make_client(recorder, clinic_id=None).request("GET", "/auth/me")

        assert CLINIC_HEADER not in recorder.last.headers

    @pytest.mark.unit
    def test_header_follows_session_changes(self, make_client):
        recorder = Recorder()
        client = make_client(recorder)

        client.request("GET", "/hr/employees")
        client.session.clinic_id = "clinic-002"
        client.request("GET", "/hr/employees")
        client.session.clear()
        client.request("GET", "/hr/employees")

        assert [r.headers.get(CLINIC_HEADER) for r in recorder.requests] == [
            "clinic-001",
            "clinic-002",
            None,
        ]

    @pytest.mark.unit
    def test_paths_resolve_under_base_url(self, make_client):
        recorder = Recorder()
        make_client(recorder).request("GET", "/inventory/products")

        assert str(recorder.last.url) == "http://portal.test/api/inventory/products"


class TestUnauthorized:
    @pytest.mark.unit
    def test_redirects_to_login_once(self, make_client, navigator):
        recorder = Recorder(401, json={"success": False, "error": "Unauthorized", "message": "Token expired"})

        resp = make_client(recorder).request("GET", "/auth/me")

        assert navigator.paths == [LOGIN_PATH]
        assert resp.as_dict() == {"success": False, "error": "Unauthorized", "message": "Token expired"}

    @pytest.mark.unit
    def test_non_json_401_still_returns_envelope(self, make_client, navigator):
        recorder = Recorder(401, content=b"<html>login</html>")

        resp = make_client(recorder).request("GET", "/auth/me")

        assert navigator.paths == [LOGIN_PATH]
        assert resp.as_dict() == {"success": False, "error": "Unauthorized"}

    @pytest.mark.unit
    @pytest.mark.parametrize("status_code", [200, 400, 403, 404, 500])
    def test_other_statuses_do_not_redirect(self, make_client, navigator, status_code):
        make_client(Recorder(status_code, json={"success": False, "error": "x"})).request("GET", "/auth/me")

        assert navigator.paths == []


class TestEnvelope:
    @pytest.mark.unit
    def test_network_error(self, make_client, navigator):
        def unreachable(request):
            raise httpx.ConnectError("connection refused", request=request)

        resp = make_client(unreachable).request("GET", "/hr/employees")

        assert resp.as_dict() == {"success": False, "error": "Network error"}
        assert navigator.paths == []

    @pytest.mark.unit
    def test_timeout_is_network_error(self, make_client):
        def slow(request):
            raise httpx.ReadTimeout("timed out", request=request)

        assert make_client(slow).request("GET", "/hr/employees").error == "Network error"

    @pytest.mark.unit
    def test_success_passes_through(self, make_client):
        recorder = Recorder(json={"success": True, "data": {"id": "emp-001"}, "message": "ok"})

        resp = make_client(recorder).request("GET", "/hr/employees/emp-001", response_model=dict)

        assert resp.success
        assert resp.data == {"id": "emp-001"}
        assert resp.message == "ok"

    @pytest.mark.unit
    def test_failure_never_carries_data(self, make_client):
        recorder = Recorder(400, json={"success": False, "data": {"leak": 1}, "error": "Bad request"})

        resp = make_client(recorder).request("POST", "/hr/employees", json={}, response_model=Page[dict])

        assert resp.data is None
        assert resp.as_dict() == {"success": False, "error": "Bad request"}

    @pytest.mark.unit
    def test_non_envelope_success_body(self, make_client):
        recorder = Recorder(200, json=[1, 2, 3])

        resp = make_client(recorder).request("GET", "/hr/policies")

        assert resp.as_dict() == {"success": False, "error": "Invalid response", "message": "OK"}

    @pytest.mark.unit
    def test_non_json_error_body(self, make_client):
        recorder = Recorder(502, content=b"Bad Gateway")

        resp = make_client(recorder).request("GET", "/hr/policies")

        assert resp.as_dict() == {"success": False, "error": "Bad Gateway"}

    @pytest.mark.unit
    def test_none_params_dropped(self, make_client):
        recorder = Recorder()
        make_client(recorder).request("GET", "/hr/employees", params={"page": 2, "search": None})

        assert dict(recorder.last.url.params) == {"page": "2"}

    @pytest.mark.unit
    @pytest.mark.parametrize("success", ["false", "False", 0, "0", "no"])
    def test_coerced_failure_never_carries_data(self, make_client, success):
        recorder = Recorder(200, json={"success": success, "data": {"x": 1}, "error": "nope"})

        resp = make_client(recorder).request("GET", "/hr/policies")

        assert resp.success is False
        assert resp.as_dict() == {"success": False, "error": "nope"}

    @pytest.mark.unit
    @pytest.mark.parametrize("success", ["true", 1, "1", "yes"])
    def test_coerced_success_keeps_data(self, make_client, success):
        recorder = Recorder(200, json={"success": success, "data": {"x": 1}})

        resp = make_client(recorder).request("GET", "/hr/policies", response_model=dict)

        assert resp.success is True
        assert resp.data == {"x": 1}

    @pytest.mark.unit
    def test_failure_validated_directly_drops_data(self):
        resp = ApiResponse[dict].model_validate({"success": 0, "data": {"x": 1}})

        assert resp.data is None

    @pytest.mark.unit
    def test_failure_helper(self):
        assert ApiResponse.failure("boom").as_dict() == {"success": False, "error": "boom"}


class TestPortalClient:
    @pytest.mark.unit
    def test_from_settings_uses_configured_base_url(self):
        recorder = Recorder()
        settings = Settings(_env_file=None, api_base_url=BASE_URL, api_timeout_seconds=5)

        with PortalClient.from_settings(
            settings,
            session=ClientSession(clinic_id="clinic-001"),
            transport=httpx.MockTransport(recorder),
        ) as api:
            api.auth.get_me()
            assert api.session.clinic_id == "clinic-001"
            assert api.client._http.timeout.read == 5

        assert str(recorder.last.url) == "http://portal.test/api/auth/me"


class TestAccountRole:
    """Portal account roles are their own closed vocabulary."""

    @pytest.mark.unit
    def test_vocabulary(self):
        assert [r.value for r in AccountRole] == ["USER", "ADMIN", "SUPER_ADMIN"]

    @pytest.mark.unit
    def test_distinct_from_staff_roles(self):
        assert {r.value for r in AccountRole} != {r.value for r in UserRole}
        assert AccountRole("SUPER_ADMIN") is AccountRole.SUPER_ADMIN
        with pytest.raises(ValueError):
            AccountRole("MANAGER")
