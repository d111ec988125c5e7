"""HTTP tests for Basic authentication and role-based access."""

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from src.cruddemo.api.http.app import create_app
from src.cruddemo.api.http.deps import get_db_session
from src.cruddemo.runtime.config.config_data import AccessRuleConfig, ConfigData
from tests.fixtures.auth import basic_auth


class TestAuthentication:
    def test_missing_credentials_get_challenge(self, client: TestClient):
        response = client.get("/api/employees")

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == 'Basic realm="Realm"'

    def test_wrong_password(self, client: TestClient):
        response = client.get("/api/employees", headers=basic_auth("john", "nope"))

        assert response.status_code == 401
        assert "www-authenticate" in response.headers

    def test_unknown_user(self, client: TestClient):
        response = client.get("/api/employees", headers=basic_auth("mallory", "test123"))

        assert response.status_code == 401

    def test_unrestricted_routes_need_no_credentials(self, client: TestClient):
        assert client.get("/api/students").status_code == 200
        assert client.get("/health").status_code == 200


class TestRoleAccess:
    @pytest.mark.parametrize(
        ("method", "path", "json"),
        [
            ("POST", "/api/employees", {"firstName": "A", "lastName": "B"}),
            ("PUT", "/api/employees", {"id": 8, "firstName": "A", "lastName": "B"}),
            ("PATCH", "/api/employees/8", {"lastName": "Smith"}),
            ("DELETE", "/api/employees/8", None),
        ],
    )
    def test_employee_role_cannot_write(
        self, client: TestClient, employee_auth, frank, method, path, json
    ):
        response = client.request(method, path, json=json, headers=employee_auth)

        assert response.status_code == 403

    def test_manager_cannot_delete(self, client: TestClient, manager_auth, frank):
        assert client.delete("/api/employees/8", headers=manager_auth).status_code == 403

    def test_manager_can_patch(self, client: TestClient, manager_auth, frank):
        response = client.patch(
            "/api/employees/8", json={"lastName": "Smith"}, headers=manager_auth
        )

        assert response.status_code == 200
        assert response.json()["lastName"] == "Smith"

    def test_employee_can_read(self, client: TestClient, employee_auth, frank):
        assert client.get("/api/employees/8", headers=employee_auth).status_code == 200

    def test_forbidden_runs_before_handler(self, client: TestClient, employee_auth):
        response = client.patch("/api/employees/404", json={"id": 1}, headers=employee_auth)

        assert response.status_code == 403

    def test_admin_can_do_everything(self, client: TestClient, admin_auth, frank):
        assert client.get("/api/employees", headers=admin_auth).status_code == 200
        assert (
            client.post(
                "/api/employees",
                json={"firstName": "A", "lastName": "B"},
                headers=admin_auth,
            ).status_code
            == 200
        )
        assert client.delete("/api/employees/8", headers=admin_auth).status_code == 200


class TestApiPrefix:
    """Access rules follow the configured API prefix."""

    @pytest.fixture
    def v2_client(self, test_config: ConfigData, session: Session) -> TestClient:
        test_config.app.api_prefix = "/v2"
        app = create_app(test_config)
        app.dependency_overrides[get_db_session] = lambda: session
        return TestClient(app)

    def test_delete_without_credentials_is_challenged(self, v2_client: TestClient, frank):
        response = v2_client.delete("/v2/employees/8")

        assert response.status_code == 401
        assert "www-authenticate" in response.headers

    def test_roles_still_enforced(self, v2_client: TestClient, employee_auth, admin_auth, frank):
        assert v2_client.get("/v2/employees/8", headers=employee_auth).status_code == 200
        assert v2_client.delete("/v2/employees/8", headers=employee_auth).status_code == 403
        assert v2_client.delete("/v2/employees/8", headers=admin_auth).status_code == 200

    def test_app_refuses_uncovered_write_routes(self, test_config: ConfigData):
        test_config.security.rules = [
            AccessRuleConfig(method="GET", pattern="/employees/**", role="EMPLOYEE")
        ]

        with pytest.raises(RuntimeError, match="No access rule covers"):
            create_app(test_config)
