"""Role API resource tests."""

from unittest.mock import AsyncMock

from falcon.testing import TestClient

from osrole.application.dto.role_resource import RoleResource as RoleDeclaration
from osrole.domain.exceptions import ClusterRequestError, UnsupportedClusterVersion

from tests.conftest import basic_role, field_level_security_role, updated_role


class TestCreate:
    def test_create_role(self, client: TestClient, fake_client) -> None:
        r = client.simulate_post("/v1/roles", json=basic_role("testrole"))
        assert r.status_code == 201
        assert r.json["id"] == "testrole"
        assert r.json["description"] == "test"
        assert len(r.json["cluster_permissions"]) == 1
        assert fake_client.names() == {"testrole"}

    def test_create_invalid_role(self, client: TestClient) -> None:
        r = client.simulate_post("/v1/roles", json={"role_name": ""})
        assert r.status_code == 400
        assert "error" in r.json

    def test_create_with_non_object_body(self, client: TestClient) -> None:
        r = client.simulate_post("/v1/roles", json=["testrole"])
        assert r.status_code == 400

    def test_create_with_malformed_body(self, client: TestClient) -> None:
        r = client.simulate_post(
            "/v1/roles", body="{not json", headers={"Content-Type": "application/json"}
        )
        assert r.status_code == 400


class TestReadUpdateDelete:
    def test_read_missing_role(self, client: TestClient) -> None:
        r = client.simulate_get("/v1/roles/gone")
        assert r.status_code == 404

    def test_lifecycle(self, client: TestClient) -> None:
        client.simulate_post("/v1/roles", json=basic_role("testrole"))

        r = client.simulate_put("/v1/roles/testrole", json=updated_role("testrole"))
        assert r.status_code == 200
        assert len(r.json["tenant_permissions"]) == 2

        body = field_level_security_role("testrole")
        del body["role_name"]
        r = client.simulate_put("/v1/roles/testrole", json=body)
        assert r.status_code == 200

        r = client.simulate_get("/v1/roles/testrole")
        assert r.status_code == 200
        assert r.json["tenant_permissions"] == []
        assert r.json["index_permissions"][0]["field_level_security"] == [
            "fielda",
            "myfieldb",
        ]

        r = client.simulate_delete("/v1/roles/testrole")
        assert r.status_code == 204
        assert client.simulate_get("/v1/roles/testrole").status_code == 404

    def test_delete_missing_role(self, client: TestClient) -> None:
        assert client.simulate_delete("/v1/roles/gone").status_code == 204


class TestImport:
    def test_import_existing_role(self, client: TestClient, fake_client) -> None:
        fake_client.add_role(RoleDeclaration.parse(basic_role("testrole")).to_role())
        r = client.simulate_post("/v1/roles/testrole/import")
        assert r.status_code == 200
        assert r.json == RoleDeclaration.parse(basic_role("testrole")).state()

    def test_import_missing_role(self, client: TestClient) -> None:
        r = client.simulate_post("/v1/roles/gone/import")
        assert r.status_code == 404


class TestErrors:
    def test_unsupported_cluster(self, client: TestClient, fake_client) -> None:
        fake_client.get_role = AsyncMock(
            side_effect=UnsupportedClusterVersion("Roles only supported on ES >= 7")
        )
        r = client.simulate_get("/v1/roles/testrole")
        assert r.status_code == 501
        assert "ES >= 7" in r.json["error"]

    def test_cluster_failure(self, client: TestClient, fake_client) -> None:
        fake_client.put_role = AsyncMock(side_effect=ClusterRequestError("denied", 403))
        r = client.simulate_post("/v1/roles", json=basic_role("testrole"))
        assert r.status_code == 502

    def test_unexpected_error_is_500(self, client: TestClient, fake_client) -> None:
        fake_client.delete_role = AsyncMock(side_effect=RuntimeError("boom"))
        r = client.simulate_delete("/v1/roles/testrole")
        assert r.status_code == 500
