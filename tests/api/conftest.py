"""Fixtures for API tests."""

from unittest.mock import AsyncMock

import pytest

from osrole.domain.value_objects import ClusterVersion
from osrole.interfaces.api.app import create_app
from osrole.interfaces.api.resources.health import HealthResource
from osrole.interfaces.api.resources.roles import (
    RoleImportResource,
    RoleResource,
    RolesResource,
)
from osrole.main import build_use_cases


@pytest.fixture
def cluster_info():
    """AsyncMock ClusterInfo reporting an OpenSearch 2.x cluster."""
    mock = AsyncMock()
    mock.get_version.return_value = ClusterVersion("opensearch", "2.11.0")
    return mock


@pytest.fixture
def app(role_client_factory, cluster_info):
    """Falcon ASGI app wired to the in-memory role client."""
    use_cases = build_use_cases(role_client_factory)
    return create_app(
        roles_resource=RolesResource(use_cases.create_role),
        role_resource=RoleResource(
            use_cases.read_role, use_cases.update_role, use_cases.delete_role
        ),
        role_import_resource=RoleImportResource(use_cases.import_role),
        health_resource=HealthResource(cluster_info),
    )


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    from falcon.testing import TestClient
    return TestClient(app)
