"""Pytest fixtures for osrole tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from copy import deepcopy

import pytest

from osrole.application.dto.role_resource import RoleResource
from osrole.domain.entities import Role


# --- Fake role client ---


class FakeRoleClient:
    """In-memory role client. Stores deep copies, like a remote server would."""

    def __init__(self) -> None:
        self._roles: dict[str, Role] = {}
        self.calls: list[tuple[str, str]] = []

    async def get_role(self, name: str) -> Role | None:
        self.calls.append(("GET", name))
        role = self._roles.get(name)
        return deepcopy(role) if role else None

    async def put_role(self, role: Role) -> None:
        self.calls.append(("PUT", role.role_name))
        self._roles[role.role_name] = deepcopy(role)

    async def delete_role(self, name: str) -> bool:
        self.calls.append(("DELETE", name))
        return self._roles.pop(name, None) is not None

    def add_role(self, role: Role) -> None:
        """Helper to seed a role for tests."""
        self._roles[role.role_name] = deepcopy(role)

    def names(self) -> set[str]:
        return set(self._roles)


def make_factory(client):
    """Factory (async context manager) that always yields ``client``."""

    @asynccontextmanager
    async def factory() -> AsyncIterator:
        yield client

    return factory


# --- Declarations mirroring the lifecycle steps ---


def basic_role(name: str) -> dict:
    return {
        "role_name": name,
        "description": "test",
        "index_permissions": [{"index_patterns": ["*"], "allowed_actions": ["*"]}],
        "tenant_permissions": [
            {"tenant_patterns": ["*"], "allowed_actions": ["kibana_all_write"]}
        ],
        "cluster_permissions": ["*"],
    }


def updated_role(name: str) -> dict:
    return {
        "role_name": name,
        "description": "test",
        "index_permissions": [
            {"index_patterns": ["test*"], "allowed_actions": ["read"]},
            {"index_patterns": ["?kibana"], "allowed_actions": ["indices_all"]},
        ],
        "tenant_permissions": [
            {"tenant_patterns": ["*"], "allowed_actions": ["kibana_all_write"]},
            {"tenant_patterns": ["test*"], "allowed_actions": ["kibana_all_write"]},
        ],
        "cluster_permissions": ["*"],
    }


def role_without_tenants(name: str) -> dict:
    role = updated_role(name)
    del role["tenant_permissions"]
    return role


def field_level_security_role(name: str) -> dict:
    return {
        "role_name": name,
        "description": "test",
        "index_permissions": [
            {
                "index_patterns": ["pub*"],
                "allowed_actions": ["read"],
                "field_level_security": ["fielda", "myfieldb"],
            }
        ],
        "cluster_permissions": ["*"],
    }


# --- Fixtures ---


@pytest.fixture
def fake_client() -> FakeRoleClient:
    """Fresh in-memory role client for each test."""
    return FakeRoleClient()


@pytest.fixture
def role_client_factory(fake_client):
    """Factory returning async context manager over the fake client."""
    return make_factory(fake_client)


@pytest.fixture
def basic_resource() -> RoleResource:
    return RoleResource.parse(basic_role("testrole"))
