"""Read role use case."""

import logging

from osrole.application.dto.role_resource import RoleResource
from osrole.application.ports import RoleClientFactory

logger = logging.getLogger(__name__)


class ReadRoleUseCase:
    """Refresh a role's state from the cluster."""

    def __init__(self, role_client_factory: RoleClientFactory) -> None:
        self._client_factory = role_client_factory

    async def execute(self, role_id: str) -> RoleResource | None:
        """Return current state, or None when the role no longer exists."""
        async with self._client_factory() as client:
            role = await client.get_role(role_id)
        if role is None:
            logger.warning("Role (%s) not found, removing from state", role_id)
            return None
        return RoleResource.from_role(role)

    async def exists(self, role_id: str) -> bool:
        async with self._client_factory() as client:
            return await client.get_role(role_id) is not None
