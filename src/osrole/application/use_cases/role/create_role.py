"""Create role use case."""

import logging

from osrole.application.dto.role_resource import RoleResource
from osrole.application.ports import RoleClientFactory
from osrole.domain.exceptions import NotFound

logger = logging.getLogger(__name__)


class CreateRoleUseCase:
    """Create a role from its declaration and return the state read back."""

    def __init__(self, role_client_factory: RoleClientFactory) -> None:
        self._client_factory = role_client_factory

    async def execute(self, resource: RoleResource) -> RoleResource:
        """PUT the full role document, then read it back."""
        role = resource.to_role()
        async with self._client_factory() as client:
            await client.put_role(role)
            created = await client.get_role(role.role_name)
        if created is None:
            raise NotFound("Role", role.role_name)
        logger.info("Created role %s", role.role_name)
        return RoleResource.from_role(created)
