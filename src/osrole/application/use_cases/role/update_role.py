"""Update role use case."""

import logging

from osrole.application.dto.role_resource import RoleResource
from osrole.application.ports import RoleClientFactory
from osrole.domain.exceptions import NotFound

logger = logging.getLogger(__name__)


class UpdateRoleUseCase:
    """Replace a role document with its new declaration."""

    def __init__(self, role_client_factory: RoleClientFactory) -> None:
        self._client_factory = role_client_factory

    async def execute(self, role_id: str, resource: RoleResource) -> RoleResource:
        """Full-document PUT and read back.

        Renaming a role is a replacement: the role stored under ``role_id``
        is deleted once the new one is written.
        """
        role = resource.to_role()
        async with self._client_factory() as client:
            await client.put_role(role)
            if role.role_name != role_id:
                await client.delete_role(role_id)
                logger.info("Replaced role %s with %s", role_id, role.role_name)
            updated = await client.get_role(role.role_name)
        if updated is None:
            raise NotFound("Role", role.role_name)
        logger.info("Updated role %s", role.role_name)
        return RoleResource.from_role(updated)
