"""Delete role use case."""

import logging

from osrole.application.ports import RoleClientFactory

logger = logging.getLogger(__name__)


class DeleteRoleUseCase:
    """Destroy a role. A role that is already gone counts as deleted."""

    def __init__(self, role_client_factory: RoleClientFactory) -> None:
        self._client_factory = role_client_factory

    async def execute(self, role_id: str) -> None:
        async with self._client_factory() as client:
            deleted = await client.delete_role(role_id)
        if deleted:
            logger.info("Deleted role %s", role_id)
        else:
            logger.debug("Role %s already absent", role_id)
