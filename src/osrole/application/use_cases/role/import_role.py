"""Import role use case."""

from osrole.application.dto.role_resource import RoleResource
from osrole.application.ports import RoleClientFactory
from osrole.domain.exceptions import NotFound


class ImportRoleUseCase:
    """Adopt an existing role by id; its state is whatever the cluster holds."""

    def __init__(self, role_client_factory: RoleClientFactory) -> None:
        self._client_factory = role_client_factory

    async def execute(self, role_id: str) -> RoleResource:
        async with self._client_factory() as client:
            role = await client.get_role(role_id)
        if role is None:
            raise NotFound("Role", role_id)
        return RoleResource.from_role(role)
