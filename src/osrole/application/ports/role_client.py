"""Role client port - the cluster's role-management endpoint."""

from typing import Protocol

from osrole.domain.entities import Role


class RoleClient(Protocol):
    """Port for reading and writing role documents."""

    async def get_role(self, name: str) -> Role | None: ...

    async def put_role(self, role: Role) -> None: ...

    async def delete_role(self, name: str) -> bool: ...
