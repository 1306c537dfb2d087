"""Role client factory - detects the cluster once, then hands out clients."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from opensearchpy import AsyncOpenSearch

from osrole.application.ports import ClusterInfo, RoleClient, RoleClientFactory
from osrole.infrastructure.opensearch.role_client import select_role_client


def create_role_client_factory(
    client: AsyncOpenSearch, cluster_info: ClusterInfo
) -> RoleClientFactory:
    """Create RoleClient factory (async context manager)."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[RoleClient]:
        version = await cluster_info.get_version()
        yield select_role_client(version, client)

    return factory
