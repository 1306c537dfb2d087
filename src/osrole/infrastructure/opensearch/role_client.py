"""Security plugin role clients, one per cluster flavor."""

import logging
from urllib.parse import quote

from opensearchpy import AsyncOpenSearch
from opensearchpy.exceptions import NotFoundError, TransportError

from osrole.domain.entities import Role
from osrole.domain.exceptions import ClusterRequestError, UnsupportedClusterVersion
from osrole.domain.value_objects import ClusterFlavor, ClusterVersion
from osrole.infrastructure.opensearch.role_document import from_document, to_document

logger = logging.getLogger(__name__)


class SecurityApiRoleClient:
    """Role CRUD against ``{base_path}/{name}``."""

    base_path = ""

    def __init__(self, client: AsyncOpenSearch) -> None:
        self._client = client

    def _path(self, name: str) -> str:
        return f"{self.base_path}/{quote(name, safe='')}"

    async def _request(self, method: str, name: str, body: dict | None = None):
        try:
            return await self._client.transport.perform_request(
                method, self._path(name), body=body
            )
        except NotFoundError:
            raise
        except TransportError as e:
            raise ClusterRequestError(
                f"{method} role {name!r} failed: {e.error}", e.status_code
            ) from e

    async def get_role(self, name: str) -> Role | None:
        try:
            response = await self._request("GET", name)
        except NotFoundError:
            return None
        doc = (response or {}).get(name)
        if doc is None:
            return None
        return from_document(name, doc)

    async def put_role(self, role: Role) -> None:
        try:
            await self._request("PUT", role.role_name, to_document(role))
        except NotFoundError as e:
            raise ClusterRequestError(
                f"PUT role {role.role_name!r} failed: {e.error}", e.status_code
            ) from e
        logger.debug("PUT %s", self._path(role.role_name))

    async def delete_role(self, name: str) -> bool:
        """Delete; returns False when the role did not exist."""
        try:
            await self._request("DELETE", name)
        except NotFoundError:
            return False
        return True


class OpenSearchRoleClient(SecurityApiRoleClient):
    """OpenSearch security plugin."""

    base_path = "/_plugins/_security/api/roles"


class OpenDistroRoleClient(SecurityApiRoleClient):
    """OpenDistro for Elasticsearch 7.x security plugin."""

    base_path = "/_opendistro/_security/api/roles"


class LegacyElasticsearchRoleClient:
    """Elasticsearch 6.x - no role management through this resource."""

    def __init__(self, client: AsyncOpenSearch) -> None:
        self._client = client

    def _unsupported(self) -> UnsupportedClusterVersion:
        return UnsupportedClusterVersion("Roles only supported on ES >= 7")

    async def get_role(self, name: str) -> Role | None:
        raise self._unsupported()

    async def put_role(self, role: Role) -> None:
        raise self._unsupported()

    async def delete_role(self, name: str) -> bool:
        raise self._unsupported()


_CLIENTS = {
    ClusterFlavor.OPENSEARCH: OpenSearchRoleClient,
    ClusterFlavor.OPENDISTRO: OpenDistroRoleClient,
    ClusterFlavor.ELASTICSEARCH6: LegacyElasticsearchRoleClient,
}


def select_role_client(version: ClusterVersion, client: AsyncOpenSearch):
    """Pick the role client matching the cluster flavor."""
    return _CLIENTS[version.flavor](client)
