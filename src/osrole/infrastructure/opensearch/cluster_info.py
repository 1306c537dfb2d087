"""Cluster version detection."""

import logging

from opensearchpy import AsyncOpenSearch
from opensearchpy.exceptions import TransportError

from osrole.domain.exceptions import ClusterRequestError
from osrole.domain.value_objects import ClusterVersion

logger = logging.getLogger(__name__)


class OpenSearchClusterInfo:
    """Reads ``GET /`` once and caches the version.

    An explicit ``override`` (e.g. "opensearch:2.11.0") skips the ping.
    """

    def __init__(self, client: AsyncOpenSearch, override: str = "") -> None:
        self._client = client
        self._override = override
        self._version: ClusterVersion | None = None

    async def get_version(self) -> ClusterVersion:
        if self._version is None and self._override:
            self._version = ClusterVersion.parse(self._override)
        if self._version is None:
            try:
                info = await self._client.info()
            except TransportError as e:
                raise ClusterRequestError(
                    f"Failed to read cluster info: {e.error}", e.status_code
                ) from e
            version = info.get("version") or {}
            self._version = ClusterVersion(
                distribution=version.get("distribution") or "elasticsearch",
                number=version.get("number") or "",
            )
            logger.info(
                "Detected cluster %s %s (%s)",
                self._version.distribution,
                self._version.number,
                self._version.flavor,
            )
        return self._version
