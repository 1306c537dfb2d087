"""Health check endpoints."""

import falcon.asgi

from osrole.application.ports import ClusterInfo
from osrole.domain.exceptions import OSRoleError


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, cluster_info: ClusterInfo | None = None) -> None:
        self._cluster_info = cluster_info

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - readiness (cluster reachable, roles supported)."""
        if self._cluster_info is None:
            resp.media = {"status": "ready"}
            resp.status = falcon.HTTP_200
            return
        try:
            version = await self._cluster_info.get_version()
            supports_roles = version.supports_roles
        except OSRoleError as e:
            resp.media = {"status": "unavailable", "error": str(e)}
            resp.status = falcon.HTTP_503
            return
        resp.media = {
            "status": "ready" if supports_roles else "unsupported",
            "distribution": version.distribution,
            "version": version.number,
        }
        resp.status = falcon.HTTP_200 if supports_roles else falcon.HTTP_503
