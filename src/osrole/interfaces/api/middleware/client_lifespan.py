"""Client lifespan middleware - closes the OpenSearch client on shutdown."""

from typing import Any

from opensearchpy import AsyncOpenSearch


class ClientLifespanMiddleware:
    """Middleware that releases the cluster connection pool on shutdown."""

    def __init__(self, client: AsyncOpenSearch) -> None:
        self._client = client

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Close client when ASGI server shuts down."""
        await self._client.close()
