"""OpenSearch async client."""

from opensearchpy import AsyncOpenSearch

from osrole.config import Settings


def create_client(settings: Settings) -> AsyncOpenSearch:
    """Create async OpenSearch client.

    The client opens connections lazily; callers close it with
    ``await client.close()`` (e.g. via ClientLifespanMiddleware).
    """
    http_auth = (
        (settings.opensearch_username, settings.opensearch_password)
        if settings.opensearch_username
        else None
    )
    return AsyncOpenSearch(
        hosts=[settings.opensearch_url],
        http_auth=http_auth,
        verify_certs=settings.opensearch_verify_certs,
        ca_certs=settings.opensearch_ca_certs or None,
        ssl_show_warn=settings.opensearch_verify_certs,
        timeout=settings.opensearch_timeout,
    )
