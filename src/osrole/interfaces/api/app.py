"""Falcon ASGI application."""

import logging

import falcon.asgi
from falcon.asgi import App

from osrole.interfaces.api.resources.health import HealthResource
from osrole.interfaces.api.resources.roles import (
    RoleImportResource,
    RoleResource,
    RolesResource,
)

logger = logging.getLogger(__name__)


async def log_exception(req, resp, ex, params) -> None:
    """Log unexpected errors and answer 500."""
    logger.exception("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    roles_resource: RolesResource,
    role_resource: RoleResource,
    role_import_resource: RoleImportResource,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, log_exception)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/roles", roles_resource)
    app.add_route("/v1/roles/{role_name}", role_resource)
    app.add_route("/v1/roles/{role_name}/import", role_import_resource)
    return app
