"""Application entry point and composition root."""

import asyncio
import logging
import sys
from dataclasses import dataclass

from opensearchpy import AsyncOpenSearch

from osrole.application.ports import ClusterInfo
from osrole.application.use_cases.role.apply_roles import ApplyRolesUseCase
from osrole.application.use_cases.role.create_role import CreateRoleUseCase
from osrole.application.use_cases.role.delete_role import DeleteRoleUseCase
from osrole.application.use_cases.role.import_role import ImportRoleUseCase
from osrole.application.use_cases.role.plan_roles import PlanRolesUseCase
from osrole.application.use_cases.role.read_role import ReadRoleUseCase
from osrole.application.use_cases.role.update_role import UpdateRoleUseCase
from osrole.config import Settings, get_settings
from osrole.infrastructure.opensearch.client_factory import create_role_client_factory
from osrole.infrastructure.opensearch.cluster_info import OpenSearchClusterInfo
from osrole.infrastructure.opensearch.connection import create_client
from osrole.interfaces.api.app import create_app
from osrole.interfaces.api.middleware.client_lifespan import ClientLifespanMiddleware
from osrole.interfaces.api.resources.health import HealthResource
from osrole.interfaces.api.resources.roles import (
    RoleImportResource,
    RoleResource,
    RolesResource,
)
from osrole.interfaces.cli.commands import build_parser, run_command


@dataclass
class RoleUseCases:
    """All role use cases wired to one client factory."""

    create_role: CreateRoleUseCase
    read_role: ReadRoleUseCase
    update_role: UpdateRoleUseCase
    delete_role: DeleteRoleUseCase
    import_role: ImportRoleUseCase
    plan_roles: PlanRolesUseCase
    apply_roles: ApplyRolesUseCase


def build_use_cases(role_client_factory) -> RoleUseCases:
    create_role = CreateRoleUseCase(role_client_factory)
    update_role = UpdateRoleUseCase(role_client_factory)
    plan_roles = PlanRolesUseCase(role_client_factory)
    return RoleUseCases(
        create_role=create_role,
        read_role=ReadRoleUseCase(role_client_factory),
        update_role=update_role,
        delete_role=DeleteRoleUseCase(role_client_factory),
        import_role=ImportRoleUseCase(role_client_factory),
        plan_roles=plan_roles,
        apply_roles=ApplyRolesUseCase(plan_roles, create_role, update_role),
    )


def configure_logging(settings: Settings) -> None:
    level = "DEBUG" if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # opensearch-py logs every request at INFO
    if not settings.debug:
        logging.getLogger("opensearch").setLevel(logging.WARNING)


def _connect(settings: Settings) -> tuple[AsyncOpenSearch, ClusterInfo, RoleUseCases]:
    client = create_client(settings)
    cluster_info = OpenSearchClusterInfo(client, override=settings.opensearch_version)
    factory = create_role_client_factory(client, cluster_info)
    return client, cluster_info, build_use_cases(factory)


def create_osrole_app():
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    client, cluster_info, use_cases = _connect(settings)
    return create_app(
        roles_resource=RolesResource(use_cases.create_role),
        role_resource=RoleResource(
            use_cases.read_role, use_cases.update_role, use_cases.delete_role
        ),
        role_import_resource=RoleImportResource(use_cases.import_role),
        health_resource=HealthResource(cluster_info),
        middleware=[ClientLifespanMiddleware(client)],
    )


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(create_osrole_app(), host=settings.api_host, port=settings.api_port)


async def _run_cli(args) -> int:
    client, _, use_cases = _connect(get_settings())
    try:
        return await run_command(args, use_cases)
    finally:
        await client.close()


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(get_settings())
    if args.command == "serve":
        run_server()
        return 0
    return asyncio.run(_run_cli(args))


if __name__ == "__main__":
    sys.exit(main())
