"""Role API resources - CRUD and import for ``opensearch_role``."""

import falcon.asgi

from osrole.application.dto.role_resource import RoleResource as RoleDeclaration
from osrole.application.use_cases.role.create_role import CreateRoleUseCase
from osrole.application.use_cases.role.delete_role import DeleteRoleUseCase
from osrole.application.use_cases.role.import_role import ImportRoleUseCase
from osrole.application.use_cases.role.read_role import ReadRoleUseCase
from osrole.application.use_cases.role.update_role import UpdateRoleUseCase
from osrole.domain.exceptions import (
    ClusterRequestError,
    NotFound,
    UnsupportedClusterVersion,
    ValidationError,
)

_ERROR_STATUS = (
    (ValidationError, falcon.HTTP_400),
    (NotFound, falcon.HTTP_404),
    (UnsupportedClusterVersion, falcon.HTTP_501),
    (ClusterRequestError, falcon.HTTP_502),
)


def _set_error(resp: falcon.asgi.Response, error: Exception) -> None:
    for exc_type, status in _ERROR_STATUS:
        if isinstance(error, exc_type):
            resp.status = status
            resp.media = {"error": str(error)}
            return
    raise error


async def _read_body(req: falcon.asgi.Request) -> dict:
    try:
        body = await req.get_media()
    except falcon.HTTPBadRequest as e:
        raise ValidationError(f"Malformed request body: {e.description or e.title}") from e
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


class RolesResource:
    """POST /v1/roles - create role."""

    def __init__(self, create_role: CreateRoleUseCase) -> None:
        self._create = create_role

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        try:
            declaration = RoleDeclaration.parse(await _read_body(req))
            state = await self._create.execute(declaration)
        except Exception as e:
            _set_error(resp, e)
            return
        resp.media = state.state()
        resp.status = falcon.HTTP_201


class RoleResource:
    """GET/PUT/DELETE /v1/roles/{role_name} - read, update, destroy."""

    def __init__(
        self,
        read_role: ReadRoleUseCase,
        update_role: UpdateRoleUseCase,
        delete_role: DeleteRoleUseCase,
    ) -> None:
        self._read = read_role
        self._update = update_role
        self._delete = delete_role

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_name: str
    ) -> None:
        try:
            state = await self._read.execute(role_name)
        except Exception as e:
            _set_error(resp, e)
            return
        if state is None:
            resp.status = falcon.HTTP_404
            resp.media = {"error": f"Role {role_name!r} not found"}
            return
        resp.media = state.state()
        resp.status = falcon.HTTP_200

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_name: str
    ) -> None:
        """Replace the role document; a different role_name in the body renames."""
        try:
            body = await _read_body(req)
            body.setdefault("role_name", role_name)
            declaration = RoleDeclaration.parse(body)
            state = await self._update.execute(role_name, declaration)
        except Exception as e:
            _set_error(resp, e)
            return
        resp.media = state.state()
        resp.status = falcon.HTTP_200

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_name: str
    ) -> None:
        try:
            await self._delete.execute(role_name)
        except Exception as e:
            _set_error(resp, e)
            return
        resp.status = falcon.HTTP_204


class RoleImportResource:
    """POST /v1/roles/{role_name}/import - adopt an existing role."""

    def __init__(self, import_role: ImportRoleUseCase) -> None:
        self._import = import_role

    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_name: str
    ) -> None:
        try:
            state = await self._import.execute(role_name)
        except Exception as e:
            _set_error(resp, e)
            return
        resp.media = state.state()
        resp.status = falcon.HTTP_200
