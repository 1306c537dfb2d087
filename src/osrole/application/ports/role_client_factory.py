"""Role client factory port - yields the version-selected client."""

from contextlib import AbstractAsyncContextManager
from typing import Protocol

from osrole.application.ports.role_client import RoleClient


class RoleClientFactory(Protocol):
    """Factory returning an async context manager over a RoleClient."""

    def __call__(self) -> AbstractAsyncContextManager[RoleClient]: ...
