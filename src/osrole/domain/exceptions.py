"""Domain exceptions."""


class OSRoleError(Exception):
    """Base exception for osrole."""

    pass


class NotFound(OSRoleError):
    """Requested resource was not found on the cluster."""

    def __init__(self, kind: str, identifier: str) -> None:
        super().__init__(f"{kind} {identifier!r} not found")
        self.kind = kind
        self.identifier = identifier


class ValidationError(OSRoleError):
    """Validation failed for a role declaration."""

    pass


class UnsupportedClusterVersion(OSRoleError):
    """The cluster version does not support role management."""

    pass


class ClusterRequestError(OSRoleError):
    """The cluster rejected or failed a request."""

    def __init__(self, message: str, status: int | str | None = None) -> None:
        super().__init__(message)
        self.status = status
