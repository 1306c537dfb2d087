"""Domain entities."""

from osrole.domain.entities.role import IndexPermission, Role, TenantPermission

__all__ = [
    "IndexPermission",
    "Role",
    "TenantPermission",
]
