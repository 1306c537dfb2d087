"""Role entity - a named bundle of cluster, index and tenant permissions."""

from dataclasses import dataclass, field


def _as_set(values: list[str] | None) -> frozenset[str]:
    return frozenset(values or ())


@dataclass
class IndexPermission:
    """Actions allowed on a set of index patterns, with optional FLS/DLS."""

    index_patterns: list[str] = field(default_factory=list)
    allowed_actions: list[str] = field(default_factory=list)
    field_level_security: list[str] = field(default_factory=list)
    document_level_security: str = ""
    masked_fields: list[str] = field(default_factory=list)

    def normalized(self) -> tuple:
        return (
            _as_set(self.index_patterns),
            _as_set(self.allowed_actions),
            _as_set(self.field_level_security),
            self.document_level_security or "",
            _as_set(self.masked_fields),
        )


@dataclass
class TenantPermission:
    """Actions allowed on a set of tenant patterns."""

    tenant_patterns: list[str] = field(default_factory=list)
    allowed_actions: list[str] = field(default_factory=list)

    def normalized(self) -> tuple:
        return (_as_set(self.tenant_patterns), _as_set(self.allowed_actions))


@dataclass
class Role:
    """Role - identified by name; collections behave as sets."""

    role_name: str
    description: str = ""
    cluster_permissions: list[str] = field(default_factory=list)
    index_permissions: list[IndexPermission] = field(default_factory=list)
    tenant_permissions: list[TenantPermission] = field(default_factory=list)

    @property
    def id(self) -> str:
        """Resource id - the role name."""
        return self.role_name

    def normalized(self) -> tuple:
        """Order-insensitive form used to compare declared and remote roles."""
        return (
            self.role_name,
            self.description or "",
            _as_set(self.cluster_permissions),
            frozenset(p.normalized() for p in self.index_permissions),
            frozenset(p.normalized() for p in self.tenant_permissions),
        )

    def is_equivalent(self, other: "Role") -> bool:
        return self.normalized() == other.normalized()
