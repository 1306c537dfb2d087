"""Role resource schema - the declared shape of an ``opensearch_role``."""

import json
import re

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from osrole.domain.entities import IndexPermission, Role, TenantPermission
from osrole.domain.exceptions import ValidationError as RoleValidationError

# Security plugin substitutions such as ${user.name} or ${attr.jwt.depts}
_DLS_PLACEHOLDER = re.compile(r"\$\{[^}]*\}")


def _dedupe(values: list[str]) -> list[str]:
    """Reject blank entries and drop duplicates, keeping first occurrence order."""
    seen: set[str] = set()
    result = []
    for v in values:
        if not v or not v.strip():
            raise ValueError("entries must be non-empty strings")
        if v not in seen:
            seen.add(v)
            result.append(v)
    return result


class IndexPermissionBlock(BaseModel):
    """``index_permissions`` block."""

    model_config = ConfigDict(extra="forbid")

    index_patterns: list[str] = Field(default_factory=list)
    allowed_actions: list[str] = Field(default_factory=list)
    field_level_security: list[str] = Field(default_factory=list)
    document_level_security: str = ""
    masked_fields: list[str] = Field(default_factory=list)

    @field_validator(
        "index_patterns", "allowed_actions", "field_level_security", "masked_fields"
    )
    @classmethod
    def dedupe_lists(cls, v: list[str]) -> list[str]:
        return _dedupe(v)

    @field_validator("document_level_security")
    @classmethod
    def dls_is_json_object(cls, v: str) -> str:
        if not v:
            return ""
        try:
            parsed = json.loads(_DLS_PLACEHOLDER.sub("0", v))
        except json.JSONDecodeError as e:
            raise ValueError(f"document_level_security is not valid JSON: {e}") from e
        if not isinstance(parsed, dict):
            raise ValueError("document_level_security must be a JSON object")
        return v


class TenantPermissionBlock(BaseModel):
    """``tenant_permissions`` block."""

    model_config = ConfigDict(extra="forbid")

    tenant_patterns: list[str] = Field(default_factory=list)
    allowed_actions: list[str] = Field(default_factory=list)

    @field_validator("tenant_patterns", "allowed_actions")
    @classmethod
    def dedupe_lists(cls, v: list[str]) -> list[str]:
        return _dedupe(v)


class RoleResource(BaseModel):
    """Declared role: attribute names follow the resource schema contract."""

    model_config = ConfigDict(extra="forbid")

    role_name: str
    description: str = ""
    cluster_permissions: list[str] = Field(default_factory=list)
    index_permissions: list[IndexPermissionBlock] = Field(default_factory=list)
    tenant_permissions: list[TenantPermissionBlock] = Field(default_factory=list)

    @field_validator("role_name")
    @classmethod
    def valid_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("role_name must not be empty")
        if "/" in v:
            raise ValueError("role_name must not contain '/'")
        return v

    @field_validator("cluster_permissions")
    @classmethod
    def dedupe_cluster(cls, v: list[str]) -> list[str]:
        return _dedupe(v)

    @field_validator("index_permissions", "tenant_permissions")
    @classmethod
    def dedupe_blocks(cls, v: list) -> list:
        # Blocks form a set; identical blocks collapse into one.
        seen = set()
        result = []
        for block in v:
            key = block.model_dump_json()
            if key not in seen:
                seen.add(key)
                result.append(block)
        return result

    @classmethod
    def parse(cls, data: dict) -> "RoleResource":
        """Validate raw declaration data, raising the domain ValidationError."""
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            name = data.get("role_name") if isinstance(data, dict) else None
            raise RoleValidationError(f"Invalid role {name or '<unnamed>'}: {e}") from e

    def to_role(self) -> Role:
        return Role(
            role_name=self.role_name,
            description=self.description,
            cluster_permissions=list(self.cluster_permissions),
            index_permissions=[
                IndexPermission(**block.model_dump()) for block in self.index_permissions
            ],
            tenant_permissions=[
                TenantPermission(**block.model_dump()) for block in self.tenant_permissions
            ],
        )

    @classmethod
    def from_role(cls, role: Role) -> "RoleResource":
        """State as stored by the cluster; declaration validators are not applied."""
        return cls.model_construct(
            role_name=role.role_name,
            description=role.description or "",
            cluster_permissions=list(role.cluster_permissions),
            index_permissions=[
                IndexPermissionBlock.model_construct(
                    index_patterns=list(p.index_patterns),
                    allowed_actions=list(p.allowed_actions),
                    field_level_security=list(p.field_level_security),
                    document_level_security=p.document_level_security or "",
                    masked_fields=list(p.masked_fields),
                )
                for p in role.index_permissions
            ],
            tenant_permissions=[
                TenantPermissionBlock.model_construct(
                    tenant_patterns=list(p.tenant_patterns),
                    allowed_actions=list(p.allowed_actions),
                )
                for p in role.tenant_permissions
            ],
        )

    def state(self) -> dict:
        """Flat resource state, including ``id``."""
        return {"id": self.role_name, **self.model_dump()}
