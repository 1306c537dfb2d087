"""Load role declarations from YAML files."""

from pathlib import Path

import yaml

from osrole.application.dto.role_resource import RoleResource
from osrole.domain.exceptions import ValidationError


def load_roles(path: Path) -> list[RoleResource]:
    """Read ``roles:`` from a declaration file.

    Example::

        roles:
          - role_name: logs_reader
            cluster_permissions: ["cluster_composite_ops_ro"]
            index_permissions:
              - index_patterns: ["logs-*"]
                allowed_actions: ["read"]
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValidationError(f"{path}: invalid YAML: {e}") from e

    if data is None:
        return []
    if not isinstance(data, dict) or not isinstance(data.get("roles", []), list):
        raise ValidationError(f"{path}: expected a mapping with a 'roles' list")
    return [RoleResource.parse(item) for item in data.get("roles") or []]
