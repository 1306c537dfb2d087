"""Plan DTOs - what apply will do for each declared role."""

from dataclasses import dataclass
from enum import StrEnum

from osrole.application.dto.role_resource import RoleResource


class PlanAction(StrEnum):
    """Per-role reconcile action."""

    CREATE = "create"
    UPDATE = "update"
    NO_OP = "no-op"


@dataclass
class PlanEntry:
    """Planned change for one role."""

    action: PlanAction
    desired: RoleResource
    current: RoleResource | None = None

    @property
    def role_name(self) -> str:
        return self.desired.role_name

    @property
    def changed(self) -> bool:
        return self.action is not PlanAction.NO_OP
