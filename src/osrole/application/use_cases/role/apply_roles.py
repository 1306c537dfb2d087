"""Apply roles use case - execute a plan through the CRUD use cases."""

import logging

from osrole.application.dto.plan import PlanAction, PlanEntry
from osrole.application.dto.role_resource import RoleResource
from osrole.application.use_cases.role.create_role import CreateRoleUseCase
from osrole.application.use_cases.role.plan_roles import PlanRolesUseCase
from osrole.application.use_cases.role.update_role import UpdateRoleUseCase

logger = logging.getLogger(__name__)


class ApplyRolesUseCase:
    """Create missing roles and update drifted ones."""

    def __init__(
        self,
        plan_roles: PlanRolesUseCase,
        create_role: CreateRoleUseCase,
        update_role: UpdateRoleUseCase,
    ) -> None:
        self._plan = plan_roles
        self._create = create_role
        self._update = update_role

    async def execute(self, resources: list[RoleResource]) -> list[PlanEntry]:
        """Return the executed plan; ``current`` holds the post-apply state."""
        plan = await self._plan.execute(resources)
        for entry in plan:
            if entry.action is PlanAction.CREATE:
                entry.current = await self._create.execute(entry.desired)
            elif entry.action is PlanAction.UPDATE:
                entry.current = await self._update.execute(entry.role_name, entry.desired)
        changed = sum(1 for e in plan if e.changed)
        logger.info("Apply complete: %d changed, %d unchanged", changed, len(plan) - changed)
        return plan
