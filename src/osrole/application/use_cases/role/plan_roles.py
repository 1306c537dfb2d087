"""Plan roles use case - compare declarations against the cluster."""

from osrole.application.dto.plan import PlanAction, PlanEntry
from osrole.application.dto.role_resource import RoleResource
from osrole.application.ports import RoleClientFactory
from osrole.domain.exceptions import ValidationError


class PlanRolesUseCase:
    """Decide create / update / no-op for each declared role."""

    def __init__(self, role_client_factory: RoleClientFactory) -> None:
        self._client_factory = role_client_factory

    async def execute(self, resources: list[RoleResource]) -> list[PlanEntry]:
        names = [r.role_name for r in resources]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValidationError(f"Duplicate role declarations: {', '.join(duplicates)}")

        plan = []
        async with self._client_factory() as client:
            for resource in resources:
                current = await client.get_role(resource.role_name)
                if current is None:
                    plan.append(PlanEntry(action=PlanAction.CREATE, desired=resource))
                    continue
                action = (
                    PlanAction.NO_OP
                    if current.is_equivalent(resource.to_role())
                    else PlanAction.UPDATE
                )
                plan.append(
                    PlanEntry(
                        action=action,
                        desired=resource,
                        current=RoleResource.from_role(current),
                    )
                )
        return plan
