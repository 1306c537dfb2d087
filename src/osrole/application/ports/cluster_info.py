"""Cluster info port."""

from typing import Protocol

from osrole.domain.value_objects import ClusterVersion


class ClusterInfo(Protocol):
    """Port for discovering the cluster version/distribution."""

    async def get_version(self) -> ClusterVersion: ...
