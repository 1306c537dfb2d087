"""Domain value objects."""

from osrole.domain.value_objects.cluster_version import ClusterFlavor, ClusterVersion

__all__ = [
    "ClusterFlavor",
    "ClusterVersion",
]
