"""Application ports - interfaces for external adapters."""

from osrole.application.ports.cluster_info import ClusterInfo
from osrole.application.ports.role_client import RoleClient
from osrole.application.ports.role_client_factory import RoleClientFactory

__all__ = [
    "ClusterInfo",
    "RoleClient",
    "RoleClientFactory",
]
