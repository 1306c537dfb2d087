"""Cluster version and flavor detected from the root endpoint."""

from dataclasses import dataclass
from enum import StrEnum

from osrole.domain.exceptions import UnsupportedClusterVersion


class ClusterFlavor(StrEnum):
    """Which security API (if any) a cluster exposes."""

    OPENSEARCH = "opensearch"
    OPENDISTRO = "opendistro"
    ELASTICSEARCH6 = "elasticsearch6"


@dataclass(frozen=True)
class ClusterVersion:
    """Version reported by the cluster, e.g. ("opensearch", "2.11.0")."""

    distribution: str
    number: str

    @property
    def major(self) -> int:
        head = self.number.split(".", 1)[0]
        try:
            return int(head)
        except ValueError:
            raise UnsupportedClusterVersion(
                f"Cannot parse cluster version {self.number!r}"
            ) from None

    @property
    def flavor(self) -> ClusterFlavor:
        """Map distribution/major version to the client flavor."""
        if self.distribution == "opensearch":
            return ClusterFlavor.OPENSEARCH
        if self.major == 7:
            return ClusterFlavor.OPENDISTRO
        if self.major == 6:
            return ClusterFlavor.ELASTICSEARCH6
        raise UnsupportedClusterVersion(
            f"Unsupported cluster version {self.distribution} {self.number}"
        )

    @property
    def supports_roles(self) -> bool:
        return self.flavor is not ClusterFlavor.ELASTICSEARCH6

    @classmethod
    def parse(cls, value: str) -> "ClusterVersion":
        """Parse an override such as "opensearch:2.11.0" or "7.10.2".

        A bare number below 6 can only be OpenSearch; 6.x and 7.x are
        Elasticsearch.
        """
        distribution, sep, number = value.partition(":")
        number = number.strip() if sep else value.strip()
        if not number:
            raise UnsupportedClusterVersion(f"Invalid cluster version {value!r}")
        if not sep:
            major = cls("elasticsearch", number).major
            distribution = "opensearch" if major < 6 else "elasticsearch"
        return cls(distribution=distribution.strip().lower(), number=number)
