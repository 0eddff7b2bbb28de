"""Physical and layer 3 topology graphs."""

from __future__ import annotations

from pydantic import Field

from apicem.core.response import Response
from apicem.services.base import ApiModel, Service


class TopologyNode(ApiModel):
    id: str = ""
    label: str | None = None
    ip: str | None = None
    device_type: str | None = None
    family: str | None = None
    role: str | None = None
    platform_id: str | None = None


class TopologyLink(ApiModel):
    id: str | None = None
    source: str = ""
    target: str = ""
    start_port_name: str | None = None
    end_port_name: str | None = None
    link_status: str | None = None


class Topology(ApiModel):
    id: str | None = None
    nodes: list[TopologyNode] = Field(default_factory=list)
    links: list[TopologyLink] = Field(default_factory=list)


class TopologyService(Service):
    """Wraps the ``v1/topology`` resource."""

    def get_physical_topology(self) -> tuple[Topology, Response]:
        return self._call("GET", "v1/topology/physical-topology", Topology)

    def get_l3_topology(self, topology_type: str) -> tuple[Topology, Response]:
        """``topology_type`` is a routing protocol such as ``ospf`` or ``static``."""
        return self._call("GET", f"v1/topology/l3/{topology_type}", Topology)
