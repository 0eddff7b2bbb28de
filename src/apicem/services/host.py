"""End hosts seen by the controller."""

from __future__ import annotations

from typing import Any

from apicem.core.response import Response
from apicem.services.base import ApiModel, Service


class Host(ApiModel):
    id: str = ""
    host_ip: str | None = None
    host_mac: str | None = None
    host_type: str | None = None
    connected_network_device_id: str | None = None
    connected_network_device_ip_address: str | None = None
    connected_interface_id: str | None = None
    connected_interface_name: str | None = None
    vlan_id: str | None = None
    last_updated: str | None = None


class HostService(Service):
    """Wraps the ``v1/host`` resource."""

    def get_hosts(self, options: Any = None) -> tuple[list[Host], Response]:
        return self._call("GET", "v1/host", list[Host], options=options)

    def get_host(self, host_id: str) -> tuple[Host, Response]:
        return self._call("GET", f"v1/host/{host_id}", Host)

    def get_host_count(self) -> tuple[int, Response]:
        return self._call("GET", "v1/host/count", int)
