"""Device interfaces."""

from __future__ import annotations

from typing import Any

from apicem.core.response import Response
from apicem.services.base import ApiModel, Service


class Interface(ApiModel):
    id: str = ""
    device_id: str | None = None
    port_name: str | None = None
    interface_type: str | None = None
    status: str | None = None
    admin_status: str | None = None
    mac_address: str | None = None
    ipv4_address: str | None = None
    ipv4_mask: str | None = None
    speed: str | None = None
    vlan_id: str | None = None
    description: str | None = None


class InterfaceService(Service):
    """Wraps the ``v1/interface`` resource."""

    def get_interfaces(self, options: Any = None) -> tuple[list[Interface], Response]:
        return self._call("GET", "v1/interface", list[Interface], options=options)

    def get_interface(self, interface_id: str) -> tuple[Interface, Response]:
        return self._call("GET", f"v1/interface/{interface_id}", Interface)

    def get_interfaces_by_device(self, device_id: str) -> tuple[list[Interface], Response]:
        return self._call("GET", f"v1/interface/network-device/{device_id}", list[Interface])

    def get_interface_count(self) -> tuple[int, Response]:
        return self._call("GET", "v1/interface/count", int)
