"""Inventory of managed network devices."""

from __future__ import annotations

from typing import Any

from apicem.core.response import Response
from apicem.services.base import ApiModel, Service


class NetworkDevice(ApiModel):
    id: str = ""
    hostname: str | None = None
    management_ip_address: str | None = None
    mac_address: str | None = None
    platform_id: str | None = None
    software_version: str | None = None
    serial_number: str | None = None
    family: str | None = None
    series: str | None = None
    role: str | None = None
    type: str | None = None
    reachability_status: str | None = None
    up_time: str | None = None
    location: str | None = None


class NetworkDeviceService(Service):
    """Wraps the ``v1/network-device`` resource."""

    def get_network_devices(self, options: Any = None) -> tuple[list[NetworkDevice], Response]:
        return self._call("GET", "v1/network-device", list[NetworkDevice], options=options)

    def get_network_device(self, device_id: str) -> tuple[NetworkDevice, Response]:
        return self._call("GET", f"v1/network-device/{device_id}", NetworkDevice)

    def get_network_device_count(self) -> tuple[int, Response]:
        return self._call("GET", "v1/network-device/count", int)

    def get_network_device_range(
        self, start_index: int, records_to_return: int
    ) -> tuple[list[NetworkDevice], Response]:
        """Return ``records_to_return`` devices starting at 1-based ``start_index``."""
        return self._call(
            "GET",
            f"v1/network-device/{start_index}/{records_to_return}",
            list[NetworkDevice],
        )
