"""Network discovery jobs."""

from __future__ import annotations

from pydantic import Field

from apicem.core.response import Response
from apicem.services.base import ApiModel, Service, TaskIdResult


class DiscoveryRequest(ApiModel):
    name: str
    discovery_type: str = "Range"
    ip_address_list: str = ""
    protocol_order: str | None = None
    snmp_ro_community: str | None = Field(default=None, alias="snmpROCommunity")
    snmp_version: str | None = None
    global_credential_id_list: list[str] | None = None
    retry: int | None = None
    timeout: int | None = None
    rediscovery: bool | None = None


class Discovery(ApiModel):
    id: str = ""
    name: str | None = None
    discovery_type: str | None = None
    discovery_status: str | None = None
    discovery_condition: str | None = None
    ip_address_list: str | None = None
    device_ids: str | None = None
    num_devices: int | None = None
    global_credential_id_list: list[str] = Field(default_factory=list)


class DiscoveryService(Service):
    """Wraps the ``v1/discovery`` resource."""

    def add_discovery(self, request: DiscoveryRequest) -> tuple[TaskIdResult, Response]:
        return self._call_async("POST", "v1/discovery", body=request)

    def get_discovery(self, discovery_id: str) -> tuple[Discovery, Response]:
        return self._call("GET", f"v1/discovery/{discovery_id}", Discovery)

    def get_discovery_count(self) -> tuple[int, Response]:
        return self._call("GET", "v1/discovery/count", int)

    def delete_discovery(self, discovery_id: str) -> tuple[TaskIdResult, Response]:
        return self._call_async("DELETE", f"v1/discovery/{discovery_id}")
