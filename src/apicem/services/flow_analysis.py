"""Path trace (flow analysis) between two endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from apicem.core.response import Response
from apicem.services.base import ApiModel, Service


class FlowAnalysisRequest(ApiModel):
    source_ip: str = Field(alias="sourceIP")
    dest_ip: str = Field(alias="destIP")
    source_port: str | None = None
    dest_port: str | None = None
    protocol: str | None = None
    periodic_refresh: bool | None = None
    inclusions: list[str] | None = None


class FlowAnalysisStarted(ApiModel):
    flow_analysis_id: str = ""
    task_id: str = ""
    url: str = ""


class FlowAnalysisRequestStatus(ApiModel):
    id: str = ""
    status: str | None = None
    source_ip: str | None = Field(default=None, alias="sourceIP")
    dest_ip: str | None = Field(default=None, alias="destIP")
    failure_reason: str | None = None


class FlowAnalysis(ApiModel):
    request: FlowAnalysisRequestStatus = Field(default_factory=FlowAnalysisRequestStatus)
    last_update: str | None = None
    network_elements_info: list[dict[str, Any]] = Field(default_factory=list)


class FlowAnalysisService(Service):
    """Wraps the ``v1/flow-analysis`` resource."""

    def add_flow_analysis(self, request: FlowAnalysisRequest) -> tuple[FlowAnalysisStarted, Response]:
        result, response = self._call("POST", "v1/flow-analysis", FlowAnalysisStarted, body=request)
        response.monitor = result.url or None
        return result, response

    def get_flow_analysis(self, flow_analysis_id: str) -> tuple[FlowAnalysis, Response]:
        return self._call("GET", f"v1/flow-analysis/{flow_analysis_id}", FlowAnalysis)
