"""Resource services built on the shared client."""

from .base import ApiModel, ApiResult, Service, TaskIdResult
from .discovery import Discovery, DiscoveryRequest, DiscoveryService
from .flow_analysis import (
    FlowAnalysis,
    FlowAnalysisRequest,
    FlowAnalysisService,
    FlowAnalysisStarted,
)
from .host import Host, HostService
from .interface import Interface, InterfaceService
from .network_device import NetworkDevice, NetworkDeviceService
from .task import Task, TaskService
from .ticket import Ticket, TicketService
from .topology import Topology, TopologyService

__all__ = [
    "ApiModel",
    "ApiResult",
    "Discovery",
    "DiscoveryRequest",
    "DiscoveryService",
    "FlowAnalysis",
    "FlowAnalysisRequest",
    "FlowAnalysisService",
    "FlowAnalysisStarted",
    "Host",
    "HostService",
    "Interface",
    "InterfaceService",
    "NetworkDevice",
    "NetworkDeviceService",
    "Service",
    "Task",
    "TaskIdResult",
    "TaskService",
    "Ticket",
    "TicketService",
    "Topology",
    "TopologyService",
]
