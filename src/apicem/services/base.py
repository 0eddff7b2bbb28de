"""Shared pieces for resource services."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from apicem.core.destination import DecodeInto
from apicem.core.query import add_options
from apicem.core.response import Response

if TYPE_CHECKING:
    from apicem.core.client import Client

T = TypeVar("T")

__all__ = ["ApiModel", "ApiResult", "TaskIdResult", "Service"]


class ApiModel(BaseModel):
    """Base for controller payloads: camelCase on the wire, unknown keys kept."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class ApiResult(BaseModel, Generic[T]):
    """The ``{"response": ..., "version": ...}`` envelope used by every endpoint."""

    model_config = ConfigDict(extra="allow")

    response: T
    version: str | None = None


class TaskIdResult(ApiModel):
    """Handle returned by asynchronous operations."""

    task_id: str = ""
    url: str = ""


class Service:
    """A view over the owning client's transport and configuration."""

    def __init__(self, client: Client) -> None:
        self.client = client

    def _call(
        self,
        method: str,
        path: str,
        result_type: Any,
        *,
        body: Any = None,
        options: Any = None,
    ) -> tuple[Any, Response]:
        """Send one request and decode the ``response`` field of the envelope."""

        if options is not None:
            path = add_options(path, options)
        request = self.client.new_request(method, path, body)
        response = self.client.do(request, DecodeInto(ApiResult[result_type]))
        return response.data.response, response

    def _call_async(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
    ) -> tuple[TaskIdResult, Response]:
        """Start an asynchronous operation; ``response.monitor`` tracks its task."""

        result, response = self._call(method, path, TaskIdResult, body=body)
        response.monitor = result.url or None
        return result, response

