"""Response wrapper and error-response classification."""

from __future__ import annotations

from typing import Any

import requests
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from apicem.core.errors import ApiError

__all__ = ["Response", "ErrorDetail", "ErrorBody", "check_response"]


class Response:
    """An APIC-EM response wrapping the ``requests.Response`` from the transport.

    Attribute access falls through to the wrapped response, so ``status_code``,
    ``headers``, ``url`` and friends work as usual.
    """

    def __init__(self, http_response: requests.Response, *, monitor: str | None = None) -> None:
        self.http_response = http_response
        # URI of the task resource tracking an asynchronous operation.
        self.monitor = monitor
        self.data: Any = None

    def __getattr__(self, name: str) -> Any:
        if name == "http_response":
            raise AttributeError(name)
        return getattr(self.http_response, name)

    def __repr__(self) -> str:
        return f"<Response [{self.http_response.status_code}] monitor={self.monitor!r}>"


class ErrorDetail(BaseModel):
    model_config = ConfigDict(extra="ignore")

    description: str = Field(default="", validation_alias=AliasChoices("description", "Description"))

    @field_validator("description", mode="before")
    @classmethod
    def _null_description(cls, value: Any) -> Any:
        return "" if value is None else value


class ErrorBody(BaseModel):
    """JSON shape of an error response body. Every field is optional."""

    model_config = ConfigDict(extra="ignore")

    message: str = Field(default="", validation_alias=AliasChoices("message", "Message"))
    errors: list[ErrorDetail] = Field(
        default_factory=list, validation_alias=AliasChoices("errors", "Errors")
    )
    tracking_id: str = Field(
        default="", validation_alias=AliasChoices("trackingId", "tracking_id", "TrackingID")
    )

    # A JSON null counts as a missing field.
    @field_validator("message", "tracking_id", mode="before")
    @classmethod
    def _null_text(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("errors", mode="before")
    @classmethod
    def _null_errors(cls, value: Any) -> Any:
        return [] if value is None else value


def check_response(response: requests.Response) -> ApiError | None:
    """Return an :class:`ApiError` if ``response`` has a status outside 2xx.

    Error bodies are expected to be empty or JSON matching :class:`ErrorBody`.
    Anything else leaves the error fields at their defaults; the status is
    never masked by a body that fails to parse.
    """

    if 200 <= response.status_code <= 299:
        return None

    body = ErrorBody()
    try:
        content = response.content
    except (requests.RequestException, RuntimeError):
        # RuntimeError: the body was already streamed by the completion callback.
        content = b""
    if content:
        try:
            body = ErrorBody.model_validate_json(content)
        except ValidationError:
            pass

    return ApiError(
        response,
        message=body.message,
        errors=body.errors,
        tracking_id=body.tracking_id,
    )
