"""Exception hierarchy for the APIC-EM client.

Every failure raised by :class:`apicem.core.client.Client` belongs to one of a
small number of kinds. Transport failures are the exception: they are raised
as the transport's own ``requests.RequestException`` and can be mapped onto
:class:`ErrorKind` with :func:`classify`.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

import requests

if TYPE_CHECKING:
    from apicem.core.response import ErrorDetail, Response

__all__ = [
    "ErrorKind",
    "ApicEmError",
    "ConfigError",
    "URLParseError",
    "EncodeError",
    "BuildError",
    "DecodeError",
    "ApiError",
    "classify",
]


class ErrorKind(str, Enum):
    """Failure categories surfaced by the client."""

    URL = "url"  # malformed base or relative URL
    ENCODE = "encode"  # request body or query options could not be encoded
    BUILD = "build"  # transport request object could not be constructed
    TRANSPORT = "transport"  # network, connection or TLS failure
    API = "api"  # non-2xx HTTP status
    DECODE = "decode"  # response body did not fit the destination
    CONFIG = "config"  # settings file or environment could not be loaded


class ApicEmError(Exception):
    """Base exception for all errors raised by this package."""

    kind: ErrorKind = ErrorKind.API

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "kind": self.kind.value,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
        }


class ConfigError(ApicEmError):
    """Raised when client settings are missing or invalid."""

    kind = ErrorKind.CONFIG

    def __init__(self, message: str, *, source: str | None = None, cause: BaseException | None = None) -> None:
        super().__init__(message, cause=cause)
        self.source = source


class URLParseError(ApicEmError):
    """Raised when a URL string cannot be parsed."""

    kind = ErrorKind.URL

    def __init__(self, message: str, *, url: str | None = None, cause: BaseException | None = None) -> None:
        super().__init__(message, cause=cause)
        self.url = url


class EncodeError(ApicEmError):
    """Raised when a request body or options value cannot be encoded."""

    kind = ErrorKind.ENCODE


class BuildError(ApicEmError):
    """Raised when the transport request cannot be built."""

    kind = ErrorKind.BUILD


class DecodeError(ApicEmError):
    """Raised when a successful response body cannot be decoded."""

    kind = ErrorKind.DECODE

    def __init__(self, message: str, *, response: Response, cause: BaseException | None = None) -> None:
        super().__init__(message, cause=cause)
        self.response = response


class ApiError(ApicEmError):
    """An error response returned by the controller (status outside 2xx).

    ``message``, ``errors`` and ``tracking_id`` are parsed from the JSON body
    when one is present; otherwise they keep their empty defaults.
    """

    kind = ErrorKind.API

    def __init__(
        self,
        response: requests.Response,
        *,
        message: str = "",
        errors: list[ErrorDetail] | None = None,
        tracking_id: str = "",
    ) -> None:
        self.http_response = response
        self.errors = list(errors or [])
        self.tracking_id = tracking_id
        self.response: Response | None = None
        super().__init__(message)

    @property
    def status_code(self) -> int:
        return self.http_response.status_code

    @property
    def method(self) -> str | None:
        request = self.http_response.request
        return request.method if request is not None else None

    @property
    def url(self) -> str | None:
        request = self.http_response.request
        if request is not None and request.url:
            return request.url
        return self.http_response.url or None

    def __str__(self) -> str:
        return f"{self.method} {self.url}: {self.status_code} {self.message}"

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload.update(
            {
                "method": self.method,
                "url": self.url,
                "status_code": self.status_code,
                "errors": [detail.description for detail in self.errors],
                "tracking_id": self.tracking_id,
            }
        )
        return payload


def classify(exc: BaseException) -> ErrorKind | None:
    """Return the :class:`ErrorKind` for ``exc`` or ``None`` if it is foreign."""

    if isinstance(exc, ApicEmError):
        return exc.kind
    if isinstance(exc, requests.RequestException):
        return ErrorKind.TRANSPORT
    return None
