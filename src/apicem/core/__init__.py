"""Request/response plumbing shared by all resource services."""

from __future__ import annotations

from .client import (
    AUTH_HEADER,
    DEFAULT_BASE_URL,
    DEFAULT_USER_AGENT,
    MEDIA_TYPE,
    Client,
    ClientOption,
    RequestCompletionCallback,
    encode_json,
    set_auth_token,
    set_base_url,
    set_completion_callback,
    set_user_agent,
)
from .destination import ABSENT, Absent, DecodeInto, Destination, WriteTo, as_destination
from .errors import (
    ApiError,
    ApicEmError,
    BuildError,
    ConfigError,
    DecodeError,
    EncodeError,
    ErrorKind,
    URLParseError,
    classify,
)
from .query import ListOptions, add_options
from .response import ErrorBody, ErrorDetail, Response, check_response
from .values import Value, boolean, integer, stream_to_string, string

__all__ = [
    "ABSENT",
    "AUTH_HEADER",
    "DEFAULT_BASE_URL",
    "DEFAULT_USER_AGENT",
    "MEDIA_TYPE",
    "Absent",
    "ApiError",
    "ApicEmError",
    "BuildError",
    "Client",
    "ClientOption",
    "ConfigError",
    "DecodeError",
    "DecodeInto",
    "Destination",
    "EncodeError",
    "ErrorBody",
    "ErrorDetail",
    "ErrorKind",
    "ListOptions",
    "RequestCompletionCallback",
    "Response",
    "URLParseError",
    "Value",
    "WriteTo",
    "add_options",
    "as_destination",
    "boolean",
    "check_response",
    "classify",
    "encode_json",
    "integer",
    "set_auth_token",
    "set_base_url",
    "set_completion_callback",
    "set_user_agent",
    "stream_to_string",
    "string",
]
