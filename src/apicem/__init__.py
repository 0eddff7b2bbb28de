"""Python client for the Cisco APIC-EM controller REST API."""

from __future__ import annotations

from apicem.version import __version__
from apicem.config import ClientSettings, load_settings
from apicem.core import (
    DEFAULT_BASE_URL,
    DEFAULT_USER_AGENT,
    ApiError,
    ApicEmError,
    BuildError,
    Client,
    ConfigError,
    DecodeError,
    DecodeInto,
    EncodeError,
    ErrorKind,
    ListOptions,
    Response,
    URLParseError,
    Value,
    WriteTo,
    add_options,
    boolean,
    integer,
    set_auth_token,
    set_base_url,
    set_completion_callback,
    set_user_agent,
    stream_to_string,
    string,
)
from apicem.core.logger import LogConfig, LogFormat, configure_logging, get_logger, log_completed_requests

__all__ = [
    "__version__",
    "DEFAULT_BASE_URL",
    "DEFAULT_USER_AGENT",
    "ApiError",
    "ApicEmError",
    "BuildError",
    "Client",
    "ClientSettings",
    "ConfigError",
    "DecodeError",
    "DecodeInto",
    "EncodeError",
    "ErrorKind",
    "ListOptions",
    "LogConfig",
    "LogFormat",
    "Response",
    "URLParseError",
    "Value",
    "WriteTo",
    "add_options",
    "boolean",
    "configure_logging",
    "get_logger",
    "integer",
    "load_settings",
    "log_completed_requests",
    "set_auth_token",
    "set_base_url",
    "set_completion_callback",
    "set_user_agent",
    "stream_to_string",
    "string",
]
