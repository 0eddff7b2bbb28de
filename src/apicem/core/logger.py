"""Structured logging setup for the client.

The library never configures logging on import. Applications call
:func:`configure_logging` once; until then events flow through whatever
structlog/stdlib configuration is active.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, MutableMapping, Sequence
from dataclasses import dataclass
from enum import Enum
from functools import partial
from typing import Any, cast

import requests
import structlog
from structlog.stdlib import BoundLogger

__all__ = [
    "LogFormat",
    "LogConfig",
    "DEFAULT_LOG_LEVEL",
    "REDACTED",
    "redact_headers",
    "configure_logging",
    "get_logger",
    "log_completed_requests",
]


class LogFormat(str, Enum):
    """Supported output formats for the renderer."""

    JSON = "json"
    KEY_VALUE = "key_value"


DEFAULT_LOG_LEVEL = logging.INFO

REDACTED = "***REDACTED***"

_DEFAULT_LOGGER_NAME = "apicem"
_AUTH_HEADER = "X-Auth-Token"
_KEY_ORDER: Sequence[str] = ("timestamp", "level", "logger", "message", "method", "url", "status_code")


@dataclass(frozen=True, slots=True)
class LogConfig:
    """User configurable logging parameters."""

    level: int | str = DEFAULT_LOG_LEVEL
    format: LogFormat = LogFormat.JSON
    redact_fields: Sequence[str] = ("x_auth_token", "authorization", "password", "service_ticket")


def _coerce_log_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    mapped = logging.getLevelName(level.upper())
    if isinstance(mapped, int):
        return mapped
    raise ValueError(f"Unsupported log level: {level}")


def _redact_sensitive_values(
    _: Any,
    __: str,
    event_dict: MutableMapping[str, Any],
    *,
    redact_fields: Iterable[str],
) -> MutableMapping[str, Any]:
    for field in redact_fields:
        if event_dict.get(field):
            event_dict[field] = REDACTED
    headers = event_dict.get("headers")
    if isinstance(headers, Mapping):
        event_dict["headers"] = redact_headers(headers)
    return event_dict


def redact_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Copy ``headers`` with the auth token replaced."""
    return {
        key: (REDACTED if key.lower() == _AUTH_HEADER.lower() else value)
        for key, value in headers.items()
    }


def _shared_processors(config: LogConfig) -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True, key="timestamp"),
        structlog.processors.EventRenamer("message"),
        partial(_redact_sensitive_values, redact_fields=config.redact_fields),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer_for(format: LogFormat) -> Any:
    if format is LogFormat.KEY_VALUE:
        return structlog.processors.KeyValueRenderer(
            key_order=_KEY_ORDER,
            sort_keys=False,
            drop_missing=True,
        )
    return structlog.processors.JSONRenderer(sort_keys=True, ensure_ascii=False)


def configure_logging(config: LogConfig | None = None) -> None:
    """Initialise stdlib logging and structlog from ``config``."""

    cfg = config or LogConfig()
    shared_processors = _shared_processors(cfg)

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer_for(cfg.format),
        ],
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    logging.basicConfig(handlers=[handler], level=_coerce_log_level(cfg.level), force=True)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = _DEFAULT_LOGGER_NAME) -> BoundLogger:
    """Return a bound logger for ``name`` backed by the stdlib logger of that name.

    Output follows stdlib levels and handlers, so nothing below WARNING is
    emitted until the application configures logging.
    """

    return cast(
        BoundLogger,
        structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger),
    )


def log_completed_requests(
    logger: Any | None = None,
    *,
    level: str = "info",
) -> Callable[[requests.PreparedRequest, requests.Response], None]:
    """Build a completion callback that logs every finished request.

    Register it with ``client.on_request_completed(log_completed_requests())``.
    The auth token header is redacted before anything is logged.
    """

    log = logger if logger is not None else get_logger("apicem.requests")
    emit = getattr(log, level)

    def _callback(request: requests.PreparedRequest, response: requests.Response) -> None:
        emit(
            "http.request.completed",
            method=request.method,
            url=request.url,
            status_code=response.status_code,
            elapsed_ms=round(response.elapsed.total_seconds() * 1000, 3),
            headers=redact_headers(dict(request.headers)),
        )

    return _callback
