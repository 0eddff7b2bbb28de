"""Query string helpers: URL parsing and list option encoding."""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import SplitResult, parse_qs, urlencode, urlsplit, urlunsplit

from pydantic import BaseModel, ConfigDict, Field

from apicem.core.errors import EncodeError, URLParseError
from apicem.core.values import Value

__all__ = ["ListOptions", "add_options", "parse_url", "parse_absolute_url"]

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class ListOptions(BaseModel):
    """Pagination parameters accepted by list endpoints."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    page: int = Field(default=0, ge=0, description="Page of results to retrieve.")
    per_page: int = Field(default=0, ge=0, description="Number of results to include per page.")


def parse_url(raw: str) -> SplitResult:
    """Split ``raw`` into URL components or raise :class:`URLParseError`."""

    if not isinstance(raw, str):
        raise URLParseError(f"URL must be a string, got {type(raw).__name__}", url=repr(raw))
    if _CONTROL_CHARS.search(raw):
        raise URLParseError(f"invalid control character in URL {raw!r}", url=raw)
    if _BAD_ESCAPE.search(raw):
        raise URLParseError(f"invalid URL escape in {raw!r}", url=raw)
    try:
        parts = urlsplit(raw)
        _ = parts.port  # raises on a non-numeric or out of range port
    except ValueError as exc:
        raise URLParseError(f"cannot parse URL {raw!r}: {exc}", url=raw, cause=exc) from exc
    return parts


def parse_absolute_url(raw: str) -> SplitResult:
    """Like :func:`parse_url` but also require a scheme and a host."""

    parts = parse_url(raw)
    if not parts.scheme or not parts.netloc:
        raise URLParseError(f"URL {raw!r} is not absolute", url=raw)
    return parts


def add_options(url: str, options: Any) -> str:
    """Return ``url`` with the non-empty fields of ``options`` added to its query.

    Parameters already present on ``url`` are kept unless ``options`` supplies
    the same key, in which case the new values replace them. Keys are emitted
    in sorted order so repeated calls give the same query string.
    """

    if options is None:
        return url

    parts = parse_url(url)
    new_values = _option_values(options)

    merged = parse_qs(parts.query, keep_blank_values=True)
    merged.update(new_values)

    query = urlencode(sorted(merged.items()), doseq=True)
    return urlunsplit(parts._replace(query=query))


def _option_values(options: Any) -> dict[str, list[str]]:
    if isinstance(options, BaseModel):
        raw = options.model_dump(by_alias=True, mode="json")
    elif dataclasses.is_dataclass(options) and not isinstance(options, type):
        raw = {field.name: getattr(options, field.name) for field in dataclasses.fields(options)}
    elif isinstance(options, Mapping):
        raw = dict(options)
    else:
        raise EncodeError(
            f"query options must be a model, dataclass or mapping, got {type(options).__name__}"
        )

    values: dict[str, list[str]] = {}
    for key, value in raw.items():
        if not isinstance(key, str):
            raise EncodeError(f"query option keys must be strings, got {key!r}")
        if isinstance(value, Value):
            values[key] = [_scalar(key, value.value)]
            continue
        if _is_empty(value):
            continue
        if isinstance(value, (list, tuple, set, frozenset)):
            items = [_scalar(key, item) for item in value if not _is_empty(item)]
            if items:
                values[key] = items
            continue
        values[key] = [_scalar(key, value)]
    return values


def _is_empty(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    if isinstance(value, (str, bytes, list, tuple, set, frozenset, dict)):
        return len(value) == 0
    return False


def _scalar(key: str, value: Any) -> str:
    if isinstance(value, Value):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    if isinstance(value, bytes):
        return value.decode("utf-8")
    raise EncodeError(f"cannot encode query option {key!r} of type {type(value).__name__}")
