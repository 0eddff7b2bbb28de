"""Load :class:`ClientSettings` from YAML and ``APICEM_*`` environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from apicem.core.errors import ConfigError

from .models import ClientSettings

ENV_PREFIX = "APICEM_"

_ENV_FIELDS: tuple[str, ...] = (
    "base_url",
    "user_agent",
    "auth_token",
    "verify_tls",
    "username",
    "password",
)
_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def load_settings(
    path: str | Path | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ClientSettings:
    """Build settings from an optional YAML file overlaid with environment values.

    Environment variables win over the file. Pass ``env={}`` to ignore the
    process environment.
    """

    payload: dict[str, Any] = {}
    if path is not None:
        payload.update(_load_yaml(Path(path)))

    environ = os.environ if env is None else env
    payload.update(_collect_env_overrides(environ))

    try:
        return ClientSettings.model_validate(payload)
    except ValidationError as exc:
        source = str(path) if path is not None else "environment"
        raise ConfigError(f"invalid client settings: {exc}", source=source, cause=exc) from exc


def _load_yaml(path: Path) -> dict[str, Any]:
    resolved = path.expanduser()
    if not resolved.is_file():
        raise ConfigError(f"settings file not found: {resolved}", source=str(resolved))
    try:
        with resolved.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except yaml.YAMLError as exc:
        raise ConfigError(f"cannot parse {resolved}: {exc}", source=str(resolved), cause=exc) from exc
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ConfigError(f"{resolved} must contain a mapping at the top level", source=str(resolved))
    return dict(data)


def _collect_env_overrides(environ: Mapping[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for field in _ENV_FIELDS:
        raw = environ.get(f"{ENV_PREFIX}{field.upper()}")
        if raw is None:
            continue
        overrides[field] = _coerce_bool(field, raw) if field == "verify_tls" else raw
    return overrides


def _coerce_bool(field: str, raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ConfigError(f"{ENV_PREFIX}{field.upper()} must be a boolean, got {raw!r}", source="environment")
