"""Client configuration model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

from apicem.core.client import DEFAULT_BASE_URL
from apicem.core.errors import URLParseError
from apicem.core.query import parse_absolute_url


class ClientSettings(BaseModel):
    """Settings used by :meth:`apicem.core.client.Client.from_settings`."""

    model_config = ConfigDict(extra="forbid")

    base_url: str = Field(default=DEFAULT_BASE_URL, description="Controller API root.")
    user_agent: str | None = Field(
        default=None,
        description="Prefix joined to the library user agent with '+'.",
    )
    auth_token: SecretStr | None = Field(
        default=None,
        description="Service ticket sent in the X-Auth-Token header.",
    )
    verify_tls: bool = Field(
        default=True,
        description="Verify the controller certificate when the client creates its own session.",
    )
    username: str | None = Field(default=None, description="Account used to request a service ticket.")
    password: SecretStr | None = Field(default=None)

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, value: str) -> str:
        try:
            parse_absolute_url(value)
        except URLParseError as exc:
            raise ValueError(exc.message) from exc
        return value

    @field_validator("user_agent")
    @classmethod
    def validate_user_agent(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            raise ValueError("user_agent must not be blank")
        return value
