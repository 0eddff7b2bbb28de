"""Tests for loading client settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from apicem.config import ClientSettings, load_settings
from apicem.core.client import DEFAULT_BASE_URL
from apicem.core.errors import ConfigError


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "apicem.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults_without_file_or_environment() -> None:
    settings = load_settings(env={})
    assert settings == ClientSettings()
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.verify_tls is True
    assert settings.auth_token is None


def test_yaml_file_is_loaded(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "base_url: https://apic.example.test/api\n"
        "user_agent: inventory-sync/2.1\n"
        "verify_tls: false\n"
        "username: devnetuser\n"
        "password: s3cret\n",
    )

    settings = load_settings(path, env={})

    assert settings.base_url == "https://apic.example.test/api"
    assert settings.user_agent == "inventory-sync/2.1"
    assert settings.verify_tls is False
    assert settings.username == "devnetuser"
    assert settings.password is not None
    assert settings.password.get_secret_value() == "s3cret"
    assert "s3cret" not in repr(settings)


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    assert load_settings(_write(tmp_path, ""), env={}) == ClientSettings()


def test_environment_overrides_file(tmp_path: Path) -> None:
    path = _write(tmp_path, "base_url: https://file.example.test/api\nverify_tls: true\n")
    env = {
        "APICEM_BASE_URL": "https://env.example.test/api",
        "APICEM_AUTH_TOKEN": "ST-env",
        "APICEM_VERIFY_TLS": "off",
        "UNRELATED": "ignored",
    }

    settings = load_settings(path, env=env)

    assert settings.base_url == "https://env.example.test/api"
    assert settings.auth_token is not None
    assert settings.auth_token.get_secret_value() == "ST-env"
    assert settings.verify_tls is False


def test_process_environment_is_read_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APICEM_USER_AGENT", "from-env/1")
    assert load_settings().user_agent == "from-env/1"


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError) as exc_info:
        load_settings(tmp_path / "absent.yaml", env={})
    assert exc_info.value.source == str(tmp_path / "absent.yaml")


def test_invalid_yaml(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="cannot parse"):
        load_settings(_write(tmp_path, "base_url: [unclosed\n"), env={})


def test_top_level_must_be_mapping(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="mapping"):
        load_settings(_write(tmp_path, "- one\n- two\n"), env={})


def test_bad_boolean_in_environment() -> None:
    with pytest.raises(ConfigError, match="APICEM_VERIFY_TLS"):
        load_settings(env={"APICEM_VERIFY_TLS": "perhaps"})


@pytest.mark.parametrize(
    "text",
    [
        "base_url: not-a-url\n",
        "base_url: /relative/only\n",
        "user_agent: '   '\n",
        "unknown_key: 1\n",
    ],
)
def test_invalid_values_raise_config_error(tmp_path: Path, text: str) -> None:
    path = _write(tmp_path, text)
    with pytest.raises(ConfigError) as exc_info:
        load_settings(path, env={})
    assert exc_info.value.source == str(path)
    assert exc_info.value.to_dict()["kind"] == "config"
