"""Tests for client construction and functional options."""

from __future__ import annotations

from unittest.mock import Mock

import pytest
import requests
import responses
from pydantic import SecretStr
from responses import matchers

from apicem import (
    DEFAULT_BASE_URL,
    DEFAULT_USER_AGENT,
    ApiError,
    Client,
    ClientSettings,
    URLParseError,
    set_auth_token,
    set_base_url,
    set_completion_callback,
    set_user_agent,
)
from apicem.services import (
    DiscoveryService,
    FlowAnalysisService,
    HostService,
    InterfaceService,
    NetworkDeviceService,
    TaskService,
    TicketService,
    TopologyService,
)

from tests.helpers import BASE_URL, FakeSession, build_response


def test_defaults() -> None:
    with Client() as client:
        assert client.base_url == DEFAULT_BASE_URL
        assert client.user_agent == DEFAULT_USER_AGENT
        assert client.authorization == ""
        assert isinstance(client.session, requests.Session)


def test_supplied_session_is_used() -> None:
    session = requests.Session()
    client = Client(session)
    assert client.session is session


@pytest.mark.parametrize(
    ("attribute", "service_type"),
    [
        ("discovery", DiscoveryService),
        ("flow_analysis", FlowAnalysisService),
        ("host", HostService),
        ("interface", InterfaceService),
        ("network_device", NetworkDeviceService),
        ("task", TaskService),
        ("ticket", TicketService),
        ("topology", TopologyService),
    ],
)
def test_services_share_the_client(attribute: str, service_type: type) -> None:
    client = Client()
    service = getattr(client, attribute)
    assert isinstance(service, service_type)
    assert service.client is client


def test_options_apply_in_order() -> None:
    client = Client.new(
        None,
        set_base_url("https://first.example.test/api"),
        set_base_url("https://second.example.test/api"),
        set_auth_token("ticket-1"),
    )
    assert client.base_url == "https://second.example.test/api"
    assert client.authorization == "ticket-1"


def test_user_agent_option_prefixes_current_value() -> None:
    client = Client.new(None, set_user_agent("custom/1.0"))
    assert client.user_agent == f"custom/1.0+{DEFAULT_USER_AGENT}"

    stacked = Client.new(None, set_user_agent("inner/1"), set_user_agent("outer/2"))
    assert stacked.user_agent == f"outer/2+inner/1+{DEFAULT_USER_AGENT}"


@pytest.mark.parametrize("url", ["relative/path", "://missing-scheme", "http://[::1", "https://host:port/api"])
def test_invalid_base_url_option_fails(url: str) -> None:
    with pytest.raises(URLParseError):
        Client.new(None, set_base_url(url))


def test_first_failing_option_aborts_construction() -> None:
    later = Mock()
    with pytest.raises(URLParseError):
        Client.new(None, set_base_url("not a url"), later)
    later.assert_not_called()


def test_base_url_setter_validates_and_keeps_previous_value() -> None:
    client = Client()
    with pytest.raises(URLParseError):
        client.base_url = "/only/a/path"
    assert client.base_url == DEFAULT_BASE_URL


def test_base_url_change_applies_to_next_request() -> None:
    client = Client()
    client.base_url = "https://other.example.test/v2"
    assert client.new_request("GET", "v1/host").url == "https://other.example.test/v2/v1/host"


def test_completion_callback_option_registers_hook() -> None:
    calls = []
    session = FakeSession(build_response(204))
    client = Client.new(session, set_completion_callback(lambda req, resp: calls.append(resp.status_code)))

    client.do(client.new_request("DELETE", "v1/ticket/abc"))

    assert calls == [204]


def test_close_only_closes_owned_session() -> None:
    shared = Mock(spec=requests.Session)
    Client(shared).close()
    shared.close.assert_not_called()

    owned = Client()
    owned.session = Mock(spec=requests.Session)
    owned.close()
    owned.session.close.assert_called_once_with()


def test_from_settings() -> None:
    settings = ClientSettings(
        base_url="https://apic.example.test/api",
        user_agent="inventory-sync/2.1",
        auth_token=SecretStr("ST-1"),
        verify_tls=False,
    )
    with Client.from_settings(settings) as client:
        assert client.base_url == "https://apic.example.test/api"
        assert client.user_agent == f"inventory-sync/2.1+{DEFAULT_USER_AGENT}"
        assert client.authorization == "ST-1"
        assert client.session.verify is False


def test_from_settings_leaves_supplied_session_alone() -> None:
    session = requests.Session()
    client = Client.from_settings(ClientSettings(verify_tls=False), session)
    assert client.session is session
    assert session.verify is True
    assert client.user_agent == DEFAULT_USER_AGENT
    assert client.authorization == ""


def test_from_settings_logs_in_with_credentials(mocked_responses: responses.RequestsMock) -> None:
    mocked_responses.post(
        f"{BASE_URL}/v1/ticket",
        json={"response": {"serviceTicket": "ST-login"}, "version": "1.0"},
        match=[matchers.json_params_matcher({"username": "devnetuser", "password": "pw"})],
    )
    settings = ClientSettings(base_url=BASE_URL, username="devnetuser", password=SecretStr("pw"))

    with Client.from_settings(settings) as client:
        assert client.authorization == "ST-login"


def test_from_settings_prefers_auth_token_over_login(mocked_responses: responses.RequestsMock) -> None:
    settings = ClientSettings(
        base_url=BASE_URL,
        auth_token=SecretStr("ST-given"),
        username="devnetuser",
        password=SecretStr("pw"),
    )

    with Client.from_settings(settings) as client:
        assert client.authorization == "ST-given"
    assert len(mocked_responses.calls) == 0


def test_from_settings_without_password_skips_login(mocked_responses: responses.RequestsMock) -> None:
    with Client.from_settings(ClientSettings(base_url=BASE_URL, username="devnetuser")) as client:
        assert client.authorization == ""
    assert len(mocked_responses.calls) == 0


def test_from_settings_login_failure_propagates(mocked_responses: responses.RequestsMock) -> None:
    mocked_responses.post(f"{BASE_URL}/v1/ticket", status=401, json={"message": "bad credentials"})
    settings = ClientSettings(base_url=BASE_URL, username="devnetuser", password=SecretStr("wrong"))

    with pytest.raises(ApiError) as exc_info:
        Client.from_settings(settings)

    assert exc_info.value.status_code == 401
    assert exc_info.value.message == "bad credentials"
