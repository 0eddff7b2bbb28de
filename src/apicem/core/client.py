"""Shared HTTP plumbing for every APIC-EM resource service."""

from __future__ import annotations

import dataclasses
import json
import re
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any
from urllib.parse import urljoin, urlsplit, urlunsplit

import requests
import urllib3
from pydantic import BaseModel, ValidationError

from apicem.version import __version__
from apicem.core.destination import Absent, DecodeInto, Destination, WriteTo, as_destination
from apicem.core.errors import BuildError, DecodeError, EncodeError
from apicem.core.logger import get_logger
from apicem.core.query import parse_absolute_url, parse_url
from apicem.core.response import Response, check_response
from apicem.core.values import Value
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

if TYPE_CHECKING:
    from apicem.config.models import ClientSettings

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_USER_AGENT",
    "MEDIA_TYPE",
    "AUTH_HEADER",
    "Client",
    "ClientOption",
    "RequestCompletionCallback",
    "encode_json",
    "set_auth_token",
    "set_base_url",
    "set_completion_callback",
    "set_user_agent",
]

DEFAULT_BASE_URL = "https://sandboxapic.cisco.com/api"
DEFAULT_USER_AGENT = f"apicem/{__version__}"
MEDIA_TYPE = "application/json"
AUTH_HEADER = "X-Auth-Token"

# Bytes read from an unconsumed body before closing, so the connection can be reused.
DRAIN_LIMIT = 512

_METHOD_TOKEN = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")

RequestCompletionCallback = Callable[[requests.PreparedRequest, requests.Response], None]
ClientOption = Callable[["Client"], None]


class Client:
    """Client for the APIC-EM REST API.

    One ``Client`` owns the transport (a ``requests.Session``) and the request
    configuration. Every resource service attached to it (``client.host``,
    ``client.network_device`` and so on) reads that state through the client,
    so changes to :attr:`base_url` or :attr:`authorization` apply to the next
    request made by any service.

    The client performs no locking. Configure it before sharing it between
    threads.
    """

    def __init__(self, session: requests.Session | None = None) -> None:
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self._base_url = DEFAULT_BASE_URL
        self.user_agent = DEFAULT_USER_AGENT
        self.authorization = ""
        self._on_request_completed: RequestCompletionCallback | None = None
        self._logger = get_logger(__name__)

        self.discovery = DiscoveryService(self)
        self.flow_analysis = FlowAnalysisService(self)
        self.host = HostService(self)
        self.interface = InterfaceService(self)
        self.network_device = NetworkDeviceService(self)
        self.task = TaskService(self)
        self.ticket = TicketService(self)
        self.topology = TopologyService(self)

    @classmethod
    def new(cls, session: requests.Session | None = None, *options: ClientOption) -> Client:
        """Build a client and apply ``options`` in order.

        The first option that raises aborts construction; later options are
        not applied.
        """

        client = cls(session)
        for option in options:
            option(client)
        return client

    @classmethod
    def from_settings(cls, settings: ClientSettings, session: requests.Session | None = None) -> Client:
        """Build a client from loaded :class:`~apicem.config.models.ClientSettings`.

        Without an ``auth_token`` but with ``username`` and ``password``, a
        service ticket is requested right away through ``client.ticket.login``.
        """

        options: list[ClientOption] = [set_base_url(settings.base_url)]
        if settings.user_agent:
            options.append(set_user_agent(settings.user_agent))
        if settings.auth_token:
            options.append(set_auth_token(settings.auth_token.get_secret_value()))
        client = cls.new(session, *options)
        if session is None:
            client.session.verify = settings.verify_tls
        if not settings.auth_token and settings.username and settings.password:
            try:
                client.ticket.login(settings.username, settings.password.get_secret_value())
            except Exception:
                client.close()
                raise
        return client

    @property
    def base_url(self) -> str:
        return self._base_url

    @base_url.setter
    def base_url(self, value: str) -> None:
        parse_absolute_url(value)
        self._base_url = value

    def on_request_completed(self, callback: RequestCompletionCallback | None) -> None:
        """Register the callback run after every completed request."""
        self._on_request_completed = callback

    def close(self) -> None:
        """Close the session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Request construction
    # ------------------------------------------------------------------

    def new_request(self, method: str, path: str, body: Any = None) -> requests.PreparedRequest:
        """Create an API request.

        ``path`` may be absolute or relative. Relative paths are resolved
        against :attr:`base_url` and should be given without a leading slash;
        a leading slash would resolve against the host root instead. If
        ``body`` is not ``None`` it is JSON encoded into the request payload.
        """

        method = method.upper()
        if not _METHOD_TOKEN.match(method):
            raise BuildError(f"invalid HTTP method {method!r}")

        url = self._resolve(path)

        data = encode_json(body) if body is not None else None

        headers = {
            "Content-Type": MEDIA_TYPE,
            "Accept": MEDIA_TYPE,
            "User-Agent": self.user_agent,
        }
        if self.authorization:
            headers[AUTH_HEADER] = self.authorization

        try:
            return self.session.prepare_request(
                requests.Request(method, url, data=data, headers=headers)
            )
        except (requests.RequestException, ValueError) as exc:
            raise BuildError(f"cannot build {method} request for {url}: {exc}", cause=exc) from exc

    def _resolve(self, path: str) -> str:
        parse_url(path)
        base = urlsplit(self._base_url)
        if not base.path.endswith("/"):
            base = base._replace(path=base.path + "/")
        return urljoin(urlunsplit(base), path)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def do(self, request: requests.PreparedRequest, destination: Any = None) -> Response:
        """Send ``request`` and return the wrapped response.

        ``destination`` selects what happens to a successful body: ``None``
        discards it, a writable binary stream receives the raw bytes, and a
        type (or :class:`~apicem.core.destination.DecodeInto`) decodes the
        JSON body into :attr:`Response.data`.

        Raises :class:`~apicem.core.errors.ApiError` for a status outside
        2xx, :class:`~apicem.core.errors.DecodeError` when the body does not
        fit the destination, and the transport's own exception when the
        request cannot be sent.
        """

        target = as_destination(destination)
        self._logger.debug("http.request.sent", method=request.method, url=request.url)
        send_kwargs = self.session.merge_environment_settings(request.url, {}, True, None, None)
        http_response = self.session.send(request, **send_kwargs)

        with _drained(http_response, self._logger):
            if self._on_request_completed is not None:
                self._on_request_completed(request, http_response)

            response = Response(http_response)

            error = check_response(http_response)
            if error is not None:
                error.response = response
                raise error

            self._decode(response, target)

        self._logger.debug(
            "http.request.completed",
            method=request.method,
            url=request.url,
            status_code=http_response.status_code,
        )
        return response

    @staticmethod
    def _decode(response: Response, target: Destination) -> None:
        if isinstance(target, Absent):
            return
        if isinstance(target, WriteTo):
            try:
                for chunk in response.http_response.iter_content(chunk_size=8192):
                    target.sink.write(chunk)
            except (OSError, TypeError) as exc:
                raise DecodeError(f"cannot copy response body: {exc}", response=response, cause=exc) from exc
            return
        if isinstance(target, DecodeInto):
            try:
                response.data = target.decode(response.http_response.content)
            except ValidationError as exc:
                raise DecodeError(
                    f"cannot decode response body as {target.target!r}: {exc}",
                    response=response,
                    cause=exc,
                ) from exc
            return
        raise TypeError(f"unsupported destination {target!r}")


@contextmanager
def _drained(http_response: requests.Response, logger: Any) -> Iterator[requests.Response]:
    try:
        yield http_response
    finally:
        raw = http_response.raw
        if raw is not None:
            try:
                raw.read(DRAIN_LIMIT)
            except (OSError, urllib3.exceptions.HTTPError) as exc:
                logger.debug("http.response.drain_failed", error=str(exc))
        http_response.close()


def encode_json(body: Any) -> bytes:
    """Serialize a request body, unwrapping models, dataclasses and boxed values."""

    try:
        return json.dumps(body, default=_json_default, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise EncodeError(f"cannot encode request body: {exc}", cause=exc) from exc


def _json_default(obj: Any) -> Any:
    if isinstance(obj, Value):
        return obj.value
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json", by_alias=True, exclude_none=True)
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {field.name: getattr(obj, field.name) for field in dataclasses.fields(obj)}
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def set_base_url(url: str) -> ClientOption:
    """Client option that sets the base URL."""

    def _option(client: Client) -> None:
        client.base_url = url

    return _option


def set_user_agent(user_agent: str) -> ClientOption:
    """Client option that prefixes the default user agent."""

    def _option(client: Client) -> None:
        client.user_agent = f"{user_agent}+{client.user_agent}"

    return _option


def set_auth_token(token: str) -> ClientOption:
    """Client option that sets the ``X-Auth-Token`` value."""

    def _option(client: Client) -> None:
        client.authorization = token

    return _option


def set_completion_callback(callback: RequestCompletionCallback) -> ClientOption:
    """Client option that registers the request completion callback."""

    def _option(client: Client) -> None:
        client.on_request_completed(callback)

    return _option
