"""Fakes shared by the unit tests."""

from __future__ import annotations

import io

import requests

BASE_URL = "https://apic.example.test/api"


class TrackingStream(io.BytesIO):
    """In-memory response body that records how it was read and closed."""

    def __init__(self, data: bytes = b"") -> None:
        super().__init__(data)
        self.read_sizes: list[int | None] = []
        self.close_calls = 0

    def read(self, size: int | None = -1) -> bytes:  # type: ignore[override]
        self.read_sizes.append(size)
        return super().read(size)

    def close(self) -> None:
        self.close_calls += 1
        super().close()


def build_response(status: int, body: bytes = b"", *, headers: dict[str, str] | None = None) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response.raw = TrackingStream(body)
    for key, value in (headers or {}).items():
        response.headers[key] = value
    return response


class FakeSession(requests.Session):
    """Session that returns queued responses instead of touching the network."""

    def __init__(self, *queued: requests.Response) -> None:
        super().__init__()
        self.queue = list(queued)
        self.sent: list[tuple[requests.PreparedRequest, dict[str, object]]] = []

    def send(self, request: requests.PreparedRequest, **kwargs: object) -> requests.Response:  # type: ignore[override]
        self.sent.append((request, kwargs))
        response = self.queue.pop(0)
        response.request = request
        response.url = request.url or ""
        return response
