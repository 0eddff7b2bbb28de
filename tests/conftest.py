"""Shared pytest fixtures for the apicem tests."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
import responses

_SRC = Path(__file__).resolve().parent.parent / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from apicem import Client, set_base_url  # noqa: E402

from tests.helpers import BASE_URL  # noqa: E402


@pytest.fixture
def client() -> Iterator[Client]:
    """Client pointed at a test controller."""
    instance = Client.new(None, set_base_url(BASE_URL))
    yield instance
    instance.close()


@pytest.fixture
def mocked_responses() -> Iterator[responses.RequestsMock]:
    with responses.RequestsMock() as rsps:
        yield rsps
