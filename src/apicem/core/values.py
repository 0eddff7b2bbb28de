"""Boxed scalar helpers for optional request fields."""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import IO, Any, Generic, TypeVar

T = TypeVar("T")

__all__ = ["Value", "string", "integer", "boolean", "stream_to_string"]


@dataclass(eq=True)
class Value(Generic[T]):
    """A standalone holder for one scalar.

    Payloads use ``Value`` to tell a field that was explicitly set to a zero
    value (``Value(0)``, ``Value("")``, ``Value(False)``) apart from a field that
    was left unset (``None``). The request encoder unwraps it to ``value``.
    """

    value: T

    def get(self) -> T:
        return self.value


def string(v: str) -> Value[str]:
    """Return a new box holding ``v``."""
    return Value(str(v))


def integer(v: int) -> Value[int]:
    """Return a new box holding ``v``."""
    return Value(int(v))


def boolean(v: bool) -> Value[bool]:
    """Return a new box holding ``v``."""
    return Value(bool(v))


def stream_to_string(stream: IO[Any] | io.IOBase) -> str:
    """Read a binary or text stream to the end and return it as text."""
    data = stream.read()
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="replace")
    return data or ""
