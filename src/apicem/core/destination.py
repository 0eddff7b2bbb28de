"""Decode destinations accepted by :meth:`apicem.core.client.Client.do`."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import IO, Any, Generic, TypeVar, Union

from pydantic import TypeAdapter

T = TypeVar("T")

__all__ = ["Absent", "WriteTo", "DecodeInto", "Destination", "ABSENT", "as_destination"]


@dataclass(frozen=True, slots=True)
class Absent:
    """Discard the response body."""


@dataclass(frozen=True, slots=True)
class WriteTo:
    """Copy the raw response body into a writable binary stream."""

    sink: IO[bytes]


@dataclass(frozen=True, slots=True)
class DecodeInto(Generic[T]):
    """Decode the JSON response body as ``target``.

    ``target`` is any type pydantic can validate: a model class, ``dict``,
    ``list[Model]`` and so on.
    """

    target: Any
    adapter: TypeAdapter[T] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "adapter", TypeAdapter(self.target))

    def decode(self, payload: bytes) -> T:
        return self.adapter.validate_json(payload)


Destination = Union[Absent, WriteTo, DecodeInto[Any]]

ABSENT = Absent()


def as_destination(value: Any) -> Destination:
    """Normalize ``None``, a writable stream or a type into a :data:`Destination`."""

    if value is None:
        return ABSENT
    if isinstance(value, (Absent, WriteTo, DecodeInto)):
        return value
    if callable(getattr(value, "write", None)) and not isinstance(value, type):
        return WriteTo(value)
    return DecodeInto(value)
