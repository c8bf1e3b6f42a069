"""
Explicit optional values for sparse update payloads

A patch field is either ``Present(value)`` or ``ABSENT``. Absence is its own
state, so a field that was not supplied is never confused with a falsy or
``None`` value.
"""
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Present(Generic[T]):
    """A supplied value"""
    value: T


class Absent:
    """Marker for a field that was not supplied"""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __reduce__(self):
        return (Absent, ())


ABSENT = Absent()

Maybe = Union[Present[T], Absent]
