"""Domain Types — rich types that replace bare strings across the codebase.

Invariants:
    - Operation values are the exact, case-sensitive operation names
    - CounterIdentity is immutable; both parts non-empty (checked at the input boundary)
    - AdminKey never shows its value in repr/str; reveal() is the only way out
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - str Enum for Operation: serializes to JSON without custom encoders
    - AdminKey as a wrapper class (not NewType): a NewType is still a str at runtime
      and would print itself into logs and reprs
    - Frozen dataclasses: requests are built once per invocation and discarded
"""

from dataclasses import dataclass
from enum import Enum


class Operation(str, Enum):
    """The eight counter operations."""
    HIT = "hit"
    CREATE = "create"
    GET = "get"
    INFO = "info"
    SET = "set"
    UPDATE = "update"
    RESET = "reset"
    DELETE = "delete"


@dataclass(frozen=True)
class CounterIdentity:
    """Addresses exactly one remote counter."""
    namespace: str
    key: str


class AdminKey:
    """Secret credential issued by the counter service at creation time."""

    __slots__ = ("_value",)

    def __init__(self, value: str):
        self._value = value

    def reveal(self) -> str:
        """Return the raw secret. Callers: request building and create output only."""
        return self._value

    def __bool__(self) -> bool:
        return bool(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AdminKey):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return "AdminKey('**********')"

    __str__ = __repr__
