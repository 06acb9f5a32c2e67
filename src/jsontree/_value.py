"""
Tree values produced by the parser.

A parsed document is a closed tagged union of six frozen dataclasses. Arrays
and objects own their children; the tree never refers back to the input.
Trees are immutable and hashable.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
from types import MappingProxyType
from typing import Any
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class Null:
    """The `null` literal."""


@dataclass(frozen=True, slots=True)
class Boolean:
    value: bool


@dataclass(frozen=True, slots=True)
class Number:
    """A finite number; there is no separate integer kind."""

    value: float


@dataclass(frozen=True, slots=True)
class String:
    value: str


@dataclass(frozen=True, slots=True)
class Array:
    items: tuple["Value", ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> "Value":
        return self.items[index]


@dataclass(frozen=True, slots=True)
class Object:
    """
    A read-only mapping from decoded string keys to values.

    Built from key/value pairs in one step, so a repeated key keeps the last
    value. Key order is not part of equality or of the hash.
    """

    members: Mapping[str, "Value"] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "members", MappingProxyType(dict(self.members))
        )

    def __hash__(self) -> int:
        return hash(frozenset(self.members.items()))

    def __len__(self) -> int:
        return len(self.members)

    def __getitem__(self, key: str) -> "Value":
        return self.members[key]

    def __contains__(self, key: object) -> bool:
        return key in self.members


Value: TypeAlias = Null | Boolean | Number | String | Array | Object

NULL = Null()
TRUE = Boolean(True)
FALSE = Boolean(False)


def to_python(value: Value) -> Any:
    """Converts a tree into plain Python objects (None/bool/float/str/list/dict)."""
    match value:
        case Null():
            return None
        case Boolean(flag):
            return flag
        case Number(number):
            return number
        case String(text):
            return text
        case Array(items):
            return [to_python(item) for item in items]
        case Object(members):
            return {key: to_python(item) for key, item in members.items()}
        case _:
            raise TypeError(
                f"Object of type {type(value).__name__} is not a tree value"
            )
