"""Values, entries and sections of a Windows INF file."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Union


@dataclass(frozen=True)
class Raw:
    """A plain string value, stored as written in the file."""

    text: str


@dataclass(frozen=True)
class CommaSeparated:
    """A value made of comma-separated items."""

    items: tuple[str, ...] = ()

    def __init__(self, items: Iterable[str] = ()) -> None:
        object.__setattr__(self, "items", tuple(items))


@dataclass(frozen=True)
class ListValue:
    """A list of strings, used for multi-line values or arrays."""

    items: tuple[str, ...] = ()

    def __init__(self, items: Iterable[str] = ()) -> None:
        object.__setattr__(self, "items", tuple(items))


InfValue = Union[Raw, CommaSeparated, ListValue]


@dataclass(frozen=True)
class KeyValue:
    """A ``key = value`` entry; the value may be absent."""

    key: str
    value: Optional[InfValue] = None


@dataclass(frozen=True)
class OnlyValue:
    """An entry that carries a value without a key."""

    value: InfValue


InfEntry = Union[KeyValue, OnlyValue]


@dataclass
class InfSection:
    """A named section and the entries it holds, in file order."""

    name: str
    entries: list[InfEntry] = field(default_factory=list)