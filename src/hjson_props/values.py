"""Value types for a parsed Hjson document."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Union


@dataclass
class VString:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass
class VNumber:
    value: int | float | Decimal

    def __str__(self) -> str:
        v = self.value
        if isinstance(v, int):
            return str(v)
        finite = v.is_finite() if isinstance(v, Decimal) else math.isfinite(v)
        # Same cut-off hjson applies when it reads an integral float as int
        if finite and abs(v) < 1e10 and v == int(v):
            return str(int(v))
        return str(v)


@dataclass
class VBool:
    value: bool

    def __str__(self) -> str:
        return str(self.value).lower()


@dataclass
class VArray:
    items: list["Value"] = field(default_factory=list)


@dataclass
class VObject:
    """Ordered object members; names are unique within one object."""

    members: list[tuple[str, "Value"]] = field(default_factory=list)

    def __post_init__(self) -> None:
        # A repeated name keeps its first position and takes the last value
        merged: dict[str, Value] = {}
        for name, value in self.members:
            merged[name] = value
        self.members = list(merged.items())

    def get(self, name: str) -> "Value | None":
        for member_name, value in self.members:
            if member_name == name:
                return value
        return None


class _Null:
    """Singleton for an explicit ``null`` in the document."""

    _instance: "_Null | None" = None

    def __new__(cls) -> "_Null":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Null"

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return "null"


Null = _Null()

Value = Union[VObject, VArray, VString, VNumber, VBool, _Null]
