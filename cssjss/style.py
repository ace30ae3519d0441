from __future__ import annotations
import json
import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any
from typing_extensions import TypeAliasType

__all__ = [
    "Scalar",
    "Number",
    "Nested",
    "FallbackList",
    "StyleValue",
    "is_object",
    "entries",
    "format_number",
    "from_native",
    "to_native",
]


@dataclass
class Scalar:
    """Textual value, `red`, `1px solid`, `"Roboto", sans-serif`."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass
class Number:
    """Numeric value. Written back to CSS with a `px` suffix."""

    value: int | float

    def __str__(self) -> str:
        return format_number(self.value)


@dataclass
class Nested:
    """A style object: property names, selectors or at-rules mapped to values.
    Insertion order is the order of the source.
    """

    entries: dict[str, StyleValue] = field(default_factory=dict)

    def __contains__(self, key: str) -> bool:
        return key in self.entries

    def __getitem__(self, key: str) -> StyleValue:
        return self.entries[key]

    def __setitem__(self, key: str, value: StyleValue):
        self.entries[key] = value

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, key: str, default: StyleValue | None = None) -> StyleValue | None:
        return self.entries.get(key, default)

    def child(self, key: str) -> Nested:
        """The nested object under `key`, created when missing."""
        value = self.entries.get(key)
        if not isinstance(value, Nested):
            value = self.entries[key] = Nested()
        return value


@dataclass
class FallbackList:
    """Earlier declarations of a repeated property, most recent first.
    Each entry maps the property to the value it was overridden with.
    """

    entries: list[dict[str, StyleValue]] = field(default_factory=list)

    def push(self, prop: str, value: StyleValue):
        self.entries.insert(0, {prop: value})

    def __len__(self) -> int:
        return len(self.entries)


StyleValue = TypeAliasType("StyleValue", Scalar | Number | Nested | FallbackList)


def is_object(value: Any) -> bool:
    """Whether the value holds keys of its own. Fallback lists count, their keys
    being the list indexes.
    """
    return isinstance(value, (Nested, FallbackList))


def entries(value: Nested | FallbackList) -> list[tuple[str, StyleValue]]:
    if isinstance(value, FallbackList):
        return [(str(i), Nested(dict(entry))) for i, entry in enumerate(value.entries)]
    return list(value.entries.items())


def format_number(value: int | float) -> str:
    """Number text as a JavaScript engine prints it: `10`, `1.5`, `NaN`, `Infinity`.

    Magnitudes below `1e-6` or from `1e21` up use exponent form (`1e-7`,
    `1.5e+21`), everything else is written out in full (`0.00001`).
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if 1e-6 <= abs(value) < 1e21:
        if isinstance(value, int) or value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), "f")
    mantissa, _, exponent = repr(float(value)).partition("e")
    sign = "-" if exponent.startswith("-") else "+"
    return f"{mantissa}e{sign}{int(exponent.lstrip('+-'))}"


def from_native(value: Any) -> StyleValue:
    """Build a style value from plain python data, typically the result of `json.loads`.

    Mappings become `Nested`. Lists of mappings become `FallbackList`, any
    other list becomes a `Nested` keyed by index. `None` and booleans keep their
    JSON spelling as a `Scalar`.
    """
    if isinstance(value, (Nested, FallbackList, Scalar, Number)):
        return value
    elif isinstance(value, dict):
        return Nested({str(key): from_native(item) for key, item in value.items()})
    elif isinstance(value, (list, tuple)):
        if len(value) > 0 and all(isinstance(item, dict) for item in value):
            return FallbackList(
                [{str(key): from_native(v) for key, v in item.items()} for item in value]
            )
        return Nested({str(i): from_native(item) for i, item in enumerate(value)})
    elif isinstance(value, bool) or value is None:
        return Scalar(json.dumps(value))
    elif isinstance(value, (int, float)):
        return Number(value)
    return Scalar(str(value))


def to_native(value: StyleValue) -> Any:
    """Plain python data for a style value, ready for `json.dumps`."""
    if isinstance(value, Nested):
        return {key: to_native(item) for key, item in value.entries.items()}
    elif isinstance(value, FallbackList):
        return [{key: to_native(item) for key, item in entry.items()} for entry in value.entries]
    return value.value
