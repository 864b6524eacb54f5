"""Value model: the right-hand side of a declaration.

A value is exactly one of :class:`Keyword`, :class:`Length` or
:class:`Color`.  Code that consumes a :data:`Value` dispatches on these three
types and raises ``TypeError`` for anything else, so adding a new kind forces
every consumer to be revisited.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Union


class Unit(Enum):
    """Length units understood by the parser."""

    PX = "px"


@dataclass(frozen=True)
class Keyword:
    """A bare identifier such as ``auto`` or ``block``."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Length:
    """A number with a unit, e.g. ``12.5px``."""

    value: float
    unit: Unit = Unit.PX

    def __str__(self) -> str:
        # Shortest repr digits, written without an exponent.
        number = format(Decimal(repr(float(self.value))), "f")
        if number.endswith(".0"):
            number = number[:-2]
        return f"{number}{self.unit.value}"


@dataclass(frozen=True)
class Color:
    """An RGBA color with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")

    def __str__(self) -> str:
        text = f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        if self.a != 255:
            text += f"{self.a:02x}"
        return text


Value = Union[Keyword, Length, Color]

AUTO = Keyword("auto")
ZERO = Length(0.0, Unit.PX)


def to_px(value: Value) -> float:
    """Return the pixel size of *value*, or 0.0 if it is not a pixel length."""
    if isinstance(value, Length):
        if value.unit is Unit.PX:
            return value.value
        raise TypeError(f"Unhandled unit: {value.unit!r}")
    if isinstance(value, (Keyword, Color)):
        return 0.0
    raise TypeError(f"Not a stylesheet value: {value!r}")
