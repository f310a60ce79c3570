"""
Typed style declaration values.

A declared value is one of three kinds: a raw string, a number with a unit
(zero, pixels or a percentage) or an RGB color. Values are immutable once
parsed and compare by content.
"""

from enum import Enum
from typing import Any, Dict, Tuple


class Value:
    """Base class for declaration values."""

    def _key(self) -> Tuple:
        raise NotImplementedError("Subclasses must implement _key")

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self).__name__,) + self._key())


class StringValue(Value):
    """A raw string value, e.g. ``block`` or ``sans-serif``."""

    def __init__(self, text: str):
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    def _key(self) -> Tuple:
        return (self._text,)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"StringValue({self._text!r})"


class Unit(Enum):
    """Units a numeric value may carry."""
    ZERO = "zero"
    PX = "px"
    PERCENTAGE = "%"


class NumericValue(Value):
    """
    A number with a unit.

    Zero is unit-less and always carries the number 0.
    """

    def __init__(self, unit: Unit, number: int = 0):
        """
        Initialize a numeric value.

        Args:
            unit: The unit of the value
            number: Non-negative magnitude (ignored for ``Unit.ZERO``)
        """
        if number < 0:
            raise ValueError(f"Numeric values cannot be negative: {number}")
        self._unit = unit
        self._number = 0 if unit is Unit.ZERO else number

    @classmethod
    def zero(cls) -> 'NumericValue':
        return cls(Unit.ZERO)

    @classmethod
    def px(cls, number: int) -> 'NumericValue':
        return cls(Unit.PX, number)

    @classmethod
    def percentage(cls, number: int) -> 'NumericValue':
        return cls(Unit.PERCENTAGE, number)

    @property
    def unit(self) -> Unit:
        return self._unit

    @property
    def number(self) -> int:
        return self._number

    def to_pixels(self, reference: int) -> int:
        """
        Convert to pixels.

        Args:
            reference: Length a percentage is taken of

        Returns:
            int: Pixel length, percentages truncated toward zero
        """
        if self._unit is Unit.ZERO:
            return 0
        if self._unit is Unit.PX:
            return self._number
        return self._number * reference // 100

    def _key(self) -> Tuple:
        return (self._unit, self._number)

    def __str__(self) -> str:
        if self._unit is Unit.ZERO:
            return "0"
        return f"{self._number}{self._unit.value}"

    def __repr__(self) -> str:
        if self._unit is Unit.ZERO:
            return "NumericValue.zero()"
        factory = "px" if self._unit is Unit.PX else "percentage"
        return f"NumericValue.{factory}({self._number})"


class Color(Value):
    """An RGB color with 8-bit channels."""

    def __init__(self, r: int, g: int, b: int):
        """
        Initialize a color.

        Args:
            r: Red channel (0-255)
            g: Green channel (0-255)
            b: Blue channel (0-255)
        """
        for name, channel in (('r', r), ('g', g), ('b', b)):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel {name} out of range: {channel}")
        self._rgb = (r, g, b)

    @classmethod
    def from_hex(cls, digits: str) -> 'Color':
        """
        Build a color from 3 or 6 hexadecimal digits (without ``#``).

        Args:
            digits: Hex digits; the 3-digit form doubles each digit

        Returns:
            Color: The parsed color
        """
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        if len(digits) != 6:
            raise ValueError(f"Expected 3 or 6 hex digits, got {len(digits)}")
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    @property
    def r(self) -> int:
        return self._rgb[0]

    @property
    def g(self) -> int:
        return self._rgb[1]

    @property
    def b(self) -> int:
        return self._rgb[2]

    def as_tuple(self) -> Tuple[int, int, int]:
        """The channels as an ``(r, g, b)`` tuple."""
        return self._rgb

    def as_u32(self) -> int:
        """The color packed as ``0xRRGGBB``."""
        return (self.r << 16) | (self.g << 8) | self.b

    def to_hex(self) -> str:
        return "#{:02x}{:02x}{:02x}".format(*self._rgb)

    def _key(self) -> Tuple:
        return self._rgb

    def __str__(self) -> str:
        return self.to_hex()

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b})"


# A declaration map: property name -> value
Declarations = Dict[str, Value]
