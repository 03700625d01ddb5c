"""Text attributes (SGR parameters) and a bitset of them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Iterable, Iterator, Union

from ansiterm.command import csi

__all__ = ["Attribute", "Attributes"]


class Attribute(enum.Enum):
    """A text attribute; each member's value is its SGR parameter.

    Not every terminal supports every attribute.
    """

    RESET = 0
    BOLD = 1
    DIM = 2
    ITALIC = 3
    UNDERLINED = 4
    SLOW_BLINK = 5
    RAPID_BLINK = 6
    REVERSE = 7
    HIDDEN = 8
    CROSSED_OUT = 9
    FRAKTUR = 20
    NO_BOLD = 21
    NORMAL_INTENSITY = 22
    NO_ITALIC = 23
    NO_UNDERLINE = 24
    NO_BLINK = 25
    NO_REVERSE = 27
    NO_HIDDEN = 28
    NOT_CROSSED_OUT = 29
    FRAMED = 51
    ENCIRCLED = 52
    OVER_LINED = 53
    NOT_FRAMED_OR_ENCIRCLED = 54
    NOT_OVER_LINED = 55

    def sgr(self) -> int:
        """Return the SGR parameter of this attribute."""
        return self.value

    def bytes(self) -> int:
        """Return the single bit that represents this attribute in ``Attributes``.

        The bit is shifted by one so that ``RESET`` (position 0) can be stored.
        """
        return 1 << (_POSITION[self] + 1)

    def __str__(self) -> str:
        return csi(self.sgr(), "m")


_POSITION = {attribute: position for position, attribute in enumerate(Attribute)}

_Operand = Union[Attribute, "Attributes"]


def _bits_of(operand: object) -> int | None:
    if isinstance(operand, Attribute):
        return operand.bytes()
    if isinstance(operand, Attributes):
        return operand.bits
    return None


@dataclass
class Attributes:
    """A set of attributes, stored as a bitset."""

    bits: int = 0

    @classmethod
    def from_iterable(cls, attributes: Iterable[Attribute]) -> Attributes:
        """Build a set holding every given attribute."""
        result = cls()
        for attribute in attributes:
            result.set(attribute)
        return result

    def set(self, attribute: Attribute) -> None:
        """Add the attribute; does nothing if it is already set."""
        self.bits |= attribute.bytes()

    def unset(self, attribute: Attribute) -> None:
        """Remove the attribute; does nothing if it is not set."""
        self.bits &= ~attribute.bytes()

    def toggle(self, attribute: Attribute) -> None:
        """Set the attribute if it is unset, unset it if it is set."""
        self.bits ^= attribute.bytes()

    def has(self, attribute: Attribute) -> bool:
        """Return whether the attribute is set."""
        return self.bits & attribute.bytes() != 0

    def extend(self, attributes: Attributes) -> None:
        """Set all the attributes of ``attributes``; removes none."""
        self.bits |= attributes.bits

    def is_empty(self) -> bool:
        """Return whether no attribute is set."""
        return self.bits == 0

    def copy(self) -> Attributes:
        """Return an independent copy of this set."""
        return replace(self)

    def __contains__(self, attribute: object) -> bool:
        return isinstance(attribute, Attribute) and self.has(attribute)

    def __iter__(self) -> Iterator[Attribute]:
        return (attribute for attribute in Attribute if self.has(attribute))

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __and__(self, other: _Operand) -> Attributes:
        bits = _bits_of(other)
        if bits is None:
            return NotImplemented
        return Attributes(self.bits & bits)

    def __or__(self, other: _Operand) -> Attributes:
        bits = _bits_of(other)
        if bits is None:
            return NotImplemented
        return Attributes(self.bits | bits)

    def __xor__(self, other: _Operand) -> Attributes:
        bits = _bits_of(other)
        if bits is None:
            return NotImplemented
        return Attributes(self.bits ^ bits)