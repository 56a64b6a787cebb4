"""Bit vectors and vectors of field elements with entry-wise arithmetic."""

from __future__ import annotations

from typing import Any, Iterable, Iterator


def _check_same_length(left, right) -> None:
    if len(left) != len(right):
        raise ValueError(f"length mismatch: {len(left)} != {len(right)}")


def _check_split_point(at: int, length: int) -> None:
    if not 0 <= at <= length:
        raise IndexError(f"split index {at} out of range for length {length}")


class BitVec:
    """A growable vector of bits stored as 0/1 integers."""

    __slots__ = ("_bits",)

    def __init__(self, bits: Iterable[int] = ()):
        self._bits = list(bits)

    @classmethod
    def zeros(cls, length):
        return cls([0] * length)

    def append(self, bit):
        self._bits.append(bit)

    def split_off(self, at):
        """Remove and return the bits from ``at`` onwards."""
        _check_split_point(at, len(self._bits))
        tail = BitVec(self._bits[at:])
        del self._bits[at:]
        return tail

    def __len__(self) -> int:
        return len(self._bits)

    def __iter__(self) -> Iterator[int]:
        return iter(self._bits)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return BitVec(self._bits[index])
        return self._bits[index]

    def __setitem__(self, index, bit):
        self._bits[index] = bit

    def __eq__(self, other):
        if not isinstance(other, BitVec):
            return NotImplemented
        return self._bits == other._bits

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other):
        """Entry-wise XOR."""
        if not isinstance(other, BitVec):
            return NotImplemented
        _check_same_length(self, other)
        return BitVec(a ^ b for a, b in zip(self._bits, other._bits))

    def __and__(self, other):
        """Entry-wise AND."""
        if not isinstance(other, BitVec):
            return NotImplemented
        _check_same_length(self, other)
        return BitVec(a & b for a, b in zip(self._bits, other._bits))

    def __repr__(self) -> str:
        return f"BitVec({self._bits!r})"


class GFVec:
    """A growable vector of field elements."""

    __slots__ = ("_elements",)

    def __init__(self, elements: Iterable[Any] = ()):
        self._elements = list(elements)

    @classmethod
    def zeros(cls, field, length):
        return cls(field.zero() for _ in range(length))

    def append(self, element):
        self._elements.append(element)

    def split_off(self, at):
        """Remove and return the elements from ``at`` onwards."""
        _check_split_point(at, len(self._elements))
        tail = GFVec(self._elements[at:])
        del self._elements[at:]
        return tail

    def multiply_bits(self, bits):
        """Keep each element whose bit is 1 and replace the others by zero."""
        _check_same_length(self, bits)
        return GFVec(
            element if bit == 1 else type(element).zero()
            for element, bit in zip(self._elements, bits)
        )

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._elements)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return GFVec(self._elements[index])
        return self._elements[index]

    def __setitem__(self, index, element):
        self._elements[index] = element

    def __eq__(self, other):
        if not isinstance(other, GFVec):
            return NotImplemented
        return self._elements == other._elements

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other):
        """Entry-wise field addition."""
        if not isinstance(other, GFVec):
            return NotImplemented
        _check_same_length(self, other)
        return GFVec(a + b for a, b in zip(self._elements, other._elements))

    def __repr__(self) -> str:
        return f"GFVec({self._elements!r})"