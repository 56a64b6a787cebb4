"""Binary field elements, seeds and garbled rows with byte (de)serialisation."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass, field
from typing import Any, ClassVar, Sequence

SEED_BYTE_LEN = 16


def _read_le(data: Sequence[int] | bytes, offset: int, width: int) -> tuple[int, int]:
    end = offset + width
    if offset < 0 or end > len(data):
        raise IndexError(
            f"cannot read {width} bytes at offset {offset} from {len(data)} bytes"
        )
    return int.from_bytes(bytes(data[offset:end]), "little"), end


def read_u8(data, offset):
    """Read one byte; return (value, offset after it)."""
    return _read_le(data, offset, 1)


def read_u32(data, offset):
    """Read a little-endian u32; return (value, offset after it)."""
    return _read_le(data, offset, 4)


def read_u64(data, offset):
    """Read a little-endian u64; return (value, offset after it)."""
    return _read_le(data, offset, 8)


def zero_seed() -> bytes:
    """The all-zero seed."""
    return bytes(SEED_BYTE_LEN)


def random_seed() -> bytes:
    """A seed from a non-cryptographic random source."""
    return bytes(_random.getrandbits(8) for _ in range(SEED_BYTE_LEN))


def _random_value(num_bytes: int) -> int:
    return _random.getrandbits(8 * num_bytes)


def _multiply_bit(element, bit):
    if bit == 0:
        return type(element)(0)
    if bit == 1:
        return element
    raise ValueError(f"{bit!r} is not binary!")


def _add(element, other):
    if type(other) is not type(element):
        return NotImplemented
    return type(element)(element.value ^ other.value)


@dataclass(frozen=True)
class _BinaryField:
    """Element of a characteristic-2 field stored as a little-endian integer."""

    value: int = 0
    NUM_BYTES: ClassVar[int] = 0

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or not 0 <= self.value < 1 << (8 * self.NUM_BYTES):
            raise ValueError(
                f"{self.value!r} does not fit in {self.NUM_BYTES} bytes"
            )


class GF2p8(_BinaryField):
    """Element of GF(2^8)."""

    NUM_BYTES: ClassVar[int] = 1

    @classmethod
    def zero(cls):
        return cls(0)

    @classmethod
    def random(cls):
        """A non-cryptographic random element."""
        return cls(_random_value(cls.NUM_BYTES))

    @classmethod
    def from_hash_digest(cls, digest):
        """Take the first byte of a hash digest."""
        if len(digest) == 0:
            raise ValueError("empty digest")
        return cls(bytes(digest[:1])[0])

    @classmethod
    def from_bytes(cls, data, offset=0):
        """Decode an element at ``offset``; return (element, offset after it)."""
        value, end = _read_le(data, offset, cls.NUM_BYTES)
        return cls(value), end

    @classmethod
    def num_bytes(cls) -> int:
        return cls.NUM_BYTES

    def to_bytes(self) -> bytes:
        return self.value.to_bytes(self.NUM_BYTES, "little")

    def multiply_bit(self, bit):
        """Multiply by a bit: 0 gives zero, 1 gives the element itself."""
        return _multiply_bit(self, bit)

    def __add__(self, other):
        return _add(self, other)


class GF2p128(_BinaryField):
    """Element of GF(2^128)."""

    NUM_BYTES: ClassVar[int] = 16

    @classmethod
    def zero(cls):
        return cls(0)

    @classmethod
    def random(cls):
        """A non-cryptographic random element."""
        return cls(_random_value(cls.NUM_BYTES))

    @classmethod
    def from_bytes(cls, data, offset=0):
        """Decode an element at ``offset``; return (element, offset after it)."""
        value, end = _read_le(data, offset, cls.NUM_BYTES)
        return cls(value), end

    @classmethod
    def num_bytes(cls) -> int:
        return cls.NUM_BYTES

    def to_bytes(self) -> bytes:
        return self.value.to_bytes(self.NUM_BYTES, "little")

    def multiply_bit(self, bit):
        """Multiply by a bit: 0 gives zero, 1 gives the element itself."""
        return _multiply_bit(self, bit)

    def __add__(self, other):
        return _add(self, other)


class GF2p256(_BinaryField):
    """Element of GF(2^256)."""

    NUM_BYTES: ClassVar[int] = 32

    @classmethod
    def zero(cls):
        return cls(0)

    @classmethod
    def random(cls):
        """A non-cryptographic random element."""
        return cls(_random_value(cls.NUM_BYTES))

    @classmethod
    def from_bytes(cls, data, offset=0):
        """Decode an element at ``offset``; return (element, offset after it)."""
        value, end = _read_le(data, offset, cls.NUM_BYTES)
        return cls(value), end

    @classmethod
    def num_bytes(cls) -> int:
        return cls.NUM_BYTES

    def to_bytes(self) -> bytes:
        return self.value.to_bytes(self.NUM_BYTES, "little")

    def multiply_bit(self, bit):
        """Multiply by a bit: 0 gives zero, 1 gives the element itself."""
        return _multiply_bit(self, bit)

    def __add__(self, other):
        return _add(self, other)


@dataclass
class GarbledRow:
    """One garbled-table row: a control byte and VOLE / VOLEitH MAC fields."""

    first_u8: int
    vole_mac_field: Any
    voleith_mac_field: list = field(default_factory=list)
    vole_mac_remaining_field: Any = None

    @classmethod
    def zero(cls, vole_field):
        """The zero row for the given VOLE field type, with no VOLEitH entries."""
        return cls(0, vole_field.zero(), [], vole_field.zero())

    def __add__(self, other):
        if not isinstance(other, GarbledRow):
            return NotImplemented
        return GarbledRow(
            self.first_u8 ^ other.first_u8,
            self.vole_mac_field + other.vole_mac_field,
            [a + b for a, b in zip(self.voleith_mac_field, other.voleith_mac_field)],
            self.vole_mac_remaining_field + other.vole_mac_remaining_field,
        )