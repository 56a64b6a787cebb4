"""Sizes derived from a circuit and the public-parameter byte encoding."""

from __future__ import annotations

from dataclasses import dataclass

from .value_types import SEED_BYTE_LEN

_USIZE_BYTES = 8


@dataclass(frozen=True)
class ParameterSizes:
    """Vector lengths used by the protocol for one circuit."""

    num_input_bits: int
    big_iw_size: int
    big_l: int
    big_n: int
    bs: int
    rm: int

    @classmethod
    def from_circuit(cls, num_and_gates, num_input_bits, bs, rm):
        """Derive the sizes from the AND-gate count, input count, bs and rm."""
        for name, value in (
            ("num_and_gates", num_and_gates),
            ("num_input_bits", num_input_bits),
            ("bs", bs),
            ("rm", rm),
        ):
            if value < 0:
                raise ValueError(f"{name} must not be negative, got {value}")
        big_l = bs * num_and_gates + rm
        return cls(
            num_input_bits=num_input_bits,
            big_iw_size=num_and_gates,
            big_l=big_l,
            big_n=num_input_bits + 2 * num_and_gates + 3 * big_l,
            bs=bs,
            rm=rm,
        )


def encode_varint(value):
    """Encode an unsigned integer in the compact variable-length form."""
    if value < 0:
        raise ValueError(f"cannot encode negative value {value}")
    if value < 251:
        return bytes([value])
    for marker, width in ((251, 2), (252, 4), (253, 8), (254, 16)):
        if value < 1 << (8 * width):
            return bytes([marker]) + value.to_bytes(width, "little")
    raise ValueError(f"{value} does not fit in 128 bits")


def _encode_usize(value: int) -> bytes:
    if not 0 <= value < 1 << (8 * _USIZE_BYTES):
        raise ValueError(f"{value} does not fit in {_USIZE_BYTES} bytes")
    return value.to_bytes(_USIZE_BYTES, "little")


def _encode_index_list(indices) -> bytes:
    return encode_varint(len(indices)) + b"".join(encode_varint(i) for i in indices)


def encode_public_parameter_bytes(tau, kappa, master_key, big_ia, big_ib, bs, rm):
    """Serialise the public parameter fields in their fixed order."""
    if not 0 <= tau <= 0xFF:
        raise ValueError(f"tau {tau} does not fit in one byte")
    master_key = bytes(master_key)
    if len(master_key) != SEED_BYTE_LEN:
        raise ValueError(
            f"master key must be {SEED_BYTE_LEN} bytes, got {len(master_key)}"
        )
    return b"".join(
        (
            bytes([tau]),
            _encode_usize(kappa),
            master_key,
            _encode_index_list(big_ia),
            _encode_index_list(big_ib),
            _encode_usize(bs),
            _encode_usize(rm),
        )
    )


def garbled_row_byte_len(vole_field, voleith_field, kappa):
    """Byte length of one serialised garbled row."""
    return 1 + 2 * vole_field.num_bytes() + voleith_field.num_bytes() * kappa