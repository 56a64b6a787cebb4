"""Checks on VOLE correlations and small bit helpers."""

from __future__ import annotations

from .vectors import GFVec


class CorrelationError(Exception):
    """Raised when MACs, keys and bits do not satisfy the VOLE relation."""


def parse_two_bits(value):
    """Split the two low bits of ``value`` into (bit 0, bit 1)."""
    return value & 1, (value >> 1) & 1


def verify_vole_correlations(bits, macs, delta, keys):
    """Check that every MAC equals key + delta * bit.

    Raises ``ValueError`` if the vectors differ in length and
    ``CorrelationError`` if any entry breaks the relation.
    """
    expected = keys + GFVec(delta.multiply_bit(bit) for bit in bits)
    if macs != expected:
        bad = [
            position
            for position, (mac, want) in enumerate(zip(macs, expected))
            if mac != want
        ]
        if len(macs) != len(expected):
            raise ValueError(
                f"length mismatch: {len(macs)} MACs for {len(expected)} keys"
            )
        raise CorrelationError(f"VOLE correlation broken at positions {bad}")