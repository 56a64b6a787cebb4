"""Splitting committed bits and VOLEitH MACs/keys into protocol components."""

from __future__ import annotations

from dataclasses import dataclass

from .vectors import BitVec, GFVec


@dataclass
class MaskedBits:
    """Bits masked with the committed random bits, sent to the verifier."""

    r_input: BitVec
    r_output_and: BitVec
    r_prime: BitVec
    a: BitVec
    b: BitVec
    c: BitVec


@dataclass
class VoleithVectors:
    """VOLEitH MACs or keys for each protocol component."""

    r_input: GFVec
    r_output_and: GFVec
    r_prime: GFVec
    tilde_a: GFVec
    tilde_b: GFVec
    tilde_c: GFVec


def _segment_lengths(sizes):
    return [
        sizes.num_input_bits,
        sizes.big_iw_size,
        sizes.big_iw_size,
        sizes.big_l,
        sizes.big_l,
        sizes.big_l,
    ]


def _take_from_end(vector, lengths):
    """Split ``vector`` into tails of the given lengths, last one first."""
    total = sum(lengths)
    if len(vector) != total:
        raise ValueError(f"expected {total} entries, got {len(vector)}")
    remaining = type(vector)(vector)
    return [remaining.split_off(len(remaining) - length) for length in lengths]


def split_prover_bits(
    sizes, secret_bits, secret_macs, r_input, r_output_and, r_prime, tilde_a, tilde_b, tilde_c
):
    """Mask the prover's bits and split the committed MACs.

    The committed vectors are read from the end: input bits, AND outputs,
    r', then a, b and c. Returns the masked bits and the MACs by component.
    The given vectors are left unchanged.
    """
    lengths = _segment_lengths(sizes)
    bit_parts = _take_from_end(secret_bits, lengths)
    mac_parts = _take_from_end(secret_macs, lengths)
    own_bits = (r_input, r_output_and, r_prime, tilde_a, tilde_b, tilde_c)
    masked = MaskedBits(*(own + part for own, part in zip(own_bits, bit_parts)))
    return masked, VoleithVectors(*mac_parts)


def derive_verifier_keys(sizes, nabla, public_keys, masked):
    """Turn reconstructed keys and masked bits into per-component VOLEitH keys."""
    lengths = _segment_lengths(sizes)
    key_parts = _take_from_end(public_keys, lengths)
    hats = (masked.r_input, masked.r_output_and, masked.r_prime, masked.a, masked.b, masked.c)
    keys = []
    for part, hat, length in zip(key_parts, hats, lengths):
        if len(hat) < length:
            raise ValueError(f"masked bit vector has {len(hat)} bits, need {length}")
        adjustment = GFVec(nabla.multiply_bit(hat[i]) for i in range(length))
        keys.append(part + adjustment)
    return VoleithVectors(*keys)