import random

import pytest

from pagc.value_types import GF2p8, GF2p256
from pagc.vectors import BitVec, GFVec
from pagc.verification import CorrelationError, parse_two_bits, verify_vole_correlations


def test_parse_two_bits_recovers_one():
    k0, k1 = parse_two_bits(1)
    assert k0 + 2 * k1 == 1


@pytest.mark.parametrize("value", [0, 1, 2, 3])
def test_parse_two_bits_round_trip(value):
    k0, k1 = parse_two_bits(value)
    assert k0 in (0, 1) and k1 in (0, 1)
    assert k0 + 2 * k1 == value


def test_parse_two_bits_ignores_high_bits():
    assert parse_two_bits(0b1110) == parse_two_bits(0b10)


def _correlated(field, length, rng):
    delta = field.random()
    bits = BitVec(rng.getrandbits(1) for _ in range(length))
    keys = GFVec(field.random() for _ in range(length))
    macs = GFVec(k + delta.multiply_bit(b) for k, b in zip(keys, bits))
    return bits, macs, delta, keys


@pytest.mark.parametrize("field", [GF2p8, GF2p256])
def test_valid_correlations_pass(field):
    rng = random.Random(7)
    bits, macs, delta, keys = _correlated(field, 20, rng)
    assert verify_vole_correlations(bits, macs, delta, keys) is None


def test_broken_correlation_raises():
    rng = random.Random(3)
    bits, macs, delta, keys = _correlated(GF2p256, 10, rng)
    macs[4] = macs[4] + GF2p256(1)
    with pytest.raises(CorrelationError):
        verify_vole_correlations(bits, macs, delta, keys)


def test_flipped_bit_raises_when_delta_nonzero():
    rng = random.Random(5)
    bits, macs, _, keys = _correlated(GF2p8, 8, rng)
    delta = GF2p8(0x5A)
    macs = GFVec(k + delta.multiply_bit(b) for k, b in zip(keys, bits))
    bits[0] ^= 1
    with pytest.raises(CorrelationError):
        verify_vole_correlations(bits, macs, delta, keys)


def test_length_mismatch_raises_value_error():
    delta = GF2p8(3)
    with pytest.raises(ValueError):
        verify_vole_correlations(BitVec([1, 0]), GFVec([GF2p8(1)]), delta, GFVec([GF2p8(1)]))