import random

import pytest

from pagc.public_params import ParameterSizes
from pagc.svole_split import MaskedBits, derive_verifier_keys, split_prover_bits
from pagc.value_types import GF2p8
from pagc.vectors import BitVec, GFVec


SIZES = ParameterSizes.from_circuit(4, 6, 2, 3)


def _random_bits(rng, length):
    return BitVec(rng.getrandbits(1) for _ in range(length))


def _own_bits(rng):
    s = SIZES
    return (
        _random_bits(rng, s.num_input_bits),
        _random_bits(rng, s.big_iw_size),
        _random_bits(rng, s.big_iw_size),
        _random_bits(rng, s.big_l),
        _random_bits(rng, s.big_l),
        _random_bits(rng, s.big_l),
    )


def _component_pairs(bits, vectors):
    return [
        (bits[0], vectors.r_input),
        (bits[1], vectors.r_output_and),
        (bits[2], vectors.r_prime),
        (bits[3], vectors.tilde_a),
        (bits[4], vectors.tilde_b),
        (bits[5], vectors.tilde_c),
    ]


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_commit_split_reconstruct_gives_voleith_correlations(seed):
    rng = random.Random(seed)
    nabla = GF2p8(rng.randrange(1, 256))
    secret_bits = _random_bits(rng, SIZES.big_n)
    secret_macs = GFVec(GF2p8(rng.randrange(256)) for _ in range(SIZES.big_n))
    public_keys = GFVec(m + nabla.multiply_bit(b) for m, b in zip(secret_macs, secret_bits))
    own = _own_bits(rng)

    masked, macs = split_prover_bits(SIZES, secret_bits, secret_macs, *own)
    keys = derive_verifier_keys(SIZES, nabla, public_keys, masked)

    for (bits, mac_vec), (_, key_vec) in zip(
        _component_pairs(own, macs), _component_pairs(own, keys)
    ):
        assert len(mac_vec) == len(bits) == len(key_vec)
        for bit, mac, key in zip(bits, mac_vec, key_vec):
            assert nabla.multiply_bit(bit) + mac == key


def test_split_order_reads_from_the_end():
    secret_macs = GFVec(GF2p8(i) for i in range(SIZES.big_n))
    secret_bits = BitVec.zeros(SIZES.big_n)
    own = tuple(BitVec.zeros(len(b)) for b in _own_bits(random.Random(0)))
    masked, macs = split_prover_bits(SIZES, secret_bits, secret_macs, *own)
    assert macs.r_input == secret_macs[SIZES.big_n - SIZES.num_input_bits:]
    assert macs.tilde_c == secret_macs[:SIZES.big_l]
    assert masked.r_input == own[0]


def test_masking_is_xor_with_secret_bits():
    rng = random.Random(9)
    secret_bits = _random_bits(rng, SIZES.big_n)
    secret_macs = GFVec.zeros(GF2p8, SIZES.big_n)
    own = _own_bits(rng)
    masked, _ = split_prover_bits(SIZES, secret_bits, secret_macs, *own)
    unmasked, _ = split_prover_bits(SIZES, secret_bits, secret_macs, *(
        masked.r_input, masked.r_output_and, masked.r_prime, masked.a, masked.b, masked.c
    ))
    assert isinstance(unmasked, MaskedBits)
    assert (unmasked.r_input, unmasked.c) == (own[0], own[5])


def test_inputs_are_not_modified():
    rng = random.Random(4)
    secret_bits = _random_bits(rng, SIZES.big_n)
    secret_macs = GFVec(GF2p8(rng.randrange(256)) for _ in range(SIZES.big_n))
    bits_copy, macs_copy = BitVec(secret_bits), GFVec(secret_macs)
    split_prover_bits(SIZES, secret_bits, secret_macs, *_own_bits(rng))
    assert secret_bits == bits_copy
    assert secret_macs == macs_copy


def test_wrong_total_length_raises():
    rng = random.Random(6)
    with pytest.raises(ValueError):
        split_prover_bits(
            SIZES,
            _random_bits(rng, SIZES.big_n - 1),
            GFVec.zeros(GF2p8, SIZES.big_n - 1),
            *_own_bits(rng),
        )


def test_derive_keys_rejects_short_masked_bits():
    rng = random.Random(8)
    own = _own_bits(rng)
    masked = MaskedBits(BitVec([]), *own[1:])
    with pytest.raises(ValueError):
        derive_verifier_keys(SIZES, GF2p8(5), GFVec.zeros(GF2p8, SIZES.big_n), masked)