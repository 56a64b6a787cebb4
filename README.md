# pagc

Building blocks for publicly auditable garbled-circuit two-party computation
authenticated with VOLE-in-the-head (VOLEitH). The package covers field
elements, vectors, the checks on VOLE correlations, the sizes and byte
encoding of the public parameters, and how committed bits and MACs are cut
into their protocol components.

## Modules

### `pagc.value_types`

- `GF2p8`, `GF2p128` and `GF2p256` are immutable elements of binary fields.
  Each one stores its value as an integer in `.value`.
  - `zero()` and `random()` create elements. `random()` uses a
    non-cryptographic source.
  - `a + b` is XOR. Adding elements of two different field types raises
    `TypeError`.
  - `multiply_bit(bit)` returns zero for 0 and the element itself for 1. Any
    other value raises `ValueError`.
  - `to_bytes()` returns the little-endian encoding (1, 16 or 32 bytes), and
    `num_bytes()` gives that length.
  - `from_bytes(data, offset=0)` returns `(element, offset_after)`.
  - `GF2p8.from_hash_digest(digest)` takes the first byte of a digest.
- `read_u8`, `read_u32` and `read_u64` read little-endian integers. Each
  returns `(value, offset_after)` and raises `IndexError` when the data is too
  short.
- `zero_seed()` and `random_seed()` return 16-byte seeds (`SEED_BYTE_LEN`).
- `GarbledRow` holds a control byte, a VOLE MAC field, a list of VOLEitH MAC
  fields and a remaining VOLE MAC field.
  - `GarbledRow.zero(field_type)` creates an all-zero row.
  - `+` adds two rows field by field.

### `pagc.vectors`

- `BitVec` holds bits as 0/1 integers. `GFVec` holds field elements.
- Both support the following:
  - `zeros(...)`, `append`, indexing, slicing, iteration, `len` and `==`.
  - `split_off(at)` removes the tail from `at` onwards and returns it.
  - `+` adds entry-wise: XOR for bits, field addition for elements.
- `BitVec & BitVec` is entry-wise AND.
- `GFVec.multiply_bits(bits)` keeps each element whose bit is 1 and puts zero
  in the other positions.
- Entry-wise operations on vectors of different lengths raise `ValueError`.

### `pagc.verification`

- `verify_vole_correlations(bits, macs, delta, keys)` checks that
  `mac == key + delta * bit` holds at every position. It raises
  `CorrelationError` and lists the positions that fail. It raises `ValueError`
  when the lengths differ.
- `parse_two_bits(value)` returns the two low bits of `value` as
  `(bit0, bit1)`.

### `pagc.public_params`

- `ParameterSizes.from_circuit(num_and_gates, num_input_bits, bs, rm)` derives
  the protocol sizes from the circuit counts:
  - `big_iw_size` is the number of AND gates.
  - `big_l = bs * num_and_gates + rm`.
  - `big_n = num_input_bits + 2 * num_and_gates + 3 * big_l`.

  Negative counts raise `ValueError`.
- `encode_varint(value)` encodes an integer in a variable-length form:
  - values below 251 take a single byte;
  - larger values take a marker byte (251 to 254) followed by 2, 4, 8 or 16
    little-endian bytes.
- `encode_public_parameter_bytes(tau, kappa, master_key, big_ia, big_ib, bs, rm)`
  writes these fields in order:
  1. `tau` as one byte;
  2. `kappa` as 8 little-endian bytes;
  3. the 16-byte master key;
  4. the two index lists, each written as a varint length followed by varint
     entries;
  5. `bs` and `rm`, each as 8 little-endian bytes.
- `garbled_row_byte_len(vole_field, voleith_field, kappa)` returns
  `1 + 2 * vole bytes + kappa * voleith bytes`.

### `pagc.svole_split`

- `split_prover_bits(sizes, secret_bits, secret_macs, r_input, r_output_and, r_prime, tilde_a, tilde_b, tilde_c)`
  reads the committed bit and MAC vectors from the end. The segments come in
  this order: input bits, AND outputs, r', then a, b and c. It returns a
  `MaskedBits`, which holds the prover's bits XORed with the committed bits,
  and a `VoleithVectors`, which holds the MACs for each component. The vectors
  passed in are not modified.
- `derive_verifier_keys(sizes, nabla, public_keys, masked)` splits
  reconstructed keys in the same way. To each key it adds `nabla` times the
  matching masked bit, and it returns the keys as a `VoleithVectors`.

## Example

```python
from pagc.value_types import GF2p8
from pagc.vectors import BitVec, GFVec
from pagc.verification import CorrelationError, verify_vole_correlations

delta = GF2p8.random()
bits = BitVec([0, 1, 1, 0])
keys = GFVec(GF2p8.random() for _ in bits)
macs = keys + GFVec(delta.multiply_bit(b) for b in bits)

verify_vole_correlations(bits, macs, delta, keys)  # passes

try:
    verify_vole_correlations(BitVec([1, 1, 1, 0]), macs, delta + GF2p8(1), keys)
except CorrelationError as error:
    print(error)
```

## What the package does not do

This is a library of building blocks. It does not include:

- a command-line program;
- a Bristol-format circuit reader;
- a GGM-tree or vector commitment, a PRG or hashing;
- the end-to-end preprocessing, proving and verification of the protocol.

Callers provide the committed vectors, the reconstructed keys and the circuit
counts themselves.

Randomness from `random()` and `random_seed()` comes from Python's `random`
module. Use it for tests and benchmarks only.

## Installation and tests

```
pip install .
pip install ".[test]"
pytest
```