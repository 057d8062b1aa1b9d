# dilithcore

Pure-Python building blocks of the Dilithium lattice signature scheme:
the parameter sets, the Keccak permutation and the SHAKE/SHA-3 functions
built on it, the number-theoretic transform, the encoding of the signature
hint vector, and the AES-based deterministic generator used to produce
known-answer-test (KAT) request files.

## Modules

- `dilithcore.params` — constants (`N`, `Q`, `D`, `SEEDBYTES`, `CRHBYTES`,
  `TRBYTES`, ...) and `parameter_set(mode)`, which returns the frozen
  `ParameterSet` for mode 2, 3 or 5 (mode 2 by default) and raises
  `ValueError` for any other mode. A `ParameterSet` carries `k`, `l`, `eta`,
  `tau`, `beta`, `gamma1`, `gamma2`, `omega` and `ctildebytes`, and derives
  `public_key_bytes`, `secret_key_bytes`, `signature_bytes` and the packed
  sizes of the individual polynomial encodings.
- `dilithcore.keccak` — `keccak_f1600(state)` applies the 24-round
  permutation to 25 unsigned 64-bit lanes and returns the new lanes.
- `dilithcore.fips202` — the incremental sponges `Shake128` and `Shake256`
  (`absorb`, `finalize`, `squeeze`, `squeeze_blocks`, and the class method
  `absorb_once`), plus one-shot `shake128(data, length)`,
  `shake256(data, length)`, `sha3_256(data)` and `sha3_512(data)`.
  Absorbing after `finalize`, or squeezing before it, raises `RuntimeError`.
- `dilithcore.ntt` — `ntt(coeffs)` and `invntt_tomont(coeffs)` over
  Z_q[X]/(X^256 + 1) with q = 8380417. Both take 256 coefficients and return
  a new list; no final reduction is applied.
- `dilithcore.packing` — `pack_hint(hint, params)` and
  `unpack_hint(data, params)` encode and decode the hint vector as `omega`
  indices followed by `k` running counts. Non-canonical encodings raise
  `MalformedSignatureError` (a `ValueError`).
- `dilithcore.rng` — `aes256_ecb(key, block)`, the AES-256 CTR-DRBG
  `CtrDrbg(entropy_input, personalization_string=None)` with `random_bytes`
  and `update`, and the bounded seed expander
  `SeedExpander(seed, diversifier, maxlen)` with `read`. Requests outside
  the expander's limits raise `RngError`, whose `code` attribute holds
  `RNG_BAD_MAXLEN` or `RNG_BAD_REQ_LEN`.
- `dilithcore.kat` — `write_requests(stream, count=100)` writes KAT request
  records seeded from the fixed entropy bytes 0..47; `find_marker`,
  `read_hex` and `format_bstr` read and format the hexadecimal fields of
  such files.

## Installation

```
pip install .
```

## Examples

```python
from dilithcore.fips202 import Shake128, shake256
from dilithcore.params import parameter_set

params = parameter_set(2)
print(params.public_key_bytes, params.secret_key_bytes, params.signature_bytes)
# 1312 2560 2420

digest = shake256(b"message", 32)

xof = Shake128()
xof.absorb(b"seed")
xof.finalize()
stream = xof.squeeze(64)
```

Transforming a polynomial and back:

```python
from dilithcore.ntt import ntt, invntt_tomont
from dilithcore.params import Q

coeffs = list(range(256))
restored = invntt_tomont(ntt(coeffs))
# each restored coefficient is congruent to the input times 2**32 modulo Q
assert all((r - c * 2**32) % Q == 0 for r, c in zip(restored, coeffs))
```

Writing a KAT request file and reading a field back:

```python
import io
from dilithcore.kat import read_hex, write_requests

buffer = io.StringIO()
write_requests(buffer, 3)
buffer.seek(0)
seed = read_hex(buffer, 48, "seed = ")
```

## What this package does not do

It provides the pieces listed above and nothing more. There is no key
generation, signing or verification, no sampling of polynomials or
expansion of the public matrix, no packing of keys or of the `z` part of a
signature, and no command-line program. `dilithcore.kat` writes request
files only; producing the matching response files needs a signing
implementation, which this package does not include.

## Tests

```
pip install .[test]
pytest
```