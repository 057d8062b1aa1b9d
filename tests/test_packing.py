import random

import pytest

from dilithcore.packing import MalformedSignatureError, pack_hint, unpack_hint
from dilithcore.params import N, parameter_set

P2 = parameter_set(2)


def _empty_hint(params):
    return [[0] * N for _ in range(params.k)]


def _random_hint(params, seed):
    rng = random.Random(seed)
    hint = _empty_hint(params)
    for _ in range(params.omega):
        hint[rng.randrange(params.k)][rng.randrange(N)] = 1
    return hint


def test_pack_known_layout():
    hint = _empty_hint(P2)
    hint[0][3] = 1
    hint[0][10] = 1
    hint[2][0] = 1
    packed = pack_hint(hint, P2)
    assert len(packed) == P2.omega + P2.k
    assert packed[:3] == bytes([3, 10, 0])
    assert packed[3 : P2.omega] == bytes(P2.omega - 3)
    assert packed[P2.omega :] == bytes([2, 2, 3, 3])


def test_empty_hint_packs_to_zeros():
    assert pack_hint(_empty_hint(P2), P2) == bytes(P2.omega + P2.k)
    assert unpack_hint(bytes(P2.omega + P2.k), P2) == _empty_hint(P2)


@pytest.mark.parametrize("mode", [2, 3, 5])
@pytest.mark.parametrize("seed", [0, 1, 2])
def test_roundtrip(mode, seed):
    params = parameter_set(mode)
    hint = _random_hint(params, seed)
    assert unpack_hint(pack_hint(hint, params), params) == hint


def test_nonzero_values_become_ones():
    hint = _empty_hint(P2)
    hint[1][5] = 7
    decoded = unpack_hint(pack_hint(hint, P2), P2)
    assert decoded[1][5] == 1
    assert sum(map(sum, decoded)) == 1


def test_too_many_hints_rejected():
    hint = _empty_hint(P2)
    hint[0] = [1] * N
    with pytest.raises(ValueError):
        pack_hint(hint, P2)


def test_wrong_polynomial_count_rejected():
    with pytest.raises(ValueError):
        pack_hint(_empty_hint(P2)[:-1], P2)


def test_wrong_length_rejected():
    with pytest.raises(MalformedSignatureError):
        unpack_hint(bytes(P2.omega + P2.k - 1), P2)


def test_unordered_indices_rejected():
    data = bytearray(P2.omega + P2.k)
    data[0], data[1] = 10, 3
    data[P2.omega :] = bytes([2, 2, 2, 2])
    with pytest.raises(MalformedSignatureError):
        unpack_hint(bytes(data), P2)


def test_duplicate_indices_rejected():
    data = bytearray(P2.omega + P2.k)
    data[0], data[1] = 4, 4
    data[P2.omega :] = bytes([2, 2, 2, 2])
    with pytest.raises(MalformedSignatureError):
        unpack_hint(bytes(data), P2)


def test_decreasing_count_rejected():
    data = bytearray(P2.omega + P2.k)
    data[0], data[1] = 1, 2
    data[P2.omega :] = bytes([2, 1, 2, 2])
    with pytest.raises(MalformedSignatureError):
        unpack_hint(bytes(data), P2)


def test_count_above_omega_rejected():
    data = bytearray(P2.omega + P2.k)
    data[P2.omega] = P2.omega + 1
    with pytest.raises(MalformedSignatureError):
        unpack_hint(bytes(data), P2)


def test_nonzero_padding_rejected():
    data = bytearray(P2.omega + P2.k)
    data[P2.omega - 1] = 9
    with pytest.raises(MalformedSignatureError):
        unpack_hint(bytes(data), P2)


def test_malformed_is_value_error():
    with pytest.raises(ValueError):
        unpack_hint(b"", P2)