"""Encoding of the hint vector h inside a Dilithium signature."""

from __future__ import annotations

from collections.abc import Sequence

from .params import N, ParameterSet


class MalformedSignatureError(ValueError):
    """Raised when an encoded hint does not follow the canonical format."""


def pack_hint(hint: Sequence[Sequence[int]], params: ParameterSet) -> bytes:
    """Encode K hint polynomials as OMEGA indices followed by K running counts."""
    if len(hint) != params.k:
        raise ValueError(f"hint needs {params.k} polynomials, got {len(hint)}")
    indices = bytearray()
    counts = bytearray()
    for poly in hint:
        if len(poly) != N:
            raise ValueError(f"a polynomial needs {N} coefficients, got {len(poly)}")
        indices.extend(j for j, coeff in enumerate(poly) if coeff != 0)
        if len(indices) > params.omega:
            raise ValueError(f"hint has more than {params.omega} nonzero coefficients")
        counts.append(len(indices))
    indices.extend(bytes(params.omega - len(indices)))
    return bytes(indices + counts)


def unpack_hint(data: bytes, params: ParameterSet) -> list[list[int]]:
    """Decode a packed hint, rejecting any non-canonical encoding."""
    data = bytes(data)
    if len(data) != params.polyvech_packedbytes:
        raise MalformedSignatureError(
            f"packed hint must be {params.polyvech_packedbytes} bytes, got {len(data)}"
        )
    omega = params.omega
    hint = []
    k = 0
    for i in range(params.k):
        poly = [0] * N
        end = data[omega + i]
        if end < k or end > omega:
            raise MalformedSignatureError(f"invalid hint count in polynomial {i}")
        for j in range(k, end):
            # Indices are strictly increasing for strong unforgeability.
            if j > k and data[j] <= data[j - 1]:
                raise MalformedSignatureError("hint indices are not strictly increasing")
            poly[data[j]] = 1
        k = end
        hint.append(poly)
    if any(data[k:omega]):
        raise MalformedSignatureError("unused hint index bytes are not zero")
    return hint