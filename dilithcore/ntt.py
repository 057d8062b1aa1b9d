"""Forward and inverse number-theoretic transform over Z_Q[X]/(X^N + 1)."""

from __future__ import annotations

from collections.abc import Sequence

from .params import N, Q

_QINV = 58728449  # Q^-1 mod 2^32
_INV_SCALE = 41978  # mont^2 / 256
_ROOT_OF_UNITY = 1753
_MONT = (1 << 32) % Q


def _bit_reverse8(k: int) -> int:
    return int(f"{k:08b}"[::-1], 2)


def _centered(value: int) -> int:
    value %= Q
    return value - Q if value > Q // 2 else value


def _build_zetas() -> tuple[int, ...]:
    """Powers of the root of unity in bit-reversed order, in Montgomery form."""
    table = [0]
    table.extend(
        _centered(_MONT * pow(_ROOT_OF_UNITY, _bit_reverse8(k), Q))
        for k in range(1, N)
    )
    return tuple(table)


ZETAS: tuple[int, ...] = _build_zetas()


def _montgomery_reduce(a: int) -> int:
    """Return a * 2^-32 mod Q as a value in (-Q, Q)."""
    t = ((a & 0xFFFFFFFF) * _QINV) & 0xFFFFFFFF
    if t >= 1 << 31:
        t -= 1 << 32
    return (a - t * Q) >> 32


def _checked(coeffs: Sequence[int]) -> list[int]:
    if len(coeffs) != N:
        raise ValueError(f"a polynomial needs {N} coefficients, got {len(coeffs)}")
    return [int(c) for c in coeffs]


def ntt(coeffs: Sequence[int]) -> list[int]:
    """Forward NTT without final reduction; output is in bit-reversed order."""
    a = _checked(coeffs)
    k = 0
    length = 128
    while length > 0:
        for start in range(0, N, 2 * length):
            k += 1
            zeta = ZETAS[k]
            for j in range(start, start + length):
                t = _montgomery_reduce(zeta * a[j + length])
                a[j + length] = a[j] - t
                a[j] = a[j] + t
        length >>= 1
    return a


def invntt_tomont(coeffs: Sequence[int]) -> list[int]:
    """Inverse NTT followed by multiplication with the Montgomery factor 2^32.

    Input coefficients must be smaller than Q in absolute value; so are the
    output coefficients.
    """
    a = _checked(coeffs)
    k = N
    length = 1
    while length < N:
        for start in range(0, N, 2 * length):
            k -= 1
            zeta = -ZETAS[k]
            for j in range(start, start + length):
                t = a[j]
                a[j] = t + a[j + length]
                a[j + length] = _montgomery_reduce(zeta * (t - a[j + length]))
        length <<= 1
    return [_montgomery_reduce(_INV_SCALE * c) for c in a]