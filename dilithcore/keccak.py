"""The Keccak-f[1600] permutation on a state of 25 64-bit lanes."""

from __future__ import annotations

from collections.abc import Sequence

NROUNDS = 24
_MASK = (1 << 64) - 1


def _rol(value: int, offset: int) -> int:
    offset %= 64
    if offset == 0:
        return value
    return ((value << offset) | (value >> (64 - offset))) & _MASK


def _round_constants() -> tuple[int, ...]:
    constants = []
    register = 1
    for _ in range(NROUNDS):
        constant = 0
        for j in range(7):
            if register & 1:
                constant |= 1 << ((1 << j) - 1)
            register <<= 1
            if register & 0x100:
                register ^= 0x171
        constants.append(constant)
    return tuple(constants)


def _rotation_offsets() -> tuple[int, ...]:
    offsets = [0] * 25
    x, y = 1, 0
    for t in range(24):
        offsets[x + 5 * y] = ((t + 1) * (t + 2) // 2) % 64
        x, y = y, (2 * x + 3 * y) % 5
    return tuple(offsets)


ROUND_CONSTANTS = _round_constants()
_ROTATIONS = _rotation_offsets()


def keccak_f1600(state: Sequence[int]) -> list[int]:
    """Apply the 24-round permutation and return the new 25-lane state."""
    if len(state) != 25:
        raise ValueError(f"Keccak state needs 25 lanes, got {len(state)}")
    if any(not 0 <= lane <= _MASK for lane in state):
        raise ValueError("Keccak lanes must be unsigned 64-bit integers")

    a = list(state)
    for rc in ROUND_CONSTANTS:
        columns = [a[x] ^ a[x + 5] ^ a[x + 10] ^ a[x + 15] ^ a[x + 20] for x in range(5)]
        deltas = [columns[(x - 1) % 5] ^ _rol(columns[(x + 1) % 5], 1) for x in range(5)]
        a = [lane ^ deltas[i % 5] for i, lane in enumerate(a)]

        b = [0] * 25
        for i, lane in enumerate(a):
            x, y = i % 5, i // 5
            b[y + 5 * ((2 * x + 3 * y) % 5)] = _rol(lane, _ROTATIONS[i])

        a = [
            b[i] ^ (~b[(i % 5 + 1) % 5 + 5 * (i // 5)] & b[(i % 5 + 2) % 5 + 5 * (i // 5)])
            for i in range(25)
        ]
        a[0] ^= rc
    return a