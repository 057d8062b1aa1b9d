"""SHAKE128, SHAKE256, SHA3-256 and SHA3-512 built on Keccak-f[1600]."""

from __future__ import annotations

from typing import ClassVar

from .keccak import keccak_f1600

SHAKE128_RATE = 168
SHAKE256_RATE = 136
SHA3_256_RATE = 136
SHA3_512_RATE = 72

_SHAKE_DOMAIN = 0x1F
_SHA3_DOMAIN = 0x06


def _xor_into(lanes: list[int], pos: int, data: bytes) -> None:
    """XOR ``data`` into the little-endian byte stream of the state at ``pos``."""
    for offset, byte in enumerate(data, start=pos):
        lanes[offset // 8] ^= byte << (8 * (offset % 8))


def _state_bytes(lanes: list[int], start: int, end: int) -> bytes:
    first, last = start // 8, (end + 7) // 8
    raw = b"".join(lane.to_bytes(8, "little") for lanes_slice in [lanes[first:last]] for lane in lanes_slice)
    return raw[start - 8 * first : end - 8 * first]


class Shake:
    """Incremental Keccak sponge; subclasses fix the rate in bytes."""

    rate: ClassVar[int] = 0
    domain: ClassVar[int] = _SHAKE_DOMAIN

    def __init__(self) -> None:
        if not self.rate:
            raise TypeError(f"{type(self).__name__} has no rate; use Shake128 or Shake256")
        self._lanes = [0] * 25
        self._pos = 0
        self._finalized = False

    def absorb(self, data: bytes) -> None:
        """Absorb more input; may be called any number of times before finalize."""
        if self._finalized:
            raise RuntimeError("cannot absorb after the sponge has been finalized")
        view = memoryview(bytes(data))
        pos, rate = self._pos, self.rate
        while pos + len(view) >= rate:
            take = rate - pos
            _xor_into(self._lanes, pos, view[:take])
            view = view[take:]
            self._lanes = keccak_f1600(self._lanes)
            pos = 0
        _xor_into(self._lanes, pos, view)
        self._pos = pos + len(view)

    def finalize(self) -> None:
        """Apply domain separation and padding, switching the sponge to squeezing."""
        if self._finalized:
            raise RuntimeError("the sponge has already been finalized")
        pos = self._pos
        self._lanes[pos // 8] ^= self.domain << (8 * (pos % 8))
        self._lanes[self.rate // 8 - 1] ^= 1 << 63
        self._pos = self.rate
        self._finalized = True

    def squeeze(self, length: int) -> bytes:
        """Squeeze ``length`` bytes; repeated calls continue the output stream."""
        if length < 0:
            raise ValueError("cannot squeeze a negative number of bytes")
        self._require_finalized()
        out = bytearray()
        remaining = length
        while remaining:
            if self._pos == self.rate:
                self._lanes = keccak_f1600(self._lanes)
                self._pos = 0
            take = min(self.rate - self._pos, remaining)
            out += _state_bytes(self._lanes, self._pos, self._pos + take)
            self._pos += take
            remaining -= take
        return bytes(out)

    def squeeze_blocks(self, nblocks: int) -> bytes:
        """Squeeze whole blocks of ``rate`` bytes; assumes no partial block is pending."""
        if nblocks < 0:
            raise ValueError("cannot squeeze a negative number of blocks")
        self._require_finalized()
        out = bytearray()
        for _ in range(nblocks):
            self._lanes = keccak_f1600(self._lanes)
            out += _state_bytes(self._lanes, 0, self.rate)
        return bytes(out)

    @classmethod
    def absorb_once(cls, data: bytes) -> Shake:
        """Return a fresh sponge that has absorbed ``data`` and been finalized."""
        sponge = cls()
        sponge.absorb(data)
        sponge.finalize()
        return sponge

    def _require_finalized(self) -> None:
        if not self._finalized:
            raise RuntimeError("finalize the sponge before squeezing")


class Shake128(Shake):
    """SHAKE128 extendable-output function."""

    rate = SHAKE128_RATE


class Shake256(Shake):
    """SHAKE256 extendable-output function."""

    rate = SHAKE256_RATE


class _Sha3_256(Shake):
    rate = SHA3_256_RATE
    domain = _SHA3_DOMAIN


class _Sha3_512(Shake):
    rate = SHA3_512_RATE
    domain = _SHA3_DOMAIN


def _xof(cls: type[Shake], data: bytes, length: int) -> bytes:
    if length < 0:
        raise ValueError("output length must not be negative")
    sponge = cls.absorb_once(data)
    nblocks, tail = divmod(length, cls.rate)
    return sponge.squeeze_blocks(nblocks) + sponge.squeeze(tail)


def shake128(data: bytes, length: int) -> bytes:
    """Return ``length`` bytes of SHAKE128 output for ``data``."""
    return _xof(Shake128, data, length)


def shake256(data: bytes, length: int) -> bytes:
    """Return ``length`` bytes of SHAKE256 output for ``data``."""
    return _xof(Shake256, data, length)


def sha3_256(data: bytes) -> bytes:
    """Return the 32-byte SHA3-256 digest of ``data``."""
    return _Sha3_256.absorb_once(data).squeeze(32)


def sha3_512(data: bytes) -> bytes:
    """Return the 64-byte SHA3-512 digest of ``data``."""
    return _Sha3_512.absorb_once(data).squeeze(64)