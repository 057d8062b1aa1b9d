"""AES-256 CTR-DRBG and AES-based seed expander used for known-answer tests."""

from __future__ import annotations

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

RNG_BAD_MAXLEN = -1
RNG_BAD_OUTBUF = -2
RNG_BAD_REQ_LEN = -3

_SEED_MATERIAL_BYTES = 48
_BLOCK = 16


class RngError(ValueError):
    """Raised when a generator is used outside its limits."""

    def __init__(self, message: str, code: int) -> None:
        super().__init__(message)
        self.code = code


def aes256_ecb(key: bytes, block: bytes) -> bytes:
    """Encrypt one 16-byte block with AES-256 in ECB mode."""
    key, block = bytes(key), bytes(block)
    if len(key) != 32:
        raise ValueError(f"AES-256 needs a 32-byte key, got {len(key)}")
    if len(block) != _BLOCK:
        raise ValueError(f"AES works on 16-byte blocks, got {len(block)}")
    encryptor = Cipher(algorithms.AES(key), modes.ECB()).encryptor()
    return encryptor.update(block) + encryptor.finalize()


def _increment(counter: bytes) -> bytes:
    """Increment a big-endian counter, wrapping around at its width."""
    width = len(counter)
    value = (int.from_bytes(counter, "big") + 1) % (1 << (8 * width))
    return value.to_bytes(width, "big")


class CtrDrbg:
    """Deterministic random bit generator built on AES-256 in counter mode."""

    def __init__(
        self,
        entropy_input: bytes,
        personalization_string: bytes | None = None,
        security_strength: int = 256,
    ) -> None:
        entropy_input = bytes(entropy_input)
        if len(entropy_input) != _SEED_MATERIAL_BYTES:
            raise ValueError(
                f"entropy input must be {_SEED_MATERIAL_BYTES} bytes, got {len(entropy_input)}"
            )
        seed_material = entropy_input
        if personalization_string is not None:
            personalization = bytes(personalization_string)
            if len(personalization) != _SEED_MATERIAL_BYTES:
                raise ValueError(
                    f"personalization string must be {_SEED_MATERIAL_BYTES} bytes, "
                    f"got {len(personalization)}"
                )
            seed_material = bytes(a ^ b for a, b in zip(seed_material, personalization))
        self.security_strength = security_strength
        self.key = bytes(32)
        self.v = bytes(_BLOCK)
        self.update(seed_material)
        self.reseed_counter = 1

    def update(self, provided_data: bytes | None = None) -> None:
        """Derive a new key and counter, optionally mixing in 48 bytes of data."""
        temp = bytearray()
        v = self.v
        for _ in range(3):
            v = _increment(v)
            temp += aes256_ecb(self.key, v)
        if provided_data is not None:
            provided = bytes(provided_data)
            if len(provided) != _SEED_MATERIAL_BYTES:
                raise ValueError(
                    f"provided data must be {_SEED_MATERIAL_BYTES} bytes, got {len(provided)}"
                )
            temp = bytearray(a ^ b for a, b in zip(temp, provided))
        self.key = bytes(temp[:32])
        self.v = bytes(temp[32:])

    def random_bytes(self, length: int) -> bytes:
        """Return ``length`` pseudo-random bytes and advance the generator."""
        if length < 0:
            raise ValueError("cannot generate a negative number of bytes")
        out = bytearray()
        while len(out) < length:
            self.v = _increment(self.v)
            out += aes256_ecb(self.key, self.v)
        self.update(None)
        self.reseed_counter += 1
        return bytes(out[:length])


class SeedExpander:
    """Expands a 32-byte seed and an 8-byte diversifier into a bounded stream."""

    def __init__(self, seed: bytes, diversifier: bytes, maxlen: int) -> None:
        if maxlen >= 1 << 32:
            raise RngError("maximum length must be below 2**32", RNG_BAD_MAXLEN)
        if maxlen < 0:
            raise RngError("maximum length must not be negative", RNG_BAD_MAXLEN)
        seed, diversifier = bytes(seed), bytes(diversifier)
        if len(seed) < 32:
            raise ValueError(f"seed must hold 32 bytes, got {len(seed)}")
        if len(diversifier) < 8:
            raise ValueError(f"diversifier must hold 8 bytes, got {len(diversifier)}")
        self.length_remaining = maxlen
        self._key = seed[:32]
        self._ctr = diversifier[:8] + maxlen.to_bytes(4, "big") + bytes(4)
        self._buffer = bytes(_BLOCK)
        self._buffer_pos = _BLOCK

    def read(self, length: int) -> bytes:
        """Return the next ``length`` bytes of the expanded stream."""
        if length < 0:
            raise RngError("cannot read a negative number of bytes", RNG_BAD_REQ_LEN)
        if length >= self.length_remaining:
            raise RngError("request exceeds the remaining length", RNG_BAD_REQ_LEN)
        self.length_remaining -= length

        out = bytearray()
        while True:
            available = _BLOCK - self._buffer_pos
            need = length - len(out)
            if need <= available:
                out += self._buffer[self._buffer_pos : self._buffer_pos + need]
                self._buffer_pos += need
                return bytes(out)
            out += self._buffer[self._buffer_pos :]
            self._buffer = aes256_ecb(self._key, self._ctr)
            self._buffer_pos = 0
            self._ctr = self._ctr[:12] + _increment(self._ctr[12:])