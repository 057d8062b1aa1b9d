"""Reading and writing of known-answer-test request files."""

from __future__ import annotations

import string
from typing import TextIO

from .rng import CtrDrbg

MAX_MARKER_LEN = 50
REQUEST_SEED_BYTES = 48

_HEX_DIGITS = frozenset(string.hexdigits)


def find_marker(stream: TextIO, marker: str) -> bool:
    """Advance ``stream`` past the next occurrence of ``marker``.

    Only the first ``MAX_MARKER_LEN - 1`` characters of the marker are
    matched. Returns False if the end of the stream is reached first.
    """
    target = marker[: MAX_MARKER_LEN - 1]
    window = stream.read(len(target))
    if len(window) < len(target):
        return False
    while window != target:
        ch = stream.read(1)
        if not ch:
            return False
        window = window[1:] + ch
    return True


def read_hex(stream: TextIO, length: int, marker: str) -> bytes:
    """Read the hexadecimal value that follows ``marker`` into ``length`` bytes.

    Digits are shifted in from the right, so a short value is left-padded
    with zeros and a long one keeps only its last ``length`` bytes.
    Raises ValueError if the marker is not found.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if length == 0:
        return b""
    if not find_marker(stream, marker):
        raise ValueError(f"marker {marker!r} not found")
    value = 0
    modulus = 1 << (8 * length)
    started = False
    while ch := stream.read(1):
        if ch not in _HEX_DIGITS:
            if started or ch == "\n":
                break
            continue
        started = True
        value = ((value << 4) | int(ch, 16)) % modulus
    return value.to_bytes(length, "big")


def format_bstr(label: str, data: bytes) -> str:
    """Format ``data`` as upper-case hex after ``label``, ending in a newline."""
    return f"{label}{bytes(data).hex().upper() or '00'}\n"


def write_requests(stream: TextIO, count: int = 100) -> None:
    """Write ``count`` request records seeded from the fixed entropy 0..47."""
    if count < 0:
        raise ValueError("count must not be negative")
    drbg = CtrDrbg(bytes(range(REQUEST_SEED_BYTES)))
    for i in range(count):
        stream.write(f"count = {i}\n")
        stream.write(format_bstr("seed = ", drbg.random_bytes(REQUEST_SEED_BYTES)))
        mlen = 33 * (i + 1)
        stream.write(f"mlen = {mlen}\n")
        stream.write(format_bstr("msg = ", drbg.random_bytes(mlen)))
        stream.write("pk =\n")
        stream.write("sk =\n")
        stream.write("smlen =\n")
        stream.write("sm =\n\n")