"""Stable integer hashes for asset and object names."""

from __future__ import annotations

_SEED = 5381
_MULTIPLIER = 33
_MASK = 0xFFFFFFFF


def name_hash(text: str | bytes) -> int:
    """Return the signed 32-bit multiplicative hash of ``text``.

    Strings are hashed over their UTF-8 bytes.
    """
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    value = _SEED
    for byte in data:
        value = (_MULTIPLIER * value + byte) & _MASK
    if value >= 1 << 31:
        value -= 1 << 32
    return value