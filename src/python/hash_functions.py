"""
Hash functions for the Bloom filter.

A single FNV-1 hash of the element seeds a 48-bit linear congruential
generator; each LCG step yields one bit index.

Copyright (c) 2025 John Byrd
https://github.com/johnwbyrd/bloomer

SPDX-License-Identifier: BSD-3-Clause
"""
from typing import List

from bloom_errors import InvalidArgumentError, NullInputError, require_bytes

FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619

LCG_MULTIPLIER = 0x5DEECE66D
LCG_ADDEND = 0xB
LCG_MASK = (1 << 48) - 1
LCG_SHIFT = 48 - 30

# Seed used when the signed base hash is -2**31, which has no absolute value.
FALLBACK_SEED = 42
INT32_MIN = -(1 << 31)

# Bound that leaves the 30-bit LCG output unreduced.
HASH_RANGE = 1 << 30


def fnv1_32(data: bytes) -> int:
    """32-bit FNV-1 hash (multiply, then XOR)."""
    data = require_bytes(data)
    hash_val = FNV_OFFSET_BASIS
    for byte in data:
        hash_val = (hash_val * FNV_PRIME) & 0xFFFFFFFF
        hash_val ^= byte
    return hash_val


def to_signed32(value: int) -> int:
    """Reinterpret an unsigned 32-bit value as two's complement."""
    return value - (1 << 32) if value & 0x80000000 else value


def base_seed(data: bytes) -> int:
    """Non-negative LCG seed derived from the FNV-1 hash of ``data``."""
    signed = to_signed32(fnv1_32(data))
    if signed == INT32_MIN:
        return FALLBACK_SEED
    return abs(signed)


def expand(data: bytes, k: int, m: int = HASH_RANGE) -> List[int]:
    """Derive ``k`` bit indices in ``[0, m)`` for ``data``."""
    if k < 1:
        raise InvalidArgumentError(f"k must be at least 1, got {k}")
    if m < 1:
        raise InvalidArgumentError(f"m must be positive, got {m}")
    seed = base_seed(data)
    positions = []
    for _ in range(k):
        seed = (seed * LCG_MULTIPLIER + LCG_ADDEND) & LCG_MASK
        positions.append((seed >> LCG_SHIFT) % m)
    return positions


def create_hash(data: bytes) -> int:
    """Single 30-bit digest of ``data`` (the first expanded value)."""
    return expand(data, 1)[0]


def create_hash_str(text: str, encoding: str = "utf-8") -> int:
    """Encode ``text`` with ``encoding`` and hash the result."""
    if not isinstance(text, str):
        raise NullInputError(
            f"text must be a str, got {type(text).__name__}")
    return create_hash(text.encode(encoding))
