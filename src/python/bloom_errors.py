"""
Bloom filter exception types.

Copyright (c) 2025 John Byrd
https://github.com/johnwbyrd/bloomer

SPDX-License-Identifier: BSD-3-Clause
"""


class BloomFilterError(Exception):
    """Base class for all Bloom filter errors."""


class InvalidArgumentError(BloomFilterError, ValueError):
    """A parameter, bit index or persisted record is out of range."""


class NullInputError(BloomFilterError, TypeError):
    """A missing or non-bytes element was passed where bytes are required."""


def require_bytes(data, what: str = "data") -> bytes:
    """Return ``data`` as bytes, rejecting None and non-bytes-like values."""
    if data is None:
        raise NullInputError(f"{what} must not be None")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise NullInputError(
        f"{what} must be bytes-like, got {type(data).__name__}")
