"""
Binary persistence format for Bloom filters.

Record layout (little-endian)::

    uint32  m             number of bits
    uint32  k             number of hash functions
    uint32  number_added  add() calls recorded
    bytes   bits          ceil(m / 8) bytes, bit i at byte i // 8, position i % 8

Copyright (c) 2025 John Byrd
https://github.com/johnwbyrd/bloomer

SPDX-License-Identifier: BSD-3-Clause
"""
import logging
import struct
from pathlib import Path
from typing import Optional

from bloom_errors import InvalidArgumentError, require_bytes
from bloom_filter import BloomFilter

logger = logging.getLogger(__name__)

HEADER_FMT = "<III"
HEADER_SIZE = struct.calcsize(HEADER_FMT)
UINT32_MAX = 0xFFFFFFFF


def dumps(bloom: BloomFilter) -> bytes:
    """Serialize a filter to its binary record."""
    m, k, added = bloom.size(), bloom.get_k(), bloom.count()
    for name, value in (("m", m), ("k", k), ("number_added", added)):
        if value > UINT32_MAX:
            raise InvalidArgumentError(f"{name}={value} does not fit in 32 bits")
    return struct.pack(HEADER_FMT, m, k, added) + bloom.to_bytes()


def loads(data: bytes, capacity: Optional[int] = None) -> BloomFilter:
    """Rebuild a filter from a binary record.

    The record does not carry the expected element count; pass ``capacity``
    to keep the original estimate, otherwise ``max(1, number_added)`` is used.
    """
    data = require_bytes(data)
    if len(data) < HEADER_SIZE:
        raise InvalidArgumentError(
            f"record too short: {len(data)} bytes, header needs {HEADER_SIZE}")
    m, k, added = struct.unpack_from(HEADER_FMT, data, 0)
    if m < 1:
        raise InvalidArgumentError("record has zero-length bit array")
    expected = HEADER_SIZE + (m + 7) // 8
    if len(data) != expected:
        raise InvalidArgumentError(
            f"record length {len(data)} does not match m={m} "
            f"(expected {expected} bytes)")
    if capacity is None:
        capacity = max(1, added)
    return BloomFilter.restore(m, capacity, added, data[HEADER_SIZE:],
                               num_hash_functions=k)


def write_bloom_file(bloom: BloomFilter, output_path: Path):
    """Write Bloom filter record to binary file."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'wb') as f:
        f.write(dumps(bloom))
    logger.debug("Bloom filter written to %s", output_path)


def read_bloom_file(input_path: Path,
                    capacity: Optional[int] = None) -> BloomFilter:
    """Read a Bloom filter record from binary file."""
    with open(input_path, 'rb') as f:
        data = f.read()
    logger.debug("Read %d byte Bloom filter record from %s",
                 len(data), input_path)
    return loads(data, capacity)
