"""
Bloom filter implementation.

Copyright (c) 2025 John Byrd
https://github.com/johnwbyrd/bloomer

SPDX-License-Identifier: BSD-3-Clause
"""
import logging
import math
from typing import Iterable, List, Optional

from bit_storage import BitStorage
from bloom_config import BloomConfig
from bloom_errors import InvalidArgumentError, require_bytes
from hash_functions import expand

logger = logging.getLogger(__name__)


class BloomFilter:
    """Bloom filter for efficient set membership testing of byte strings.

    ``number_added`` counts calls to :meth:`add`, not distinct elements:
    adding the same bytes twice sets no new bits but increments it twice.
    """

    def __init__(self, bits_per_element: float, capacity: int,
                 num_hash_functions: int):
        self._init_from_config(
            BloomConfig(bits_per_element, capacity, num_hash_functions))

    def _init_from_config(self, config: BloomConfig):
        self.config = config
        self.bits = BitStorage(config.size_bits)
        self.number_added = 0
        logger.debug("BloomFilter created: m=%d bits, k=%d, n=%d, c=%.4f",
                     config.size_bits, config.num_hash_functions,
                     config.capacity, config.bits_per_element)

    @classmethod
    def from_config(cls, config: BloomConfig) -> "BloomFilter":
        """Create an empty filter for an existing configuration."""
        bloom = cls.__new__(cls)
        bloom._init_from_config(config)
        return bloom

    @classmethod
    def from_bit_array_size(cls, size_bits: int, capacity: int) -> "BloomFilter":
        """Create a filter of ``size_bits`` bits with k estimated from m/n."""
        return cls.from_config(BloomConfig.for_bit_array_size(size_bits, capacity))

    @classmethod
    def from_false_positive_probability(cls, probability: float,
                                        capacity: int) -> "BloomFilter":
        """Create a filter sized for ``capacity`` elements at ``probability``."""
        return cls.from_config(
            BloomConfig.for_false_positive_probability(probability, capacity))

    @classmethod
    def restore(cls, size_bits: int, capacity: int, number_added: int,
                bit_data: bytes,
                num_hash_functions: Optional[int] = None) -> "BloomFilter":
        """Rebuild a filter from persisted bits.

        Without ``num_hash_functions`` k is re-derived as in
        :meth:`from_bit_array_size`; pass the stored k when the original
        filter was built some other way.
        """
        if num_hash_functions is None:
            config = BloomConfig.for_bit_array_size(size_bits, capacity)
        else:
            if capacity <= 0:
                raise InvalidArgumentError(
                    f"capacity must be positive, got {capacity}")
            config = BloomConfig(size_bits / capacity, capacity,
                                 num_hash_functions, size_bits)
        bloom = cls.from_config(config)
        bloom.bits.load_bytes(require_bytes(bit_data, "bit_data"))
        bloom.number_added = number_added
        logger.debug("BloomFilter restored: %d elements, %d bits set",
                     number_added, bloom.bits_set)
        return bloom

    def _get_bit_positions(self, data: bytes) -> List[int]:
        """Calculate the k bit positions for an element."""
        data = require_bytes(data)
        return expand(data, self.config.num_hash_functions, len(self.bits))

    def add(self, data: bytes):
        """Add a byte string to the Bloom filter."""
        for bit_pos in self._get_bit_positions(data):
            self.bits.set(bit_pos)
        self.number_added += 1

    def update(self, elements: Iterable[bytes]):
        """Add every element of ``elements``."""
        for data in elements:
            self.add(data)

    def contains(self, data: bytes) -> bool:
        """Check if a byte string might be in the filter."""
        for bit_pos in self._get_bit_positions(data):
            if not self.bits.get(bit_pos):
                return False
        return True

    __contains__ = contains

    def clear(self):
        """Clear all bits and reset the element counter."""
        self.bits.clear_all()
        self.number_added = 0

    def get_bit(self, index: int) -> bool:
        """Read a single bit of the filter."""
        return self.bits.get(index)

    def set_bit(self, index: int, value: bool):
        """Set or clear a single bit of the filter."""
        self.bits.set(index, value)

    def to_bytes(self) -> bytes:
        """Packed LSB-first bit data, ``ceil(m / 8)`` bytes."""
        return self.bits.to_bytes()

    def size(self) -> int:
        """Number of bits in the filter (m)."""
        return len(self.bits)

    def count(self) -> int:
        """Number of add() calls since construction or the last clear()."""
        return self.number_added

    def __len__(self) -> int:
        return self.number_added

    def get_expected_number_of_elements(self) -> int:
        return self.config.capacity

    def get_expected_bits_per_element(self) -> float:
        return self.config.bits_per_element

    def get_bits_per_element(self) -> float:
        """Actual bits per added element; infinite while the filter is empty."""
        if self.number_added == 0:
            return math.inf
        return len(self.bits) / self.number_added

    def get_k(self) -> int:
        return self.config.num_hash_functions

    def get_false_positive_probability(self, count: Optional[float] = None) -> float:
        """False positive probability (1 - e^(-k*count/m))^k.

        ``count`` defaults to the number of elements added so far.
        """
        if count is None:
            count = self.number_added
        k = self.config.num_hash_functions
        return (1 - math.exp(-k * count / len(self.bits))) ** k

    def expected_false_positive_probability(self) -> float:
        """False positive probability once ``capacity`` elements are added."""
        return self.get_false_positive_probability(self.config.capacity)

    @property
    def bits_set(self) -> int:
        """Count number of bits set in the filter."""
        return self.bits.count_set()

    @property
    def fill_rate(self) -> float:
        """Calculate actual fill rate (proportion of bits set)."""
        return self.bits_set / len(self.bits)

    def __eq__(self, other):
        if not isinstance(other, BloomFilter):
            return NotImplemented
        return (self.size() == other.size()
                and self.get_k() == other.get_k()
                and self.get_expected_number_of_elements()
                == other.get_expected_number_of_elements()
                and self.bits == other.bits)

    def __repr__(self):
        return (f"BloomFilter(m={self.size()}, k={self.get_k()}, "
                f"n={self.config.capacity}, added={self.number_added})")
