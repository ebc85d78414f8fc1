"""
Bloom filter configuration and parameter derivation.

Copyright (c) 2025 John Byrd
https://github.com/johnwbyrd/bloomer

SPDX-License-Identifier: BSD-3-Clause
"""
import math
from dataclasses import dataclass
from typing import Optional

from bloom_errors import InvalidArgumentError


@dataclass(frozen=True)
class BloomConfig:
    """Bloom filter parameters: bits per element, capacity and hash rounds.

    ``size_bits`` is ceil(c * n) unless given; the fixed-size form passes m
    through so that c = m / n cannot round it up.
    """

    bits_per_element: float
    capacity: int
    num_hash_functions: int
    size_bits: Optional[int] = None

    def __post_init__(self):
        if not self.bits_per_element > 0:
            raise InvalidArgumentError(
                f"bits_per_element must be positive, got {self.bits_per_element}")
        if self.capacity <= 0:
            raise InvalidArgumentError(
                f"capacity must be positive, got {self.capacity}")
        if self.num_hash_functions < 1:
            raise InvalidArgumentError(
                f"num_hash_functions must be at least 1, got {self.num_hash_functions}")
        if self.size_bits is None:
            object.__setattr__(self, "size_bits",
                               math.ceil(self.bits_per_element * self.capacity))
        elif self.size_bits < 1:
            raise InvalidArgumentError(
                f"bit array size must be positive, got {self.size_bits}")

    @classmethod
    def for_bit_array_size(cls, size_bits: int, capacity: int) -> "BloomConfig":
        """Fixed memory budget: k = round((m/n) * ln(2))."""
        if size_bits < 1:
            raise InvalidArgumentError(
                f"bit array size must be positive, got {size_bits}")
        if capacity <= 0:
            raise InvalidArgumentError(
                f"capacity must be positive, got {capacity}")
        c = size_bits / capacity
        return cls(c, capacity, round(c * math.log(2)), size_bits)

    @classmethod
    def for_false_positive_probability(cls, probability: float,
                                       capacity: int) -> "BloomConfig":
        """Target accuracy: k = ceil(-log2(p)), c = k / ln(2)."""
        if not 0 < probability < 1:
            raise InvalidArgumentError(
                f"false positive probability must be in (0, 1), got {probability}")
        k = math.ceil(-math.log2(probability))
        return cls(k / math.log(2), capacity, k)

    @property
    def size_bytes(self) -> int:
        """Bloom filter size in bytes when packed."""
        return (self.size_bits + 7) // 8

    def optimal_k(self, expected_elements: int = None) -> float:
        """Calculate optimal number of hash functions for given element count."""
        n = expected_elements or self.capacity
        return (self.size_bits / n) * math.log(2)

    def print_summary(self):
        """Print configuration summary."""
        print("=" * 80)
        print("BLOOM FILTER CONFIGURATION")
        print("=" * 80)
        print(f"Expected elements (n): {self.capacity:,}")
        print(f"Bits per element (c): {self.bits_per_element:.4f}")
        print(f"Bits (m): ceil({self.bits_per_element:.4f} × {self.capacity:,}) = "
              f"{self.size_bits:,}")
        print(f"Bytes: {self.size_bytes:,} ({self.size_bytes / 1024:.2f} KB)")
        print(f"Hash functions (k): {self.num_hash_functions}")
        print(f"Optimal k: (m/n) × ln(2) = {self.optimal_k():.2f}")
        print("=" * 80)
        print()
