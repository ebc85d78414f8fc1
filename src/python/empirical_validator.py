"""
Empirical validation of Bloom filter false positive rate.

Copyright (c) 2025 John Byrd
https://github.com/johnwbyrd/bloomer

SPDX-License-Identifier: BSD-3-Clause
"""
import random
from typing import Iterable, Optional

from bloom_errors import InvalidArgumentError
from bloom_filter import BloomFilter

ELEMENT_SIZE = 100


def check_element_size(element_size: int):
    """Reject element sizes that leave no random values to draw."""
    if element_size < 1:
        raise InvalidArgumentError(
            f"element size must be at least 1 byte, got {element_size}")


def check_element_space(element_size: int, needed: int):
    """Reject requests for more distinct elements than the size allows."""
    available = 256 ** element_size
    if needed > available:
        raise InvalidArgumentError(
            f"{needed:,} distinct {element_size}-byte elements requested, "
            f"only {available:,} exist")


class EmpiricalValidator:
    """Validate Bloom filter performance with random non-members."""

    def __init__(self, bloom_filter: BloomFilter, members: Iterable[bytes],
                 element_size: int = ELEMENT_SIZE,
                 rng: Optional[random.Random] = None):
        check_element_size(element_size)
        self.filter = bloom_filter
        self.member_set = set(bytes(m) for m in members)
        self.element_size = element_size
        self.rng = rng or random.Random()

    @classmethod
    def populated(cls, bloom_filter: BloomFilter, num_elements: int,
                  element_size: int = ELEMENT_SIZE,
                  rng: Optional[random.Random] = None) -> "EmpiricalValidator":
        """Add ``num_elements`` distinct random elements and wrap the filter."""
        check_element_size(element_size)
        check_element_space(element_size, num_elements)
        rng = rng or random.Random()
        members = set()
        while len(members) < num_elements:
            members.add(rng.randbytes(element_size))
        bloom_filter.update(members)
        return cls(bloom_filter, members, element_size, rng)

    def generate_non_member(self) -> bytes:
        """Random element guaranteed not to be a member."""
        while True:
            candidate = self.rng.randbytes(self.element_size)
            if candidate not in self.member_set:
                return candidate

    def run_validation(self, num_samples: int = 100000) -> dict:
        """Run empirical validation and return results."""
        check_element_space(self.element_size,
                            len(self.member_set) + num_samples)
        false_positives = 0
        seen = set()

        while len(seen) < num_samples:
            candidate = self.generate_non_member()
            if candidate in seen:
                continue
            seen.add(candidate)

            # Every hit on a non-member is a false positive
            if self.filter.contains(candidate):
                false_positives += 1

        empirical_rate = false_positives / num_samples if num_samples else 0.0

        return {
            'samples': num_samples,
            'false_positives': false_positives,
            'empirical_rate': empirical_rate
        }

    def print_validation(self, theoretical_fp_rate: float,
                         num_samples: int = 100000) -> dict:
        """Run and print empirical validation."""
        print("\n" + "=" * 80)
        print("EMPIRICAL VALIDATION")
        print("=" * 80)
        print(f"Testing false positive rate with random "
              f"{self.element_size}-byte non-members...")

        results = self.run_validation(num_samples)

        print(f"Random samples tested: {results['samples']:,}")
        print(f"False positives: {results['false_positives']:,}")
        print(f"Empirical FP rate: {results['empirical_rate'] * 100:.4f}%")
        print(f"Theoretical FP rate: {theoretical_fp_rate * 100:.4f}%")

        diff = abs(results['empirical_rate'] - theoretical_fp_rate)
        print(f"Difference: {diff * 100:.4f}%")

        if diff < 0.002:
            print("✓ Empirical rate matches theory!")
        else:
            print("⚠ Empirical rate differs from theory "
                  "(expected due to random sampling)")

        print("=" * 80)
        return results
