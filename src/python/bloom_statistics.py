"""
Bloom filter statistics calculation and display.

Copyright (c) 2025 John Byrd
https://github.com/johnwbyrd/bloomer

SPDX-License-Identifier: BSD-3-Clause
"""
import math

from bloom_filter import BloomFilter


class BloomStatistics:
    """Calculate and display Bloom filter statistics."""

    def __init__(self, bloom_filter: BloomFilter):
        self.filter = bloom_filter

    def theoretical_fill_rate(self) -> float:
        """Calculate theoretical fill rate: 1 - e^(-kn/m)."""
        k = self.filter.get_k()
        n = self.filter.count()
        m = self.filter.size()
        return 1 - math.exp(-k * n / m)

    def false_positive_rate(self) -> float:
        """Calculate false positive rate: (1 - e^(-kn/m))^k."""
        return self.filter.get_false_positive_probability()

    def observed_false_positive_rate(self) -> float:
        """False positive rate implied by the bits actually set: fill^k."""
        return self.filter.fill_rate ** self.filter.get_k()

    def optimal_k(self) -> float:
        """Calculate optimal k for minimum FP rate."""
        n = self.filter.count() or self.filter.get_expected_number_of_elements()
        return (self.filter.size() / n) * math.log(2)

    def optimal_fp_rate(self) -> float:
        """Calculate FP rate if using optimal k."""
        k_opt = max(1, round(self.optimal_k()))
        m = self.filter.size()
        n = self.filter.count()
        fill = 1 - math.exp(-k_opt * n / m)
        return fill ** k_opt

    def print_statistics(self):
        """Print comprehensive statistics."""
        n = self.filter.count()
        k = self.filter.get_k()
        m = self.filter.size()

        actual_fill = self.filter.fill_rate
        theoretical_fill = self.theoretical_fill_rate()
        fp_rate = self.false_positive_rate()

        print("\n=== BLOOM FILTER STATISTICS ===")
        print(f"Elements inserted (n): {n:,}")
        print(f"Expected elements: {self.filter.get_expected_number_of_elements():,}")
        print(f"Bits in filter (m): {m:,}")
        print(f"Hash functions (k): {k}")
        print(f"Bits per element (m/n): {self.filter.get_bits_per_element():.2f}")
        print(f"\nActual bits set: {self.filter.bits_set:,} / {m:,} "
              f"({actual_fill * 100:.2f}%)")
        print(f"Theoretical fill rate: {theoretical_fill * 100:.2f}%")
        print(f"Difference: {abs(actual_fill - theoretical_fill) * 100:.2f}%")
        if fp_rate > 0:
            print(f"\nFalse positive rate: {fp_rate * 100:.4f}% "
                  f"(1 in {1/fp_rate:.0f})")
        else:
            print("\nFalse positive rate: 0.0000%")
        print(f"Formula: (1 - e^(-{k}×{n}/{m}))^{k} = {fp_rate:.6f}")
        print(f"At capacity: "
              f"{self.filter.expected_false_positive_probability() * 100:.4f}%")

        optimal_k = self.optimal_k()
        print(f"\nOptimal k for minimum FP rate: {optimal_k:.2f}")
        if abs(optimal_k - k) > 1:
            k_opt_int = round(optimal_k)
            opt_fp = self.optimal_fp_rate()
            print(f"With k={k_opt_int}: FP rate would be {opt_fp * 100:.4f}%")
