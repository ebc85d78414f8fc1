"""Tests for empirical false positive validation."""
import random

import pytest

from bloom_errors import InvalidArgumentError
from bloom_filter import BloomFilter
from empirical_validator import EmpiricalValidator


def test_populated_adds_distinct_members():
    bloom = BloomFilter.from_false_positive_probability(0.01, 500)
    validator = EmpiricalValidator.populated(bloom, 500, rng=random.Random(1))
    assert bloom.count() == 500
    assert len(validator.member_set) == 500
    assert all(len(m) == 100 for m in validator.member_set)
    assert all(bloom.contains(m) for m in validator.member_set)


def test_non_members_are_disjoint():
    validator = EmpiricalValidator(BloomFilter(8.0, 10, 3), [b"a"],
                                   element_size=1, rng=random.Random(2))
    for _ in range(200):
        assert validator.generate_non_member() not in validator.member_set


def test_empty_filter_has_no_false_positives():
    validator = EmpiricalValidator(BloomFilter(8.0, 100, 3), [],
                                   rng=random.Random(3))
    results = validator.run_validation(1000)
    assert results == {'samples': 1000, 'false_positives': 0,
                       'empirical_rate': 0.0}


def test_saturated_filter_accepts_everything():
    bloom = BloomFilter(1.0, 8, 1)
    for i in range(8):
        bloom.set_bit(i, True)
    validator = EmpiricalValidator(bloom, [], rng=random.Random(4))
    assert validator.run_validation(50)['empirical_rate'] == 1.0


def test_print_validation(capsys):
    bloom = BloomFilter.from_false_positive_probability(0.01, 1000)
    validator = EmpiricalValidator.populated(bloom, 1000, rng=random.Random(5))
    results = validator.print_validation(
        bloom.get_false_positive_probability(), num_samples=5000)
    out = capsys.readouterr().out
    assert "EMPIRICAL VALIDATION" in out
    assert "Random samples tested: 5,000" in out
    assert results['samples'] == 5000
    assert results['empirical_rate'] < 0.05


def test_element_size_must_be_positive():
    with pytest.raises(InvalidArgumentError):
        EmpiricalValidator(BloomFilter(8.0, 10, 3), [], element_size=0)
    with pytest.raises(InvalidArgumentError):
        EmpiricalValidator.populated(BloomFilter(8.0, 10, 3), 5, element_size=0)


def test_populated_rejects_more_members_than_values():
    bloom = BloomFilter(8.0, 300, 3)
    with pytest.raises(InvalidArgumentError):
        EmpiricalValidator.populated(bloom, 257, element_size=1)
    assert bloom.count() == 0


def test_run_validation_rejects_more_samples_than_values():
    validator = EmpiricalValidator.populated(
        BloomFilter(8.0, 10, 3), 10, element_size=1, rng=random.Random(6))
    with pytest.raises(InvalidArgumentError):
        validator.run_validation(1000)
    # 246 non-members remain, so exactly that many samples still works
    assert validator.run_validation(246)['samples'] == 246
