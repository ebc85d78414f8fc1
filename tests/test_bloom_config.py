"""Tests for parameter derivation."""
import math

import pytest

from bloom_config import BloomConfig
from bloom_errors import InvalidArgumentError


def test_explicit_parameters():
    config = BloomConfig(8.0, 1000, 5)
    assert config.size_bits == 8000
    assert config.size_bytes == 1000
    assert config.num_hash_functions == 5


def test_size_rounds_up():
    assert BloomConfig(1.5, 3, 1).size_bits == 5


def test_from_false_positive_probability():
    config = BloomConfig.for_false_positive_probability(0.01, 1000)
    assert config.num_hash_functions == 7
    assert config.bits_per_element == pytest.approx(7 / math.log(2))
    assert config.size_bits == math.ceil((7 / math.log(2)) * 1000)
    assert config.size_bits == 10099


def test_from_bit_array_size():
    config = BloomConfig.for_bit_array_size(10000, 1000)
    assert config.bits_per_element == 10.0
    assert config.num_hash_functions == 7
    assert config.size_bits == 10000


def test_from_bit_array_size_keeps_exact_size():
    for m in (10099, 12345, 99991):
        assert BloomConfig.for_bit_array_size(m, 1000).size_bits == m


def test_bit_array_too_small_for_one_hash():
    with pytest.raises(InvalidArgumentError):
        BloomConfig.for_bit_array_size(1, 1000)


@pytest.mark.parametrize("c, n, k", [
    (0, 100, 3),
    (-1.0, 100, 3),
    (8.0, 0, 3),
    (8.0, -5, 3),
    (8.0, 100, 0),
])
def test_invalid_explicit_parameters(c, n, k):
    with pytest.raises(InvalidArgumentError):
        BloomConfig(c, n, k)


@pytest.mark.parametrize("p", [0, 1, -0.5, 1.5])
def test_invalid_probability(p):
    with pytest.raises(InvalidArgumentError):
        BloomConfig.for_false_positive_probability(p, 1000)


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        BloomConfig(8.0, 0, 3)


def test_optimal_k():
    config = BloomConfig.for_bit_array_size(10000, 1000)
    assert config.optimal_k() == pytest.approx(10 * math.log(2))
    assert config.optimal_k(2000) == pytest.approx(5 * math.log(2))


def test_print_summary(capsys):
    BloomConfig.for_false_positive_probability(0.01, 1000).print_summary()
    out = capsys.readouterr().out
    assert "Hash functions (k): 7" in out
    assert "10,099" in out
