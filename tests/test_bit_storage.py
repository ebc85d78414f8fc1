"""Tests for the packed bit vector."""
import pytest

from bit_storage import BitStorage
from bloom_errors import InvalidArgumentError


def test_new_storage_is_clear():
    storage = BitStorage(130)
    assert len(storage) == 130
    assert storage.num_words == 3
    assert storage.count_set() == 0
    assert not any(storage.get(i) for i in range(130))


def test_set_get_and_clear_single_bits():
    storage = BitStorage(130)
    for i in (0, 63, 64, 129):
        storage.set(i)
        assert storage.get(i)
    assert storage.count_set() == 4
    storage.set(63, False)
    assert not storage.get(63)
    assert storage.get(64)
    assert storage.count_set() == 3


def test_clear_all():
    storage = BitStorage(70)
    for i in range(0, 70, 3):
        storage.set(i)
    storage.clear_all()
    assert storage.count_set() == 0
    assert len(storage) == 70


@pytest.mark.parametrize("index", [-1, 10, 100])
def test_out_of_range_index(index):
    storage = BitStorage(10)
    with pytest.raises(InvalidArgumentError):
        storage.get(index)
    with pytest.raises(InvalidArgumentError):
        storage.set(index, True)


def test_length_must_be_positive():
    with pytest.raises(InvalidArgumentError):
        BitStorage(0)


def test_to_bytes_is_lsb_first():
    storage = BitStorage(20)
    storage.set(0)
    storage.set(9)
    storage.set(19)
    assert storage.to_bytes() == bytes([0b00000001, 0b00000010, 0b00001000])


def test_from_bytes_restores_bits():
    data = bytes([0xA5, 0x00, 0xFF, 0x01, 0x80, 0x7E, 0x00, 0x00, 0x03])
    storage = BitStorage.from_bytes(72, data)
    assert storage.to_bytes() == data
    assert storage.get(0) and not storage.get(1) and storage.get(2)
    assert storage.get(64) and storage.get(65) and not storage.get(66)


def test_from_bytes_drops_bits_past_length():
    storage = BitStorage.from_bytes(4, bytes([0xFF]))
    assert storage.count_set() == 4
    assert storage.to_bytes() == bytes([0x0F])


def test_load_bytes_rejects_wrong_length():
    storage = BitStorage(16)
    with pytest.raises(InvalidArgumentError):
        storage.load_bytes(b"\x00")
    with pytest.raises(InvalidArgumentError):
        storage.load_bytes(b"\x00\x00\x00")


def test_equality():
    a, b = BitStorage(40), BitStorage(40)
    assert a == b
    a.set(5)
    assert a != b
    b.set(5)
    assert a == b
    assert BitStorage(40) != BitStorage(41)
