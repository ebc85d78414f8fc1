"""
Packed fixed-length bit vector.

Copyright (c) 2025 John Byrd
https://github.com/johnwbyrd/bloomer

SPDX-License-Identifier: BSD-3-Clause
"""
from array import array

from bloom_errors import InvalidArgumentError

WORD_BITS = 64


class BitStorage:
    """Fixed-length bit vector packed into unsigned 64-bit words.

    Bit ``i`` lives in word ``i // 64`` at position ``i % 64``. Exported
    bytes use the same LSB-first order: bit ``i`` is byte ``i // 8``,
    position ``i % 8``.
    """

    __slots__ = ("_length", "_words")

    def __init__(self, length: int):
        if length < 1:
            raise InvalidArgumentError(
                f"bit storage length must be positive, got {length}")
        self._length = length
        self._words = array("Q", bytes(self.num_words * 8))

    @property
    def num_words(self) -> int:
        """Number of 64-bit words backing the vector."""
        return (self._length + WORD_BITS - 1) // WORD_BITS

    @property
    def num_bytes(self) -> int:
        """Size of the exported byte representation."""
        return (self._length + 7) // 8

    def __len__(self) -> int:
        return self._length

    def _check_index(self, index: int):
        if not 0 <= index < self._length:
            raise InvalidArgumentError(
                f"bit index {index} out of range [0, {self._length})")

    def get(self, index: int) -> bool:
        """Return True if bit ``index`` is set."""
        self._check_index(index)
        return (self._words[index >> 6] >> (index & 63)) & 1 == 1

    def set(self, index: int, value: bool = True):
        """Set or clear bit ``index``."""
        self._check_index(index)
        if value:
            self._words[index >> 6] |= 1 << (index & 63)
        else:
            self._words[index >> 6] &= ~(1 << (index & 63)) & 0xFFFFFFFFFFFFFFFF

    def clear_all(self):
        """Clear every bit."""
        for i in range(len(self._words)):
            self._words[i] = 0

    def count_set(self) -> int:
        """Count number of bits set."""
        return sum(bin(word).count('1') for word in self._words)

    def to_bytes(self) -> bytes:
        """Export the packed bits as ``ceil(length / 8)`` LSB-first bytes."""
        raw = b"".join(word.to_bytes(8, "little") for word in self._words)
        return raw[:self.num_bytes]

    def load_bytes(self, data: bytes):
        """Replace the contents from an LSB-first packed byte string."""
        if len(data) != self.num_bytes:
            raise InvalidArgumentError(
                f"expected {self.num_bytes} bytes of bit data, got {len(data)}")
        padded = bytes(data) + bytes(self.num_words * 8 - len(data))
        for i in range(self.num_words):
            self._words[i] = int.from_bytes(padded[i * 8:i * 8 + 8], "little")
        # Drop stray bits past the end of the vector.
        tail = self._length % WORD_BITS
        if tail:
            self._words[-1] &= (1 << tail) - 1

    @classmethod
    def from_bytes(cls, length: int, data: bytes) -> "BitStorage":
        """Build a vector of ``length`` bits from packed bytes."""
        storage = cls(length)
        storage.load_bytes(data)
        return storage

    def __eq__(self, other):
        if not isinstance(other, BitStorage):
            return NotImplemented
        return self._length == other._length and self._words == other._words

    def __repr__(self):
        return f"BitStorage(length={self._length}, set={self.count_set()})"
