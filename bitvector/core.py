"""A growable set of non-negative integers stored one bit per element."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from bitvector.words import (
    WORD_BITS,
    WORD_MAX,
    difference_words,
    eq_left_words,
    intersection_words,
    iter_bits,
    ones_words,
    symmetric_difference_words,
    union_words,
    word_count,
    word_mask,
)

_FROM_ITERABLE_BITS = 2 << 12
_MIN_BOOL_BITS = 64


class BitVector:
    """A set of non-negative integers, one bit per possible element.

    Set operations work word by word. Operators follow the same meaning
    as the named methods: ``&`` is intersection, ``|`` is union and
    ``^`` is difference (elements of the left operand not in the right).
    """

    __slots__ = ("_words",)
    __hash__ = None  # mutable

    def __init__(self, bits: int) -> None:
        self._words: list[int] = [0] * word_count(bits)

    @classmethod
    def _from_words(cls, words: list[int]) -> BitVector:
        vector = cls(0)
        vector._words = words
        return vector

    @classmethod
    def ones(cls, bits: int) -> BitVector:
        """Return a bit vector holding every element ``0 .. bits - 1``."""
        return cls._from_words(ones_words(bits))

    @classmethod
    def from_iterable(cls, values: Iterable[int]) -> BitVector:
        """Build a bit vector holding the given integers."""
        vector = cls(_FROM_ITERABLE_BITS)
        for value in values:
            vector.insert(int(value))
        return vector

    @classmethod
    def from_bools(cls, values: Iterable[bool]) -> BitVector:
        """Build a bit vector whose element ``i`` is present when ``values[i]`` is true."""
        flags = list(values)
        vector = cls(max(len(flags), _MIN_BOOL_BITS))
        for index, flag in enumerate(flags):
            if flag:
                vector.insert(index)
        return vector

    def is_empty(self) -> bool:
        """Return True when the set holds no element."""
        return not any(self._words)

    def __len__(self) -> int:
        return sum(word.bit_count() for word in self._words)

    def clear(self) -> None:
        """Remove every element, keeping the capacity."""
        self._words = [0] * len(self._words)

    def contains(self, bit: int) -> bool:
        """Return True when ``bit`` is in the set."""
        if bit < 0 or bit >= self.capacity():
            return False
        word, mask = word_mask(bit)
        return bool(self._words[word] & mask)

    def __contains__(self, bit: object) -> bool:
        if not isinstance(bit, int):
            return False
        return self.contains(bit)

    def eq_left(self, other: BitVector, bit: int) -> bool:
        """Tell whether both sets agree on every element below ``bit``.

        Raises ``IndexError`` when either vector cannot hold ``bit - 1``.
        """
        return eq_left_words(self._words, other._words, bit)

    def insert(self, bit: int) -> bool:
        """Add ``bit``, growing if needed; return True if it was not present."""
        if bit >= self.capacity():
            self.grow(bit + 1)
        word, mask = word_mask(bit)
        old = self._words[word]
        self._words[word] = old | mask
        return not old & mask

    def remove(self, bit: int) -> bool:
        """Remove ``bit``; return True if it was present."""
        if bit < 0 or bit >= self.capacity():
            return False
        word, mask = word_mask(bit)
        old = self._words[word]
        self._words[word] = old & ~mask & WORD_MAX
        return bool(old & mask)

    def capacity(self) -> int:
        """Return how many elements fit without growing."""
        return len(self._words) * WORD_BITS

    def union(self, other: BitVector) -> BitVector:
        """Return the elements in either set."""
        return self._from_words(union_words(self._words, other._words))

    def intersection(self, other: BitVector) -> BitVector:
        """Return the elements in both sets."""
        return self._from_words(intersection_words(self._words, other._words))

    def difference(self, other: BitVector) -> BitVector:
        """Return the elements of this set that are not in ``other``."""
        return self._from_words(difference_words(self._words, other._words))

    def difference_d(self, other: BitVector) -> BitVector:
        """Return the elements in exactly one of the two sets."""
        return self._from_words(symmetric_difference_words(self._words, other._words))

    def _require_same_capacity(self, other: BitVector) -> None:
        if self.capacity() != other.capacity():
            raise ValueError(
                f"capacities differ: {self.capacity()} != {other.capacity()}"
            )

    def union_inplace(self, other: BitVector) -> BitVector:
        """Add the elements of ``other``; both must have the same capacity."""
        self._require_same_capacity(other)
        self._words = [a | b for a, b in zip(self._words, other._words)]
        return self

    def intersection_inplace(self, other: BitVector) -> BitVector:
        """Keep only elements also in ``other``; both must have the same capacity."""
        self._require_same_capacity(other)
        self._words = [a & b for a, b in zip(self._words, other._words)]
        return self

    def difference_inplace(self, other: BitVector) -> BitVector:
        """Drop the elements of ``other``; both must have the same capacity."""
        self._require_same_capacity(other)
        self._words = [a & ~b & WORD_MAX for a, b in zip(self._words, other._words)]
        return self

    def difference_d_inplace(self, other: BitVector) -> BitVector:
        """Keep elements in exactly one set; both must have the same capacity."""
        self._require_same_capacity(other)
        self._words = [a ^ b for a, b in zip(self._words, other._words)]
        return self

    def grow(self, num_bits: int) -> None:
        """Make room for at least ``num_bits`` elements; never shrinks."""
        needed = word_count(num_bits)
        if len(self._words) < needed:
            self._words.extend([0] * (needed - len(self._words)))

    def copy(self) -> BitVector:
        """Return an independent copy."""
        return self._from_words(list(self._words))

    def __copy__(self) -> BitVector:
        return self.copy()

    def __iter__(self) -> Iterator[int]:
        return iter_bits(list(self._words))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitVector):
            return NotImplemented
        return self.eq_left(other, self.capacity())

    def __str__(self) -> str:
        return "[" + "".join(f"{element}, " for element in self) + "]"

    def __repr__(self) -> str:
        return "[" + "".join(f"{word:b} " for word in self._words) + "]"

    def __and__(self, other: object) -> BitVector:
        if not isinstance(other, BitVector):
            return NotImplemented
        return self.intersection(other)

    def __or__(self, other: object) -> BitVector:
        if not isinstance(other, BitVector):
            return NotImplemented
        return self.union(other)

    def __xor__(self, other: object) -> BitVector:
        if not isinstance(other, BitVector):
            return NotImplemented
        return self.difference(other)

    def __iand__(self, other: object) -> BitVector:
        if not isinstance(other, BitVector):
            return NotImplemented
        return self.intersection_inplace(other)

    def __ior__(self, other: object) -> BitVector:
        if not isinstance(other, BitVector):
            return NotImplemented
        return self.union_inplace(other)

    def __ixor__(self, other: object) -> BitVector:
        if not isinstance(other, BitVector):
            return NotImplemented
        return self.difference_inplace(other)