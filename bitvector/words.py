"""Word-level helpers for bit sets stored as lists of 64-bit integers.

Bit ``i`` of the set lives in word ``i // 64``, at position ``i % 64``
counted from the least significant end.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

WORD_BITS = 64
WORD_MAX = (1 << WORD_BITS) - 1


def _check_non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def word_count(bits: int) -> int:
    """Return how many 64-bit words are needed to hold ``bits`` bits."""
    _check_non_negative(bits, "bits")
    return (bits + WORD_BITS - 1) // WORD_BITS


def word_offset(index: int) -> tuple[int, int]:
    """Return the word number and the bit position inside it for ``index``."""
    _check_non_negative(index, "index")
    return divmod(index, WORD_BITS)


def word_mask(index: int) -> tuple[int, int]:
    """Return the word number for ``index`` and a mask selecting its bit."""
    word, offset = word_offset(index)
    return word, 1 << offset


def ones_words(bits: int) -> list[int]:
    """Return words with bits ``0 .. bits - 1`` set and no other bit set.

    The result always ends with a partial word, which is empty when
    ``bits`` is a multiple of 64.
    """
    word, offset = word_offset(bits)
    return [WORD_MAX] * word + [WORD_MAX >> (WORD_BITS - offset)]


def union_words(left: Sequence[int], right: Sequence[int]) -> list[int]:
    """Bitwise OR of two word lists; the longer list's tail is kept."""
    merged = [a | b for a, b in zip(left, right)]
    longer = left if len(left) >= len(right) else right
    merged.extend(longer[len(merged):])
    return merged


def intersection_words(left: Sequence[int], right: Sequence[int]) -> list[int]:
    """Bitwise AND of two word lists, as long as the shorter one."""
    return [a & b for a, b in zip(left, right)]


def difference_words(left: Sequence[int], right: Sequence[int]) -> list[int]:
    """Bits of ``left`` that are not in ``right``.

    The result is as long as ``left`` when ``left`` is the longer list,
    and as long as the shorter list otherwise.
    """
    result = [a & ~b & WORD_MAX for a, b in zip(left, right)]
    if len(left) > len(right):
        result.extend(left[len(right):])
    return result


def symmetric_difference_words(left: Sequence[int], right: Sequence[int]) -> list[int]:
    """Bitwise XOR of two word lists; the longer list's tail is kept."""
    result = [a ^ b for a, b in zip(left, right)]
    longer = left if len(left) >= len(right) else right
    result.extend(longer[len(result):])
    return result


def eq_left_words(left: Sequence[int], right: Sequence[int], bit: int) -> bool:
    """Tell whether both word lists agree on every bit below ``bit``.

    Raises ``IndexError`` when either list is too short to hold bit
    ``bit - 1``.
    """
    _check_non_negative(bit, "bit")
    if bit == 0:
        return True
    word, offset = word_offset(bit - 1)
    if word >= len(left) or word >= len(right):
        raise IndexError(f"bit {bit - 1} lies beyond the stored words")
    if list(left[:word]) != list(right[:word]):
        return False
    mask = (1 << (offset + 1)) - 1
    return (left[word] & mask) == (right[word] & mask)


def iter_bits(words: Iterable[int]) -> Iterator[int]:
    """Yield the indices of all set bits, in increasing order."""
    for word_index, word in enumerate(words):
        base = word_index * WORD_BITS
        while word:
            lowest = word & -word
            yield base + lowest.bit_length() - 1
            word ^= lowest