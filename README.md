# bitvector

`bitvector` is a set of non-negative integers that uses one bit for each
possible element. The bits are stored as a list of 64-bit words. Union,
intersection and difference work one word at a time with plain bitwise
operations.

This is a library with no command-line entry point. It has no dependencies
outside the standard library.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and then run pytest:

```
pip install ".[test]"
pytest
```

## Usage

```python
from bitvector.core import BitVector

bits = BitVector(30)          # room for 30 elements (rounded up to 64)
for i in range(10):
    bits.insert(i)            # True if the element was new
list(bits)                    # [0, 1, 2, 3, 4, 5, 6, 7, 8, 9]
len(bits)                     # 10
3 in bits                     # True

other = BitVector.from_iterable(range(5, 15))

list(bits.union(other))        # [0, 1, ..., 14]
list(bits.intersection(other)) # [5, 6, 7, 8, 9]
list(bits.difference(other))   # [0, 1, 2, 3, 4]
list(bits.difference_d(other)) # [0, 1, 2, 3, 4, 10, 11, 12, 13, 14]

# Operators: & is intersection, | is union, ^ is difference (self minus other)
list(bits ^ other)             # [0, 1, 2, 3, 4]
```

Note that `^` means plain difference here. For the symmetric difference,
use `difference_d`.

Iterating a vector yields its elements in increasing order.

### Growing and capacity

When `insert` gets an element past the vector's capacity, the vector grows
to hold it. `contains` and `remove` return `False` for elements past the
capacity, and also for negative elements. `insert` raises `ValueError` when
given a negative element. `capacity()` is always a multiple of 64.
`grow(n)` makes room for at least `n` elements and never shrinks the vector.

```python
bits = BitVector(10)
bits.insert(1020999)
1020999 in bits               # True
bits.capacity() >= 1021000    # True
```

`remove(n)` returns `True` if `n` was present. `clear()` removes every
element and keeps the capacity. `is_empty()` tells whether the vector holds
any element.

### Other constructors

- `BitVector.ones(n)` holds every element from `0` to `n - 1`.
- `BitVector.from_iterable(values)` collects integers into a new vector.
  The vector starts with room for 8192 elements.
- `BitVector.from_bools(flags)` sets bit `i` wherever `flags[i]` is true.
  The vector has room for at least 64 elements.
- `copy()` (or `copy.copy`) returns an independent copy.

### In-place operations

These methods change the vector itself and return it:
`union_inplace`, `intersection_inplace`, `difference_inplace` and
`difference_d_inplace`. The operators `|=`, `&=` and `^=` do the same, and
`^=` is plain difference. Both operands must have the same capacity. If they
do not, `ValueError` is raised.

### Equality and prefixes

Two vectors compare equal when they hold the same elements below the left
operand's capacity. `a.eq_left(b, n)` tells whether `a` and `b` hold the
same elements below `n`. It raises `IndexError` when either vector is too
small to hold element `n - 1`. Vectors are mutable, so they cannot be hashed.

### Text forms

`str(bits)` lists the elements, as in `[4, 5, ]`. `repr(bits)` shows the
underlying words in binary, one word after another.

### Word-level helpers

`bitvector.words` holds the functions that the class is built on. They work
on plain lists of integers:

- `word_count`
- `word_offset`
- `word_mask`
- `ones_words`
- `union_words`
- `intersection_words`
- `difference_words`
- `symmetric_difference_words`
- `eq_left_words`
- `iter_bits`