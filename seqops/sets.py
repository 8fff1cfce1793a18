"""
Set-like cleanup of sequences, performed in place.

Both functions compact the sequence the way remove_if + erase does: survivors
are moved to the front in their original order and the tail is deleted, so
the sequence must support `del seq[k:]` (list, bytearray, array.array).
"""

import logging
from collections import Counter
from collections.abc import Callable, Hashable, MutableSequence
from typing import TypeVar

logger = logging.getLogger(__name__)

H = TypeVar("H", bound=Hashable)


def _compact(sequence: MutableSequence[H], keep: Callable[[H], bool]) -> int:
    """Moves elements satisfying `keep` to the front, drops the rest, returns the new length."""
    write = 0
    for read in range(len(sequence)):
        item = sequence[read]
        if keep(item):
            if write != read:
                sequence[write] = item
            write += 1
    del sequence[write:]
    return write


def remove_intersection(
    a: MutableSequence[H], b: MutableSequence[H], *, symmetric: bool = False
) -> None:
    """
    Removes from `a` every element whose value also occurs in `b`.

    Membership is decided by counting: occurrences in `a` and `b` are pooled
    into one multiset and an element is dropped when its pooled count exceeds 1.
    Every copy of a shared value is removed, and so is every copy of a value
    repeated inside `a` alone, even if `b` never mentions it.

    Example:
        >>> a, b = [1, 2, 2, 3], [2, 4]
        >>> remove_intersection(a, b)
        >>> a, b
        ([1, 3], [2, 4])

    Args:
        a: Sequence to clean, modified in place.
        b: Sequence to compare against, left untouched unless `symmetric`.
        symmetric: Also strip the shared values from `b`, with counts taken
            before either sequence is modified.
    """
    counts = Counter(a)
    counts.update(b)

    def unique(item: H) -> bool:
        return counts[item] <= 1

    before = len(a)
    _compact(a, unique)
    if symmetric:
        _compact(b, unique)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Removed %d of %d elements from a", before - len(a), before)


def remove_duplicates(values: MutableSequence[H]) -> int:
    """
    Removes repeated elements, keeping the first occurrence of each value.

    Surviving elements keep their relative order.

    Example:
        >>> values = [3, 1, 2, 1, 3]
        >>> remove_duplicates(values)
        3
        >>> values
        [3, 1, 2]

    Returns:
        The new length of `values`.
    """
    seen: set[H] = set()

    def first_seen(item: H) -> bool:
        if item in seen:
            return False
        seen.add(item)
        return True

    return _compact(values, first_seen)
