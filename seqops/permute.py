"""
In-place application of a permutation to a sequence.

Applying `order` to `values` means that afterwards `values[i]` holds the value
previously stored at `values[order[i]]`. Both variants walk the cycle
decomposition of `order`, so every element is moved once and every cycle is
visited once:

    reorder(values, order)              - keeps `order`, uses an n-element marker array
    reorder_destructive(order, values)  - overwrites `order` with the sentinel, no allocation
    reorder_all(order, *sequences)      - same `order` applied to several parallel sequences

Example:
    >>> values = [1, 2, 3, 4]
    >>> reorder(values, [2, 0, 3, 1])
    >>> values
    [3, 1, 4, 2]
"""

import logging
from collections.abc import Callable

import numpy as np

from .checks import check_permutation, check_same_length, check_sentinel, unsigned_max
from .constants import DEBUG_CHECKS, SENTINEL
from .types import IndexSequence, MutableIndexSequence, MutableValues

logger = logging.getLogger(__name__)


def _swap_items(values: MutableValues, i: int, j: int) -> None:
    values[i], values[j] = values[j], values[i]


def _swap_rows(values: np.ndarray, i: int, j: int) -> None:
    # Fancy indexing copies the right-hand side, so rows of N-D arrays swap correctly
    values[[i, j]] = values[[j, i]]


def _swapper(values: MutableValues) -> Callable[[MutableValues, int, int], None]:
    return _swap_rows if isinstance(values, np.ndarray) else _swap_items


def _apply_cycles(values: MutableValues, order: IndexSequence) -> int:
    """Reorder `values` without validating `order`. Returns the number of cycles."""
    n = len(values)
    done = np.zeros(n, dtype=bool)
    swap = _swapper(values)
    cycles = 0
    for i in range(n):
        if done[i]:
            continue
        done[i] = True
        cycles += 1
        prev_j = i
        j = order[i]
        while j != i:
            swap(values, prev_j, j)
            done[j] = True
            prev_j = j
            j = order[j]
    return cycles


def reorder(values: MutableValues, order: IndexSequence) -> None:
    """
    Rearranges `values` in place according to `order`, leaving `order` intact.

    Use this variant when the same order must be applied to several sequences.

    Args:
        values: Mutable sequence to reorder (list, bytearray, array.array or
            numpy array, reordered along its first axis).
        order: Bijection on [0, len(values)); `values[i]` receives the old
            `values[order[i]]`.

    Raises:
        PermutationError: If `order` is not a valid permutation (debug only).
    """
    if DEBUG_CHECKS:
        check_permutation(order, len(values))
    cycles = _apply_cycles(values, order)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Reordered %d elements in %d cycles", len(values), cycles)


def reorder_all(order: IndexSequence, *sequences: MutableValues) -> None:
    """Applies the same `order` to every sequence. `order` is validated once."""
    if DEBUG_CHECKS:
        for index, sequence in enumerate(sequences):
            check_same_length(order, sequence, names=("order", f"sequences[{index}]"))
        check_permutation(order, len(order))
    for sequence in sequences:
        _apply_cycles(sequence, order)


def sentinel_for(order: MutableIndexSequence) -> int:
    """
    Returns the marker reorder_destructive writes into `order`.

    This is SENTINEL (-1) except for unsigned buffers (numpy arrays,
    array.array typecodes, bytearray), which cannot store it and receive
    their maximum value instead.
    """
    limit = unsigned_max(order)
    return SENTINEL if limit is None else limit


def reorder_destructive(order: MutableIndexSequence, values: MutableValues) -> None:
    """
    Rearranges `values` exactly like reorder(), consuming `order` as scratch space.

    Each visited position is marked by overwriting its slot in `order` with the
    sentinel (see sentinel_for), so no marker array is allocated. The next hop
    of a cycle is read before its slot is overwritten and one temporary holds
    the value displaced from the start of the cycle.

    After the call every slot of `order` equals the sentinel: the buffer
    still belongs to the caller but no longer describes a permutation.

    Args:
        order: Bijection on [0, len(values)), destroyed by the call.
        values: Mutable sequence of the same length as `order`.

    Raises:
        ValueError: If the lengths differ (debug only).
        PermutationError: If `order` is not a permutation or cannot hold
            the sentinel (debug only).
    """
    if DEBUG_CHECKS:
        check_same_length(order, values)
        check_permutation(order, len(order))
        check_sentinel(order)

    cycles = _consume_cycles(order, values)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Destructively reordered %d elements in %d cycles", len(order), cycles)


def _consume_cycles(order: MutableIndexSequence, values: MutableValues) -> int:
    """Destructive cycle walk without validation. Returns the number of cycles."""
    sentinel = sentinel_for(order)
    copy_rows = isinstance(values, np.ndarray) and values.ndim > 1
    cycles = 0
    for start in range(len(order)):
        hop = order[start]
        if hop == sentinel:
            continue
        cycles += 1
        held = values[start].copy() if copy_rows else values[start]
        position = start
        while hop != start:
            # slot is marked before its value is overwritten
            order[position] = sentinel
            values[position] = values[hop]
            position = hop
            hop = order[position]
        order[position] = sentinel
        values[position] = held
    return cycles
