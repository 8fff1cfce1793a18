"""
Debug-only precondition checks.

The reordering primitives assume their inputs are valid: a permutation must be
a bijection on [0, n), parallel buffers must have equal lengths and a buffer
used destructively must be able to hold the sentinel. Violations are not
recoverable errors, so the primitives only call these checks while
DEBUG_CHECKS is set (i.e. unless Python runs with -O).
"""

import array
import logging
import operator
from collections.abc import Sized
from typing import NoReturn

import numpy as np

from .types import IndexSequence

logger = logging.getLogger(__name__)

_SIGNED_TYPECODES = frozenset("bhilq")
_UNSIGNED_TYPECODES = frozenset("BHILQ")


class PermutationError(ValueError):
    """Raised when an index sequence is not a valid permutation."""

    pass


def is_permutation(order: IndexSequence, n: int) -> bool:
    """True iff `order` holds every index of [0, n) exactly once."""
    if len(order) != n:
        return False
    if isinstance(order, np.ndarray):
        if order.ndim != 1 or order.dtype.kind not in "iu":
            return False
        if n == 0:
            return True
        return (
            int(order.min()) >= 0
            and int(order.max()) < n
            and np.unique(order).size == n
        )
    seen = [False] * n
    for index in order:
        if not _is_integer(index):
            return False
        if not (0 <= index < n) or seen[index]:
            return False
        seen[index] = True
    return True


def check_permutation(order: IndexSequence, n: int, *, name: str = "order") -> None:
    """
    Raise PermutationError unless `order` is a bijection on [0, n).

    The message names the first offending position so a broken caller can be
    traced back to where the permutation was built.
    """
    if len(order) != n:
        _fail(f"{name} has length {len(order)}, expected {n}")
    if isinstance(order, np.ndarray):
        if order.ndim != 1:
            _fail(f"{name} must be one-dimensional, got shape {order.shape}")
        if order.dtype.kind not in "iu":
            _fail(f"{name} must hold integers, got dtype {order.dtype}")
        indices = order.tolist()
    else:
        indices = order
    seen = [False] * n
    for position, index in enumerate(indices):
        if not _is_integer(index):
            _fail(f"{name}[{position}] = {index!r} is not an integer")
        if not (0 <= index < n):
            _fail(f"{name}[{position}] = {index} out of range [0, {n})")
        if seen[index]:
            _fail(f"{name}[{position}] = {index} repeats an earlier index")
        seen[index] = True


def check_same_length(
    first: Sized, second: Sized, *, names: tuple[str, str] = ("order", "values")
) -> None:
    if len(first) != len(second):
        logger.debug("Length mismatch: %s=%d, %s=%d", names[0], len(first), names[1], len(second))
        raise ValueError(
            f"{names[0]} and {names[1]} must have equal length, "
            f"got {len(first)} and {len(second)}"
        )


def unsigned_max(order: IndexSequence) -> int | None:
    """
    Largest value an unsigned index buffer can store.

    None for buffers that can store -1 (lists, signed numpy arrays, signed
    array.array typecodes).
    """
    if isinstance(order, np.ndarray):
        if order.dtype.kind == "u":
            return int(np.iinfo(order.dtype).max)
    elif isinstance(order, bytearray):
        return 0xFF
    elif isinstance(order, array.array) and order.typecode in _UNSIGNED_TYPECODES:
        return (1 << (8 * order.itemsize)) - 1
    return None


def check_sentinel(order: IndexSequence, *, name: str = "order") -> None:
    """
    Raise PermutationError if `order` cannot store the sentinel.

    Python lists and signed buffers store -1. Unsigned buffers (unsigned numpy
    dtypes, unsigned array.array typecodes, bytearray) store their maximum
    instead, which must lie outside [0, n).
    """
    if isinstance(order, np.ndarray):
        kind = f"dtype {order.dtype}"
        if order.dtype.kind not in "iu":
            _fail(f"{name} must hold integers, got {kind}")
    elif isinstance(order, array.array):
        kind = f"typecode {order.typecode!r}"
        if order.typecode not in _SIGNED_TYPECODES | _UNSIGNED_TYPECODES:
            _fail(f"{name} must hold integers, got {kind}")
    else:
        kind = type(order).__name__
    limit = unsigned_max(order)
    if limit is not None and limit < len(order):
        _fail(f"{name} {kind} is too narrow for {len(order)} indices plus a sentinel")


def _fail(message: str) -> NoReturn:
    logger.debug("Precondition failed: %s", message)
    raise PermutationError(message)


def _is_integer(value: object) -> bool:
    try:
        operator.index(value)
    except TypeError:
        return False
    return True
