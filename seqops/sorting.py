"""
Index sorting: compute the permutation that sorts a sequence.
"""

import logging
from collections.abc import Sequence

import numpy as np

from .checks import check_same_length
from .constants import DEBUG_CHECKS
from .permute import reorder_all
from .types import MutableValues, OrderedT

logger = logging.getLogger(__name__)


def sort_indices(values: Sequence[OrderedT] | np.ndarray) -> list[int] | np.ndarray:
    """
    Returns the indices that would stable-sort `values` ascending.

    Reading `values` in the order idx[0], idx[1], ... yields the sorted
    sequence; equal elements keep their original relative order, so
    sort_indices followed by reorder is a stable sort. Only `<` is used.
    `values` is not modified.

    Example:
        >>> sort_indices([5, 4, 3, 2, 0, 1])
        [4, 5, 3, 2, 1, 0]

    Returns:
        A list of ints, or an integer numpy array when `values` is an array.

    Raises:
        ValueError: If `values` is a numpy array that is not one-dimensional.
    """
    if isinstance(values, np.ndarray):
        if values.ndim != 1:
            raise ValueError(f"values must be one-dimensional, got shape {values.shape}")
        return np.argsort(values, kind="stable")
    return sorted(range(len(values)), key=values.__getitem__)


def sort_parallel(
    keys: MutableValues, *sequences: MutableValues
) -> list[int] | np.ndarray:
    """
    Sorts `keys` in place and reorders each of `sequences` the same way.

    `keys` must be one-dimensional; numpy arrays among `sequences` may have
    more dimensions and are reordered along their first axis.

    Returns:
        The order that was applied, as computed by sort_indices(keys).
    """
    if DEBUG_CHECKS:
        for index, sequence in enumerate(sequences):
            check_same_length(keys, sequence, names=("keys", f"sequences[{index}]"))
    order = sort_indices(keys)
    reorder_all(order, keys, *sequences)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Sorted %d parallel sequences of length %d", len(sequences) + 1, len(keys))
    return order
