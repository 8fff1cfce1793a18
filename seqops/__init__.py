"""
Sequence reordering and set-cleanup primitives.

Compute the permutation that sorts a sequence, apply a permutation to any
number of parallel sequences in place, and strip duplicate or shared
elements from sequences.

Typical use:
    order = sort_indices(keys)
    reorder(keys, order)
    reorder(payload, order)
"""

from .checks import (
    PermutationError,
    check_permutation,
    check_same_length,
    check_sentinel,
    is_permutation,
)
from .constants import DEBUG_CHECKS, SENTINEL
from .permutation import Permutation
from .permute import reorder, reorder_all, reorder_destructive, sentinel_for
from .sets import remove_duplicates, remove_intersection
from .sorting import sort_indices, sort_parallel

__all__ = [
    # Sorting
    "sort_indices",
    "sort_parallel",
    # Applying permutations
    "reorder",
    "reorder_all",
    "reorder_destructive",
    "sentinel_for",
    "Permutation",
    # Set cleanup
    "remove_intersection",
    "remove_duplicates",
    # Preconditions
    "PermutationError",
    "is_permutation",
    "check_permutation",
    "check_same_length",
    "check_sentinel",
    # Constants
    "SENTINEL",
    "DEBUG_CHECKS",
]
