"""
Validated permutation type.

The apply functions in `reorder` take any index sequence and trust it. A
Permutation is only constructible from a bijection, so code that holds one
can apply it repeatedly without re-validating.
"""

import operator
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

import numpy as np

from .checks import check_permutation, check_same_length
from .constants import DEBUG_CHECKS
from .permute import _apply_cycles, _consume_cycles
from .sorting import sort_indices
from .types import IndexSequence, MutableValues, OrderedT


@dataclass(frozen=True)
class Permutation:
    """
    Bijection on [0, n) in gather form: applying it sets values[i] to the old
    values[indices[i]].

    Example:
        >>> p = Permutation((2, 0, 3, 1))
        >>> p.cycles()
        ((0, 2, 3, 1),)
        >>> p.inverse()
        Permutation(indices=(1, 3, 0, 2))
    """

    indices: tuple[int, ...]

    def __post_init__(self) -> None:
        indices = self.indices
        if not isinstance(indices, np.ndarray):
            indices = tuple(indices)
        check_permutation(indices, len(indices), name="indices")
        normalized = tuple(operator.index(index) for index in indices)
        object.__setattr__(self, "indices", normalized)

    @classmethod
    def identity(cls, n: int) -> "Permutation":
        if n < 0:
            raise ValueError("n must be non-negative")
        return cls(tuple(range(n)))

    @classmethod
    def from_indices(cls, indices: IndexSequence) -> "Permutation":
        return cls(tuple(indices))

    @classmethod
    def sorting(cls, values: Sequence[OrderedT] | np.ndarray) -> "Permutation":
        """The stable sorting permutation of `values` (see sort_indices)."""
        return cls.from_indices(sort_indices(values))

    def __len__(self) -> int:
        return len(self.indices)

    def __iter__(self) -> Iterator[int]:
        return iter(self.indices)

    def __getitem__(self, position: int) -> int:
        return self.indices[position]

    def is_identity(self) -> bool:
        return all(index == position for position, index in enumerate(self.indices))

    def inverse(self) -> "Permutation":
        """Permutation `inv` with inv[p[i]] == i, undoing apply()."""
        inverse = [0] * len(self.indices)
        for position, index in enumerate(self.indices):
            inverse[index] = position
        return Permutation(tuple(inverse))

    def cycles(self) -> tuple[tuple[int, ...], ...]:
        """
        Cycle decomposition, following i -> indices[i].

        Fixed points appear as 1-cycles. Each cycle starts at its smallest
        index and cycles are ordered by that index.
        """
        visited = [False] * len(self.indices)
        result: list[tuple[int, ...]] = []
        for start in range(len(self.indices)):
            if visited[start]:
                continue
            cycle = []
            current = start
            while not visited[current]:
                visited[current] = True
                cycle.append(current)
                current = self.indices[current]
            result.append(tuple(cycle))
        return tuple(result)

    def apply(self, values: MutableValues) -> None:
        """Reorders `values` in place (see reorder)."""
        if DEBUG_CHECKS:
            check_same_length(self.indices, values, names=("permutation", "values"))
        _apply_cycles(values, self.indices)

    def apply_destructive(self, values: MutableValues) -> None:
        """
        Reorders `values` with the destructive cycle walk.

        The walk consumes a scratch list of n indices copied from the
        permutation, so unlike reorder_destructive this allocates. Only the
        length is checked.
        """
        if DEBUG_CHECKS:
            check_same_length(self.indices, values, names=("permutation", "values"))
        _consume_cycles(list(self.indices), values)
