"""
Type definitions for the sequence primitives.
"""

from collections.abc import MutableSequence, Sequence
from typing import Any, Protocol, TypeAlias, TypeVar

import numpy as np


class SupportsLessThan(Protocol):
    """Anything usable with the `<` operator, the only ordering the library needs."""

    def __lt__(self, other: Any, /) -> bool: ...


OrderedT = TypeVar("OrderedT", bound=SupportsLessThan)

# Indices are plain ints or numpy integer arrays (np.argsort output)
IndexSequence: TypeAlias = Sequence[int] | np.ndarray
MutableIndexSequence: TypeAlias = MutableSequence[int] | np.ndarray
MutableValues: TypeAlias = MutableSequence[Any] | np.ndarray
