"""Seeded randomness.

Every random draw in a search goes through one numpy Generator so that
a fixed seed reproduces the search exactly.
"""

from typing import Optional, Sequence, TypeVar, Union

import numpy as np

T = TypeVar("T")


def make_rng(seed: Optional[Union[int, np.random.Generator]] = None) -> np.random.Generator:
    """Create a Generator from a seed, or pass an existing one through."""
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def random_choice(rng: np.random.Generator, items: Sequence[T]) -> T:
    """Uniformly pick one element of a non-empty sequence."""
    return items[int(rng.integers(len(items)))]
