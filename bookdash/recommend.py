"""Random book recommendation."""
from typing import Optional, Sequence

import numpy as np

from .models import Book


def pick_random(subset: Sequence[Book], rng: Optional[np.random.Generator] = None) -> Optional[Book]:
    """
    Pick one book uniformly at random from the subset.

    A fresh generator seeded from OS entropy is used per call unless one is
    passed in. Returns None when the subset is empty.
    """
    if not subset:
        return None

    if rng is None:
        rng = np.random.default_rng()

    return subset[int(rng.integers(len(subset)))]
