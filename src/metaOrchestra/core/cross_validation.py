"""
Cross-validation partitioning for metaOrchestra.

Partitions are numpy arrays of instance indices. Every function draws from its
own generator, seeded by ``random_state``, so no global random state is shared
between calls.
"""

import math
from typing import List, Optional, Tuple

import numpy as np
from sklearn.model_selection import KFold

from .exceptions import FoldCountError


def holdout(
    n: int,
    right_fraction: float,
    random_state: Optional[int] = None
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Split ``0..n-1`` into two random disjoint partitions.

    Args:
        n: Size of the collection to partition
        right_fraction: Fraction of the collection placed in the right partition
        random_state: Seed for the permutation

    Returns:
        (left, right) index arrays; ``right`` holds ``floor(right_fraction * n)`` indices
    """
    if not 0.0 <= right_fraction <= 1.0:
        raise ValueError(f"right_fraction must lie in [0, 1], got {right_fraction}")

    shuffled = np.random.default_rng(random_state).permutation(n)
    pivot = int(math.floor(right_fraction * n))
    return shuffled[pivot:], shuffled[:pivot]


def kfold(n: int, k: int, random_state: Optional[int] = None) -> List[np.ndarray]:
    """
    Partition ``0..n-1`` into ``k`` shuffled folds.

    Fold sizes differ by at most one. The complement of a fold is the
    corresponding training set (see ``fold_complement``).

    Args:
        n: Number of instances
        k: Number of folds
        random_state: Seed for the shuffle

    Returns:
        List of ``k`` index arrays

    Raises:
        FoldCountError: If ``k`` is not in ``[1, n]``
    """
    if k < 1 or k > n:
        raise FoldCountError(f"Number of folds must lie in [1, {n}], got {k}")
    if k == 1:
        return [np.random.default_rng(random_state).permutation(n)]

    splitter = KFold(n_splits=k, shuffle=True, random_state=random_state)
    return [test_idx for _, test_idx in splitter.split(np.arange(n))]


def fold_complement(n: int, fold: np.ndarray) -> np.ndarray:
    """Indices of ``0..n-1`` not contained in ``fold``."""
    return np.setdiff1d(np.arange(n), fold, assume_unique=True)
