"""
Helper utilities for metaOrchestra.

This module contains small array helpers shared by transformers and ensembles.
"""

from typing import Any, Sequence, Union
import pandas as pd
import numpy as np

ArrayLike = Union[np.ndarray, pd.DataFrame, Sequence[Any]]


def n_rows(X: ArrayLike) -> int:
    """Number of instances (rows) in ``X``."""
    return X.shape[0] if hasattr(X, 'shape') else len(X)


def as_matrix(X: ArrayLike) -> np.ndarray:
    """Return ``X`` as a 2-D numpy array, keeping its dtype."""
    matrix = X.to_numpy() if isinstance(X, pd.DataFrame) else np.asarray(X)
    if matrix.ndim == 1:
        matrix = matrix.reshape(-1, 1)
    return matrix


def take_rows(X: ArrayLike, indices: np.ndarray) -> ArrayLike:
    """Select rows by position, preserving DataFrames."""
    if isinstance(X, (pd.DataFrame, pd.Series)):
        return X.iloc[indices]
    return np.asarray(X)[indices]


def as_vector(y: ArrayLike) -> np.ndarray:
    """Return labels as a flat numpy array."""
    return np.asarray(y).ravel()
