"""
Data validation utilities for metaOrchestra.

This module checks training and prediction inputs before they reach a model.
"""

from typing import Optional

import numpy as np

from ..core.exceptions import ShapeError
from ..utils.helpers import ArrayLike, as_matrix, n_rows
from ..utils.logger import get_logger


class DataValidator:
    """Validator for feature matrices and label vectors."""

    def __init__(self):
        self.logger = get_logger("DataValidator")

    def validate(self, X: ArrayLike, y: Optional[ArrayLike] = None) -> None:
        """
        Validate input data.

        Args:
            X: Feature matrix
            y: Target labels (optional)

        Raises:
            ShapeError: If the data is empty or rows and labels disagree
        """
        self._validate_feature_matrix(X)
        if y is not None:
            self._validate_labels(y)
            self._validate_data_consistency(X, y)

    def _validate_feature_matrix(self, X: ArrayLike) -> None:
        """Validate feature matrix."""
        matrix = as_matrix(X)
        if matrix.shape[0] == 0:
            raise ShapeError("No samples in feature matrix")
        if matrix.shape[1] == 0:
            raise ShapeError("No features in feature matrix")

        if matrix.dtype.kind == 'f' and np.isnan(matrix).any():
            self.logger.warning("Feature matrix contains NaN values")

    def _validate_labels(self, y: ArrayLike) -> None:
        """Validate target labels."""
        labels = np.asarray(y)
        if labels.ndim != 1:
            raise ShapeError(f"Labels must be one-dimensional, got shape {labels.shape}")
        if len(labels) == 0:
            raise ShapeError("No labels provided")

    def _validate_data_consistency(self, X: ArrayLike, y: ArrayLike) -> None:
        """Validate data consistency."""
        if n_rows(X) != len(y):
            raise ShapeError(
                f"Feature matrix length ({n_rows(X)}) doesn't match labels length ({len(y)})"
            )
