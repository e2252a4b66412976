"""
Scaling and projection transformers for metaOrchestra.
"""

from abc import abstractmethod
from typing import Any, Dict, Optional

import numpy as np
from sklearn.decomposition import PCA as SklearnPCA
from sklearn.preprocessing import StandardScaler

from ..core.base import Transformer
from ..core.exceptions import FitError, ShapeError
from ..utils.helpers import ArrayLike, as_matrix


class _EstimatorTransformer(Transformer):
    """Transformer applying a fitted scikit-learn estimator's ``transform``."""

    def __init__(self, options: Optional[Dict[str, Any]] = None):
        super().__init__(options)
        self.estimator_ = None
        self.n_features_in_ = None

    @abstractmethod
    def _build_estimator(self):
        """Create the unfitted native estimator."""
        pass

    def fit(self, X: ArrayLike, y: Optional[ArrayLike] = None) -> '_EstimatorTransformer':
        matrix = as_matrix(X).astype(float)
        self.n_features_in_ = matrix.shape[1]
        try:
            self.estimator_ = self._build_estimator().fit(matrix)
        except Exception as exc:
            raise FitError(f"{type(self).__name__} failed to fit: {exc}") from exc
        self.is_fitted = True
        return self

    def transform(self, X: ArrayLike) -> np.ndarray:
        self._check_is_fitted()
        matrix = as_matrix(X).astype(float)
        if matrix.shape[1] != self.n_features_in_:
            raise ShapeError(
                f"{type(self).__name__} was fitted on {self.n_features_in_} columns, "
                f"got {matrix.shape[1]}"
            )
        return self.estimator_.transform(matrix)


class Standardizer(_EstimatorTransformer):
    """Centers every column to zero mean and unit variance."""

    @classmethod
    def default_options(cls) -> Dict[str, Any]:
        return {"impl_options": {"with_mean": True, "with_std": True}}

    def _build_estimator(self) -> StandardScaler:
        return StandardScaler(**self.options["impl_options"])


class PCA(_EstimatorTransformer):
    """Projects the data onto its leading principal components."""

    @classmethod
    def default_options(cls) -> Dict[str, Any]:
        return {"impl_options": {"n_components": None}}

    def _build_estimator(self) -> SklearnPCA:
        return SklearnPCA(**self.options["impl_options"])
