"""
Base model implementation for metaOrchestra.

This module contains the adapter base class that binds a scikit-learn
estimator to the Learner contract.
"""

from abc import abstractmethod
from typing import Any, Dict, Optional

import numpy as np
from sklearn.base import BaseEstimator

from ..core.base import Learner
from ..core.exceptions import FitError, ShapeError
from ..data.validator import DataValidator
from ..utils.helpers import ArrayLike, as_matrix, as_vector


class BaseModel(Learner):
    """
    Base class for learners backed by a scikit-learn estimator.

    Subclasses build the native estimator from ``self.options['impl_options']``
    in ``_build_estimator``. Input validation failures and any exception raised
    by the native fit are wrapped in ``FitError``.
    """

    def __init__(self, options: Optional[Dict[str, Any]] = None):
        super().__init__(options)
        self.model_ = None
        self.classes_ = None
        self.n_features_in_ = None
        self.feature_names_ = None

    @classmethod
    def default_options(cls) -> Dict[str, Any]:
        return {"impl_options": {}}

    @abstractmethod
    def _build_estimator(self) -> BaseEstimator:
        """Create the unfitted native estimator."""
        pass

    def fit(self, X: ArrayLike, y: ArrayLike) -> 'BaseModel':
        """Fit the model to the training data."""
        try:
            DataValidator().validate(X, y)
            matrix = as_matrix(X)
            labels = as_vector(y)

            self.feature_names_ = X.columns.tolist() if hasattr(X, 'columns') else None
            self.n_features_in_ = matrix.shape[1]
            self.classes_ = np.unique(labels)

            self.model_ = self._build_estimator()
            self.model_.fit(matrix, labels)
        except Exception as exc:
            raise FitError(f"{type(self).__name__} failed to fit: {exc}") from exc

        self.is_fitted = True
        return self

    def transform(self, X: ArrayLike) -> np.ndarray:
        """Predict one label per row of ``X``."""
        self._check_is_fitted()
        matrix = as_matrix(X)
        if matrix.shape[1] != self.n_features_in_:
            raise ShapeError(
                f"{type(self).__name__} was fitted on {self.n_features_in_} features, "
                f"got {matrix.shape[1]}"
            )
        return self.model_.predict(matrix)

    def predict_proba(self, X: ArrayLike) -> np.ndarray:
        """Predict class probabilities, if the native estimator supports it."""
        self._check_is_fitted()
        if not hasattr(self.model_, "predict_proba"):
            raise AttributeError(f"{type(self.model_).__name__} has no predict_proba")
        return self.model_.predict_proba(as_matrix(X))
