"""
Base classes and interfaces for metaOrchestra.

This module defines the Transformer contract that every model, atomic or
ensemble, implements.
"""

import copy
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import numpy as np

from .exceptions import NotFittedError
from .options import merge_options
from ..utils.helpers import ArrayLike
from ..utils.logger import get_logger


class Transformer(ABC):
    """
    Base class for everything that can be fitted and then applied to new data.

    A transformer owns a nested option store. Its class defines the default
    schema in ``default_options``; options passed to the constructor are merged
    over the defaults. The store is deep-copied, so child transformers held in
    the options belong to this instance alone. To reconfigure a transformer,
    derive a new one with ``metaOrchestra.core.options.derive``.
    """

    def __init__(self, options: Optional[Dict[str, Any]] = None):
        self.logger = get_logger(type(self).__name__)
        defaults = self.default_options()
        for key in (options or {}):
            if key not in defaults:
                self.logger.warning(f"Unknown option for {type(self).__name__}: {key}")
        self._options = copy.deepcopy(merge_options(defaults, options))
        self.is_fitted = False

    @classmethod
    def default_options(cls) -> Dict[str, Any]:
        """Default option schema; must return a fresh dictionary on every call."""
        return {}

    @property
    def options(self) -> Dict[str, Any]:
        """Option store of this transformer (read-only)."""
        return self._options

    @abstractmethod
    def fit(self, X: ArrayLike, y: Optional[ArrayLike] = None) -> 'Transformer':
        """Fit the transformer to the training data."""
        pass

    @abstractmethod
    def transform(self, X: ArrayLike) -> np.ndarray:
        """Apply the fitted transformer to new data."""
        pass

    def fit_transform(self, X: ArrayLike, y: Optional[ArrayLike] = None) -> np.ndarray:
        """Fit and transform the data."""
        return self.fit(X, y).transform(X)

    def _check_is_fitted(self) -> None:
        if not self.is_fitted:
            raise NotFittedError(f"{type(self).__name__} must be fitted before transforming")

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Learner(Transformer):
    """Transformer that predicts one label per instance from labeled training data."""

    @abstractmethod
    def fit(self, X: ArrayLike, y: ArrayLike) -> 'Learner':
        """Fit the learner to features ``X`` and labels ``y``."""
        pass
