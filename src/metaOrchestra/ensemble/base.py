"""
Shared machinery for metaOrchestra ensembles.

Child fits are independent of each other, so they can be fanned out with
joblib. Each task returns its fitted learner; with process-based backends the
returned object is a copy, which is why callers keep the return value rather
than the instance they submitted.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np
from joblib import Parallel, delayed

from ..core.base import Learner
from ..core.exceptions import EmptyEnsembleError
from ..data.validator import DataValidator
from ..models.decision_tree import DecisionStumpAdaboost, PrunedTree, RandomForest
from ..utils.helpers import ArrayLike, as_vector, take_rows


def default_learners() -> List[Learner]:
    """Children used when an ensemble is built without explicit learners."""
    return [PrunedTree(), DecisionStumpAdaboost(), RandomForest()]


def _fit_learner(learner: Learner, X: ArrayLike, y: np.ndarray) -> Learner:
    return learner.fit(X, y)


def _fit_and_predict(
    learner: Learner,
    X: ArrayLike,
    y: np.ndarray,
    train_idx: np.ndarray,
    test_idx: np.ndarray
) -> np.ndarray:
    learner.fit(take_rows(X, train_idx), y[train_idx])
    return np.asarray(learner.transform(take_rows(X, test_idx)))


def fit_learners(
    learners: Sequence[Learner],
    X: ArrayLike,
    y: np.ndarray,
    n_jobs: Optional[int] = 1
) -> List[Learner]:
    """Fit every learner on the same data and return the fitted learners in order."""
    return Parallel(n_jobs=n_jobs)(
        delayed(_fit_learner)(learner, X, y) for learner in learners
    )


def fit_and_predict(
    tasks: Sequence[Tuple[Learner, np.ndarray, np.ndarray]],
    X: ArrayLike,
    y: np.ndarray,
    n_jobs: Optional[int] = 1
) -> List[np.ndarray]:
    """
    Run ``(learner, train_idx, test_idx)`` tasks.

    Each learner is fitted on the training rows and predicts the test rows.

    Returns:
        Predictions per task, in task order
    """
    return Parallel(n_jobs=n_jobs)(
        delayed(_fit_and_predict)(learner, X, y, train_idx, test_idx)
        for learner, train_idx, test_idx in tasks
    )


class BaseEnsemble(Learner):
    """
    Base class for ensembles of child learners.

    Options:
        learners: ordered list of child learners; registration order decides ties
        n_jobs: number of parallel joblib workers for child fits
        random_state: seed for internal partitioning
    """

    def __init__(self, options: Optional[Dict[str, Any]] = None):
        super().__init__(options)
        self.validator = DataValidator()

    @classmethod
    def default_options(cls) -> Dict[str, Any]:
        return {
            "learners": default_learners(),
            "n_jobs": 1,
            "random_state": 42,
        }

    @property
    def learners(self) -> List[Learner]:
        return self.options["learners"]

    def _check_fit_input(self, X: ArrayLike, y: ArrayLike) -> np.ndarray:
        """Validate the training data and return the labels as an array."""
        if not self.learners:
            raise EmptyEnsembleError(f"{type(self).__name__} has no learners")
        labels = as_vector(y)
        self.validator.validate(X, labels)
        return labels

    def __repr__(self) -> str:
        children = ", ".join(repr(learner) for learner in self.learners)
        return f"{type(self).__name__}([{children}])"
