"""
Majority voting ensemble for metaOrchestra.
"""

from collections import Counter
from typing import Any, Sequence

import numpy as np

from .base import BaseEnsemble, fit_learners
from ..core.options import derive
from ..utils.helpers import ArrayLike


def majority_vote(votes: Sequence[Any]) -> Any:
    """
    Most frequent value in ``votes``.

    Among equally frequent values the one cast first wins.
    """
    counts = Counter(votes)
    return max(counts, key=counts.get)


class VoteEnsemble(BaseEnsemble):
    """
    Ensemble predicting the per-instance mode of its children's predictions.

    Every child is fitted on the full training set. Ties go to the value
    predicted by the earliest registered child among the tied values.
    """

    def fit(self, X: ArrayLike, y: ArrayLike) -> 'VoteEnsemble':
        """Fit every child learner on the training data."""
        y = self._check_fit_input(X, y)
        self.logger.info(f"Fitting {len(self.learners)} voting learners on {len(y)} instances")

        self.learners_ = fit_learners(
            [derive(learner) for learner in self.learners], X, y, self.options["n_jobs"]
        )

        self.is_fitted = True
        return self

    def transform(self, X: ArrayLike) -> np.ndarray:
        """Predict the majority label per instance."""
        self._check_is_fitted()
        predictions = [np.asarray(learner.transform(X)) for learner in self.learners_]

        votes_per_row = zip(*predictions)
        return np.array([majority_vote(votes) for votes in votes_per_row])
