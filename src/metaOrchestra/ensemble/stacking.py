"""
Stacked generalization for metaOrchestra.

The stacker is trained on out-of-fold predictions of the child learners, so
it never sees a prediction a child made on instances it was trained on.
"""

from typing import Any, Dict, List

import numpy as np

from .base import BaseEnsemble, fit_and_predict, fit_learners
from ..core.cross_validation import fold_complement, kfold
from ..core.exceptions import FoldCountError
from ..core.options import derive
from ..models.decision_tree import RandomForest
from ..preprocessing.one_hot_encoder import OneHotEncoder
from ..utils.helpers import ArrayLike, as_matrix, n_rows


class StackEnsemble(BaseEnsemble):
    """
    Two-level ensemble: child learners feed a meta-learner ("stacker").

    Options:
        stacker: learner trained on the children's predictions
        n_folds: folds used to produce out-of-fold predictions
        keep_original_features: append the original features to the
            children's predictions before they reach the stacker

    Fitting:
        1. Split the training set into ``n_folds`` folds.
        2. For each fold, train a fresh copy of every child on the other folds
           and predict the fold itself.
        3. Encode that out-of-fold table and fit the stacker on it.
        4. Refit every child on the full training set for use at transform time.
    """

    @classmethod
    def default_options(cls) -> Dict[str, Any]:
        options = super().default_options()
        options.update({
            "stacker": RandomForest(),
            "n_folds": 5,
            "keep_original_features": False,
        })
        return options

    def _folds(self, n: int) -> List[np.ndarray]:
        n_folds = self.options["n_folds"]
        if n_folds < 2:
            raise FoldCountError(f"Stacking needs at least 2 folds, got {n_folds}")
        return kfold(n, n_folds, self.options["random_state"])

    def _meta_table(self, predictions: np.ndarray, X: ArrayLike) -> np.ndarray:
        """One column per child, optionally followed by the original features."""
        if self.options["keep_original_features"]:
            return np.hstack([predictions, as_matrix(X).astype(object)])
        return predictions

    def _out_of_fold_predictions(self, X: ArrayLike, y: np.ndarray) -> np.ndarray:
        n = n_rows(X)
        folds = self._folds(n)

        tasks = [
            (derive(learner), fold_complement(n, fold), fold)
            for fold in folds
            for learner in self.learners
        ]
        predictions = fit_and_predict(tasks, X, y, self.options["n_jobs"])

        table = np.empty((n, len(self.learners)), dtype=object)
        for task_index, predicted in enumerate(predictions):
            fold_index, learner_index = divmod(task_index, len(self.learners))
            table[folds[fold_index], learner_index] = predicted
            self.logger.debug(
                f"Fold {fold_index}: learner {learner_index} predicted {len(predicted)} instances"
            )
        return table

    def fit(self, X: ArrayLike, y: ArrayLike) -> 'StackEnsemble':
        """Fit the stacker on out-of-fold predictions, then refit the children."""
        y = self._check_fit_input(X, y)
        self.logger.info(
            f"Stacking {len(self.learners)} learners with {self.options['n_folds']} folds "
            f"on {len(y)} instances"
        )

        self.meta_training_table_ = self._meta_table(self._out_of_fold_predictions(X, y), X)
        self.encoder_ = OneHotEncoder().fit(self.meta_training_table_)
        self.stacker_ = derive(self.options["stacker"]).fit(
            self.encoder_.transform(self.meta_training_table_), y
        )

        self.learners_ = fit_learners(
            [derive(learner) for learner in self.learners], X, y, self.options["n_jobs"]
        )

        self.is_fitted = True
        return self

    def transform(self, X: ArrayLike) -> np.ndarray:
        """Predict with the stacker on the children's predictions for ``X``."""
        self._check_is_fitted()
        predictions = np.empty((n_rows(X), len(self.learners_)), dtype=object)
        for learner_index, learner in enumerate(self.learners_):
            predictions[:, learner_index] = learner.transform(X)

        meta_table = self._meta_table(predictions, X)
        return self.stacker_.transform(self.encoder_.transform(meta_table))
