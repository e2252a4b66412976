"""
Best-learner selection ensemble for metaOrchestra.

Candidates are scored on validation partitions drawn from the training data;
the best one is refitted on all training data and used for prediction.
"""

from typing import Any, Dict, List, Tuple

import numpy as np
import pandas as pd

from .base import BaseEnsemble, fit_and_predict
from ..core.base import Learner
from ..core.cross_validation import fold_complement, holdout, kfold
from ..core.exceptions import FoldCountError
from ..core.options import derive, expand_options_grid
from ..evaluation.metrics import score
from ..utils.helpers import ArrayLike, n_rows


class BestLearnerEnsemble(BaseEnsemble):
    """
    Ensemble that keeps the single best scoring candidate.

    Options:
        learner_options_grid: None, or a list aligned with ``learners`` whose
            entries are None or an options grid (see ``expand_options_grid``);
            every grid point yields one candidate derived from its learner
        validation: ``method`` ("kfold" or "holdout"), ``n_folds`` and
            ``holdout_fraction``
        metric: scoring metric passed to ``score``

    Candidates are ranked by their mean score over all partitions; the first
    candidate in registration order wins a tie.
    """

    @classmethod
    def default_options(cls) -> Dict[str, Any]:
        options = super().default_options()
        options.update({
            "learner_options_grid": None,
            "validation": {
                "method": "kfold",
                "n_folds": 5,
                "holdout_fraction": 0.3,
            },
            "metric": "accuracy",
        })
        return options

    def _candidates(self) -> List[Learner]:
        grids = self.options["learner_options_grid"]
        if grids is not None and len(grids) != len(self.learners):
            raise ValueError(
                f"learner_options_grid has {len(grids)} entries for {len(self.learners)} learners"
            )

        candidates = []
        for position, learner in enumerate(self.learners):
            grid = grids[position] if grids is not None else None
            for overrides in expand_options_grid(grid):
                candidates.append(derive(learner, overrides))
        return candidates

    def _partitions(self, n: int) -> List[Tuple[np.ndarray, np.ndarray]]:
        """(train, validation) index pairs."""
        validation = self.options["validation"]
        random_state = self.options["random_state"]

        if validation["method"] == "kfold":
            folds = kfold(n, validation["n_folds"], random_state)
            if len(folds) == 1:
                raise FoldCountError("kfold validation needs at least two folds")
            return [(fold_complement(n, fold), fold) for fold in folds]
        if validation["method"] == "holdout":
            train_idx, valid_idx = holdout(n, validation["holdout_fraction"], random_state)
            if len(train_idx) == 0 or len(valid_idx) == 0:
                raise ValueError(
                    f"holdout_fraction {validation['holdout_fraction']} leaves an empty partition"
                )
            return [(train_idx, valid_idx)]
        raise ValueError(f"Unknown validation method: {validation['method']}")

    def fit(self, X: ArrayLike, y: ArrayLike) -> 'BestLearnerEnsemble':
        """Score every candidate, then refit the best one on all data."""
        y = self._check_fit_input(X, y)
        candidates = self._candidates()
        partitions = self._partitions(n_rows(X))
        self.logger.info(
            f"Selecting among {len(candidates)} candidates on {len(partitions)} partitions"
        )

        tasks = [
            (derive(candidate), train_idx, valid_idx)
            for train_idx, valid_idx in partitions
            for candidate in candidates
        ]
        predictions = fit_and_predict(tasks, X, y, self.options["n_jobs"])

        scores = np.empty((len(candidates), len(partitions)))
        for task_index, predicted in enumerate(predictions):
            partition_index, candidate_index = divmod(task_index, len(candidates))
            valid_idx = partitions[partition_index][1]
            scores[candidate_index, partition_index] = score(
                self.options["metric"], y[valid_idx], predicted
            )

        self.scores_ = pd.DataFrame(
            scores,
            index=[f"{position}:{candidate!r}" for position, candidate in enumerate(candidates)],
            columns=[f"partition_{index}" for index in range(len(partitions))],
        )
        self.scores_["mean"] = scores.mean(axis=1)

        best_index = int(np.argmax(self.scores_["mean"].to_numpy()))
        self.candidates_ = candidates
        self.best_learner_ = candidates[best_index].fit(X, y)
        self.logger.info(
            f"Selected {self.best_learner_!r} with mean {self.options['metric']} "
            f"{self.scores_['mean'].iloc[best_index]:.2f}"
        )

        self.is_fitted = True
        return self

    def transform(self, X: ArrayLike) -> np.ndarray:
        """Delegate to the selected learner."""
        self._check_is_fitted()
        return self.best_learner_.transform(X)
