"""
Evaluation metrics for metaOrchestra.

The supported metrics form a closed set; add a branch to ``score`` to
support another one.
"""

from typing import Any, Sequence

import numpy as np

from ..core.exceptions import ShapeError, UnsupportedMetricError

SUPPORTED_METRICS = ("accuracy",)


def score(metric: str, actual: Sequence[Any], predicted: Sequence[Any]) -> float:
    """
    Score predictions against ground truth values.

    Available metrics:
        - ``accuracy``: percentage of exact matches, in ``[0, 100]``

    Args:
        metric: Metric to assess with
        actual: Ground truth values
        predicted: Predicted values

    Returns:
        Score of the predictions

    Raises:
        UnsupportedMetricError: If ``metric`` is not implemented
        ShapeError: If ``actual`` and ``predicted`` differ in length
    """
    actual = np.asarray(actual).ravel()
    predicted = np.asarray(predicted).ravel()
    if len(actual) != len(predicted):
        raise ShapeError(
            f"Cannot score {len(predicted)} predictions against {len(actual)} values"
        )

    if metric == "accuracy":
        # Compared as objects so mixed-type and continuous values are allowed
        matches = actual.astype(object) == predicted.astype(object)
        return float(np.mean(matches) * 100.0)
    raise UnsupportedMetricError(f"Metric {metric} not implemented for score.")
