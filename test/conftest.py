# test/conftest.py
from __future__ import annotations

import numpy as np
import pandas as pd
import pytest
from sklearn.datasets import make_classification


@pytest.fixture
def separable_data():
    """Two well separated classes with string labels, split into train/test."""
    X, y = make_classification(
        n_samples=80,
        n_features=4,
        n_informative=3,
        n_redundant=0,
        class_sep=3.0,
        random_state=0,
    )
    labels = np.where(y == 1, "disease", "health")
    return X[:60], labels[:60], X[60:], labels[60:]


@pytest.fixture
def separable_frame(separable_data):
    X_train, y_train, X_test, y_test = separable_data
    columns = [f"feature{i}" for i in range(X_train.shape[1])]
    return (
        pd.DataFrame(X_train, columns=columns),
        y_train,
        pd.DataFrame(X_test, columns=columns),
        y_test,
    )


@pytest.fixture
def echo_data():
    """
    Column 0 and 1 equal the labels, column 2 is unrelated to them.

    Labels are 70% zeros, so a constant-zero learner scores 70.
    """
    y = np.array([0] * 14 + [1] * 6)
    noise = np.array([1, 0] * 10)
    X = np.column_stack([y, y, noise])
    return X, y
