import logging

import numpy as np
import pytest

from metaOrchestra.core.exceptions import FitError, NotFittedError, ShapeError
from metaOrchestra.models import (
    DecisionStumpAdaboost,
    ModelFactory,
    PrunedTree,
    RandomForest,
    SKLLearner,
)
from metaOrchestra.ensemble import StackEnsemble, VoteEnsemble
from metaOrchestra.evaluation.metrics import score


@pytest.mark.parametrize("learner_cls", [PrunedTree, RandomForest, DecisionStumpAdaboost])
def test_tree_learners_fit_and_predict(learner_cls, separable_data):
    X_train, y_train, X_test, y_test = separable_data
    learner = learner_cls().fit(X_train, y_train)
    predictions = learner.transform(X_test)

    assert predictions.shape == (len(X_test),)
    assert set(predictions) <= {"disease", "health"}
    assert score("accuracy", y_test, predictions) >= 70.0


def test_learner_accepts_dataframes(separable_frame):
    X_train, y_train, X_test, _ = separable_frame
    learner = PrunedTree().fit(X_train, y_train)
    assert learner.feature_names_ == list(X_train.columns)
    assert len(learner.transform(X_test)) == len(X_test)


def test_transform_before_fit_raises(separable_data):
    with pytest.raises(NotFittedError):
        PrunedTree().transform(separable_data[2])


def test_transform_with_wrong_column_count_raises(separable_data):
    X_train, y_train, X_test, _ = separable_data
    learner = PrunedTree().fit(X_train, y_train)
    with pytest.raises(ShapeError):
        learner.transform(X_test[:, :2])


def test_native_fit_failure_becomes_fit_error(separable_data):
    X_train, y_train, _, _ = separable_data
    X_bad = X_train.copy()
    X_bad[0, 0] = np.nan
    learner = SKLLearner({"learner": "LogisticRegression"})

    with pytest.raises(FitError) as excinfo:
        learner.fit(X_bad, y_train)
    assert isinstance(excinfo.value.__cause__, ValueError)


@pytest.mark.parametrize("X, y", [
    (np.zeros((3, 0)), [0, 1, 0]),
    (np.zeros((3, 2)), [[0], [1], [0]]),
    (np.zeros((3, 2)), [0, 1]),
])
def test_invalid_fit_input_becomes_fit_error(X, y):
    with pytest.raises(FitError) as excinfo:
        PrunedTree().fit(X, y)
    assert isinstance(excinfo.value.__cause__, ShapeError)


def test_skl_learner_builds_named_estimator(separable_data):
    X_train, y_train, X_test, _ = separable_data
    learner = SKLLearner({"learner": "KNeighborsClassifier", "impl_options": {"n_neighbors": 3}})
    learner.fit(X_train, y_train)

    assert learner.model_.n_neighbors == 3
    assert learner.predict_proba(X_test).shape == (len(X_test), 2)


def test_skl_learner_rejects_unknown_name():
    with pytest.raises(ValueError):
        SKLLearner({"learner": "NoSuchClassifier"})


def test_unknown_option_is_logged(caplog):
    with caplog.at_level(logging.WARNING):
        PrunedTree({"impl_option": {"max_depth": 2}})
    assert "Unknown option for PrunedTree: impl_option" in caplog.text


def test_factory_creates_models_by_name():
    factory = ModelFactory()
    learner = factory.create_model("SKLLearner", {"learner": "GaussianNB"})
    assert isinstance(learner, SKLLearner)
    assert learner.options["learner"] == "GaussianNB"


def test_factory_builds_nested_specs():
    spec = {
        "name": "StackEnsemble",
        "options": {
            "n_folds": 3,
            "learners": [
                {"name": "PrunedTree", "options": {"impl_options": {"max_depth": 2}}},
                {"name": "SKLLearner", "options": {"learner": "GaussianNB"}},
            ],
            "stacker": {"name": "SKLLearner", "options": {"learner": "LogisticRegression"}},
        },
    }
    ensemble = ModelFactory().create_from_spec(spec)

    assert isinstance(ensemble, StackEnsemble)
    assert ensemble.options["n_folds"] == 3
    assert [type(learner) for learner in ensemble.learners] == [PrunedTree, SKLLearner]
    assert ensemble.learners[0].options["impl_options"]["max_depth"] == 2
    assert ensemble.options["stacker"].options["learner"] == "LogisticRegression"


def test_factory_respects_available_backends():
    factory = ModelFactory(available=["PrunedTree", "VoteEnsemble"])
    assert factory.available_models() == ["PrunedTree", "VoteEnsemble"]
    assert isinstance(factory.create_model("VoteEnsemble"), VoteEnsemble)
    with pytest.raises(ValueError):
        factory.create_model("SKLLearner")


def test_factory_rejects_unknown_backends():
    with pytest.raises(ValueError):
        ModelFactory(available=["CRTLearner"])
