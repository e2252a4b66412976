"""
Generic scikit-learn learner for metaOrchestra.

Wraps any classifier from a fixed table of scikit-learn estimators, selected
by name through the ``learner`` option.
"""

from typing import Any, Dict

from sklearn.base import BaseEstimator
from sklearn.discriminant_analysis import LinearDiscriminantAnalysis, QuadraticDiscriminantAnalysis
from sklearn.ensemble import (
    AdaBoostClassifier,
    BaggingClassifier,
    ExtraTreesClassifier,
    GradientBoostingClassifier,
    RandomForestClassifier,
)
from sklearn.linear_model import (
    LogisticRegression,
    RidgeClassifier,
    RidgeClassifierCV,
    SGDClassifier,
)
from sklearn.naive_bayes import BernoulliNB, GaussianNB, MultinomialNB
from sklearn.neighbors import KNeighborsClassifier, NearestCentroid, RadiusNeighborsClassifier
from sklearn.neural_network import MLPClassifier
from sklearn.svm import LinearSVC, NuSVC, SVC
from sklearn.tree import DecisionTreeClassifier

from .base_model import BaseModel

SKLEARN_LEARNERS = {
    "AdaBoostClassifier": AdaBoostClassifier,
    "BaggingClassifier": BaggingClassifier,
    "ExtraTreesClassifier": ExtraTreesClassifier,
    "GradientBoostingClassifier": GradientBoostingClassifier,
    "RandomForestClassifier": RandomForestClassifier,
    "LDA": LinearDiscriminantAnalysis,
    "QDA": QuadraticDiscriminantAnalysis,
    "LogisticRegression": LogisticRegression,
    "RidgeClassifier": RidgeClassifier,
    "RidgeClassifierCV": RidgeClassifierCV,
    "SGDClassifier": SGDClassifier,
    "KNeighborsClassifier": KNeighborsClassifier,
    "RadiusNeighborsClassifier": RadiusNeighborsClassifier,
    "NearestCentroid": NearestCentroid,
    "SVC": SVC,
    "LinearSVC": LinearSVC,
    "NuSVC": NuSVC,
    "MLPClassifier": MLPClassifier,
    "GaussianNB": GaussianNB,
    "MultinomialNB": MultinomialNB,
    "BernoulliNB": BernoulliNB,
    "DecisionTreeClassifier": DecisionTreeClassifier,
}


class SKLLearner(BaseModel):
    """Learner backed by a scikit-learn classifier chosen by name."""

    def __init__(self, options=None):
        super().__init__(options)
        learner = self.options["learner"]
        if learner not in SKLEARN_LEARNERS:
            raise ValueError(
                f"Unknown scikit-learn learner: {learner}. "
                f"Available: {sorted(SKLEARN_LEARNERS)}"
            )

    @classmethod
    def default_options(cls) -> Dict[str, Any]:
        return {
            "learner": "LinearSVC",
            "impl_options": {},
        }

    def _build_estimator(self) -> BaseEstimator:
        return SKLEARN_LEARNERS[self.options["learner"]](**self.options["impl_options"])

    def __repr__(self) -> str:
        return f"SKLLearner({self.options['learner']})"
