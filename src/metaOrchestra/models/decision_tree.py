"""
Tree-based learners for metaOrchestra.

Pruned decision tree, random forest and AdaBoost over decision stumps, all
backed by scikit-learn.
"""

from typing import Any, Dict

from sklearn.ensemble import AdaBoostClassifier, RandomForestClassifier
from sklearn.tree import DecisionTreeClassifier

from .base_model import BaseModel


class PrunedTree(BaseModel):
    """Decision tree with cost-complexity pruning."""

    @classmethod
    def default_options(cls) -> Dict[str, Any]:
        return {
            "impl_options": {
                "ccp_alpha": 0.0,
                "max_depth": None,
                "random_state": 42,
            }
        }

    def _build_estimator(self) -> DecisionTreeClassifier:
        return DecisionTreeClassifier(**self.options["impl_options"])


class RandomForest(BaseModel):
    """Random forest; each tree sees a ``max_samples`` share of the instances."""

    @classmethod
    def default_options(cls) -> Dict[str, Any]:
        return {
            "impl_options": {
                "n_estimators": 10,
                "max_features": "sqrt",
                "max_samples": 0.7,
                "random_state": 42,
                "n_jobs": 1,
            }
        }

    def _build_estimator(self) -> RandomForestClassifier:
        return RandomForestClassifier(bootstrap=True, **self.options["impl_options"])


class DecisionStumpAdaboost(BaseModel):
    """AdaBoost over depth-one decision trees."""

    @classmethod
    def default_options(cls) -> Dict[str, Any]:
        return {
            "impl_options": {
                "n_iterations": 7,
                "random_state": 42,
            }
        }

    def _build_estimator(self) -> AdaBoostClassifier:
        impl_options = self.options["impl_options"]
        return AdaBoostClassifier(
            estimator=DecisionTreeClassifier(max_depth=1),
            n_estimators=impl_options["n_iterations"],
            random_state=impl_options["random_state"],
        )
