"""
Model implementations for metaOrchestra.

This module contains the scikit-learn backed learners and the factory that
builds transformers by name.
"""

from typing import Any, Dict, Iterable, Optional

from .base_model import BaseModel
from .decision_tree import DecisionStumpAdaboost, PrunedTree, RandomForest
from .sklearn_learner import SKLEARN_LEARNERS, SKLLearner


def _registry() -> Dict[str, type]:
    from ..ensemble import BestLearnerEnsemble, StackEnsemble, VoteEnsemble
    from ..preprocessing import OneHotEncoder, PCA, Standardizer

    return {
        "PrunedTree": PrunedTree,
        "RandomForest": RandomForest,
        "DecisionStumpAdaboost": DecisionStumpAdaboost,
        "SKLLearner": SKLLearner,
        "OneHotEncoder": OneHotEncoder,
        "Standardizer": Standardizer,
        "PCA": PCA,
        "VoteEnsemble": VoteEnsemble,
        "StackEnsemble": StackEnsemble,
        "BestLearnerEnsemble": BestLearnerEnsemble,
    }


class ModelFactory:
    """
    Factory for creating transformers by name.

    Backend availability is passed in explicitly: ``available`` restricts the
    factory to the named transformers, e.g. when an optional backend is not
    installed in the running environment.
    """

    def __init__(self, available: Optional[Iterable[str]] = None):
        registry = _registry()
        if available is not None:
            available = set(available)
            unknown = available - set(registry)
            if unknown:
                raise ValueError(f"Unknown transformers: {sorted(unknown)}")
            registry = {name: cls for name, cls in registry.items() if name in available}
        self.registry = registry

    def available_models(self):
        """Names this factory can build."""
        return sorted(self.registry)

    def create_model(self, name: str, options: Optional[Dict[str, Any]] = None):
        """Create a transformer by name with optional option overrides."""
        if name not in self.registry:
            raise ValueError(f"Unknown model: {name}")
        return self.registry[name](options)

    def create_from_spec(self, spec: Dict[str, Any]):
        """
        Create a transformer from a plain nested specification.

        A specification is ``{"name": ..., "options": {...}}``. Inside the
        options, ``learners`` may hold a list of specifications and
        ``stacker`` a single one; they are built recursively.

        Args:
            spec: Transformer specification, e.g. loaded from YAML

        Returns:
            Configured transformer
        """
        if "name" not in spec:
            raise ValueError(f"Model specification without a name: {spec}")

        options = dict(spec.get("options") or {})
        if "learners" in options:
            options["learners"] = [self._build_child(child) for child in options["learners"]]
        if "stacker" in options:
            options["stacker"] = self._build_child(options["stacker"])
        return self.create_model(spec["name"], options)

    def _build_child(self, child):
        return self.create_from_spec(child) if isinstance(child, dict) else child


__all__ = [
    "BaseModel",
    "DecisionStumpAdaboost",
    "ModelFactory",
    "PrunedTree",
    "RandomForest",
    "SKLEARN_LEARNERS",
    "SKLLearner",
]
