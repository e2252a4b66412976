"""
metaOrchestra v1.0

Heterogeneous learners behind one Transformer interface, combined into
voting, stacking and best-learner ensembles.
"""

__version__ = "1.0.0"

# Core imports
from .core.base import Learner, Transformer
from .core.cross_validation import holdout, kfold
from .core.exceptions import (
    EmptyEnsembleError,
    FitError,
    FoldCountError,
    InferenceError,
    MetaOrchestraError,
    NotFittedError,
    ShapeError,
    UnsupportedMetricError,
)
from .core.options import derive, flatten_options, merge_options, set_option_path
from .core.variable_types import NominalVar, NumericVar, infer_element_type, infer_variable_type

# Evaluation
from .evaluation.metrics import score

# Models
from .models import ModelFactory, DecisionStumpAdaboost, PrunedTree, RandomForest, SKLLearner

# Preprocessing
from .preprocessing import OneHotEncoder, PCA, Standardizer

# Ensembles
from .ensemble import BestLearnerEnsemble, StackEnsemble, VoteEnsemble

# Configuration
from .utils.config import ConfigManager

__all__ = [
    # Core
    "Learner",
    "Transformer",
    "holdout",
    "kfold",
    "derive",
    "flatten_options",
    "merge_options",
    "set_option_path",
    "NominalVar",
    "NumericVar",
    "infer_element_type",
    "infer_variable_type",

    # Errors
    "EmptyEnsembleError",
    "FitError",
    "FoldCountError",
    "InferenceError",
    "MetaOrchestraError",
    "NotFittedError",
    "ShapeError",
    "UnsupportedMetricError",

    # Evaluation
    "score",

    # Models
    "ModelFactory",
    "DecisionStumpAdaboost",
    "PrunedTree",
    "RandomForest",
    "SKLLearner",

    # Preprocessing
    "OneHotEncoder",
    "PCA",
    "Standardizer",

    # Ensembles
    "BestLearnerEnsemble",
    "StackEnsemble",
    "VoteEnsemble",

    # Configuration
    "ConfigManager",
]
