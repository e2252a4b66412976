"""
Core functionality for metaOrchestra.

This module contains the Transformer contract, the option store, variable
type inference, cross-validation partitioning and the error hierarchy.
"""

from .base import Learner, Transformer
from .cross_validation import fold_complement, holdout, kfold
from .exceptions import (
    EmptyEnsembleError,
    FitError,
    FoldCountError,
    InferenceError,
    MetaOrchestraError,
    NotFittedError,
    ShapeError,
    UnsupportedMetricError,
)
from .options import derive, expand_options_grid, flatten_options, merge_options, set_option_path
from .variable_types import (
    NominalVar,
    NumericVar,
    infer_element_type,
    infer_variable_type,
    is_missing,
    missing_mask,
)

__all__ = [
    "Learner",
    "Transformer",
    "fold_complement",
    "holdout",
    "kfold",
    "EmptyEnsembleError",
    "FitError",
    "FoldCountError",
    "InferenceError",
    "MetaOrchestraError",
    "NotFittedError",
    "ShapeError",
    "UnsupportedMetricError",
    "derive",
    "expand_options_grid",
    "flatten_options",
    "merge_options",
    "set_option_path",
    "NominalVar",
    "NumericVar",
    "infer_element_type",
    "infer_variable_type",
    "is_missing",
    "missing_mask",
]
