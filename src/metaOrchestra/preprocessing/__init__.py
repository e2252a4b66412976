"""
Preprocessing modules for metaOrchestra.

This module contains transformers that reshape feature matrices rather than
predict labels.
"""

from .one_hot_encoder import OneHotEncoder
from .scaling import PCA, Standardizer

__all__ = [
    "OneHotEncoder",
    "PCA",
    "Standardizer",
]
