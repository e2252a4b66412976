"""
Evaluation modules for metaOrchestra.

This module contains scoring utilities.
"""

from .metrics import SUPPORTED_METRICS, score

__all__ = [
    "SUPPORTED_METRICS",
    "score",
]
