"""
Ensemble learners for metaOrchestra.

This module contains the majority voting, stacking and best-learner
selection ensembles.
"""

from .base import BaseEnsemble
from .best_learner import BestLearnerEnsemble
from .stacking import StackEnsemble
from .voting import VoteEnsemble, majority_vote

__all__ = [
    "BaseEnsemble",
    "BestLearnerEnsemble",
    "StackEnsemble",
    "VoteEnsemble",
    "majority_vote",
]
