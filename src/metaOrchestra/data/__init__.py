"""
Data handling modules for metaOrchestra.

This module contains input validation.
"""

from .validator import DataValidator

__all__ = [
    "DataValidator",
]
