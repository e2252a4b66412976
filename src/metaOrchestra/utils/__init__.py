"""
Utility modules for metaOrchestra.

This module contains logging and array helpers. ``ConfigManager`` lives in
``metaOrchestra.utils.config``; it is not imported here because it depends
on the model registry.
"""

from .logger import get_logger, setup_logging
from .helpers import as_matrix, as_vector, n_rows, take_rows

__all__ = [
    "get_logger",
    "setup_logging",
    "as_matrix",
    "as_vector",
    "n_rows",
    "take_rows",
]
