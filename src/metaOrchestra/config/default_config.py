"""
Default configuration for metaOrchestra.

This module contains the default configuration settings. Configuration files
are merged over these defaults.
"""

from typing import Dict, Any

DEFAULT_CONFIG: Dict[str, Any] = {
    # Transformer to build; options are merged over its class defaults
    "model": {
        "name": "VoteEnsemble",
        "options": {}
    },

    # Backends the factory may build; None means all of them
    "available_models": None,

    # Logging configuration
    "logging": {
        "level": "INFO",
        "format": "%(asctime)s | %(levelname)s | %(name)s:%(lineno)d | %(message)s",
        "file": None
    }
}
