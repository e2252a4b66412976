"""
Configuration management for metaOrchestra.

This module loads model specifications from YAML or JSON files and builds
transformers from them.
"""

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from ..config.default_config import DEFAULT_CONFIG
from ..core.options import merge_options
from ..models import ModelFactory
from .logger import get_logger, setup_logging


class ConfigManager:
    """Configuration manager for metaOrchestra."""

    def __init__(self):
        self.logger = get_logger("ConfigManager")
        self.config = copy.deepcopy(DEFAULT_CONFIG)

    def load_from_file(self, config_path: Union[str, Path]) -> 'ConfigManager':
        """
        Load configuration from a file.

        Args:
            config_path: Path to configuration file

        Returns:
            Self for method chaining
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        self.logger.info(f"Loading configuration from {config_path}")

        suffix = config_path.suffix.lower()
        if suffix in ('.yaml', '.yml'):
            with open(config_path, 'r') as f:
                config_data = yaml.safe_load(f) or {}
        elif suffix == '.json':
            with open(config_path, 'r') as f:
                config_data = json.load(f)
        else:
            raise ValueError(f"Unsupported configuration file format: {config_path.suffix}")

        return self.update_config(**config_data)

    def save_to_file(self, config_path: Union[str, Path]) -> None:
        """
        Save configuration to a file.

        Args:
            config_path: Path to save configuration file
        """
        config_path = Path(config_path)
        suffix = config_path.suffix.lower()
        if suffix not in ('.yaml', '.yml', '.json'):
            raise ValueError(f"Unsupported configuration file format: {config_path.suffix}")

        config_path.parent.mkdir(parents=True, exist_ok=True)
        self.logger.info(f"Saving configuration to {config_path}")

        with open(config_path, 'w') as f:
            if suffix == '.json':
                json.dump(self.config, f, indent=2)
            else:
                yaml.safe_dump(self.config, f, default_flow_style=False, indent=2)

    def get_config(self) -> Dict[str, Any]:
        """Get the current configuration."""
        return self.config

    def update_config(self, **kwargs) -> 'ConfigManager':
        """
        Merge new values into the configuration.

        Unknown top-level keys are ignored with a warning.

        Returns:
            Self for method chaining
        """
        known = {}
        for key, value in kwargs.items():
            if key in DEFAULT_CONFIG:
                known[key] = value
            else:
                self.logger.warning(f"Unknown configuration key: {key}")

        self.config = merge_options(self.config, known)
        return self

    def configure_logging(self) -> None:
        """Apply the ``logging`` section."""
        settings = self.config["logging"]
        setup_logging(
            level=getattr(logging, str(settings["level"]).upper()),
            log_file=settings["file"],
            log_format=settings["format"],
        )

    def build(self):
        """Build the transformer described by the ``model`` section."""
        factory = ModelFactory(available=self.config["available_models"])
        return factory.create_from_spec(self.config["model"])
