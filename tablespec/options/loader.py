"""
Option Layer Loader

Loads option layers from YAML files so defaults can live next to the
documents that use them:

    # defaults.yaml
    options:
      theme: grid
      margin: [20, 15]
      headStyles:
        fillColor: [41, 128, 185]

The top-level ``options:`` wrapper is optional.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from loguru import logger


class OptionsLoadError(Exception):
    """Raised when an option file cannot be read or is not a mapping."""

    def __init__(self, path: Union[str, Path], message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


class OptionsLoader:
    """
    Loads option layers from YAML configuration files.

    Usage:
        loader = OptionsLoader()
        document_defaults = loader.load(Path("config/document.yaml"))
    """

    def __init__(self, wrapper_key: str = 'options'):
        """
        Initialize loader.

        Args:
            wrapper_key: Top-level key holding the options, if present
        """
        self.wrapper_key = wrapper_key

    def load(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """
        Load one option layer.

        Args:
            config_path: Path to YAML file

        Returns:
            Option mapping (empty for an empty file)

        Raises:
            OptionsLoadError: If the file is unreadable, invalid YAML or not
                a mapping
        """
        logger.info(f"Loading options from: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to load options: {e}")
            raise OptionsLoadError(config_path, str(e)) from e

        return self.parse(data, config_path)

    def loads(self, text: str) -> Dict[str, Any]:
        """Load one option layer from a YAML string."""
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise OptionsLoadError('<string>', str(e)) from e
        return self.parse(data, '<string>')

    def parse(self, data: Any, source: Union[str, Path]) -> Dict[str, Any]:
        """Unwrap and check already parsed YAML data."""
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise OptionsLoadError(source, f"expected a mapping, got {type(data).__name__}")

        if set(data.keys()) == {self.wrapper_key}:
            data = data[self.wrapper_key] or {}
            if not isinstance(data, dict):
                raise OptionsLoadError(source, f"'{self.wrapper_key}' must be a mapping")

        logger.debug(f"Loaded {len(data)} option keys from {source}")
        return data

    def load_optional(self, config_path: Optional[Union[str, Path]]) -> Dict[str, Any]:
        """Load a layer if a path was given, else an empty layer."""
        if config_path is None:
            return {}
        return self.load(config_path)
