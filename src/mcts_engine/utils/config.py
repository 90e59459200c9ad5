"""YAML configuration loading."""

from pathlib import Path
from typing import Any, Dict, Union

import yaml


def load_config(path: Union[str, Path]) -> Dict[str, Any]:
    """Load a YAML config file.

    An empty file yields an empty dict.

    Raises:
        FileNotFoundError: path does not exist
        ValueError: the document is not a mapping
    """
    with open(path, 'r') as f:
        config = yaml.safe_load(f)

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValueError(f"Config {path} must be a mapping, got {type(config).__name__}")
    return config
