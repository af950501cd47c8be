"""Configuration loader for the node protocol check.

The configuration file path comes from, in order: the explicit argument,
the NODE_CONFIG environment variable (a .env file is honoured), then
config/config.yaml in the repository.

Usage:
    from node_protocol.config import load_config

    config = load_config()
    config.genesis_file
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from .config_schema import NodeConfiguration, load_validated_config

logger = logging.getLogger(__name__)

# Default config path
DEFAULT_CONFIG_PATH: Path = Path(__file__).parent.parent / "config" / "config.yaml"

CONFIG_ENV_VAR = "NODE_CONFIG"


def resolve_config_path(config_path: str | None = None) -> Path:
    """Pick the configuration file to load."""
    if config_path:
        return Path(config_path)

    load_dotenv()
    from_env = os.getenv(CONFIG_ENV_VAR)
    if from_env:
        return Path(from_env)
    return DEFAULT_CONFIG_PATH


def load_config(config_path: str | None = None) -> NodeConfiguration:
    """Load and validate node configuration.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        yaml.YAMLError: If the file is not valid YAML.
        pydantic.ValidationError: If config is invalid.
    """
    path = resolve_config_path(config_path)
    logger.debug(f"Loading node configuration from {path}")
    return load_validated_config(path)
