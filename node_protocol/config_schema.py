"""Pydantic schema for node configuration validation.

Node configuration files are YAML with the Shelley protocol keys at the
top level, exactly as the node reads them:

    Protocol: Shelley
    GenesisFile: shelley-genesis.json
    LastKnownBlockVersion-Major: 2
    LastKnownBlockVersion-Minor: 0
    MaxKnownMajorProtocolVersion: 2

Typos and invalid values fail fast with clear error messages.

Usage:
    from node_protocol.config_schema import load_validated_config
    config = load_validated_config("config/config.yaml")
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator


# =============================================================================
# BASE MODEL WITH STRICT VALIDATION
# =============================================================================

class StrictModel(BaseModel):
    """Base model that rejects unknown fields (catches typos)."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


# =============================================================================
# PROTOCOL MODELS
# =============================================================================

class NodeShelleyProtocolConfiguration(StrictModel):
    """The Shelley protocol settings the assembler consumes."""

    genesis_file: str = Field(
        alias="GenesisFile",
        description="Path to the Shelley genesis JSON file"
    )
    supported_protocol_version_major: int = Field(
        default=0,
        ge=0,
        alias="LastKnownBlockVersion-Major",
        description="Major protocol version this node announces"
    )
    supported_protocol_version_minor: int = Field(
        default=0,
        ge=0,
        alias="LastKnownBlockVersion-Minor",
        description="Minor protocol version this node announces"
    )
    max_supported_protocol_version: int = Field(
        default=1,
        ge=0,
        alias="MaxKnownMajorProtocolVersion",
        description="Highest major protocol version this node can follow"
    )

    @field_validator("genesis_file")
    @classmethod
    def genesis_file_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("GenesisFile must not be empty")
        return v


class NodeConfiguration(NodeShelleyProtocolConfiguration):
    """A whole node configuration file."""

    protocol: Literal["Shelley"] = Field(
        alias="Protocol",
        description="Consensus protocol the node runs"
    )


# =============================================================================
# LOADING
# =============================================================================

def validate_config_dict(config_dict: dict[str, Any]) -> NodeConfiguration:
    """Validate a configuration dictionary.

    Raises:
        pydantic.ValidationError: If config is invalid.
    """
    return NodeConfiguration.model_validate(config_dict)


def load_validated_config(config_path: str | Path) -> NodeConfiguration:
    """Load a YAML node configuration and validate it.

    A relative ``GenesisFile`` is resolved against the directory holding
    the configuration file, so a config and its genesis can move together.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        yaml.YAMLError: If the file is not valid YAML.
        ValueError: If the YAML document is not a mapping.
        pydantic.ValidationError: If config is invalid.
    """
    path = Path(config_path)
    with open(path) as f:
        raw: Any = yaml.safe_load(f)

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")

    config = validate_config_dict(raw)

    genesis_path = Path(config.genesis_file)
    if not genesis_path.is_absolute():
        config = config.model_copy(
            update={"genesis_file": str(path.parent / genesis_path)}
        )
    return config
