"""Tests for Pydantic node configuration validation."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from node_protocol.config import CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH, load_config, resolve_config_path
from node_protocol.config_schema import (
    NodeConfiguration,
    NodeShelleyProtocolConfiguration,
    load_validated_config,
    validate_config_dict,
)


class TestValidConfig:
    """Test that valid configs are accepted."""

    def test_minimal_config_uses_defaults(self) -> None:
        """Only Protocol and GenesisFile are required."""
        config = validate_config_dict({
            "Protocol": "Shelley",
            "GenesisFile": "genesis.json",
        })
        assert config.protocol == "Shelley"
        assert config.supported_protocol_version_major == 0
        assert config.supported_protocol_version_minor == 0
        assert config.max_supported_protocol_version == 1

    def test_version_keys_read(self) -> None:
        config = validate_config_dict({
            "Protocol": "Shelley",
            "GenesisFile": "genesis.json",
            "LastKnownBlockVersion-Major": 2,
            "LastKnownBlockVersion-Minor": 1,
            "MaxKnownMajorProtocolVersion": 3,
        })
        assert config.supported_protocol_version_major == 2
        assert config.supported_protocol_version_minor == 1
        assert config.max_supported_protocol_version == 3

    def test_python_field_names_accepted(self) -> None:
        config = NodeShelleyProtocolConfiguration(
            genesis_file="genesis.json",
            supported_protocol_version_major=1,
        )
        assert config.supported_protocol_version_major == 1

    def test_full_config_loads(self) -> None:
        """The shipped config file loads and points at the shipped genesis."""
        config = load_validated_config(DEFAULT_CONFIG_PATH)
        assert config.protocol == "Shelley"
        assert Path(config.genesis_file).exists()


class TestInvalidConfig:
    """Test that invalid configs are rejected with clear errors."""

    def test_typo_in_key_rejected(self) -> None:
        """Typos in config keys should be rejected (extra='forbid')."""
        with pytest.raises(ValidationError) as exc_info:
            validate_config_dict({
                "Protocol": "Shelley",
                "GenesisFile": "genesis.json",
                "LastKnownBlockVersion-Majr": 2,
            })
        assert "LastKnownBlockVersion-Majr" in str(exc_info.value)

    def test_unknown_protocol_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_config_dict({"Protocol": "Byron", "GenesisFile": "genesis.json"})
        assert "Protocol" in str(exc_info.value)

    def test_missing_genesis_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_config_dict({"Protocol": "Shelley"})
        assert "GenesisFile" in str(exc_info.value)

    def test_blank_genesis_rejected(self) -> None:
        with pytest.raises(ValidationError):
            validate_config_dict({"Protocol": "Shelley", "GenesisFile": "  "})

    def test_negative_version_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_config_dict({
                "Protocol": "Shelley",
                "GenesisFile": "genesis.json",
                "LastKnownBlockVersion-Minor": -1,
            })
        assert "LastKnownBlockVersion-Minor" in str(exc_info.value)

    def test_wrong_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            validate_config_dict({
                "Protocol": "Shelley",
                "GenesisFile": "genesis.json",
                "MaxKnownMajorProtocolVersion": "lots",
            })


class TestLoadValidatedConfig:
    """Tests for loading config files from disk."""

    def test_relative_genesis_resolved_against_config_dir(self, tmp_path: Path) -> None:
        config_dir = tmp_path / "node"
        config_dir.mkdir()
        path = config_dir / "config.yaml"
        path.write_text(yaml.dump({"Protocol": "Shelley", "GenesisFile": "genesis.json"}))

        config = load_validated_config(path)

        assert config.genesis_file == str(config_dir / "genesis.json")

    def test_absolute_genesis_untouched(self, tmp_path: Path) -> None:
        genesis = str(tmp_path / "elsewhere" / "genesis.json")
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({"Protocol": "Shelley", "GenesisFile": genesis}))

        assert load_validated_config(path).genesis_file == genesis

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_validated_config(tmp_path / "absent.yaml")

    def test_non_mapping_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(ValueError):
            load_validated_config(path)

    def test_returns_node_configuration(self, node_config_file: Path) -> None:
        assert isinstance(load_config(str(node_config_file)), NodeConfiguration)


class TestResolveConfigPath:
    """Where the config path comes from."""

    def test_explicit_path_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(CONFIG_ENV_VAR, "/from/env.yaml")
        assert resolve_config_path("given.yaml") == Path("given.yaml")

    def test_environment_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(CONFIG_ENV_VAR, "/from/env.yaml")
        assert resolve_config_path() == Path("/from/env.yaml")

    def test_default_path(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert resolve_config_path() == DEFAULT_CONFIG_PATH
