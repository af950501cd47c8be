"""Pytest fixtures for node_protocol tests.

Provide on-disk genesis files, node configs and credential text
envelopes built in ``tmp_path``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import cbor2
import pytest
import yaml

from node_protocol.credentials import (
    KES_SIGNING_KEY_TYPE,
    OPERATIONAL_CERTIFICATE_TYPE,
    VRF_SIGNING_KEY_TYPE,
    ProtocolFilepaths,
)
from tests.testing_utils import (
    COLD_VKEY,
    HOT_VKEY,
    KES_SKEY,
    OCERT_COUNTER,
    OCERT_KES_PERIOD,
    SIGMA,
    VRF_SKEY,
    EnvelopeWriter,
    genesis_dict,
)


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "feature(name): mark test as belonging to a feature. "
        "Usage: @pytest.mark.feature('credentials')"
    )


@pytest.fixture
def genesis_file(tmp_path: Path) -> Path:
    """A valid genesis file on disk."""
    path = tmp_path / "shelley-genesis.json"
    path.write_text(json.dumps(genesis_dict()))
    return path


@pytest.fixture
def write_envelope(tmp_path: Path) -> EnvelopeWriter:
    """Return a function writing a text envelope file.

    ``payload`` is CBOR-encoded unless ``cbor_hex`` is given directly.
    """

    def _write(
        name: str,
        type_: str,
        payload: Any = None,
        cbor_hex: str | None = None,
    ) -> Path:
        if cbor_hex is None:
            cbor_hex = cbor2.dumps(payload).hex()
        path = tmp_path / name
        path.write_text(json.dumps({
            "type": type_,
            "description": "",
            "cborHex": cbor_hex,
        }))
        return path

    return _write


@pytest.fixture
def credential_files(write_envelope: EnvelopeWriter) -> ProtocolFilepaths:
    """Valid certificate, VRF key and KES key files."""
    cert = write_envelope(
        "node.opcert",
        OPERATIONAL_CERTIFICATE_TYPE,
        [[HOT_VKEY, OCERT_COUNTER, OCERT_KES_PERIOD, SIGMA], COLD_VKEY],
    )
    vrf = write_envelope("vrf.skey", VRF_SIGNING_KEY_TYPE, VRF_SKEY)
    kes = write_envelope("kes.skey", KES_SIGNING_KEY_TYPE, KES_SKEY)
    return ProtocolFilepaths(
        shelley_cert_file=str(cert),
        shelley_vrf_file=str(vrf),
        shelley_kes_file=str(kes),
    )


@pytest.fixture
def node_config_file(tmp_path: Path, genesis_file: Path) -> Path:
    """A node config YAML pointing at ``genesis_file`` by relative path."""
    path = tmp_path / "config.yaml"
    path.write_text(yaml.dump({
        "Protocol": "Shelley",
        "GenesisFile": genesis_file.name,
        "LastKnownBlockVersion-Major": 2,
        "LastKnownBlockVersion-Minor": 1,
        "MaxKnownMajorProtocolVersion": 3,
    }))
    return path
