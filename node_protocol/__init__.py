"""Shelley protocol bootstrap validation.

This package turns a node configuration and optional credential files
into the protocol parameters the consensus engine starts from:
- config: Node configuration loading and validation
- genesis: Genesis file decoding
- credentials: Text envelope decoding and the leader credential rules
- protocol: Assembly of the final protocol parameters
- errors: Error values and their rendering
"""

from __future__ import annotations

from .credentials import LeaderCredentials, ProtocolFilepaths, read_leader_credentials
from .errors import ProtocolInstantiationError, is_error, render_protocol_instantiation_error
from .genesis import ShelleyGenesis, read_genesis
from .protocol import (
    ProtocolConfig,
    make_consensus_protocol,
    make_consensus_protocol_shelley,
    make_some_consensus_protocol_shelley,
)

__all__: list[str] = [
    "LeaderCredentials",
    "ProtocolConfig",
    "ProtocolFilepaths",
    "ProtocolInstantiationError",
    "ShelleyGenesis",
    "is_error",
    "make_consensus_protocol",
    "make_consensus_protocol_shelley",
    "make_some_consensus_protocol_shelley",
    "read_genesis",
    "read_leader_credentials",
    "render_protocol_instantiation_error",
]
