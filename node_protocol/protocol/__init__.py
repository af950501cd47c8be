# Protocol assembly package
from .assembler import (
    INITIAL_NONCE,
    SHELLEY,
    make_consensus_protocol,
    make_consensus_protocol_shelley,
    make_some_consensus_protocol_shelley,
)
from .types import NEUTRAL_NONCE, Nonce, ProtocolConfig, ProtocolVersion, SomeConsensusProtocol

__all__ = [
    "INITIAL_NONCE",
    "NEUTRAL_NONCE",
    "Nonce",
    "ProtocolConfig",
    "ProtocolVersion",
    "SHELLEY",
    "SomeConsensusProtocol",
    "make_consensus_protocol",
    "make_consensus_protocol_shelley",
    "make_some_consensus_protocol_shelley",
]
