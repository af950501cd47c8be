"""Values handed to the consensus engine."""

from __future__ import annotations

from dataclasses import dataclass

from ..credentials.types import LeaderCredentials
from ..genesis.schema import ShelleyGenesis


@dataclass(frozen=True)
class Nonce:
    """Leader-election randomness seed.

    ``hash`` is ``None`` for the neutral nonce, otherwise a 32-byte hash.
    """

    hash: bytes | None = None

    def __post_init__(self) -> None:
        if self.hash is not None and len(self.hash) != 32:
            raise ValueError(f"nonce hash must be 32 bytes, got {len(self.hash)}")

    @property
    def is_neutral(self) -> bool:
        return self.hash is None


NEUTRAL_NONCE = Nonce()


@dataclass(frozen=True)
class ProtocolVersion:
    major: int
    minor: int


@dataclass(frozen=True)
class ProtocolConfig:
    """Fully assembled Shelley protocol parameters."""

    genesis: ShelleyGenesis
    initial_nonce: Nonce
    protocol_version: ProtocolVersion
    max_supported_protocol_version: int
    leader_credentials: LeaderCredentials | None = None

    @property
    def is_block_producer(self) -> bool:
        return self.leader_credentials is not None


@dataclass(frozen=True)
class SomeConsensusProtocol:
    """Protocol-generic handle: the protocol's name and its parameters."""

    protocol: str
    config: ProtocolConfig
