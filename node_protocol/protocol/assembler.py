"""Shelley protocol assembly.

Reads the genesis file, then the leader credentials, and combines them
with the initial nonce and the configured protocol versions. The first
failure is returned as an error value and nothing after it runs.

Usage:
    result = make_consensus_protocol_shelley(config, files)
    if is_error(result):
        sys.exit(render_protocol_instantiation_error(result))
"""

from __future__ import annotations

import logging

from ..config_schema import NodeConfiguration, NodeShelleyProtocolConfiguration
from ..credentials.envelope import EnvelopeDecoder
from ..credentials.reader import read_leader_credentials
from ..credentials.types import ProtocolFilepaths
from ..errors import ProtocolInstantiationError, is_error
from ..genesis.loader import GenesisDecoder, read_genesis
from .types import NEUTRAL_NONCE, ProtocolConfig, ProtocolVersion, SomeConsensusProtocol

logger = logging.getLogger(__name__)

SHELLEY = "Shelley"

# Chains using different initial nonces are mutually incompatible, so this
# is fixed per network. Every Shelley testnet so far uses the neutral nonce.
# TODO: derive from the hash of the genesis file once a new testnet can be
# started with it.
INITIAL_NONCE = NEUTRAL_NONCE


def make_consensus_protocol_shelley(
    config: NodeShelleyProtocolConfiguration,
    files: ProtocolFilepaths | None = None,
    genesis_decoder: GenesisDecoder | None = None,
    envelope_decoder: EnvelopeDecoder | None = None,
) -> ProtocolConfig | ProtocolInstantiationError:
    """Assemble the Shelley protocol parameters.

    Args:
        config: Shelley protocol section of the node configuration
        files: Credential file paths, or None for a non-producing node
        genesis_decoder: Override for genesis decoding (tests)
        envelope_decoder: Override for credential file decoding (tests)

    Returns:
        The assembled ``ProtocolConfig`` or the first error encountered.
    """
    genesis = read_genesis(config.genesis_file, genesis_decoder)
    if is_error(genesis):
        return genesis

    credentials = read_leader_credentials(files, envelope_decoder)
    if is_error(credentials):
        return credentials

    protocol_version = ProtocolVersion(
        major=config.supported_protocol_version_major,
        minor=config.supported_protocol_version_minor,
    )
    logger.info(
        f"Shelley protocol assembled: version {protocol_version.major}."
        f"{protocol_version.minor}, max supported "
        f"{config.max_supported_protocol_version}, "
        f"block producer: {credentials is not None}"
    )
    return ProtocolConfig(
        genesis=genesis,
        initial_nonce=INITIAL_NONCE,
        protocol_version=protocol_version,
        max_supported_protocol_version=config.max_supported_protocol_version,
        leader_credentials=credentials,
    )


def make_some_consensus_protocol_shelley(
    config: NodeShelleyProtocolConfiguration,
    files: ProtocolFilepaths | None = None,
    genesis_decoder: GenesisDecoder | None = None,
    envelope_decoder: EnvelopeDecoder | None = None,
) -> SomeConsensusProtocol | ProtocolInstantiationError:
    """Same as ``make_consensus_protocol_shelley``, tagged with the protocol name."""
    result = make_consensus_protocol_shelley(
        config, files, genesis_decoder, envelope_decoder
    )
    if is_error(result):
        return result
    return SomeConsensusProtocol(protocol=SHELLEY, config=result)


def make_consensus_protocol(
    node_config: NodeConfiguration,
    files: ProtocolFilepaths | None = None,
    genesis_decoder: GenesisDecoder | None = None,
    envelope_decoder: EnvelopeDecoder | None = None,
) -> SomeConsensusProtocol | ProtocolInstantiationError:
    """Assemble whichever protocol the node configuration names.

    The configuration schema only admits Shelley, so there is nothing else
    to dispatch to yet.
    """
    return make_some_consensus_protocol_shelley(
        node_config, files, genesis_decoder, envelope_decoder
    )
