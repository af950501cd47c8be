"""Check that a node configuration and its credentials assemble cleanly.

Usage:
    node-protocol-check --config config/config.yaml
    node-protocol-check --config config/config.yaml \\
        --shelley-operational-certificate pool.opcert \\
        --shelley-vrf-key vrf.skey \\
        --shelley-kes-key kes.skey

Exit codes:
    0  protocol parameters assembled
    1  protocol instantiation failed (message names the problem)
    2  the configuration file itself could not be loaded
"""

from __future__ import annotations

import argparse
import logging
import sys

import yaml
from pydantic import ValidationError

from .config import load_config
from .credentials import ProtocolFilepaths
from .errors import is_error, render_protocol_instantiation_error
from .protocol import make_consensus_protocol

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="node-protocol-check",
        description="Validate node protocol configuration and leader credentials",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Node configuration YAML (default: $NODE_CONFIG or config/config.yaml)",
    )
    parser.add_argument(
        "--shelley-operational-certificate",
        dest="cert_file",
        default=None,
        help="Operational certificate text envelope",
    )
    parser.add_argument(
        "--shelley-vrf-key", dest="vrf_file", default=None, help="VRF signing key"
    )
    parser.add_argument(
        "--shelley-kes-key", dest="kes_file", default=None, help="KES signing key"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        node_config = load_config(args.config)
    except (OSError, yaml.YAMLError, ValidationError, ValueError) as e:
        logger.error(f"Could not load node configuration: {e}")
        return 2

    files = ProtocolFilepaths(
        shelley_cert_file=args.cert_file,
        shelley_vrf_file=args.vrf_file,
        shelley_kes_file=args.kes_file,
    )
    result = make_consensus_protocol(node_config, files)
    if is_error(result):
        print(render_protocol_instantiation_error(result), file=sys.stderr)
        return 1

    protocol = result.config
    version = protocol.protocol_version
    print(f"Protocol: {result.protocol}")
    print(f"Network magic: {protocol.genesis.network_magic}")
    print(f"Protocol version: {version.major}.{version.minor}")
    print(f"Max supported protocol version: {protocol.max_supported_protocol_version}")
    print(f"Block producer: {'yes' if protocol.is_block_producer else 'no'}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
