"""Genesis file loading.

Usage:
    from node_protocol.genesis import read_genesis
    genesis = read_genesis("config/shelley-genesis.json")
"""

from .loader import GenesisDecoder, decode_shelley_genesis, read_genesis
from .schema import GenesisDelegate, ShelleyGenesis

__all__ = [
    "GenesisDecoder",
    "GenesisDelegate",
    "ShelleyGenesis",
    "decode_shelley_genesis",
    "read_genesis",
]
