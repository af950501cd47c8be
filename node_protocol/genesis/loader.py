"""Genesis file loader.

Reads the Shelley genesis file and decodes it into a ``ShelleyGenesis``.
The decoder is a capability so tests (or another genesis format) can
swap it out.

Usage:
    genesis = read_genesis("config/shelley-genesis.json")
    if is_error(genesis):
        ...
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from pydantic import ValidationError

from ..errors import GenesisReadError
from .schema import ShelleyGenesis

logger = logging.getLogger(__name__)


class GenesisDecoder(Protocol):
    """Turns raw genesis file bytes into a genesis object.

    Raises ``ValueError`` (``pydantic.ValidationError`` included) when the
    bytes are not a valid genesis document.
    """

    def __call__(self, raw: bytes) -> ShelleyGenesis: ...


def decode_shelley_genesis(raw: bytes) -> ShelleyGenesis:
    """Default decoder: strict JSON parse validated by the pydantic schema."""
    return ShelleyGenesis.model_validate_json(raw)


def read_genesis(
    path: str | Path,
    decoder: GenesisDecoder | None = None,
) -> ShelleyGenesis | GenesisReadError:
    """Read and decode a genesis file.

    I/O and decode failures are returned as ``GenesisReadError`` carrying
    ``path`` exactly as given; nothing is raised.
    """
    decode = decoder or decode_shelley_genesis
    file = str(path)

    try:
        with open(file, "rb") as f:
            raw = f.read()
    except OSError as e:
        logger.warning(f"Cannot read genesis file {file}: {e}")
        return GenesisReadError(path=file, detail=str(e))

    try:
        genesis = decode(raw)
    except (ValidationError, ValueError) as e:
        logger.warning(f"Genesis file {file} failed to decode")
        return GenesisReadError(path=file, detail=str(e))

    logger.debug(f"Loaded genesis from {file}")
    return genesis
