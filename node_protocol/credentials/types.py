"""Key material and leader credential types.

These are plain carriers of decoded bytes. No cryptography happens here;
the consensus engine owns every use of the keys.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class KeyRole(str, Enum):
    """Role a verification key is declared for."""

    STAKE_POOL = "stake_pool"
    BLOCK_ISSUER = "block_issuer"


@dataclass(frozen=True)
class VerificationKey:
    role: KeyRole
    key_bytes: bytes


def coerce_key_role(key: VerificationKey, role: KeyRole) -> VerificationKey:
    """Relabel a verification key with another role. The bytes are untouched."""
    return replace(key, role=role)


@dataclass(frozen=True)
class OCert:
    """Operational certificate body."""

    hot_vkey: bytes  # KES verification key
    counter: int
    kes_period: int
    sigma: bytes  # cold key signature over the body


@dataclass(frozen=True)
class OperationalCertificate:
    """A certificate together with the cold key that issued it."""

    ocert: OCert
    issuer_vkey: VerificationKey


@dataclass(frozen=True)
class VrfSigningKey:
    key_bytes: bytes


@dataclass(frozen=True)
class KesSigningKey:
    key_bytes: bytes


@dataclass(frozen=True)
class IsCoreNode:
    """Everything a node needs to prove it may lead a slot."""

    op_cert: OCert
    cold_ver_key: VerificationKey
    sign_key_vrf: VrfSigningKey


@dataclass(frozen=True)
class LeaderCredentials:
    """Complete block-production credentials. Never partially populated."""

    is_core_node: IsCoreNode
    sign_key: KesSigningKey


class ProtocolFilepaths(BaseModel):
    """Credential file paths supplied on the command line.

    Each field is optional; the reader decides whether the combination
    given is acceptable.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    shelley_cert_file: str | None = Field(
        None, description="Operational certificate text envelope"
    )
    shelley_vrf_file: str | None = Field(None, description="VRF signing key text envelope")
    shelley_kes_file: str | None = Field(None, description="KES signing key text envelope")
