"""Pydantic schema for the Shelley genesis file.

The genesis document is owned by the consensus engine; this model only
checks that the file has the expected shape so a bad file fails at
startup instead of deep inside the engine. Nested parameter blocks are
kept as plain mappings and not interpreted here.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class GenesisDelegate(BaseModel):
    """Genesis key delegation: the delegate key hash and its VRF key hash."""

    model_config = ConfigDict(frozen=True)

    delegate: str
    vrf: str


class ShelleyGenesis(BaseModel):
    """Decoded Shelley genesis document. Immutable once loaded."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    system_start: datetime = Field(alias="systemStart")
    network_magic: int = Field(alias="networkMagic", ge=0)
    network_id: Literal["Mainnet", "Testnet"] = Field(alias="networkId")
    active_slots_coeff: float = Field(alias="activeSlotsCoeff", gt=0, le=1)
    security_param: int = Field(alias="securityParam", gt=0)
    epoch_length: int = Field(alias="epochLength", gt=0)
    slots_per_kes_period: int = Field(alias="slotsPerKESPeriod", gt=0)
    max_kes_evolutions: int = Field(alias="maxKESEvolutions", gt=0)
    slot_length: float = Field(alias="slotLength", gt=0)
    update_quorum: int = Field(alias="updateQuorum", ge=0)
    max_lovelace_supply: int = Field(alias="maxLovelaceSupply", ge=0)
    protocol_params: dict[str, Any] = Field(alias="protocolParams")

    gen_delegs: dict[str, GenesisDelegate] = Field(
        default_factory=dict, alias="genDelegs"
    )
    initial_funds: dict[str, int] = Field(default_factory=dict, alias="initialFunds")
    staking: dict[str, Any] | None = None
