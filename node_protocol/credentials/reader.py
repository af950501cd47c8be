"""Leader credential reader.

A node produces blocks only when it is given all three credential files:
operational certificate, VRF signing key and KES signing key. Giving none
of them is fine (the node follows the chain without leading). Giving some
but not all is almost always an operator mistake, so it is rejected and
the first missing flag is named.
"""

from __future__ import annotations

import logging

from ..errors import (
    FileError,
    KESKeyNotSpecified,
    OCertNotSpecified,
    ProtocolInstantiationError,
    VRFKeyNotSpecified,
)
from .envelope import EnvelopeDecoder, TextEnvelopeDecoder, is_envelope_error
from .types import (
    IsCoreNode,
    KeyRole,
    LeaderCredentials,
    ProtocolFilepaths,
    coerce_key_role,
)

logger = logging.getLogger(__name__)


def read_leader_credentials(
    files: ProtocolFilepaths | None,
    decoder: EnvelopeDecoder | None = None,
) -> LeaderCredentials | None | ProtocolInstantiationError:
    """Validate the credential bundle and decode it.

    Returns:
        ``None`` when no credentials were supplied, a complete
        ``LeaderCredentials`` when all three files decode, or an error
        value otherwise.
    """
    if files is None:
        return None

    cert_file = files.shelley_cert_file
    vrf_file = files.shelley_vrf_file
    kes_file = files.shelley_kes_file

    if cert_file is None and vrf_file is None and kes_file is None:
        return None

    # Partial bundles: report the first missing file in flag order
    if cert_file is None:
        return OCertNotSpecified()
    if vrf_file is None:
        return VRFKeyNotSpecified()
    if kes_file is None:
        return KESKeyNotSpecified()

    envelopes = decoder or TextEnvelopeDecoder()

    opcert = envelopes.read_operational_certificate(cert_file)
    if is_envelope_error(opcert):
        return FileError(opcert)
    vrf_key = envelopes.read_vrf_signing_key(vrf_file)
    if is_envelope_error(vrf_key):
        return FileError(vrf_key)
    kes_key = envelopes.read_kes_signing_key(kes_file)
    if is_envelope_error(kes_key):
        return FileError(kes_key)

    logger.info("Leader credentials loaded; block production enabled")
    return LeaderCredentials(
        is_core_node=IsCoreNode(
            op_cert=opcert.ocert,
            cold_ver_key=coerce_key_role(opcert.issuer_vkey, KeyRole.BLOCK_ISSUER),
            sign_key_vrf=vrf_key,
        ),
        sign_key=kes_key,
    )
