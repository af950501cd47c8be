"""Leader credentials: text envelope decoding and the bundle presence rule."""

from .envelope import (
    KES_SIGNING_KEY_SIZE,
    KES_SIGNING_KEY_TYPE,
    OPERATIONAL_CERTIFICATE_TYPE,
    SIGNATURE_SIZE,
    VERIFICATION_KEY_SIZE,
    VRF_SIGNING_KEY_SIZE,
    VRF_SIGNING_KEY_TYPE,
    EnvelopeDecoder,
    TextEnvelope,
    TextEnvelopeDecoder,
    is_envelope_error,
)
from .reader import read_leader_credentials
from .types import (
    IsCoreNode,
    KesSigningKey,
    KeyRole,
    LeaderCredentials,
    OCert,
    OperationalCertificate,
    ProtocolFilepaths,
    VerificationKey,
    VrfSigningKey,
    coerce_key_role,
)

__all__ = [
    "EnvelopeDecoder",
    "IsCoreNode",
    "KES_SIGNING_KEY_SIZE",
    "KES_SIGNING_KEY_TYPE",
    "KesSigningKey",
    "KeyRole",
    "LeaderCredentials",
    "OCert",
    "OPERATIONAL_CERTIFICATE_TYPE",
    "OperationalCertificate",
    "ProtocolFilepaths",
    "SIGNATURE_SIZE",
    "TextEnvelope",
    "TextEnvelopeDecoder",
    "VERIFICATION_KEY_SIZE",
    "VRF_SIGNING_KEY_SIZE",
    "VRF_SIGNING_KEY_TYPE",
    "VerificationKey",
    "VrfSigningKey",
    "coerce_key_role",
    "is_envelope_error",
    "read_leader_credentials",
]
