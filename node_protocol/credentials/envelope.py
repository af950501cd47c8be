"""Text envelope decoding for credential files.

Credential files on disk are JSON "text envelopes":

    {
        "type": "VrfSigningKey_PraosVRF",
        "description": "VRF Signing Key",
        "cborHex": "5840..."
    }

``type`` is the role tag and must match what the caller asked for;
``cborHex`` is the hex encoding of a CBOR payload whose shape depends on
the role. Decoding is purely syntactic: keys are not checked against
each other or against the certificate.

Every read returns either the decoded value or an envelope file error.
Nothing is raised for bad input.
"""

from __future__ import annotations

import logging
from io import BytesIO
from typing import Any, Callable, Protocol

import cbor2
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import (
    EnvelopeFileError,
    FileIOError,
    TextEnvelopeAesonDecodeError,
    TextEnvelopeDecodeError,
    TextEnvelopeFileError,
    TextEnvelopeTypeError,
)
from .types import (
    KesSigningKey,
    KeyRole,
    OCert,
    OperationalCertificate,
    VerificationKey,
    VrfSigningKey,
)

logger = logging.getLogger(__name__)

OPERATIONAL_CERTIFICATE_TYPE = "NodeOperationalCertificate"
VRF_SIGNING_KEY_TYPE = "VrfSigningKey_PraosVRF"
KES_SIGNING_KEY_TYPE = "KesSigningKey_ed25519_kes_2^7"

# Serialised sizes in bytes
VRF_SIGNING_KEY_SIZE = 64
KES_SIGNING_KEY_SIZE = 608
VERIFICATION_KEY_SIZE = 32
SIGNATURE_SIZE = 64


class TextEnvelope(BaseModel):
    """On-disk envelope wrapper."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: str
    description: str = ""
    cbor_hex: str = Field(alias="cborHex")


class EnvelopeDecoder(Protocol):
    """Reads each kind of credential file.

    Implementations return the decoded value or an envelope file error
    naming the file. They must not raise for malformed files.
    """

    def read_operational_certificate(
        self, path: str
    ) -> OperationalCertificate | EnvelopeFileError: ...

    def read_vrf_signing_key(self, path: str) -> VrfSigningKey | EnvelopeFileError: ...

    def read_kes_signing_key(self, path: str) -> KesSigningKey | EnvelopeFileError: ...


class _PayloadShapeError(ValueError):
    pass


def _expect_bytes(value: Any, size: int, what: str) -> bytes:
    if not isinstance(value, bytes):
        raise _PayloadShapeError(f"{what}: expected a byte string, got {type(value).__name__}")
    if len(value) != size:
        raise _PayloadShapeError(f"{what}: expected {size} bytes, got {len(value)}")
    return value


def _expect_int(value: Any, what: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise _PayloadShapeError(f"{what}: expected an integer, got {type(value).__name__}")
    return value


def _expect_list(value: Any, length: int, what: str) -> list[Any]:
    if not isinstance(value, list) or len(value) != length:
        raise _PayloadShapeError(f"{what}: expected a list of length {length}")
    return value


def _decode_operational_certificate(payload: Any) -> OperationalCertificate:
    body, cold_vkey = _expect_list(payload, 2, "operational certificate")
    hot_vkey, counter, kes_period, sigma = _expect_list(body, 4, "certificate body")
    return OperationalCertificate(
        ocert=OCert(
            hot_vkey=_expect_bytes(hot_vkey, VERIFICATION_KEY_SIZE, "hot verification key"),
            counter=_expect_int(counter, "issue counter"),
            kes_period=_expect_int(kes_period, "KES period"),
            sigma=_expect_bytes(sigma, SIGNATURE_SIZE, "certificate signature"),
        ),
        issuer_vkey=VerificationKey(
            role=KeyRole.STAKE_POOL,
            key_bytes=_expect_bytes(cold_vkey, VERIFICATION_KEY_SIZE, "cold verification key"),
        ),
    )


def _decode_vrf_signing_key(payload: Any) -> VrfSigningKey:
    return VrfSigningKey(key_bytes=_expect_bytes(payload, VRF_SIGNING_KEY_SIZE, "VRF signing key"))


def _decode_kes_signing_key(payload: Any) -> KesSigningKey:
    return KesSigningKey(key_bytes=_expect_bytes(payload, KES_SIGNING_KEY_SIZE, "KES signing key"))


class TextEnvelopeDecoder:
    """Default ``EnvelopeDecoder`` for JSON text envelopes with CBOR payloads."""

    def read_operational_certificate(
        self, path: str
    ) -> OperationalCertificate | EnvelopeFileError:
        return self._read(path, OPERATIONAL_CERTIFICATE_TYPE, _decode_operational_certificate)

    def read_vrf_signing_key(self, path: str) -> VrfSigningKey | EnvelopeFileError:
        return self._read(path, VRF_SIGNING_KEY_TYPE, _decode_vrf_signing_key)

    def read_kes_signing_key(self, path: str) -> KesSigningKey | EnvelopeFileError:
        return self._read(path, KES_SIGNING_KEY_TYPE, _decode_kes_signing_key)

    def _read(
        self, path: str, expected_type: str, decode_payload: Callable[[Any], Any]
    ) -> Any:
        try:
            with open(path, "rb") as f:
                raw = f.read()
        except OSError as e:
            logger.warning(f"Cannot read credential file {path}: {e}")
            return FileIOError(path=path, message=str(e))

        try:
            envelope = TextEnvelope.model_validate_json(raw)
        except ValidationError as e:
            return TextEnvelopeFileError(path, TextEnvelopeAesonDecodeError(str(e)))

        if envelope.type != expected_type:
            return TextEnvelopeFileError(
                path, TextEnvelopeTypeError(expected=(expected_type,), actual=envelope.type)
            )

        try:
            data = bytes.fromhex(envelope.cbor_hex)
            fp = BytesIO(data)
            payload = cbor2.CBORDecoder(fp).decode()
            if fp.tell() != len(data):
                raise _PayloadShapeError("leftover bytes")
            value = decode_payload(payload)
        except (cbor2.CBORDecodeError, ValueError) as e:
            return TextEnvelopeFileError(path, TextEnvelopeDecodeError(str(e)))

        logger.debug(f"Decoded {expected_type} from {path}")
        return value


def is_envelope_error(value: object) -> bool:
    """True if ``value`` is an envelope file error rather than decoded key material."""
    return isinstance(value, (TextEnvelopeFileError, FileIOError))
