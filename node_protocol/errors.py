"""Error values for protocol instantiation.

Everything that can go wrong while assembling the Shelley protocol
parameters is returned as a value, never raised. Each variant carries
enough context to render a diagnostic the operator can act on, plus a
stable machine-readable code.

Two families live here:

- Envelope file errors (``FileIOError``, ``TextEnvelopeFileError``): what
  the credential file decoder reports about a single file.
- Protocol instantiation errors (``GenesisReadError``, ``FileError`` and
  the three ``*NotSpecified`` variants): what the assembler returns.

Usage:
    from node_protocol.errors import is_error, render_protocol_instantiation_error

    result = make_consensus_protocol_shelley(config, files)
    if is_error(result):
        print(render_protocol_instantiation_error(result))
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Union


class ErrorCode(str, Enum):
    """Stable codes for programmatic handling of instantiation errors."""

    GENESIS_READ_ERROR = "genesis_read_error"
    FILE_ERROR = "file_error"
    OCERT_NOT_SPECIFIED = "ocert_not_specified"
    VRF_KEY_NOT_SPECIFIED = "vrf_key_not_specified"
    KES_KEY_NOT_SPECIFIED = "kes_key_not_specified"


# =============================================================================
# ENVELOPE ERRORS
# =============================================================================


@dataclass(frozen=True)
class TextEnvelopeError:
    """Base for failures decoding the contents of a text envelope."""

    def display(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class TextEnvelopeTypeError(TextEnvelopeError):
    """The envelope's role tag is not one of the expected tags."""

    expected: tuple[str, ...]
    actual: str

    def display(self) -> str:
        if len(self.expected) == 1:
            wanted = f" Expected: {self.expected[0]}"
        else:
            wanted = " Expected one of: " + ", ".join(self.expected)
        return f"TextEnvelope type error: {wanted} Actual: {self.actual}"


@dataclass(frozen=True)
class TextEnvelopeAesonDecodeError(TextEnvelopeError):
    """The file is not a well-formed JSON envelope."""

    message: str

    def display(self) -> str:
        return f"TextEnvelope aeson decode error: {self.message}"


@dataclass(frozen=True)
class TextEnvelopeDecodeError(TextEnvelopeError):
    """The envelope is well-formed but its payload does not decode."""

    message: str

    def display(self) -> str:
        return f"TextEnvelope decode error: {self.message}"


@dataclass(frozen=True)
class TextEnvelopeFileError:
    """A credential file failed to decode; names the file."""

    path: str
    error: TextEnvelopeError

    def display(self) -> str:
        return f"{self.path}: {self.error.display()}"


@dataclass(frozen=True)
class FileIOError:
    """A credential file could not be read at all."""

    path: str
    message: str

    def display(self) -> str:
        return f"{self.path}: {self.message}"


EnvelopeFileError = Union[TextEnvelopeFileError, FileIOError]


# =============================================================================
# PROTOCOL INSTANTIATION ERRORS
# =============================================================================


@dataclass(frozen=True)
class ProtocolInstantiationError:
    """Base for every error the protocol assembler can return."""

    code: ClassVar[ErrorCode]

    def render(self) -> str:
        raise NotImplementedError

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for structured logging."""
        return {"code": self.code.value, "error": self.render()}


@dataclass(frozen=True)
class GenesisReadError(ProtocolInstantiationError):
    """Genesis file missing, unreadable, or not a valid genesis document."""

    code: ClassVar[ErrorCode] = ErrorCode.GENESIS_READ_ERROR

    path: str
    detail: str

    def render(self) -> str:
        return (
            f"There was an error parsing the genesis file: {self.path}"
            f" Error: {json.dumps(self.detail)}"
        )


@dataclass(frozen=True)
class FileError(ProtocolInstantiationError):
    """A credential file failed envelope decoding."""

    code: ClassVar[ErrorCode] = ErrorCode.FILE_ERROR

    error: EnvelopeFileError

    def render(self) -> str:
        return self.error.display()


def _missing_flag_message(flag: str) -> str:
    return f"To create blocks, the --{flag} must also be specified"


@dataclass(frozen=True)
class OCertNotSpecified(ProtocolInstantiationError):
    """Credentials were given without an operational certificate."""

    code: ClassVar[ErrorCode] = ErrorCode.OCERT_NOT_SPECIFIED
    flag: ClassVar[str] = "shelley-operational-certificate"

    def render(self) -> str:
        return _missing_flag_message(self.flag)


@dataclass(frozen=True)
class VRFKeyNotSpecified(ProtocolInstantiationError):
    """Credentials were given without a VRF signing key."""

    code: ClassVar[ErrorCode] = ErrorCode.VRF_KEY_NOT_SPECIFIED
    flag: ClassVar[str] = "shelley-vrf-key"

    def render(self) -> str:
        return _missing_flag_message(self.flag)


@dataclass(frozen=True)
class KESKeyNotSpecified(ProtocolInstantiationError):
    """Credentials were given without a KES signing key."""

    code: ClassVar[ErrorCode] = ErrorCode.KES_KEY_NOT_SPECIFIED
    flag: ClassVar[str] = "shelley-kes-key"

    def render(self) -> str:
        return _missing_flag_message(self.flag)


def is_error(value: object) -> bool:
    """True if ``value`` is a protocol instantiation error."""
    return isinstance(value, ProtocolInstantiationError)


def render_protocol_instantiation_error(error: ProtocolInstantiationError) -> str:
    """Render an instantiation error as the message shown to the operator."""
    return error.render()
