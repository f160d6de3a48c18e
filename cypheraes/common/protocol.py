"""Pydantic models: Direction, Ok/Err tagged results."""

from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel

from cypheraes.common.errors import (
    AlignmentViolation,
    CipherError,
    FormatError,
    KeyLengthError,
    PaddingAmbiguity,
)


class Direction(str, Enum):
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


ErrorKind = Literal[
    "key_length",
    "alignment_violation",
    "padding_ambiguity",
    "format",
]

# Exception class -> tag used in Err.kind
_KINDS = {
    KeyLengthError: "key_length",
    AlignmentViolation: "alignment_violation",
    PaddingAmbiguity: "padding_ambiguity",
    FormatError: "format",
}
_ERRORS = {kind: cls for cls, kind in _KINDS.items()}


class Ok(BaseModel):
    """
    Successful result carrying the output buffer.
    """
    type: Literal["ok"] = "ok"
    data: bytes

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> bytes:
        return self.data

    def unwrap_or(self, default: bytes) -> bytes:
        return self.data


class Err(BaseModel):
    """
    Failed result. `data` holds the buffer as it was when the failure was
    detected (e.g. the still-padded plaintext), so callers can fall back to it.
    """
    type: Literal["err"] = "err"
    kind: ErrorKind
    detail: str
    data: Optional[bytes] = None

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> bytes:
        raise self.to_exception()

    def unwrap_or(self, default: bytes) -> bytes:
        return default

    def to_exception(self) -> CipherError:
        return _ERRORS[self.kind](self.detail)

    @classmethod
    def from_exception(cls, exc: CipherError, data: Optional[bytes] = None) -> "Err":
        return cls(kind=_KINDS[type(exc)], detail=str(exc), data=data)


Result = Union[Ok, Err]
