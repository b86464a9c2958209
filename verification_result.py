"""Detailed outcome of a signature check, for callers that opt in to diagnostics."""

from dataclasses import dataclass
from enum import Enum


class FailureReason(str, Enum):
    NONE = "none"
    EMPTY_MESSAGE = "empty_message"
    MALFORMED_MESSAGE = "malformed_message"
    MISSING_PUBLIC_KEY = "missing_public_key"
    MISSING_SIGNATURE = "missing_signature"
    MALFORMED_PUBLIC_KEY = "malformed_public_key"
    MALFORMED_SIGNATURE = "malformed_signature"
    INVALID_KEY = "invalid_key"
    BAD_SIGNATURE = "bad_signature"
    INTERNAL_ERROR = "internal_error"


@dataclass(frozen=True)
class VerificationResult:
    """Result of verify_detailed(). Truthy only when the signature is valid."""

    valid: bool
    reason: FailureReason = FailureReason.NONE

    @classmethod
    def ok(cls) -> "VerificationResult":
        return cls(True, FailureReason.NONE)

    @classmethod
    def failed(cls, reason: FailureReason) -> "VerificationResult":
        if reason is FailureReason.NONE:
            raise ValueError("A failed result needs a failure reason")
        return cls(False, reason)

    def __bool__(self) -> bool:
        return self.valid
