# /ed25519_verify/signature_verifier.py

"""
Module: signature_verifier.py
Purpose: Verify Ed25519 signatures over base64-encoded public keys and signatures.
Consumes:
- Public key and signature as standard base64 strings (32 and 64 raw bytes)
- Message as text (UTF-8) or bytes
Provides:
- verify(public_key_b64, signature_b64, message) → bool
- verify_text(...) / verify_bytes(...) → bool
- verify_detailed(...) → VerificationResult
Behavior:
- Total: malformed input, wrong lengths and primitive errors all yield False
- Decoded key and signature sit in pooled scratch buffers zeroed on release
- No signing, no key storage
"""

import base64
import binascii

import nacl.encoding
import nacl.exceptions
import nacl.signing

from logger import get_logger
from scratch_pool import get_pool
from verification_result import FailureReason, VerificationResult

PUBLIC_KEY_SIZE = 32
SIGNATURE_SIZE = 64

_BYTES_LIKE = (bytes, bytearray, memoryview)
# str.isspace() counts the information separators as whitespace; they are content here
_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")

logger = get_logger(__name__)


def _encoded_length(size: int) -> int:
    return 4 * ((size + 2) // 3)


def _is_blank(value) -> bool:
    if not isinstance(value, str) or not value:
        return True
    return all(ch.isspace() and ch not in _SEPARATORS for ch in value)


def _decode_fixed(value: str, buffer: bytearray, expected: int) -> bool:
    """Strictly decode base64 ``value`` into ``buffer[:expected]``."""
    if len(value) != _encoded_length(expected):
        return False
    try:
        decoded = base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError):
        return False
    if len(decoded) != expected:
        return False
    buffer[:expected] = decoded
    return True


def _check_signature(public_key: bytes, signature: bytes, message: bytes) -> FailureReason:
    try:
        verify_key = nacl.signing.VerifyKey(public_key, encoder=nacl.encoding.RawEncoder)
    except (nacl.exceptions.CryptoError, ValueError, TypeError):
        return FailureReason.INVALID_KEY
    try:
        verify_key.verify(message, signature)
    except nacl.exceptions.BadSignatureError:
        return FailureReason.BAD_SIGNATURE
    except Exception as exc:
        logger.warning("Ed25519 primitive raised %s during verification", type(exc).__name__)
        return FailureReason.INTERNAL_ERROR
    return FailureReason.NONE


def _verify_message_bytes(public_key_b64, signature_b64, message) -> VerificationResult:
    if message is None:
        return VerificationResult.failed(FailureReason.EMPTY_MESSAGE)
    if not isinstance(message, _BYTES_LIKE):
        return VerificationResult.failed(FailureReason.MALFORMED_MESSAGE)
    if not isinstance(message, bytes):
        message = bytes(message)
    if not message:
        return VerificationResult.failed(FailureReason.EMPTY_MESSAGE)

    if _is_blank(public_key_b64):
        return VerificationResult.failed(FailureReason.MISSING_PUBLIC_KEY)
    if _is_blank(signature_b64):
        return VerificationResult.failed(FailureReason.MISSING_SIGNATURE)

    pool = get_pool()
    with pool.rent(PUBLIC_KEY_SIZE) as key_buf, pool.rent(SIGNATURE_SIZE) as sig_buf:
        if not _decode_fixed(public_key_b64, key_buf, PUBLIC_KEY_SIZE):
            return VerificationResult.failed(FailureReason.MALFORMED_PUBLIC_KEY)
        if not _decode_fixed(signature_b64, sig_buf, SIGNATURE_SIZE):
            return VerificationResult.failed(FailureReason.MALFORMED_SIGNATURE)
        # PyNaCl only accepts immutable bytes
        reason = _check_signature(bytes(key_buf), bytes(sig_buf), message)

    if reason is FailureReason.NONE:
        return VerificationResult.ok()
    return VerificationResult.failed(reason)


def _verify_message_text(public_key_b64, signature_b64, message) -> VerificationResult:
    if _is_blank(message):
        return VerificationResult.failed(FailureReason.EMPTY_MESSAGE)
    try:
        # unavoidable allocation unless the caller passes bytes
        data = message.encode("utf-8")
    except UnicodeEncodeError:
        return VerificationResult.failed(FailureReason.MALFORMED_MESSAGE)
    return _verify_message_bytes(public_key_b64, signature_b64, data)


def _logged(result: VerificationResult) -> VerificationResult:
    if not result.valid:
        logger.debug("Signature rejected: %s", result.reason.value)
    return result


def verify_detailed(public_key_b64, signature_b64, message) -> VerificationResult:
    """
    Verify a signature and report why it failed.
    Args:
        public_key_b64 (str): Base64 Ed25519 public key (32 bytes decoded)
        signature_b64 (str): Base64 Ed25519 signature (64 bytes decoded)
        message (str | bytes): Text is UTF-8 encoded; bytes are used as given
    Returns:
        VerificationResult: valid flag plus the FailureReason
    """
    try:
        if isinstance(message, str):
            result = _verify_message_text(public_key_b64, signature_b64, message)
        else:
            result = _verify_message_bytes(public_key_b64, signature_b64, message)
    except Exception as exc:
        logger.warning("Unexpected %s while verifying signature", type(exc).__name__)
        result = VerificationResult.failed(FailureReason.INTERNAL_ERROR)
    return _logged(result)


def verify(public_key_b64, signature_b64, message) -> bool:
    """
    Verify an Ed25519 signature.
    Args:
        public_key_b64 (str): Base64 public key
        signature_b64 (str): Base64 signature
        message (str | bytes): Signed message
    Returns:
        bool: True if valid, False for an invalid signature or any bad input
    """
    return verify_detailed(public_key_b64, signature_b64, message).valid


def verify_text(public_key_b64, signature_b64, message: str) -> bool:
    """Verify a signature over a text message (UTF-8 encoded)."""
    if not isinstance(message, str):
        return False
    return verify_detailed(public_key_b64, signature_b64, message).valid


def verify_bytes(public_key_b64, signature_b64, message: bytes) -> bool:
    """Verify a signature over raw bytes. Preferred over verify_text on hot paths."""
    if isinstance(message, str):
        return False
    return verify_detailed(public_key_b64, signature_b64, message).valid
