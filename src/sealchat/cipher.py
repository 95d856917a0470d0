"""ChaCha20-Poly1305 sealing and opening for SealChat messages."""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305

from . import types
from .types import (
    NONCE_SIZE,
    SYMMETRIC_KEY_SIZE,
    TAG_SIZE,
    AuthenticationFailedError,
    EntropySourceUnavailableError,
    InvalidKeyEncodingError,
    MalformedSealedMessageError,
    PlaintextTooLargeError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SealedMessage:
    """Output of one seal call."""
    nonce: bytes  # 12 bytes
    ciphertext: bytes  # same length as the plaintext
    tag: bytes  # 16 bytes


def _cipher_for(key: bytes) -> ChaCha20Poly1305:
    if not isinstance(key, (bytes, bytearray)) or len(key) != SYMMETRIC_KEY_SIZE:
        raise InvalidKeyEncodingError(f"Symmetric key must be {SYMMETRIC_KEY_SIZE} bytes")
    return ChaCha20Poly1305(bytes(key))


def _random_nonce() -> bytes:
    try:
        return os.urandom(NONCE_SIZE)
    except (OSError, NotImplementedError) as e:
        raise EntropySourceUnavailableError(f"Cannot generate nonce: {e}") from e


def seal(
    plaintext: bytes,
    key: bytes,
    associated_data: Optional[bytes] = None,
) -> SealedMessage:
    """
    Encrypt and authenticate a message under a fresh random nonce.

    Args:
        plaintext: Message bytes (may be empty)
        key: 32-byte symmetric key
        associated_data: Bytes authenticated but not encrypted

    Returns:
        SealedMessage with nonce, ciphertext and tag

    Raises:
        PlaintextTooLargeError: If the plaintext or associated data exceeds
            MAX_PLAINTEXT_SIZE
        EntropySourceUnavailableError: If no nonce can be drawn
        InvalidKeyEncodingError: If the key is not 32 bytes
    """
    return seal_with_nonce(plaintext, key, _random_nonce(), associated_data)


def seal_with_nonce(
    plaintext: bytes,
    key: bytes,
    nonce: bytes,
    associated_data: Optional[bytes] = None,
) -> SealedMessage:
    """
    Encrypt and authenticate a message under a caller-supplied nonce.

    Meant for known-answer tests and for nonce sequences. Reusing a nonce
    under the same key exposes both plaintexts and allows forgeries; use
    seal() unless the nonce source guarantees uniqueness.
    """
    _check_size(plaintext, associated_data)

    if len(nonce) != NONCE_SIZE:
        raise MalformedSealedMessageError(f"Nonce must be {NONCE_SIZE} bytes, got {len(nonce)}")

    cipher = _cipher_for(key)
    combined = cipher.encrypt(bytes(nonce), bytes(plaintext), associated_data)

    logger.debug("Sealed %d-byte message", len(plaintext))
    return SealedMessage(
        nonce=bytes(nonce),
        ciphertext=combined[:-TAG_SIZE],
        tag=combined[-TAG_SIZE:],
    )


def open_sealed(
    sealed: SealedMessage,
    key: bytes,
    associated_data: Optional[bytes] = None,
) -> bytes:
    """
    Verify and decrypt a sealed message.

    No plaintext is released unless the tag verifies. Every verification
    failure raises the same error, whatever the cause.

    Args:
        sealed: The sealed message
        key: 32-byte symmetric key
        associated_data: Must equal the value given to seal()

    Returns:
        Decrypted plaintext

    Raises:
        MalformedSealedMessageError: If nonce or tag length is wrong
        PlaintextTooLargeError: If associated data exceeds MAX_PLAINTEXT_SIZE
        AuthenticationFailedError: If verification fails
        InvalidKeyEncodingError: If the key is not 32 bytes
    """
    if len(sealed.nonce) != NONCE_SIZE:
        raise MalformedSealedMessageError(
            f"Nonce must be {NONCE_SIZE} bytes, got {len(sealed.nonce)}"
        )

    if len(sealed.tag) != TAG_SIZE:
        raise MalformedSealedMessageError(
            f"Tag must be {TAG_SIZE} bytes, got {len(sealed.tag)}"
        )

    _check_size(b"", associated_data)

    cipher = _cipher_for(key)

    try:
        plaintext = cipher.decrypt(sealed.nonce, sealed.ciphertext + sealed.tag, associated_data)
    except InvalidTag:
        logger.warning("Rejected sealed message: authentication failed")
        raise AuthenticationFailedError() from None

    logger.debug("Opened %d-byte message", len(plaintext))
    return plaintext


def _check_size(plaintext: bytes, associated_data: Optional[bytes] = None) -> None:
    if len(plaintext) > types.MAX_PLAINTEXT_SIZE:
        raise PlaintextTooLargeError(
            f"Message too large: {len(plaintext)} bytes (max {types.MAX_PLAINTEXT_SIZE})"
        )

    if associated_data is not None and len(associated_data) > types.MAX_PLAINTEXT_SIZE:
        raise PlaintextTooLargeError(
            f"Associated data too large: {len(associated_data)} bytes "
            f"(max {types.MAX_PLAINTEXT_SIZE})"
        )
