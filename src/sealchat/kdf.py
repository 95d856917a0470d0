"""HKDF-SHA256 symmetric key derivation for SealChat."""

import logging
from typing import Optional

from cryptography.hazmat.primitives.kdf.hkdf import HKDF
from cryptography.hazmat.primitives.hashes import SHA256

from .types import (
    MAX_DERIVED_KEY_LENGTH,
    SYMMETRIC_KEY_SIZE,
    DerivationLengthExceededError,
)

logger = logging.getLogger(__name__)


def derive_symmetric_key(
    shared_secret: bytes,
    salt: Optional[bytes],
    shared_info: bytes = b"",
    length: int = SYMMETRIC_KEY_SIZE,
) -> bytes:
    """
    Derive a symmetric key from a shared secret with HKDF-SHA256.

    Both parties must use the same salt and shared info, or their keys
    will differ.

    Args:
        shared_secret: Raw key agreement output
        salt: Protocol salt (None means a zero-filled salt per RFC 5869)
        shared_info: Context bound into the key, e.g. a conversation id
        length: Output length in bytes

    Returns:
        Derived key of exactly `length` bytes

    Raises:
        DerivationLengthExceededError: If length exceeds 255 * 32 bytes
        ValueError: If length is not positive
    """
    if length < 1:
        raise ValueError(f"Key length must be positive, got {length}")

    if length > MAX_DERIVED_KEY_LENGTH:
        raise DerivationLengthExceededError(
            f"Cannot derive {length} bytes (max {MAX_DERIVED_KEY_LENGTH})"
        )

    hkdf = HKDF(algorithm=SHA256(), length=length, salt=salt, info=shared_info)
    key = hkdf.derive(shared_secret)

    logger.debug("Derived %d-byte key (info %d bytes)", length, len(shared_info))
    return key
