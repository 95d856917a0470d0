"""Key generation and encoding for SealChat."""

import hashlib
import logging
from typing import Tuple, Union

from cryptography.exceptions import InternalError
from cryptography.hazmat.primitives.kdf.hkdf import HKDF
from cryptography.hazmat.primitives.hashes import SHA256
from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PrivateKey, X25519PublicKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from .types import (
    KEY_DERIVATION_SALT,
    KEY_DERIVATION_INFO,
    PUBLIC_KEY_SIZE,
    EntropySourceUnavailableError,
    InvalidKeyEncodingError,
)

logger = logging.getLogger(__name__)


def generate_keypair() -> Tuple[X25519PrivateKey, X25519PublicKey]:
    """
    Generate a random X25519 key pair from the platform CSPRNG.

    Returns:
        Tuple of (private_key, public_key)

    Raises:
        EntropySourceUnavailableError: If the random source cannot be read
    """
    try:
        private_key = X25519PrivateKey.generate()
    except (OSError, InternalError) as e:
        raise EntropySourceUnavailableError(f"Cannot generate key pair: {e}") from e

    logger.debug("Generated X25519 key pair")
    return private_key, private_key.public_key()


def derive_keys_from_seed(seed: bytes) -> Tuple[X25519PrivateKey, X25519PublicKey]:
    """
    Derive an X25519 key pair from a 32-byte seed using HKDF-SHA256.

    Args:
        seed: 32-byte seed

    Returns:
        Tuple of (private_key, public_key)

    Raises:
        InvalidKeyEncodingError: If the seed is not 32 bytes
    """
    if len(seed) != 32:
        raise InvalidKeyEncodingError(f"Seed must be 32 bytes, got {len(seed)}")

    hkdf = HKDF(
        algorithm=SHA256(),
        length=32,
        salt=KEY_DERIVATION_SALT,
        info=KEY_DERIVATION_INFO,
    )
    private_key = X25519PrivateKey.from_private_bytes(hkdf.derive(seed))

    return private_key, private_key.public_key()


def public_key_of(private_key: X25519PrivateKey) -> X25519PublicKey:
    """Return the public key belonging to a private key."""
    return private_key.public_key()


def public_key_to_bytes(public_key: X25519PublicKey) -> bytes:
    """Convert X25519 public key to its 32 raw bytes."""
    return public_key.public_bytes(Encoding.Raw, PublicFormat.Raw)


def public_key_from_bytes(data: Union[bytes, bytearray]) -> X25519PublicKey:
    """
    Create X25519 public key from raw bytes.

    Any 32-byte string decodes; degenerate points are rejected later, at
    key agreement.

    Raises:
        InvalidKeyEncodingError: If data is not 32 bytes
    """
    if not isinstance(data, (bytes, bytearray)):
        raise InvalidKeyEncodingError(f"Public key must be bytes, got {type(data).__name__}")

    if len(data) != PUBLIC_KEY_SIZE:
        raise InvalidKeyEncodingError(
            f"Public key must be {PUBLIC_KEY_SIZE} bytes, got {len(data)}"
        )

    try:
        return X25519PublicKey.from_public_bytes(bytes(data))
    except ValueError as e:
        raise InvalidKeyEncodingError(f"Invalid public key: {e}") from e


def fingerprint(public_key: Union[X25519PublicKey, bytes]) -> str:
    """
    Short SHA-256 digest of a public key for comparing keys out of band.

    Accepts a key object or its 32 raw bytes. The first 8 digest bytes are
    shown as four upper-case hex groups, e.g. "A7B3 C9D1 E5F2 8A4B".

    Raises:
        InvalidKeyEncodingError: If raw bytes are not a valid public key
    """
    if not isinstance(public_key, X25519PublicKey):
        public_key = public_key_from_bytes(public_key)

    digest = hashlib.sha256(public_key_to_bytes(public_key)).hexdigest().upper()
    return " ".join(digest[i : i + 4] for i in range(0, 16, 4))
