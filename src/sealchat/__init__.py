"""
SealChat - End-to-end encrypted message sealing

Python implementation of X25519 key agreement, HKDF-SHA256 key derivation and
ChaCha20-Poly1305 sealed messages.
"""

import logging

from .keys import (
    generate_keypair,
    derive_keys_from_seed,
    public_key_of,
    public_key_to_bytes,
    public_key_from_bytes,
    fingerprint,
)
from .agreement import agree
from .kdf import derive_symmetric_key
from .cipher import SealedMessage, seal, seal_with_nonce, open_sealed
from .nonce import NonceSequence, next_nonce, seal_next
from .codec import encode_sealed, decode_sealed, is_sealed_blob
from .config import ProtocolConfig, DEFAULT_CONFIG, DEFAULT_SALT
from .box import derive_conversation_key, encrypt_for, decrypt_from
from .types import (
    PUBLIC_KEY_SIZE,
    SYMMETRIC_KEY_SIZE,
    NONCE_SIZE,
    TAG_SIZE,
    SEALED_OVERHEAD,
    MAX_DERIVED_KEY_LENGTH,
    MAX_PLAINTEXT_SIZE,
    SealChatError,
    InvalidKeyEncodingError,
    InvalidPeerKeyError,
    DerivationLengthExceededError,
    PlaintextTooLargeError,
    AuthenticationFailedError,
    MalformedSealedMessageError,
    TruncatedMessageError,
    EntropySourceUnavailableError,
    NonceExhaustedError,
    InvalidNonceSequenceError,
    ConfigurationError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Keys
    "generate_keypair",
    "derive_keys_from_seed",
    "public_key_of",
    "public_key_to_bytes",
    "public_key_from_bytes",
    "fingerprint",
    # Agreement
    "agree",
    # Derivation
    "derive_symmetric_key",
    # Cipher
    "SealedMessage",
    "seal",
    "seal_with_nonce",
    "open_sealed",
    # Nonce sequences
    "NonceSequence",
    "next_nonce",
    "seal_next",
    # Codec
    "encode_sealed",
    "decode_sealed",
    "is_sealed_blob",
    # Config
    "ProtocolConfig",
    "DEFAULT_CONFIG",
    "DEFAULT_SALT",
    # Box
    "derive_conversation_key",
    "encrypt_for",
    "decrypt_from",
    # Constants
    "PUBLIC_KEY_SIZE",
    "SYMMETRIC_KEY_SIZE",
    "NONCE_SIZE",
    "TAG_SIZE",
    "SEALED_OVERHEAD",
    "MAX_DERIVED_KEY_LENGTH",
    "MAX_PLAINTEXT_SIZE",
    # Errors
    "SealChatError",
    "InvalidKeyEncodingError",
    "InvalidPeerKeyError",
    "DerivationLengthExceededError",
    "PlaintextTooLargeError",
    "AuthenticationFailedError",
    "MalformedSealedMessageError",
    "TruncatedMessageError",
    "EntropySourceUnavailableError",
    "NonceExhaustedError",
    "InvalidNonceSequenceError",
    "ConfigurationError",
]
