"""Protocol constants and exception types for SealChat."""


# Protocol constants
PUBLIC_KEY_SIZE = 32
SYMMETRIC_KEY_SIZE = 32
NONCE_SIZE = 12
TAG_SIZE = 16
SEALED_OVERHEAD = NONCE_SIZE + TAG_SIZE

# HKDF-SHA256 can expand to at most 255 hash blocks
HASH_SIZE = 32
MAX_DERIVED_KEY_LENGTH = 255 * HASH_SIZE

# Largest buffer the ChaCha20-Poly1305 backend accepts in one call
MAX_PLAINTEXT_SIZE = 2**31 - 1

# Seed derivation constants
KEY_DERIVATION_SALT = b"SealChat-v1-keypair"
KEY_DERIVATION_INFO = b"x25519-key"


# Exception types
class SealChatError(Exception):
    """Base exception for SealChat errors."""
    pass


class InvalidKeyEncodingError(SealChatError):
    """Key bytes have the wrong type or length."""
    pass


class InvalidPeerKeyError(SealChatError):
    """Peer public key is a degenerate point."""
    pass


class DerivationLengthExceededError(SealChatError):
    """Requested output is longer than HKDF can expand."""
    pass


class PlaintextTooLargeError(SealChatError):
    """Plaintext exceeds the single-message limit."""
    pass


class AuthenticationFailedError(SealChatError):
    """Sealed message did not verify under the given key."""

    def __init__(self) -> None:
        super().__init__("Message authentication failed")


class MalformedSealedMessageError(SealChatError):
    """Sealed message nonce or tag has the wrong length."""
    pass


class TruncatedMessageError(SealChatError):
    """Blob is too short to hold a nonce and a tag."""
    pass


class EntropySourceUnavailableError(SealChatError):
    """The secure random source could not be read."""
    pass


class NonceExhaustedError(SealChatError):
    """A nonce sequence has no counter values left."""
    pass


class ConfigurationError(SealChatError):
    """Protocol parameters are invalid."""
    pass


class InvalidNonceSequenceError(SealChatError):
    """Nonce sequence prefix or counter is out of range."""
    pass
