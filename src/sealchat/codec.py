"""Sealed blob encoding and decoding for SealChat."""

from .cipher import SealedMessage
from .types import NONCE_SIZE, TAG_SIZE, SEALED_OVERHEAD, TruncatedMessageError


def encode_sealed(sealed: SealedMessage) -> bytes:
    """
    Encode a sealed message to bytes.

    Format (28 bytes of framing + ciphertext):
        [0-11]   nonce (12 bytes)
        [12..-17] ciphertext (variable)
        [-16..]  tag (16 bytes)

    Args:
        sealed: SealedMessage to encode

    Returns:
        Encoded bytes, len(ciphertext) + 28 long
    """
    return sealed.nonce + sealed.ciphertext + sealed.tag


def decode_sealed(data: bytes) -> SealedMessage:
    """
    Decode bytes into a sealed message.

    Args:
        data: Encoded blob

    Returns:
        Decoded SealedMessage

    Raises:
        TruncatedMessageError: If data is shorter than nonce plus tag
    """
    if len(data) < SEALED_OVERHEAD:
        raise TruncatedMessageError(
            f"Data too short: {len(data)} bytes (minimum {SEALED_OVERHEAD})"
        )

    data = bytes(data)
    return SealedMessage(
        nonce=data[:NONCE_SIZE],
        ciphertext=data[NONCE_SIZE:-TAG_SIZE],
        tag=data[-TAG_SIZE:],
    )


def is_sealed_blob(data: bytes) -> bool:
    """Check if data is long enough to be a sealed blob."""
    return len(data) >= SEALED_OVERHEAD
