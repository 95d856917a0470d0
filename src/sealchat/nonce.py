"""Counter-based nonces for sealing many messages under one key."""

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from .cipher import SealedMessage, seal_with_nonce
from .types import (
    NONCE_SIZE,
    EntropySourceUnavailableError,
    InvalidNonceSequenceError,
    NonceExhaustedError,
)


NONCE_PREFIX_SIZE = 4
NONCE_COUNTER_SIZE = NONCE_SIZE - NONCE_PREFIX_SIZE
MAX_NONCE_COUNTER = 2 ** (8 * NONCE_COUNTER_SIZE) - 1


@dataclass(frozen=True)
class NonceSequence:
    """Nonce state for one sender under one key.

    Nonce layout (12 bytes):
        [0..3]   random prefix, fixed for the sequence
        [4..11]  counter (8 bytes, big-endian)

    Attributes:
        prefix: The random per-sequence prefix.
        counter: The counter for the next nonce.
    """

    prefix: bytes
    counter: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.prefix, bytes) or len(self.prefix) != NONCE_PREFIX_SIZE:
            raise InvalidNonceSequenceError(f"Prefix must be {NONCE_PREFIX_SIZE} bytes")

        # MAX_NONCE_COUNTER + 1 marks a spent sequence
        if isinstance(self.counter, bool) or not isinstance(self.counter, int):
            raise InvalidNonceSequenceError("Counter must be an int")
        if not 0 <= self.counter <= MAX_NONCE_COUNTER + 1:
            raise InvalidNonceSequenceError(
                f"Counter must be in 0..{MAX_NONCE_COUNTER + 1}, got {self.counter}"
            )

    @classmethod
    def start(cls) -> "NonceSequence":
        """Begin a sequence with a fresh random prefix."""
        try:
            prefix = os.urandom(NONCE_PREFIX_SIZE)
        except (OSError, NotImplementedError) as e:
            raise EntropySourceUnavailableError(f"Cannot generate nonce prefix: {e}") from e
        return cls(prefix=prefix)


def next_nonce(sequence: NonceSequence) -> Tuple[bytes, NonceSequence]:
    """Take the next nonce and return it with the advanced sequence.

    Args:
        sequence: The current sequence.

    Returns:
        Tuple of (nonce, updated_sequence).

    Raises:
        NonceExhaustedError: If the counter has run out.
    """
    if sequence.counter > MAX_NONCE_COUNTER:
        raise NonceExhaustedError("Nonce counter exhausted; derive a new key")

    nonce = sequence.prefix + sequence.counter.to_bytes(NONCE_COUNTER_SIZE, byteorder="big")
    return nonce, NonceSequence(prefix=sequence.prefix, counter=sequence.counter + 1)


def seal_next(
    plaintext: bytes,
    key: bytes,
    sequence: NonceSequence,
    associated_data: Optional[bytes] = None,
) -> Tuple[SealedMessage, NonceSequence]:
    """Seal a message with the next nonce of a sequence.

    The returned sequence must replace the old one; sealing twice with the
    same sequence value reuses a nonce.
    """
    nonce, new_sequence = next_nonce(sequence)
    return seal_with_nonce(plaintext, key, nonce, associated_data), new_sequence
