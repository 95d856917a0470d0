"""X25519 key agreement for SealChat."""

import logging
from typing import Union

from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PrivateKey, X25519PublicKey

from .keys import public_key_from_bytes
from .types import InvalidPeerKeyError

logger = logging.getLogger(__name__)


def agree(
    private_key: X25519PrivateKey,
    peer_public_key: Union[X25519PublicKey, bytes],
) -> bytes:
    """
    Perform X25519 ECDH key exchange.

    The result is raw curve output and must go through the KDF before it is
    used as a key.

    Args:
        private_key: Our private key
        peer_public_key: Their public key, as a key object or 32 raw bytes

    Returns:
        32-byte shared secret

    Raises:
        InvalidKeyEncodingError: If raw peer key bytes are malformed
        InvalidPeerKeyError: If the peer key is a low-order point
    """
    if not isinstance(peer_public_key, X25519PublicKey):
        peer_public_key = public_key_from_bytes(peer_public_key)

    try:
        shared_secret = private_key.exchange(peer_public_key)
    except ValueError as e:
        # Backend refuses an all-zero result from small-subgroup points
        raise InvalidPeerKeyError("Peer public key produces a degenerate shared secret") from e

    logger.debug("Computed X25519 shared secret")
    return shared_secret
