"""
End-to-end encryption between two X25519 key holders.

Composes key agreement, HKDF and ChaCha20-Poly1305 into the sender and
recipient halves of a single-message exchange:

    sender:    agree -> derive -> seal -> encode -> blob
    recipient: blob -> decode -> agree -> derive -> open
"""

from typing import Optional, Union

from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PrivateKey, X25519PublicKey

from .agreement import agree
from .cipher import seal, open_sealed
from .codec import encode_sealed, decode_sealed
from .config import DEFAULT_CONFIG, ProtocolConfig
from .kdf import derive_symmetric_key


PeerKey = Union[X25519PublicKey, bytes]


def derive_conversation_key(
    private_key: X25519PrivateKey,
    peer_public_key: PeerKey,
    config: ProtocolConfig = DEFAULT_CONFIG,
) -> bytes:
    """
    Derive the symmetric key shared with a peer.

    Either party gets the same key from its own private key and the other's
    public key.

    Args:
        private_key: Our X25519 private key
        peer_public_key: Their X25519 public key (object or 32 raw bytes)
        config: Agreed salt, shared info and key length

    Returns:
        Symmetric key of config.key_length bytes
    """
    shared_secret = agree(private_key, peer_public_key)
    return derive_symmetric_key(
        shared_secret,
        salt=config.salt,
        shared_info=config.shared_info,
        length=config.key_length,
    )


def encrypt_for(
    plaintext: Union[str, bytes],
    sender_private_key: X25519PrivateKey,
    recipient_public_key: PeerKey,
    config: ProtocolConfig = DEFAULT_CONFIG,
    associated_data: Optional[bytes] = None,
) -> bytes:
    """
    Encrypt a message for a recipient.

    Args:
        plaintext: Message to encrypt; str is encoded as UTF-8
        sender_private_key: Sender's X25519 private key
        recipient_public_key: Recipient's X25519 public key
        config: Agreed protocol parameters
        associated_data: Bytes authenticated alongside the message

    Returns:
        Sealed blob (nonce || ciphertext || tag)
    """
    if isinstance(plaintext, str):
        plaintext = plaintext.encode("utf-8")

    key = derive_conversation_key(sender_private_key, recipient_public_key, config)
    return encode_sealed(seal(plaintext, key, associated_data))


def decrypt_from(
    blob: bytes,
    recipient_private_key: X25519PrivateKey,
    sender_public_key: PeerKey,
    config: ProtocolConfig = DEFAULT_CONFIG,
    associated_data: Optional[bytes] = None,
) -> bytes:
    """
    Decrypt a blob from a sender.

    Args:
        blob: Sealed blob produced by encrypt_for()
        recipient_private_key: Our X25519 private key
        sender_public_key: Sender's X25519 public key
        config: Agreed protocol parameters
        associated_data: Must match what the sender used

    Returns:
        Decrypted plaintext bytes

    Raises:
        TruncatedMessageError: If the blob is too short
        AuthenticationFailedError: If the blob does not verify
    """
    sealed = decode_sealed(blob)
    key = derive_conversation_key(recipient_private_key, sender_public_key, config)
    return open_sealed(sealed, key, associated_data)
