"""Test vectors for SealChat known-answer and cross-implementation tests."""

# Test seeds (32-byte hex strings)
ALICE_SEED_HEX = "0000000000000000000000000000000000000000000000000000000000000001"
BOB_SEED_HEX = "0000000000000000000000000000000000000000000000000000000000000002"

# RFC 7748 section 6.1
RFC7748_ALICE_PRIVATE_HEX = "77076d0a7318a57d3c16c17251b26645df4c2f87ebc0992ab177fba51db92c2a"
RFC7748_ALICE_PUBLIC_HEX = "8520f0098930a754748b7ddcb43ef75a0dbf3a0d26381af4eba4a98eaa9b4e6a"
RFC7748_BOB_PRIVATE_HEX = "5dab087e624a8a4b79e17f8b83800ee66f3bb1292618b6fd1c2f8b27ff88e0eb"
RFC7748_BOB_PUBLIC_HEX = "de9edb7d7b7dc1b4d35b61c2ece435373f8343c85b78674dadfc7e146f882b4f"
RFC7748_SHARED_SECRET_HEX = "4a5d9d5ba4ce2de1728e3bf480350f25e07e21c947d19e3376f09b3c1e161742"

# RFC 5869 test case 1 (HKDF-SHA256)
RFC5869_IKM = bytes([0x0B] * 22)
RFC5869_SALT = bytes(range(0x00, 0x0D))
RFC5869_INFO = bytes(range(0xF0, 0xFA))
RFC5869_LENGTH = 42
RFC5869_OKM_HEX = (
    "3cb25f25faacd57a90434f64d0362f2a2d2d0a90cf1a5a4c5db02d56ecc4c5bf"
    "34007208d5b887185865"
)

# RFC 8439 section 2.8.2 (ChaCha20-Poly1305 AEAD)
RFC8439_KEY = bytes(range(0x80, 0xA0))
RFC8439_NONCE = bytes.fromhex("070000004041424344454647")
RFC8439_AAD = bytes.fromhex("50515253c0c1c2c3c4c5c6c7")
RFC8439_PLAINTEXT = (
    b"Ladies and Gentlemen of the class of '99: If I could offer you only one "
    b"tip for the future, sunscreen would be it."
)
RFC8439_CIPHERTEXT_PREFIX_HEX = "d31a8d34648e60db7b86afbc53ef7ec2"
RFC8439_TAG_HEX = "1ae10b594f09e26a7e902ecbd0600691"

# Points of small order on Curve25519
LOW_ORDER_POINTS = {
    "zero": bytes(32),
    "one": b"\x01" + bytes(31),
}

# Reference flow parameters
PROTOCOL_SALT = b"Hello, playground"
SENSITIVE_MESSAGE = "The result of your test is positive"

# Plaintexts exercised by round-trip tests
TEST_MESSAGES = {
    "empty": "",
    "one_byte": "a",
    "control_chars": "tab\there\r\nnul\x00end",
    "reference": "The result of your test is positive",
    "greek": "Καλημέρα κόσμε",
    "hindi": "नमस्ते दुनिया",
    "astral_plane": "\U0001F510 sealed \U0001F511",
    "xml": '<note to="bob">meet at noon</note>',
    "block_boundary": "B" * 64,
    "multi_block": "0123456789abcdef" * 300,
}
