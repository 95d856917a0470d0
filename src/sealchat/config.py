"""Protocol parameters both parties must agree on out of band."""

from dataclasses import dataclass, replace

from .types import SYMMETRIC_KEY_SIZE, ConfigurationError


# Salt of the original playground flow
DEFAULT_SALT = b"Hello, playground"


@dataclass(frozen=True)
class ProtocolConfig:
    """Key derivation parameters for a deployment.

    None of these travel on the wire. A sender and recipient with different
    values derive different keys and every message fails to open.
    """
    salt: bytes = DEFAULT_SALT
    shared_info: bytes = b""
    key_length: int = SYMMETRIC_KEY_SIZE

    def __post_init__(self) -> None:
        if not isinstance(self.salt, bytes) or not self.salt:
            raise ConfigurationError("Salt must be non-empty bytes")

        if not isinstance(self.shared_info, bytes):
            raise ConfigurationError("Shared info must be bytes")

        if self.key_length != SYMMETRIC_KEY_SIZE:
            raise ConfigurationError(
                f"Key length must be {SYMMETRIC_KEY_SIZE} bytes, got {self.key_length}"
            )

    def with_shared_info(self, shared_info: bytes) -> "ProtocolConfig":
        """Return a copy bound to a different context, e.g. a conversation id."""
        return replace(self, shared_info=shared_info)


DEFAULT_CONFIG = ProtocolConfig()
