"""ML-DSA keypair and signature value types."""

import hashlib
import logging
from typing import Any, Union

from ..constants import REDACTED
from ..exceptions import InvalidSignatureError, KeyDisposedError
from ..level import MlDsaLevel
from ..types.common import (
    DerivationPathStr,
    HexStr,
    Message,
    PublicKeyBytes,
    SchemeSeed,
    SignatureBytes,
)
from ..types.path import DerivationPath
from ..utils.encoding import bytes_to_hex, secure_zero
from ..utils.validation import (
    validate_level,
    validate_public_key,
    validate_scheme_seed,
    validate_signature_bytes,
)

__all__ = ["KeyPair", "Signature"]

logger = logging.getLogger(__name__)


class KeyPair:
    """
    ML-DSA keypair.

    Stores the 32-byte seed rather than the expanded signing key; the
    signing key is regenerated from the seed for every signature. The seed
    is held in a bytearray that is overwritten with zeros by close(). Use
    the keypair as a context manager so erasure happens on every exit path:

        with derive_keypair(seed, 0, 0) as keypair:
            signature = keypair.sign(b"message")

    Instances are created by crypto.backend.generate_keypair.
    """

    def __init__(
        self,
        level: MlDsaLevel,
        seed: Union[bytes, bytearray],
        public_key: bytes
    ) -> None:
        """
        Initialize keypair.

        Args:
            level: Security level
            seed: 32-byte ML-DSA seed (copied)
            public_key: Encoded verifying key

        Raises:
            InvalidSeedLengthError: If seed is not 32 bytes
            InvalidPublicKeyError: If public key length does not match level
        """
        self._closed = True
        self._seed = bytearray()

        self._level = validate_level(level)
        self._public_key = PublicKeyBytes(validate_public_key(public_key, self._level))
        self._seed = bytearray(validate_scheme_seed(seed))
        self._closed = False

    @property
    def level(self) -> MlDsaLevel:
        """Get security level."""
        return self._level

    @property
    def public_key(self) -> PublicKeyBytes:
        """Get encoded public key."""
        return self._public_key

    @property
    def seed(self) -> SchemeSeed:
        """
        Get a copy of the 32-byte seed.

        The seed recreates the signing key on any ML-DSA implementation.
        Treat it like a private key.

        Raises:
            KeyDisposedError: If the keypair was closed
        """
        return SchemeSeed(self._secret_seed())

    @property
    def closed(self) -> bool:
        """True once the seed has been erased."""
        return self._closed

    def _secret_seed(self) -> bytes:
        if self._closed:
            raise KeyDisposedError()
        return bytes(self._seed)

    def sign(self, message: Message, deterministic: bool = True) -> "Signature":
        """
        Sign a message.

        Args:
            message: Message bytes (str is encoded as UTF-8)
            deterministic: Use deterministic ML-DSA signing

        Returns:
            Signature tagged with this keypair's level

        Raises:
            KeyDisposedError: If the keypair was closed
            SigningError: If the primitive fails
        """
        from .backend import sign
        return sign(self, message, deterministic=deterministic)

    def verify(self, message: Message, signature: "Signature") -> bool:
        """
        Verify a signature against this keypair's public key.

        Returns:
            True if signature is valid

        Raises:
            InvalidSignatureError: If signature is for another level or malformed
        """
        from .backend import verify
        return verify(self._public_key, self._level, message, signature)

    def derivation_path(self, coin: int, account: int, index: int) -> DerivationPathStr:
        """
        Render the derivation path for this keypair's level.

        Descriptive only; nothing is re-derived.

        Format: m/{purpose}'/{coin}'/{account}'/0/{index}
        """
        return str(DerivationPath.for_level(self._level, coin, account, index))

    def public_key_hex(self, prefix: bool = False) -> HexStr:
        """Get public key as hex string."""
        return bytes_to_hex(self._public_key, prefix=prefix)

    def fingerprint(self) -> HexStr:
        """Short identifier: first 8 bytes of SHA-256 of the public key."""
        return bytes_to_hex(hashlib.sha256(self._public_key).digest()[:8])

    def close(self) -> None:
        """Overwrite the seed with zeros. Safe to call more than once."""
        if self._closed:
            return
        secure_zero(self._seed)
        self._closed = True
        logger.debug("Erased seed of %s keypair %s", self._level, self.fingerprint())

    def __enter__(self) -> "KeyPair":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __del__(self) -> None:
        seed = getattr(self, "_seed", None)
        if seed:
            secure_zero(seed)

    def __eq__(self, other: object) -> bool:
        """Check equality by level and public key."""
        if not isinstance(other, KeyPair):
            return False
        return self._level == other._level and self._public_key == other._public_key

    def __hash__(self) -> int:
        return hash((self._level, self._public_key))

    def __repr__(self) -> str:
        """String representation. Never includes the seed."""
        state = ", closed" if self._closed else ""
        return (
            f"KeyPair(level={self._level}, public_key_len={len(self._public_key)}, "
            f"fingerprint={self.fingerprint()}, seed={REDACTED}{state})"
        )

    __str__ = __repr__


class Signature:
    """
    ML-DSA signature with level information.

    The byte layout is the raw FIPS 204 signature encoding, exactly
    level.signature_size bytes with no header.
    """

    def __init__(self, level: MlDsaLevel, data: bytes) -> None:
        """
        Initialize signature.

        Args:
            level: Level the signature was produced at
            data: Raw signature bytes

        Raises:
            InvalidSignatureError: If data is text or its length does not match the level
            UnsupportedLevelError: If level is unknown
        """
        if isinstance(data, str):
            raise InvalidSignatureError("Signature must be raw bytes; use Signature.from_hex for text")
        self._level = validate_level(level)
        self._bytes = SignatureBytes(validate_signature_bytes(data, self._level))

    @classmethod
    def from_bytes(cls, level: MlDsaLevel, data: bytes) -> "Signature":
        """
        Parse signature received from an external source.

        Only raw bytes are accepted and only the length is checked here;
        structure is checked by verify().

        Raises:
            InvalidSignatureError: If data is text or its length does not match the level
        """
        return cls(level, data)

    @classmethod
    def from_hex(cls, level: MlDsaLevel, hex_str: str) -> "Signature":
        """Parse signature from hex string."""
        level = validate_level(level)
        return cls(level, validate_signature_bytes(hex_str, level))

    @property
    def level(self) -> MlDsaLevel:
        """Get security level."""
        return self._level

    def as_bytes(self) -> SignatureBytes:
        """Get raw signature bytes."""
        return self._bytes

    def hex(self) -> HexStr:
        """Get signature as hex string."""
        return bytes_to_hex(self._bytes)

    def __bytes__(self) -> bytes:
        return bytes(self._bytes)

    def __len__(self) -> int:
        return len(self._bytes)

    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, Signature):
            return False
        return self._level == other._level and self._bytes == other._bytes

    def __hash__(self) -> int:
        return hash((self._level, self._bytes))

    def __repr__(self) -> str:
        """String representation."""
        return f"Signature(level={self._level}, len={len(self._bytes)}, prefix={self._bytes[:8].hex()})"
