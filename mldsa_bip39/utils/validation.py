"""Validation utilities for ML-DSA BIP39."""

from typing import Union

from ..constants import COARSE_SEED_SIZE, SCHEME_SEED_SIZE, MAX_PATH_COMPONENT
from ..exceptions import (
    ValidationError,
    InvalidSeedLengthError,
    InvalidPublicKeyError,
    InvalidSignatureError,
    UnsupportedLevelError,
)
from ..level import MlDsaLevel
from ..utils.encoding import hex_to_bytes

__all__ = [
    "is_valid_coarse_seed",
    "validate_coarse_seed",
    "is_valid_scheme_seed",
    "validate_scheme_seed",
    "is_valid_path_component",
    "validate_path_component",
    "validate_level",
    "is_valid_public_key",
    "validate_public_key",
    "is_valid_signature_bytes",
    "validate_signature_bytes",
]

BytesLike = Union[bytes, bytearray, memoryview]


def _as_bytes(data: Union[str, BytesLike], what: str) -> bytes:
    if isinstance(data, str):
        return hex_to_bytes(data)
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise ValidationError(f"{what} must be bytes or hex string, got {type(data).__name__}")


def _validate_seed(seed: Union[str, BytesLike], size: int, what: str) -> bytes:
    seed = _as_bytes(seed, what)
    if len(seed) != size:
        raise InvalidSeedLengthError(size, len(seed))
    return seed


def is_valid_coarse_seed(seed: Union[str, BytesLike]) -> bool:
    """Check that a BIP39 seed is exactly 64 bytes."""
    try:
        validate_coarse_seed(seed)
        return True
    except ValidationError:
        return False


def validate_coarse_seed(seed: Union[str, BytesLike]) -> bytes:
    """
    Validate BIP39 seed and return as bytes.

    Args:
        seed: Seed as bytes or hex string

    Returns:
        Seed as 64 bytes

    Raises:
        InvalidSeedLengthError: If seed is not 64 bytes
        ValidationError: If seed has the wrong type or bad hex
    """
    return _validate_seed(seed, COARSE_SEED_SIZE, "Seed")


def is_valid_scheme_seed(seed: Union[str, BytesLike]) -> bool:
    """Check that an ML-DSA seed is exactly 32 bytes."""
    try:
        validate_scheme_seed(seed)
        return True
    except ValidationError:
        return False


def validate_scheme_seed(seed: Union[str, BytesLike]) -> bytes:
    """
    Validate ML-DSA key generation seed and return as bytes.

    Raises:
        InvalidSeedLengthError: If seed is not 32 bytes
    """
    return _validate_seed(seed, SCHEME_SEED_SIZE, "ML-DSA seed")


def is_valid_path_component(value: int) -> bool:
    """Check that a coin, account or index fits in 32 unsigned bits."""
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and 0 <= value <= MAX_PATH_COMPONENT
    )


def validate_path_component(value: int, name: str = "index") -> int:
    """
    Validate a derivation path component.

    Args:
        value: Coin type, account or index
        name: Component name used in the error message

    Returns:
        The value unchanged

    Raises:
        ValidationError: If value is not an integer in [0, 2**32)
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(f"{name} must be an integer, got {type(value).__name__}")
    if not 0 <= value <= MAX_PATH_COMPONENT:
        raise ValidationError(f"{name} must be between 0 and {MAX_PATH_COMPONENT}, got {value}")
    return value


def validate_level(level: Union[MlDsaLevel, str]) -> MlDsaLevel:
    """
    Normalize a level given as member or name.

    Raises:
        UnsupportedLevelError: If level is unknown
    """
    if isinstance(level, MlDsaLevel):
        return level
    if isinstance(level, str):
        return MlDsaLevel.from_name(level)
    raise UnsupportedLevelError(f"Unsupported ML-DSA level: {level!r}")


def is_valid_public_key(key: Union[str, BytesLike], level: MlDsaLevel) -> bool:
    """Check public key length for the given level."""
    try:
        validate_public_key(key, level)
        return True
    except ValidationError:
        return False


def validate_public_key(key: Union[str, BytesLike], level: MlDsaLevel) -> bytes:
    """
    Validate public key and return as bytes.

    Args:
        key: Public key as bytes or hex string
        level: Level the key belongs to

    Returns:
        Public key bytes

    Raises:
        InvalidPublicKeyError: If the length does not match the level
    """
    try:
        key = _as_bytes(key, "Public key")
    except ValidationError as e:
        raise InvalidPublicKeyError(e.message) from e

    expected = level.public_key_size
    if len(key) != expected:
        raise InvalidPublicKeyError(
            f"Invalid public key: expected {expected} bytes for {level}, got {len(key)}",
            expected=expected,
            actual=len(key),
        )
    return key


def is_valid_signature_bytes(data: Union[str, BytesLike], level: MlDsaLevel) -> bool:
    """Check signature length for the given level."""
    try:
        validate_signature_bytes(data, level)
        return True
    except ValidationError:
        return False


def validate_signature_bytes(data: Union[str, BytesLike], level: MlDsaLevel) -> bytes:
    """
    Validate raw signature bytes and return them.

    Raises:
        InvalidSignatureError: If the length does not match the level
    """
    try:
        data = _as_bytes(data, "Signature")
    except ValidationError as e:
        raise InvalidSignatureError(e.message) from e

    expected = level.signature_size
    if len(data) != expected:
        raise InvalidSignatureError(
            f"Invalid signature: expected {expected} bytes for {level}, got {len(data)}",
            expected=expected,
            actual=len(data),
        )
    return data
