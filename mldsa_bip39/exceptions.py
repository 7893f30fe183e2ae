"""ML-DSA BIP39 exceptions hierarchy."""

from typing import Any, Optional

__all__ = [
    "MlDsaBip39Error",
    "ValidationError",
    "InvalidMnemonicError",
    "InvalidSeedLengthError",
    "InvalidPathError",
    "InvalidPublicKeyError",
    "InvalidSignatureError",
    "CryptoError",
    "SigningError",
    "VerificationError",
    "KeyGenerationError",
    "KeyDisposedError",
    "UnsupportedLevelError",
]


class MlDsaBip39Error(Exception):
    """Base exception for all ML-DSA BIP39 errors."""

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        data: Optional[Any] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.data = data

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ValidationError(MlDsaBip39Error):
    """Raised when validation fails."""
    pass


class InvalidMnemonicError(ValidationError):
    """Raised when a mnemonic phrase is malformed."""
    pass


class _SizeMismatch(ValidationError):
    """Validation error carrying expected and actual byte lengths."""

    def __init__(
        self,
        message: str,
        expected: Optional[int] = None,
        actual: Optional[int] = None
    ) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class InvalidSeedLengthError(_SizeMismatch):
    """Raised when a seed has the wrong length."""

    def __init__(
        self,
        expected: int,
        actual: int,
        message: Optional[str] = None
    ) -> None:
        if message is None:
            message = f"Invalid seed length: expected {expected} bytes, got {actual}"
        super().__init__(message, expected, actual)


class InvalidPathError(ValidationError):
    """Raised when a derivation path cannot be parsed."""
    pass


class InvalidPublicKeyError(_SizeMismatch):
    """Raised when a public key has the wrong length or cannot be decoded."""
    pass


class InvalidSignatureError(_SizeMismatch):
    """Raised when a signature is malformed or tagged with the wrong level."""
    pass


class CryptoError(MlDsaBip39Error):
    """Raised when cryptographic operation fails."""
    pass


class SigningError(CryptoError):
    """Raised when the signing primitive rejects well-formed input."""
    pass


class VerificationError(CryptoError):
    """Raised when the verification primitive fails unexpectedly."""
    pass


class KeyGenerationError(CryptoError):
    """Raised when the key generation primitive rejects a seed."""
    pass


class KeyDisposedError(CryptoError):
    """Raised when a keypair is used after its seed was erased."""

    def __init__(self, message: str = "Keypair has been closed and its seed erased") -> None:
        super().__init__(message)


class UnsupportedLevelError(MlDsaBip39Error):
    """Raised when no backend is available for the requested level."""
    pass
