"""
ML-DSA BIP39

Deterministic ML-DSA (FIPS 204) post-quantum keypairs from BIP39 mnemonics.
One mnemonic yields many independent keys at three security levels, using
level-specific BIP44-style paths:

    ML-DSA-44: m/8844'/coin'/account'/0/index
    ML-DSA-65: m/8865'/coin'/account'/0/index
    ML-DSA-87: m/8887'/coin'/account'/0/index

Example:
    >>> seed = mnemonic_to_seed("abandon " * 11 + "about")
    >>> with derive_keypair(seed, 0, 0, MlDsaLevel.DSA_44) as keypair:
    ...     signature = keypair.sign(b"Hello, post-quantum world!")
    ...     assert keypair.verify(b"Hello, post-quantum world!", signature)
"""

from .constants import DEFAULT_COIN_TYPE, SILICA_COIN_TYPE
from .level import MlDsaLevel, LevelParams
from .exceptions import (
    MlDsaBip39Error,
    ValidationError,
    InvalidMnemonicError,
    InvalidSeedLengthError,
    InvalidPathError,
    InvalidPublicKeyError,
    InvalidSignatureError,
    CryptoError,
    SigningError,
    VerificationError,
    KeyGenerationError,
    KeyDisposedError,
    UnsupportedLevelError,
)
from .types.path import DerivationPath
from .crypto import (
    KeyPair,
    Signature,
    generate_mnemonic,
    validate_mnemonic,
    mnemonic_to_seed,
    build_path,
    parse_path,
    derive_scheme_seed,
    derive_keypair,
    derive_keypair_with_coin,
    derive_keypair_from_mnemonic,
)

__version__ = "0.1.0"

__all__ = [
    # Constants
    "DEFAULT_COIN_TYPE",
    "SILICA_COIN_TYPE",

    # Levels
    "MlDsaLevel",
    "LevelParams",

    # Exceptions
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

    # Types
    "DerivationPath",
    "KeyPair",
    "Signature",

    # Functions
    "generate_mnemonic",
    "validate_mnemonic",
    "mnemonic_to_seed",
    "build_path",
    "parse_path",
    "derive_scheme_seed",
    "derive_keypair",
    "derive_keypair_with_coin",
    "derive_keypair_from_mnemonic",
]
