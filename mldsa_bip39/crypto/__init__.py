"""Cryptographic operations for ML-DSA BIP39."""

from ..crypto.bip39 import generate_mnemonic, validate_mnemonic, mnemonic_to_seed
from ..crypto.keys import KeyPair, Signature
from ..crypto.backend import generate_keypair, sign, verify
from ..crypto.derivation import (
    build_path,
    parse_path,
    derive_scheme_seed,
    derive_keypair,
    derive_keypair_with_coin,
    derive_keypair_from_mnemonic,
)

__all__ = [
    # Mnemonic
    "generate_mnemonic",
    "validate_mnemonic",
    "mnemonic_to_seed",

    # Keys
    "KeyPair",
    "Signature",

    # Backend
    "generate_keypair",
    "sign",
    "verify",

    # Derivation
    "build_path",
    "parse_path",
    "derive_scheme_seed",
    "derive_keypair",
    "derive_keypair_with_coin",
    "derive_keypair_from_mnemonic",
]
