"""Constants for ML-DSA BIP39 key derivation."""

__all__ = [
    "DEFAULT_COIN_TYPE",
    "SILICA_COIN_TYPE",
    "COARSE_SEED_SIZE",
    "SCHEME_SEED_SIZE",
    "CHANGE_COMPONENT",
    "MAX_PATH_COMPONENT",
    "DEFAULT_MNEMONIC_STRENGTH",
    "MNEMONIC_STRENGTHS",
    "MNEMONIC_LANGUAGE",
    "SIGNING_CONTEXT",
    "REDACTED",
]

# Coin type used by derive_keypair (Silica network)
SILICA_COIN_TYPE = 1337
DEFAULT_COIN_TYPE = SILICA_COIN_TYPE

# Seed sizes
COARSE_SEED_SIZE = 64
"""BIP39 seed produced by PBKDF2-HMAC-SHA512."""

SCHEME_SEED_SIZE = 32
"""ML-DSA key generation seed (xi), identical for every level."""

# Derivation path
CHANGE_COMPONENT = 0
MAX_PATH_COMPONENT = 0xFFFFFFFF

# Mnemonic generation
DEFAULT_MNEMONIC_STRENGTH = 256  # 24 words
MNEMONIC_STRENGTHS = (128, 160, 192, 224, 256)
MNEMONIC_LANGUAGE = "english"

# Pure ML-DSA, empty context string
SIGNING_CONTEXT = b""

REDACTED = "[REDACTED]"
