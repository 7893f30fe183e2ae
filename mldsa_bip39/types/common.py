"""Common type definitions for ML-DSA BIP39."""

from typing import NewType, Union

__all__ = [
    "HexStr",
    "DerivationPathStr",
    "CoarseSeed",
    "SchemeSeed",
    "PublicKeyBytes",
    "SignatureBytes",
    "Message",
]

HexStr = NewType("HexStr", str)
"""Hexadecimal string representation."""

DerivationPathStr = NewType("DerivationPathStr", str)
"""Rendered path like m/8844'/1337'/0'/0/0."""

# Crypto types
CoarseSeed = NewType("CoarseSeed", bytes)
"""64-byte BIP39 seed."""

SchemeSeed = NewType("SchemeSeed", bytes)
"""32-byte ML-DSA key generation seed."""

PublicKeyBytes = NewType("PublicKeyBytes", bytes)
"""Encoded ML-DSA verifying key."""

SignatureBytes = NewType("SignatureBytes", bytes)
"""Raw, unframed ML-DSA signature."""

# Type aliases
Message = Union[bytes, bytearray, memoryview, str]
"""Anything that can be signed; str is encoded as UTF-8."""
