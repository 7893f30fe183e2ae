"""Type definitions for ML-DSA BIP39."""

from ..types.common import (
    HexStr,
    DerivationPathStr,
    CoarseSeed,
    SchemeSeed,
    PublicKeyBytes,
    SignatureBytes,
    Message,
)

__all__ = [
    "HexStr",
    "DerivationPathStr",
    "CoarseSeed",
    "SchemeSeed",
    "PublicKeyBytes",
    "SignatureBytes",
    "Message",
]
