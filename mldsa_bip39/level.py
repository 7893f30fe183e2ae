"""ML-DSA security level definitions (FIPS 204)."""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .constants import SCHEME_SEED_SIZE
from .exceptions import UnsupportedLevelError

__all__ = ["LevelParams", "MlDsaLevel"]


@dataclass(frozen=True)
class LevelParams:
    """Parameter record for one ML-DSA security level."""
    display_name: str
    purpose: int  # BIP44-style purpose field
    domain_separator: bytes  # Derivation prefix
    public_key_size: int
    signature_size: int
    security_bits: int
    nist_category: int
    seed_size: int = SCHEME_SEED_SIZE


class MlDsaLevel(Enum):
    """
    ML-DSA security levels.

    | Level  | NIST Category | Security | Public Key | Signature |
    |--------|---------------|----------|------------|-----------|
    | DSA_44 | 2             | 128-bit  | 1,312 B    | 2,420 B   |
    | DSA_65 | 3             | 192-bit  | 1,952 B    | 3,309 B   |
    | DSA_87 | 5             | 256-bit  | 2,592 B    | 4,627 B   |

    DSA_44 is the default. DSA_65 suits high-value accounts (treasury,
    governance). DSA_87 is reserved for critical infrastructure.
    """

    DSA_44 = LevelParams(
        display_name="ML-DSA-44",
        purpose=8844,
        domain_separator=b"ML-DSA-BIP39:ML-DSA-44:V1",
        public_key_size=1312,
        signature_size=2420,
        security_bits=128,
        nist_category=2,
    )
    DSA_65 = LevelParams(
        display_name="ML-DSA-65",
        purpose=8865,
        domain_separator=b"ML-DSA-BIP39:ML-DSA-65:V1",
        public_key_size=1952,
        signature_size=3309,
        security_bits=192,
        nist_category=3,
    )
    DSA_87 = LevelParams(
        display_name="ML-DSA-87",
        purpose=8887,
        domain_separator=b"ML-DSA-BIP39:ML-DSA-87:V1",
        public_key_size=2592,
        signature_size=4627,
        security_bits=256,
        nist_category=5,
    )

    @classmethod
    def default(cls) -> "MlDsaLevel":
        """Get the default level (ML-DSA-44)."""
        return cls.DSA_44

    @classmethod
    def from_name(cls, name: Union[str, "MlDsaLevel"]) -> "MlDsaLevel":
        """
        Look up a level by name.

        Args:
            name: Display name ("ML-DSA-65"), member name ("DSA_65")
                or short form ("65", "dsa65")

        Returns:
            Matching level

        Raises:
            UnsupportedLevelError: If no level matches
        """
        if isinstance(name, MlDsaLevel):
            return name
        if not isinstance(name, str):
            raise UnsupportedLevelError(f"Unsupported ML-DSA level: {name!r}")

        key = name.strip().upper().replace("-", "").replace("_", "")
        for level in cls:
            variant = level.display_name.split("-")[-1]
            if key in (variant, f"DSA{variant}", f"MLDSA{variant}"):
                return level

        raise UnsupportedLevelError(f"Unsupported ML-DSA level: {name!r}")

    @classmethod
    def from_purpose(cls, purpose: int) -> "MlDsaLevel":
        """
        Look up a level by its derivation purpose field.

        Raises:
            UnsupportedLevelError: If no level owns the purpose
        """
        for level in cls:
            if level.purpose == purpose:
                return level
        raise UnsupportedLevelError(f"No ML-DSA level uses purpose {purpose}")

    @property
    def params(self) -> LevelParams:
        return self.value

    @property
    def display_name(self) -> str:
        """Human-readable name."""
        return self.value.display_name

    @property
    def purpose(self) -> int:
        """BIP44-style purpose field (unique per level)."""
        return self.value.purpose

    @property
    def domain_separator(self) -> bytes:
        """Domain separator for key derivation (unique per level)."""
        return self.value.domain_separator

    @property
    def public_key_size(self) -> int:
        return self.value.public_key_size

    @property
    def signature_size(self) -> int:
        return self.value.signature_size

    @property
    def seed_size(self) -> int:
        """ML-DSA seed size (32 bytes for all levels)."""
        return self.value.seed_size

    @property
    def security_bits(self) -> int:
        return self.value.security_bits

    @property
    def nist_category(self) -> int:
        return self.value.nist_category

    def __str__(self) -> str:
        return self.display_name
