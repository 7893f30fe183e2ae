"""Derivation path type for ML-DSA BIP39."""

from dataclasses import dataclass

from ..constants import CHANGE_COMPONENT
from ..level import MlDsaLevel
from ..types.common import DerivationPathStr
from ..utils.validation import validate_path_component

__all__ = ["DerivationPath"]


@dataclass(frozen=True)
class DerivationPath:
    """
    BIP44-style path identifying one ML-DSA key.

    Rendered as m/purpose'/coin'/account'/0/index. The path is only hashed
    into the seed derivation; no BIP32 child key arithmetic happens.
    """
    purpose: int
    coin: int
    account: int
    index: int

    def __post_init__(self) -> None:
        validate_path_component(self.purpose, "purpose")
        validate_path_component(self.coin, "coin")
        validate_path_component(self.account, "account")
        validate_path_component(self.index, "index")

    @classmethod
    def for_level(
        cls,
        level: MlDsaLevel,
        coin: int,
        account: int,
        index: int
    ) -> "DerivationPath":
        """Create path using the level's purpose field."""
        return cls(level.purpose, coin, account, index)

    @property
    def level(self) -> MlDsaLevel:
        """Level owning this path's purpose."""
        return MlDsaLevel.from_purpose(self.purpose)

    def __str__(self) -> DerivationPathStr:
        return DerivationPathStr(
            f"m/{self.purpose}'/{self.coin}'/{self.account}'/{CHANGE_COMPONENT}/{self.index}"
        )
