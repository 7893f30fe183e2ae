"""
Deterministic derivation of ML-DSA seeds from BIP39 seeds.

A 32-byte ML-DSA seed is squeezed from SHAKE256 over

    domain_separator(level) || bip39_seed || utf8(path)

The level's domain separator keeps levels apart even if a path string is
reused, and the path keeps every coin/account/index apart under one seed.
"""

import hashlib
import logging
import re
from typing import Union

from ..constants import DEFAULT_COIN_TYPE, SCHEME_SEED_SIZE
from ..exceptions import InvalidPathError, UnsupportedLevelError, ValidationError
from ..level import MlDsaLevel
from ..types.common import DerivationPathStr, SchemeSeed
from ..types.path import DerivationPath
from ..utils.validation import (
    validate_coarse_seed,
    validate_level,
    validate_path_component,
)
from .backend import generate_keypair
from .bip39 import mnemonic_to_seed
from .keys import KeyPair

__all__ = [
    "build_path",
    "parse_path",
    "derive_scheme_seed",
    "derive_keypair",
    "derive_keypair_with_coin",
    "derive_keypair_from_mnemonic",
]

logger = logging.getLogger(__name__)

PATH_PATTERN = re.compile(r"^m/(\d+)['h]/(\d+)['h]/(\d+)['h]/0/(\d+)$")


def build_path(level: MlDsaLevel, coin: int, account: int, index: int) -> DerivationPathStr:
    """Render m/{purpose}'/{coin}'/{account}'/0/{index} for the level."""
    return str(DerivationPath.for_level(validate_level(level), coin, account, index))


def parse_path(path: str) -> DerivationPath:
    """
    Parse a path like m/8844'/1337'/0'/0/0.

    Purpose, coin and account must be hardened (' or h), the change
    component must be 0 and the purpose must belong to a level.

    Raises:
        InvalidPathError: If the path is malformed
    """
    if not isinstance(path, str):
        raise InvalidPathError(f"Path must be a string, got {type(path).__name__}")

    match = PATH_PATTERN.match(path.strip())
    if match is None:
        raise InvalidPathError(f"Invalid derivation path: {path!r}")

    purpose, coin, account, index = (int(part) for part in match.groups())
    try:
        MlDsaLevel.from_purpose(purpose)
        return DerivationPath(purpose, coin, account, index)
    except (UnsupportedLevelError, ValidationError) as e:
        raise InvalidPathError(f"Invalid derivation path {path!r}: {e}") from e


def derive_scheme_seed(
    coarse_seed: bytes,
    path: Union[str, DerivationPath],
    level: MlDsaLevel
) -> SchemeSeed:
    """
    Derive a 32-byte ML-DSA seed from a BIP39 seed.

    Args:
        coarse_seed: 64-byte BIP39 seed
        path: Derivation path string (or DerivationPath)
        level: Level whose domain separator is absorbed first

    Returns:
        32-byte seed for ML-DSA key generation

    Raises:
        InvalidPathError: If path is not a string or DerivationPath
        InvalidSeedLengthError: If the BIP39 seed is not 64 bytes
    """
    coarse_seed = validate_coarse_seed(coarse_seed)
    if not isinstance(path, (str, DerivationPath)):
        raise InvalidPathError(f"Path must be a string, got {type(path).__name__}")
    level = validate_level(level)

    shake = hashlib.shake_256()
    shake.update(level.domain_separator)
    shake.update(coarse_seed)
    shake.update(str(path).encode("utf-8"))

    return SchemeSeed(shake.digest(SCHEME_SEED_SIZE))


def derive_keypair(
    coarse_seed: bytes,
    account: int,
    index: int,
    level: MlDsaLevel = MlDsaLevel.DSA_44
) -> KeyPair:
    """
    Derive an ML-DSA keypair using the default coin type (1337).

    Args:
        coarse_seed: 64-byte BIP39 seed
        account: Account index (usually 0)
        index: Key index within the account
        level: ML-DSA security level

    Returns:
        KeyPair for path m/{purpose}'/1337'/{account}'/0/{index}
    """
    return derive_keypair_with_coin(coarse_seed, DEFAULT_COIN_TYPE, account, index, level)


def derive_keypair_with_coin(
    coarse_seed: bytes,
    coin: int,
    account: int,
    index: int,
    level: MlDsaLevel = MlDsaLevel.DSA_44
) -> KeyPair:
    """
    Derive an ML-DSA keypair with a custom coin type.

    Args:
        coarse_seed: 64-byte BIP39 seed
        coin: Coin type (e.g. 1337 for Silica, 60 for Ethereum-style)
        account: Account index
        index: Key index within the account
        level: ML-DSA security level

    Returns:
        New KeyPair

    Raises:
        InvalidSeedLengthError: If the BIP39 seed is not 64 bytes
        ValidationError: If coin, account or index is out of range
        UnsupportedLevelError: If level is unknown
    """
    coarse_seed = validate_coarse_seed(coarse_seed)
    level = validate_level(level)
    validate_path_component(coin, "coin")
    validate_path_component(account, "account")
    validate_path_component(index, "index")

    path = build_path(level, coin, account, index)
    logger.debug("Deriving %s keypair at %s", level, path)

    scheme_seed = derive_scheme_seed(coarse_seed, path, level)
    return generate_keypair(level, scheme_seed)


def derive_keypair_from_mnemonic(
    words: str,
    passphrase: str = "",
    account: int = 0,
    index: int = 0,
    level: MlDsaLevel = MlDsaLevel.DSA_44,
    coin: int = DEFAULT_COIN_TYPE
) -> KeyPair:
    """Derive a keypair straight from a mnemonic phrase."""
    coarse_seed = mnemonic_to_seed(words, passphrase)
    return derive_keypair_with_coin(coarse_seed, coin, account, index, level)
