"""BIP39 mnemonic handling for ML-DSA key derivation."""

import logging
from typing import Union

from mnemonic import Mnemonic

from ..constants import (
    DEFAULT_MNEMONIC_STRENGTH,
    MNEMONIC_LANGUAGE,
    MNEMONIC_STRENGTHS,
)
from ..exceptions import InvalidMnemonicError, ValidationError
from ..types.common import CoarseSeed

__all__ = ["generate_mnemonic", "validate_mnemonic", "mnemonic_to_seed"]

logger = logging.getLogger(__name__)

_mnemo = Mnemonic(MNEMONIC_LANGUAGE)


def _normalize(words: Union[str, list[str]]) -> str:
    if isinstance(words, (list, tuple)):
        words = " ".join(words)
    if not isinstance(words, str):
        raise InvalidMnemonicError(f"Mnemonic must be a string, got {type(words).__name__}")
    return " ".join(words.split())


def generate_mnemonic(strength: int = DEFAULT_MNEMONIC_STRENGTH) -> str:
    """
    Generate BIP39 mnemonic phrase.

    Args:
        strength: Entropy bits (256 gives 24 words)

    Returns:
        Space-separated mnemonic

    Raises:
        ValidationError: If strength is not a BIP39 entropy size
    """
    if strength not in MNEMONIC_STRENGTHS:
        raise ValidationError("Strength must be 128, 160, 192, 224, or 256")
    return _mnemo.generate(strength=strength)


def validate_mnemonic(words: Union[str, list[str]]) -> bool:
    """Check wordlist membership, word count and checksum."""
    try:
        return _mnemo.check(_normalize(words))
    except InvalidMnemonicError:
        return False


def mnemonic_to_seed(words: Union[str, list[str]], passphrase: str = "") -> CoarseSeed:
    """
    Convert a BIP39 mnemonic to a 64-byte seed.

    Args:
        words: 12, 15, 18, 21 or 24 words, as a string or list
        passphrase: Optional passphrase (empty string for none)

    Returns:
        64-byte seed (PBKDF2-HMAC-SHA512, 2048 rounds)

    Raises:
        InvalidMnemonicError: If the phrase fails wordlist or checksum checks
    """
    phrase = _normalize(words)
    if not _mnemo.check(phrase):
        # Never echo the phrase
        word_count = len(phrase.split()) if phrase else 0
        logger.warning("Rejected mnemonic with %d words", word_count)
        raise InvalidMnemonicError(
            f"Invalid mnemonic: {word_count} words failed wordlist or checksum validation"
        )

    seed = Mnemonic.to_seed(phrase, passphrase=passphrase)
    return CoarseSeed(seed)
