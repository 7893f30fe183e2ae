"""
ML-DSA backend built on dilithium-py.

Every operation dispatches on the level to one of three parameter sets.
Lengths and level tags are checked before the lattice primitive runs, and
primitive outputs are checked against the level's sizes afterwards.
"""

import logging
from typing import NamedTuple

from dilithium_py.ml_dsa import ML_DSA_44, ML_DSA_65, ML_DSA_87

from ..constants import SIGNING_CONTEXT
from ..exceptions import (
    InvalidSignatureError,
    KeyGenerationError,
    SigningError,
    UnsupportedLevelError,
    VerificationError,
)
from ..level import MlDsaLevel
from ..types.common import Message
from ..utils.encoding import message_to_bytes
from ..utils.validation import (
    validate_level,
    validate_public_key,
    validate_scheme_seed,
    validate_signature_bytes,
)
from .keys import KeyPair, Signature

__all__ = ["generate_keypair", "sign", "verify", "is_hint_well_formed", "is_response_bounded"]

logger = logging.getLogger(__name__)


class _Scheme(NamedTuple):
    primitive: object  # dilithium_py.ml_dsa.ML_DSA instance
    k: int  # Rows of A, number of hint polynomials
    l: int  # Columns of A, number of z polynomials
    omega: int  # Maximum number of hint bits
    gamma1: int  # Range of the masking vector y
    beta: int  # tau * eta
    c_tilde_size: int  # Commitment hash length in bytes


def _scheme_for(level: MlDsaLevel) -> _Scheme:
    """Select the parameter set for a level."""
    if level is MlDsaLevel.DSA_44:
        return _Scheme(ML_DSA_44, k=4, l=4, omega=80, gamma1=2**17, beta=78, c_tilde_size=32)
    elif level is MlDsaLevel.DSA_65:
        return _Scheme(ML_DSA_65, k=6, l=5, omega=55, gamma1=2**19, beta=196, c_tilde_size=48)
    elif level is MlDsaLevel.DSA_87:
        return _Scheme(ML_DSA_87, k=8, l=7, omega=75, gamma1=2**19, beta=120, c_tilde_size=64)
    else:
        raise UnsupportedLevelError(f"Unsupported ML-DSA level: {level!r}")


def is_response_bounded(
    signature: bytes,
    c_tilde_size: int,
    l: int,
    gamma1: int,
    beta: int
) -> bool:
    """
    Check the z section of an encoded signature.

    z follows the commitment hash as l polynomials of 256 coefficients,
    each packed little-endian in bitlen(gamma1) bits as gamma1 - z[i].
    Every coefficient must satisfy |z[i]| < gamma1 - beta.
    """
    bits = gamma1.bit_length()
    poly_size = 32 * bits
    if len(signature) < c_tilde_size + l * poly_size:
        return False

    bound = gamma1 - beta
    mask = (1 << bits) - 1
    for i in range(l):
        start = c_tilde_size + i * poly_size
        packed = int.from_bytes(signature[start:start + poly_size], "little")
        for _ in range(256):
            if abs(gamma1 - (packed & mask)) >= bound:
                return False
            packed >>= bits
    return True


def is_hint_well_formed(signature: bytes, k: int, omega: int) -> bool:
    """
    Check the hint section of an encoded signature (FIPS 204 HintBitUnpack).

    The last omega + k bytes hold up to omega coefficient positions followed
    by k running totals. Totals must be non-decreasing and at most omega,
    positions must increase strictly within each polynomial, and unused
    position slots must be zero.
    """
    if len(signature) < omega + k:
        return False
    y = signature[-(omega + k):]

    index = 0
    for i in range(k):
        end = y[omega + i]
        if end < index or end > omega:
            return False
        first = index
        while index < end:
            if index > first and y[index - 1] >= y[index]:
                return False
            index += 1

    for i in range(index, omega):
        if y[i] != 0:
            return False
    return True


def generate_keypair(level: MlDsaLevel, scheme_seed: bytes) -> KeyPair:
    """
    Generate an ML-DSA keypair from a 32-byte seed.

    Args:
        level: Security level
        scheme_seed: 32-byte seed (xi in FIPS 204)

    Returns:
        KeyPair holding the seed and encoded public key

    Raises:
        InvalidSeedLengthError: If seed is not 32 bytes
        KeyGenerationError: If the primitive fails or returns a bad key
        UnsupportedLevelError: If level is unknown
    """
    level = validate_level(level)
    seed = validate_scheme_seed(scheme_seed)
    scheme = _scheme_for(level)

    try:
        public_key, _ = scheme.primitive.key_derive(seed)
    except Exception as e:
        raise KeyGenerationError(f"{level} key generation failed: {type(e).__name__}") from e

    if len(public_key) != level.public_key_size:
        raise KeyGenerationError(
            f"{level} key generation returned {len(public_key)} byte public key, "
            f"expected {level.public_key_size}"
        )

    keypair = KeyPair(level, seed, public_key)
    logger.debug("Generated %s keypair %s", level, keypair.fingerprint())
    return keypair


def sign(keypair: KeyPair, message: Message, deterministic: bool = True) -> Signature:
    """
    Sign a message with a keypair.

    The signing key is regenerated from the stored seed and dropped after
    the call.

    Args:
        keypair: Keypair to sign with
        message: Message bytes (str is encoded as UTF-8)
        deterministic: Deterministic ML-DSA when True, hedged otherwise

    Returns:
        Signature tagged with the keypair's level

    Raises:
        KeyDisposedError: If the keypair was closed
        SigningError: If the primitive fails
    """
    message = message_to_bytes(message)
    level = keypair.level
    scheme = _scheme_for(level)
    seed = keypair._secret_seed()

    try:
        _, secret_key = scheme.primitive.key_derive(seed)
        signature = scheme.primitive.sign(
            secret_key,
            message,
            ctx=SIGNING_CONTEXT,
            deterministic=deterministic,
        )
    except Exception as e:
        raise SigningError(f"{level} signing failed: {type(e).__name__}") from e

    if len(signature) != level.signature_size:
        raise SigningError(
            f"{level} signing returned {len(signature)} bytes, expected {level.signature_size}"
        )

    return Signature(level, signature)


def verify(
    public_key: bytes,
    level: MlDsaLevel,
    message: Message,
    signature: Signature
) -> bool:
    """
    Verify a signature against a public key.

    Checks run in order: signature level, public key length, signature
    length, signature decoding (z bound and hint encoding). Only then does
    the lattice verifier run.

    Args:
        public_key: Encoded public key
        level: Level the public key belongs to
        message: Signed message
        signature: Signature to check

    Returns:
        True if signature is valid, False otherwise

    Raises:
        InvalidSignatureError: On level mismatch, bad length or bad encoding
        InvalidPublicKeyError: If public key length does not match level
        UnsupportedLevelError: If level is unknown
    """
    level = validate_level(level)
    scheme = _scheme_for(level)

    if not isinstance(signature, Signature):
        raise InvalidSignatureError(
            f"Expected Signature, got {type(signature).__name__}; use Signature.from_bytes"
        )
    if signature.level != level:
        logger.warning("Rejected %s signature for %s public key", signature.level, level)
        raise InvalidSignatureError(
            f"Invalid signature: signature level {signature.level} doesn't match "
            f"expected level {level}"
        )

    public_key = validate_public_key(public_key, level)
    sig_bytes = validate_signature_bytes(signature.as_bytes(), level)

    if not is_response_bounded(
        sig_bytes, scheme.c_tilde_size, scheme.l, scheme.gamma1, scheme.beta
    ):
        logger.warning("Rejected %s signature with out-of-range response vector", level)
        raise InvalidSignatureError("Invalid signature: failed to decode signature")

    if not is_hint_well_formed(sig_bytes, scheme.k, scheme.omega):
        logger.warning("Rejected %s signature with malformed hint encoding", level)
        raise InvalidSignatureError("Invalid signature: failed to decode signature")

    message = message_to_bytes(message)
    try:
        valid = scheme.primitive.verify(public_key, message, sig_bytes, ctx=SIGNING_CONTEXT)
    except ValueError as e:
        raise InvalidSignatureError("Invalid signature: failed to decode signature") from e
    except Exception as e:
        raise VerificationError(f"{level} verification failed: {type(e).__name__}") from e

    logger.debug("%s signature verification result: %s", level, bool(valid))
    return bool(valid)
