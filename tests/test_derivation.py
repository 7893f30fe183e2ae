import hashlib

import pytest

from mldsa_bip39.crypto.derivation import (
    build_path,
    parse_path,
    derive_scheme_seed,
    derive_keypair,
    derive_keypair_with_coin,
    derive_keypair_from_mnemonic,
)
from mldsa_bip39.crypto.bip39 import mnemonic_to_seed
from mldsa_bip39.exceptions import (
    InvalidPathError,
    InvalidSeedLengthError,
    UnsupportedLevelError,
    ValidationError,
)
from mldsa_bip39.level import MlDsaLevel
from mldsa_bip39.types.path import DerivationPath

MNEMONIC = "abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon about"
ZERO_SEED = bytes(64)
SEED = bytes([42]) * 64


def test_build_path():
    assert build_path(MlDsaLevel.DSA_44, 1337, 0, 0) == "m/8844'/1337'/0'/0/0"
    assert build_path(MlDsaLevel.DSA_65, 60, 2, 7) == "m/8865'/60'/2'/0/7"
    assert build_path(MlDsaLevel.DSA_87, 1337, 0, 4294967295) == "m/8887'/1337'/0'/0/4294967295"


def test_build_path_rejects_out_of_range():
    with pytest.raises(ValidationError):
        build_path(MlDsaLevel.DSA_44, 1337, -1, 0)
    with pytest.raises(ValidationError):
        build_path(MlDsaLevel.DSA_44, 1337, 0, 2**32)


def test_parse_path_roundtrip():
    path = parse_path("m/8865'/1337'/3'/0/9")
    assert path == DerivationPath(8865, 1337, 3, 9)
    assert path.level is MlDsaLevel.DSA_65
    assert str(path) == "m/8865'/1337'/3'/0/9"
    assert parse_path("m/8844h/1337h/0h/0/1") == DerivationPath(8844, 1337, 0, 1)


@pytest.mark.parametrize(
    "path",
    [
        "m/44'/0'/0'/0/0",         # purpose owned by no level
        "m/8844'/1337'/0'/1/0",    # change must be 0
        "m/8844/1337'/0'/0/0",     # purpose not hardened
        "m/8844'/1337'/0'/0/0'",   # index hardened
        "m/8844'/1337'/0'/0",
        "m/8844'/1337'/0'/0/4294967296",
        "",
    ],
)
def test_parse_path_rejects(path):
    with pytest.raises(InvalidPathError):
        parse_path(path)


def test_scheme_seed_matches_shake256_layout():
    path = "m/8844'/1337'/0'/0/0"
    expected = hashlib.shake_256(
        b"ML-DSA-BIP39:ML-DSA-44:V1" + SEED + path.encode("utf-8")
    ).digest(32)
    assert derive_scheme_seed(SEED, path, MlDsaLevel.DSA_44) == expected


def test_scheme_seed_determinism():
    path = "m/8844'/1337'/0'/0/0"
    seed1 = derive_scheme_seed(SEED, path, MlDsaLevel.DSA_44)
    seed2 = derive_scheme_seed(SEED, path, MlDsaLevel.DSA_44)
    assert seed1 == seed2
    assert len(seed1) == 32


def test_scheme_seed_different_paths():
    seed1 = derive_scheme_seed(SEED, "m/8844'/1337'/0'/0/0", MlDsaLevel.DSA_44)
    seed2 = derive_scheme_seed(SEED, "m/8844'/1337'/0'/0/1", MlDsaLevel.DSA_44)
    assert seed1 != seed2


def test_scheme_seed_different_levels_same_path():
    path = "m/8844'/1337'/0'/0/0"
    seeds = {derive_scheme_seed(SEED, path, level) for level in MlDsaLevel}
    assert len(seeds) == 3


def test_scheme_seed_accepts_path_object():
    path = DerivationPath.for_level(MlDsaLevel.DSA_44, 1337, 0, 0)
    assert derive_scheme_seed(SEED, path, MlDsaLevel.DSA_44) == derive_scheme_seed(
        SEED, str(path), MlDsaLevel.DSA_44
    )


@pytest.mark.parametrize("path", [b"m/8844'/1337'/0'/0/0", None, 0])
def test_scheme_seed_rejects_non_text_path(path):
    with pytest.raises(InvalidPathError):
        derive_scheme_seed(SEED, path, MlDsaLevel.DSA_44)


def test_scheme_seed_rejects_short_seed():
    with pytest.raises(InvalidSeedLengthError) as exc_info:
        derive_scheme_seed(bytes(32), "m/8844'/1337'/0'/0/0", MlDsaLevel.DSA_44)
    assert exc_info.value.expected == 64
    assert exc_info.value.actual == 32


def test_zero_seed_example():
    kp1 = derive_keypair(ZERO_SEED, 0, 0, MlDsaLevel.DSA_44)
    kp2 = derive_keypair(ZERO_SEED, 0, 0, MlDsaLevel.DSA_44)

    assert kp1.derivation_path(1337, 0, 0) == "m/8844'/1337'/0'/0/0"
    assert kp1.seed == derive_scheme_seed(ZERO_SEED, "m/8844'/1337'/0'/0/0", MlDsaLevel.DSA_44)
    assert kp1.seed == kp2.seed
    assert kp1.public_key == kp2.public_key


def test_basic_derivation():
    seed = mnemonic_to_seed(MNEMONIC, "")
    keypair = derive_keypair(seed, 0, 0, MlDsaLevel.default())
    assert keypair.level is MlDsaLevel.DSA_44
    assert len(keypair.public_key) == 1312
    assert len(keypair.seed) == 32


def test_different_indices_different_keys():
    seed = mnemonic_to_seed(MNEMONIC, "")
    kp1 = derive_keypair(seed, 0, 0, MlDsaLevel.DSA_44)
    kp2 = derive_keypair(seed, 0, 1, MlDsaLevel.DSA_44)
    assert kp1.public_key != kp2.public_key


def test_different_accounts_and_coins_different_keys():
    kp1 = derive_keypair_with_coin(SEED, 1337, 0, 0, MlDsaLevel.DSA_44)
    kp2 = derive_keypair_with_coin(SEED, 1337, 1, 0, MlDsaLevel.DSA_44)
    kp3 = derive_keypair_with_coin(SEED, 60, 0, 0, MlDsaLevel.DSA_44)
    assert len({kp1.public_key, kp2.public_key, kp3.public_key}) == 3


def test_default_coin_matches_explicit():
    assert derive_keypair(SEED, 0, 0) == derive_keypair_with_coin(SEED, 1337, 0, 0)


def test_different_levels_different_keys():
    seed = mnemonic_to_seed(MNEMONIC, "")
    kp44 = derive_keypair(seed, 0, 0, MlDsaLevel.DSA_44)
    kp65 = derive_keypair(seed, 0, 0, MlDsaLevel.DSA_65)
    assert kp44.seed != kp65.seed
    assert kp44.public_key != kp65.public_key


def test_level_by_name():
    assert derive_keypair(SEED, 0, 0, "ML-DSA-65").level is MlDsaLevel.DSA_65
    with pytest.raises(UnsupportedLevelError):
        derive_keypair(SEED, 0, 0, "ML-DSA-100")


def test_derive_keypair_validates_inputs():
    with pytest.raises(InvalidSeedLengthError):
        derive_keypair(bytes(63), 0, 0)
    with pytest.raises(ValidationError):
        derive_keypair(SEED, -1, 0)
    with pytest.raises(ValidationError):
        derive_keypair_with_coin(SEED, 2**32, 0, 0)
    with pytest.raises(ValidationError):
        derive_keypair(SEED, 0, True)


def test_derive_keypair_from_mnemonic():
    seed = mnemonic_to_seed(MNEMONIC, "pass")
    expected = derive_keypair(seed, 0, 3, MlDsaLevel.DSA_44)
    keypair = derive_keypair_from_mnemonic(MNEMONIC, "pass", account=0, index=3)
    assert keypair == expected
