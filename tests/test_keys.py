import pytest

from mldsa_bip39.crypto.backend import generate_keypair
from mldsa_bip39.crypto.derivation import derive_keypair
from mldsa_bip39.crypto.keys import KeyPair, Signature
from mldsa_bip39.exceptions import (
    InvalidPublicKeyError,
    InvalidSeedLengthError,
    InvalidSignatureError,
    KeyDisposedError,
    UnsupportedLevelError,
)
from mldsa_bip39.level import MlDsaLevel

SEED = bytes([42]) * 32


def test_keypair_repr_redacts_seed():
    keypair = KeyPair(MlDsaLevel.DSA_44, SEED, bytes(1312))
    text = repr(keypair)
    assert "[REDACTED]" in text
    assert "ML-DSA-44" in text
    assert SEED.hex() not in text
    assert "42" not in text.split("fingerprint=")[0]
    assert str(keypair) == text


def test_derived_keypair_repr_never_contains_seed():
    keypair = derive_keypair(bytes(64), 0, 0)
    seed = keypair.seed
    for text in (repr(keypair), str(keypair)):
        assert seed.hex() not in text
        assert repr(seed) not in text


def test_keypair_validates_sizes():
    with pytest.raises(InvalidPublicKeyError):
        KeyPair(MlDsaLevel.DSA_44, SEED, bytes(1952))
    with pytest.raises(InvalidSeedLengthError):
        KeyPair(MlDsaLevel.DSA_44, bytes(16), bytes(1312))


def test_keypair_sign_verify():
    keypair = generate_keypair(MlDsaLevel.DSA_44, SEED)
    signature = keypair.sign(b"test message")
    assert keypair.verify(b"test message", signature)
    assert not keypair.verify(b"wrong message", signature)


def test_keypair_signs_text_as_utf8():
    keypair = generate_keypair(MlDsaLevel.DSA_44, SEED)
    signature = keypair.sign("héllo")
    assert keypair.verify("héllo".encode("utf-8"), signature)


def test_hedged_signing_verifies():
    keypair = generate_keypair(MlDsaLevel.DSA_44, SEED)
    signature = keypair.sign(b"hedged", deterministic=False)
    assert keypair.verify(b"hedged", signature)


def test_close_erases_seed():
    keypair = generate_keypair(MlDsaLevel.DSA_44, SEED)
    buffer = keypair._seed
    keypair.close()

    assert keypair.closed
    assert buffer == bytearray(32)
    with pytest.raises(KeyDisposedError):
        keypair.seed
    with pytest.raises(KeyDisposedError):
        keypair.sign(b"after close")
    keypair.close()


def test_context_manager_erases_seed_on_error():
    with pytest.raises(RuntimeError):
        with generate_keypair(MlDsaLevel.DSA_44, SEED) as keypair:
            buffer = keypair._seed
            raise RuntimeError("caller failure")
    assert keypair.closed
    assert buffer == bytearray(32)


def test_verify_after_close_uses_public_key_only():
    keypair = generate_keypair(MlDsaLevel.DSA_44, SEED)
    signature = keypair.sign(b"message")
    keypair.close()
    assert keypair.verify(b"message", signature)


def test_seed_is_a_copy():
    keypair = generate_keypair(MlDsaLevel.DSA_44, SEED)
    exported = keypair.seed
    assert exported == SEED
    assert exported is not keypair._seed


def test_derivation_path_and_format_helpers():
    keypair = generate_keypair(MlDsaLevel.DSA_87, SEED)
    assert keypair.derivation_path(1337, 0, 0) == "m/8887'/1337'/0'/0/0"
    assert keypair.derivation_path(60, 1, 2) == "m/8887'/60'/1'/0/2"
    assert keypair.public_key_hex() == keypair.public_key.hex()
    assert keypair.public_key_hex(prefix=True).startswith("0x")
    assert len(keypair.fingerprint()) == 16


def test_keypair_equality():
    kp1 = generate_keypair(MlDsaLevel.DSA_44, SEED)
    kp2 = generate_keypair(MlDsaLevel.DSA_44, SEED)
    assert kp1 == kp2
    assert hash(kp1) == hash(kp2)
    assert kp1 != generate_keypair(MlDsaLevel.DSA_44, bytes(32))


def test_signature_from_bytes_validates_size():
    with pytest.raises(InvalidSignatureError) as exc_info:
        Signature.from_bytes(MlDsaLevel.DSA_44, bytes(100))
    assert exc_info.value.expected == 2420
    assert exc_info.value.actual == 100

    signature = Signature.from_bytes(MlDsaLevel.DSA_44, bytes(2420))
    assert signature.level is MlDsaLevel.DSA_44
    assert len(signature) == 2420


@pytest.mark.parametrize("level", list(MlDsaLevel))
def test_signature_size_per_level(level):
    Signature.from_bytes(level, bytes(level.signature_size))
    with pytest.raises(InvalidSignatureError):
        Signature.from_bytes(level, bytes(level.signature_size + 1))


def test_signature_wire_roundtrip():
    keypair = generate_keypair(MlDsaLevel.DSA_65, SEED)
    signature = keypair.sign(b"wire")

    restored = Signature.from_bytes(MlDsaLevel.DSA_65, bytes(signature))
    assert restored == signature
    assert Signature.from_hex(MlDsaLevel.DSA_65, signature.hex()) == signature
    assert keypair.verify(b"wire", restored)


def test_signature_from_hex_rejects_garbage():
    with pytest.raises(InvalidSignatureError):
        Signature.from_hex(MlDsaLevel.DSA_44, "zz" * 2420)


def test_signature_unknown_level():
    with pytest.raises(UnsupportedLevelError):
        Signature.from_bytes("ML-DSA-1", bytes(2420))


def test_signature_level_mismatch_via_keypair():
    kp44 = generate_keypair(MlDsaLevel.DSA_44, SEED)
    kp65 = generate_keypair(MlDsaLevel.DSA_65, SEED)
    signature = kp65.sign(b"message")
    with pytest.raises(InvalidSignatureError):
        kp44.verify(b"message", signature)


def test_signature_from_bytes_rejects_text():
    with pytest.raises(InvalidSignatureError):
        Signature.from_bytes(MlDsaLevel.DSA_44, "00" * 2420)
    with pytest.raises(InvalidSignatureError):
        Signature(MlDsaLevel.DSA_44, "00" * 2420)
    assert Signature.from_hex(MlDsaLevel.DSA_44, "00" * 2420) == Signature.from_bytes(
        MlDsaLevel.DSA_44, bytes(2420)
    )
