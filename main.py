"""
ML-DSA BIP39 Usage Examples

This file demonstrates key features of the ML-DSA BIP39 library.
"""

import logging

from mldsa_bip39 import (
    MlDsaLevel,
    MlDsaBip39Error,
    Signature,
    derive_keypair,
    derive_keypair_with_coin,
    generate_mnemonic,
    mnemonic_to_seed,
    parse_path,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

MNEMONIC = (
    "abandon abandon abandon abandon abandon abandon "
    "abandon abandon abandon abandon abandon about"
)


def mnemonic_example():
    """Example 1: Mnemonic generation and seeds."""
    print("\n=== Mnemonic Example ===")

    words = generate_mnemonic()  # 24 words
    print(f"New mnemonic has {len(words.split())} words (not printed)")

    seed = mnemonic_to_seed(MNEMONIC, "")
    with_passphrase = mnemonic_to_seed(MNEMONIC, "correct horse")
    print(f"Seed length: {len(seed)} bytes")
    print(f"Passphrase changes seed: {seed != with_passphrase}")


def levels_example():
    """Example 2: Security levels."""
    print("\n=== Security Levels Example ===")

    for level in MlDsaLevel:
        print(
            f"{level}: NIST category {level.nist_category}, "
            f"{level.security_bits}-bit, pk {level.public_key_size} B, "
            f"sig {level.signature_size} B, purpose {level.purpose}"
        )


def derivation_example():
    """Example 3: Deriving many keys from one mnemonic."""
    print("\n=== Derivation Example ===")

    seed = mnemonic_to_seed(MNEMONIC, "")

    for index in range(3):
        with derive_keypair(seed, account=0, index=index, level=MlDsaLevel.DSA_44) as keypair:
            path = keypair.derivation_path(1337, 0, index)
            print(f"{path}: {keypair.fingerprint()}")

    # Custom coin type
    with derive_keypair_with_coin(seed, 60, 0, 0, MlDsaLevel.DSA_65) as keypair:
        path = keypair.derivation_path(60, 0, 0)
        print(f"{path}: {keypair.fingerprint()}")
        print(f"Parsed back: {parse_path(path)}")


def signing_example():
    """Example 4: Signing and verifying."""
    print("\n=== Signing Example ===")

    seed = mnemonic_to_seed(MNEMONIC, "")
    message = b"Hello, post-quantum world!"

    with derive_keypair(seed, 0, 0, MlDsaLevel.DSA_87) as keypair:
        print(f"Keypair: {keypair!r}")

        signature = keypair.sign(message)
        print(f"Signature: {len(signature)} bytes")

        # Round trip through the raw wire format
        received = Signature.from_bytes(MlDsaLevel.DSA_87, bytes(signature))
        print(f"Valid: {keypair.verify(message, received)}")
        print(f"Valid for other message: {keypair.verify(b'tampered', received)}")

        try:
            Signature.from_bytes(MlDsaLevel.DSA_87, bytes(signature)[:-1])
        except MlDsaBip39Error as e:
            print(f"Truncated signature rejected: {e}")

    print(f"Seed erased: {keypair.closed}")


def main():
    """Run all examples."""
    examples = [
        mnemonic_example,
        levels_example,
        derivation_example,
        signing_example,
    ]

    for example in examples:
        try:
            example()
        except MlDsaBip39Error as e:
            print(f"Error in {example.__name__}: {e}")


if __name__ == "__main__":
    main()
