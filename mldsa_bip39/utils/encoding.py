"""Encoding utilities for ML-DSA BIP39."""

import re
from typing import Union

from ..exceptions import ValidationError
from ..types.common import HexStr, Message

__all__ = [
    "hex_to_bytes",
    "bytes_to_hex",
    "message_to_bytes",
    "secure_zero",
]

HEX_PATTERN = re.compile(r"^[0-9a-fA-F]*$")


def hex_to_bytes(hex_str: Union[HexStr, str]) -> bytes:
    """
    Convert hex string to bytes.

    Args:
        hex_str: Hex string with or without 0x prefix

    Returns:
        Decoded bytes

    Raises:
        ValidationError: If hex string is invalid
    """
    if not isinstance(hex_str, str):
        raise ValidationError(f"Expected hex string, got {type(hex_str).__name__}")

    if hex_str.startswith("0x"):
        hex_str = hex_str[2:]
    if not HEX_PATTERN.match(hex_str):
        raise ValidationError("Invalid hex string: contains non-hex characters")
    try:
        return bytes.fromhex(hex_str)
    except ValueError as e:
        # Don't echo the input, it may be a seed
        raise ValidationError(f"Invalid hex string of length {len(hex_str)}") from e


def bytes_to_hex(data: bytes, prefix: bool = False) -> HexStr:
    """
    Convert bytes to hex string.

    Args:
        data: Bytes to encode
        prefix: Add 0x prefix

    Returns:
        Hex string
    """
    hex_str = bytes(data).hex()
    if prefix:
        hex_str = f"0x{hex_str}"
    return HexStr(hex_str)


def message_to_bytes(message: Message) -> bytes:
    """Normalize a message to bytes, encoding text as UTF-8."""
    if isinstance(message, str):
        return message.encode("utf-8")
    if isinstance(message, (bytes, bytearray, memoryview)):
        return bytes(message)
    raise ValidationError(f"Message must be bytes or str, got {type(message).__name__}")


def secure_zero(buf: Union[bytearray, memoryview]) -> None:
    """
    Overwrite a mutable buffer with zeros in place.

    Immutable bytes cannot be wiped, so only bytearray and writable
    memoryview are accepted.

    Raises:
        TypeError: If the buffer is not mutable
    """
    if isinstance(buf, memoryview):
        if buf.readonly:
            raise TypeError("Cannot zero a read-only memoryview")
        buf = buf.cast("B")
    elif not isinstance(buf, bytearray):
        raise TypeError(f"Cannot zero immutable {type(buf).__name__}")

    n = len(buf)
    if n:
        buf[:] = bytes(n)
