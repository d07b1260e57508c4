"""
0x-prefixed hex encoding as used by Ethereum JSON-RPC and tooling: byte strings,
big integers (quantities), fixed-width words and addresses.
"""

from __future__ import annotations

import binascii

from ..errors import HexDecodeError
from ..hashes import keccak256


def _strip_prefix(text: str) -> str:
    return text[2:] if text[:2] in ("0x", "0X") else text


def encode_hex(data: bytes) -> str:
    """Lowercase hex with 0x prefix; b"" encodes as "0x"."""
    return "0x" + bytes(data).hex()


def decode_hex(text: str) -> bytes:
    """
    Decode hex text to bytes.

    Args:
        text: Hex digits, optionally "0x"-prefixed. Must have even length.

    Returns:
        Decoded bytes.
    """
    digits = _strip_prefix(text)
    if len(digits) % 2:
        raise HexDecodeError(f"hex string has odd length: {text!r}")
    try:
        return binascii.unhexlify(digits)
    except (binascii.Error, ValueError) as exc:
        raise HexDecodeError(f"invalid hex string: {text!r}") from exc


def decode_big(text: str) -> int:
    """
    Decode a 0x-prefixed hex quantity into an unsigned integer (at most 256 bits).

    Leading zero digits are rejected ("0x0" is the only spelling of zero).
    """
    if text[:2] not in ("0x", "0X"):
        raise HexDecodeError(f"hex quantity without 0x prefix: {text!r}")
    digits = text[2:]
    if not digits:
        raise HexDecodeError("hex quantity is empty")
    if len(digits) > 1 and digits[0] == "0":
        raise HexDecodeError(f"hex quantity with leading zero digits: {text!r}")
    if len(digits) > 64:
        raise HexDecodeError(f"hex quantity larger than 256 bits: {text!r}")
    try:
        return int(digits, 16)
    except ValueError as exc:
        raise HexDecodeError(f"invalid hex quantity: {text!r}") from exc


def int_to_big_endian(value: int) -> bytes:
    """Minimal big-endian encoding of a non-negative integer (b"" for zero)."""
    if value < 0:
        raise ValueError("value must be non-negative")
    return value.to_bytes((value.bit_length() + 7) // 8, "big")


def left_pad32(data: bytes) -> bytes:
    """Left-pad data with zero bytes to a 32-byte word."""
    if len(data) > 32:
        raise ValueError(f"data longer than 32 bytes: {len(data)}")
    return bytes(32 - len(data)) + bytes(data)


def hex_to_address(text: str) -> bytes:
    """
    20-byte address from hex text.

    Longer input keeps the trailing 20 bytes; shorter input is left-padded.
    An odd number of digits is allowed ("0x1" is address 0x00..01).
    """
    digits = _strip_prefix(text)
    if len(digits) % 2:
        digits = "0" + digits
    raw = decode_hex(digits)
    if len(raw) > 20:
        raw = raw[-20:]
    return bytes(20 - len(raw)) + raw


def to_checksum_address(address: str | bytes) -> str:
    """
    EIP-55 mixed-case checksum encoding of an address.

    Args:
        address: 20 raw bytes or hex text (any case, optional 0x).

    Returns:
        "0x" plus 40 hex chars, uppercase where the keccak256 nibble of the
        lowercase address is >= 8.
    """
    raw = address if isinstance(address, bytes) else decode_hex(address)
    if len(raw) != 20:
        raise HexDecodeError(f"address must be 20 bytes, got {len(raw)}")
    lower = raw.hex()
    digest = keccak256(lower.encode("ascii")).hex()
    return "0x" + "".join(
        c.upper() if int(digest[i], 16) >= 8 else c for i, c in enumerate(lower)
    )


__all__: tuple[str, ...] = (
    "decode_big",
    "decode_hex",
    "encode_hex",
    "hex_to_address",
    "int_to_big_endian",
    "left_pad32",
    "to_checksum_address",
)
