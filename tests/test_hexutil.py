"""Tests for 0x-hex helpers."""

import pytest

from ethsign import (
    HexDecodeError,
    decode_big,
    decode_hex,
    encode_hex,
    hex_to_address,
    int_to_big_endian,
    left_pad32,
    privkey_to_address,
    to_checksum_address,
)

# EIP-55 reference addresses
CHECKSUMMED = [
    "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed",
    "0xfB6916095ca1df60bB79Ce92cE3Ea74c37c5d359",
    "0xdbF03B407c01E7cD3CBea99509d93f8DDDC8C6FB",
    "0xD1220A0cf47c7B9Be7A2E6BA89F429762e7b9aDb",
    "0x7E5F4552091A69125d5DfCb7b8C2659029395Bdf",
]


def test_encode_hex() -> None:
    assert encode_hex(b"") == "0x"
    assert encode_hex(b"\x00\xab") == "0x00ab"


def test_decode_hex() -> None:
    assert decode_hex("0x00ab") == b"\x00\xab"
    assert decode_hex("00AB") == b"\x00\xab"
    assert decode_hex("0x") == b""


@pytest.mark.parametrize("text", ["0x0", "0xgg", "abc"])
def test_decode_hex_rejects(text: str) -> None:
    with pytest.raises(HexDecodeError):
        decode_hex(text)


def test_decode_big() -> None:
    assert decode_big("0x0") == 0
    assert decode_big("0x2710") == 10000
    nonce = decode_big(
        "0x7fd3e50013e911e7c479a10b8525728f00000000000000000000016afd268cd7"
    )
    assert nonce.bit_length() == 255


@pytest.mark.parametrize(
    "text", ["", "0x", "10", "0x01", "0xzz", "0x1" + "0" * 64]
)
def test_decode_big_rejects(text: str) -> None:
    with pytest.raises(HexDecodeError):
        decode_big(text)


def test_int_to_big_endian() -> None:
    assert int_to_big_endian(0) == b""
    assert int_to_big_endian(255) == b"\xff"
    assert int_to_big_endian(256) == b"\x01\x00"
    with pytest.raises(ValueError):
        int_to_big_endian(-1)


def test_left_pad32() -> None:
    assert left_pad32(b"") == bytes(32)
    assert left_pad32(b"\x27\x10") == bytes(30) + b"\x27\x10"
    assert left_pad32(b"\x01" * 32) == b"\x01" * 32
    with pytest.raises(ValueError):
        left_pad32(bytes(33))


def test_hex_to_address() -> None:
    raw = hex_to_address("0xe122cd8d3d09271d1e999f766b19ada8d06b8ee9")
    assert raw == bytes.fromhex("e122cd8d3d09271d1e999f766b19ada8d06b8ee9")
    assert hex_to_address("0x1") == bytes(19) + b"\x01"
    assert hex_to_address("0x" + "ff" * 2 + "11" * 20) == b"\x11" * 20


@pytest.mark.parametrize("address", CHECKSUMMED)
def test_to_checksum_address(address: str) -> None:
    assert to_checksum_address(address.lower()) == address
    assert to_checksum_address(bytes.fromhex(address[2:])) == address


def test_to_checksum_address_rejects_wrong_length() -> None:
    with pytest.raises(HexDecodeError):
        to_checksum_address("0x1234")


def test_checksum_of_derived_address() -> None:
    priv = bytes.fromhex(
        "4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318"
    )
    assert (
        to_checksum_address(privkey_to_address(priv))
        == "0x2c7536E3605D9C16a7a3D7b1898e529396a65c23"
    )
