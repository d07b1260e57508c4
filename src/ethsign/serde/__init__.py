"""Serialization / deserialization (serde): 0x-hex quantities, addresses."""

from .hexutil import (decode_big, decode_hex, encode_hex, hex_to_address,
                      int_to_big_endian, left_pad32, to_checksum_address)

__all__: tuple[str, ...] = (
    "decode_big",
    "decode_hex",
    "encode_hex",
    "hex_to_address",
    "int_to_big_endian",
    "left_pad32",
    "to_checksum_address",
)
