#!/usr/bin/env python3
"""Example: Ethereum personal_sign (keccak256, secp256k1 RFC 6979)."""

import logging

from ethsign import (
    hex_to_privkey,
    privkey_to_address,
    recover_message_signer,
    sign_message_hex,
    to_checksum_address,
)

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

private_key = "4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318"
address = to_checksum_address(privkey_to_address(hex_to_privkey(private_key)))
print("Ethereum address:", address)

signature = sign_message_hex("Some data", private_key)
print("Signature:", signature)
print("Recovered signer:", to_checksum_address(recover_message_signer("Some data", signature)))
