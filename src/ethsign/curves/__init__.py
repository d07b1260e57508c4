"""Elliptic-curve crypto: secp256k1 (Ethereum/Bitcoin)."""

from .secp256k1 import (hex_to_privkey, privkey_to_address, privkey_to_pubkey,
                        pubkey_to_address, recover_pubkey, rfc6979_nonce, sign,
                        sign_recoverable)

__all__: tuple[str, ...] = (
    "hex_to_privkey",
    "privkey_to_address",
    "privkey_to_pubkey",
    "pubkey_to_address",
    "recover_pubkey",
    "rfc6979_nonce",
    "sign",
    "sign_recoverable",
)
