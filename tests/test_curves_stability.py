"""Stability tests for curve and hash implementations.

Lock-in exact outputs for fixed inputs so that any change in curve code
(optimizations, refactors, Cython builds) is detected. Nonce and signature
vectors are the published RFC 6979 secp256k1/SHA-256 vectors; pubkey and
address vectors are well-known values for private key 1.
"""

from __future__ import annotations

import hashlib

from ethsign import (
    keccak256,
    privkey_to_address,
    privkey_to_pubkey,
    recover_pubkey,
    sign,
    sign_recoverable,
)
from ethsign.curves import rfc6979_nonce

# --- secp256k1: private key 1 ---
SECP_PRIV = bytes.fromhex(
    "0000000000000000000000000000000000000000000000000000000000000001"
)
SECP_MSG_HASH = bytes.fromhex(
    "2339863461be3f2dbbc5f995c5bf6953ee73f6437f37b0b44de4e67088bcd4c2"
)  # keccak256(b"message to sign")
SECP_PUB_EXPECTED = bytes.fromhex(
    "0479be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
    "483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8"
)
SECP_ADDR_EXPECTED = "0x7e5f4552091a69125d5dfcb7b8c2659029395bdf"

# --- RFC 6979 (HMAC-SHA256) with sha256(message) as the signed hash ---
RFC6979_SATOSHI_HASH = hashlib.sha256(b"Satoshi Nakamoto").digest()
RFC6979_SATOSHI_K = 0x8F8A276C19F4149656B280621E358CCE24F5F52542772691EE69063B74F15D15
RFC6979_SATOSHI_R = 0x934B1EA10A4B3C1757E2B0C017D0B6143CE3C9A7E6A4A49860D7A6AB210EE3D8
RFC6979_SATOSHI_S = 0x2442CE9D2B916064108014783E923EC36B49743E2FFA1C4496F01A512AAFD9E5

RFC6979_TEARS_HASH = hashlib.sha256(
    b"All those moments will be lost in time, like tears in rain. Time to die..."
).digest()
RFC6979_TEARS_R = 0x8600DBD41E348FE5C9465AB92D23E3DB8B98B873BEECD930736488696438CB6B
RFC6979_TEARS_S = 0x547FE64427496DB33BF66019DACBF0039C04199ABB0122918601DB38A72CFC21


def test_secp256k1_privkey_to_pubkey_stable() -> None:
    """Private key 1 maps to the generator point."""
    assert privkey_to_pubkey(SECP_PRIV) == SECP_PUB_EXPECTED


def test_secp256k1_privkey_to_address_stable() -> None:
    """Exact address for fixed privkey must not change."""
    assert privkey_to_address(SECP_PRIV) == SECP_ADDR_EXPECTED


def test_rfc6979_first_nonce() -> None:
    """First RFC 6979 candidate must equal the published k."""
    nonces = rfc6979_nonce(SECP_PRIV, RFC6979_SATOSHI_HASH)
    assert next(nonces) == RFC6979_SATOSHI_K


def test_rfc6979_nonce_sequence_continues() -> None:
    nonces = rfc6979_nonce(SECP_PRIV, RFC6979_SATOSHI_HASH)
    first, second = next(nonces), next(nonces)
    assert first != second


def test_secp256k1_sign_rfc6979_vectors() -> None:
    """Exact (r, s) for published vectors must not change."""
    r, s, _ = sign_recoverable(SECP_PRIV, RFC6979_SATOSHI_HASH)
    assert (r, s) == (RFC6979_SATOSHI_R, RFC6979_SATOSHI_S)
    r, s, _ = sign_recoverable(SECP_PRIV, RFC6979_TEARS_HASH)
    assert (r, s) == (RFC6979_TEARS_R, RFC6979_TEARS_S)


def test_secp256k1_sign_matches_sign_recoverable() -> None:
    sig = sign(SECP_MSG_HASH, SECP_PRIV)
    r, s, v = sign_recoverable(SECP_PRIV, SECP_MSG_HASH)
    assert sig == r.to_bytes(32, "big") + s.to_bytes(32, "big") + bytes([v - 27])


def test_secp256k1_recover_pubkey_stable() -> None:
    """Recovered pubkey must match expected and equal privkey_to_pubkey."""
    r, s, v = sign_recoverable(SECP_PRIV, SECP_MSG_HASH)
    recid = v - 27
    recovered = recover_pubkey(SECP_MSG_HASH, r, s, recid)
    assert recovered == SECP_PUB_EXPECTED
    assert recovered == privkey_to_pubkey(SECP_PRIV)


def test_secp256k1_msg_hash_consistent() -> None:
    """SECP_MSG_HASH must equal keccak256(b'message to sign') (used by stability tests)."""
    assert SECP_MSG_HASH == keccak256(b"message to sign")
