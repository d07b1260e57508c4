"""
secp256k1 (Bitcoin/Ethereum curve): key parsing, key derivation, deterministic
ECDSA sign (RFC 6979), public key recovery.
"""

from __future__ import annotations

import hashlib
import hmac
from collections.abc import Iterator

from ..errors import InvalidKeyFormat
from ..hashes import keccak256

_P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
_Gx = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
_Gy = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _mod_inv(a: int, n: int) -> int:
    """Modular inverse via extended gcd."""
    if a < 0:
        a = (a % n + n) % n
    t, r = 0, n
    new_t, new_r = 1, a
    while new_r:
        q = r // new_r
        t, new_t = new_t, t - q * new_t
        r, new_r = new_r, r - q * new_r
    if r != 1:
        raise ValueError("no inverse")
    return t % n


def _point_add(px: int, py: int, qx: int, qy: int) -> tuple[int, int]:
    """Add two secp256k1 points in affine coords; (0,0) is identity. Returns (rx, ry)."""
    if (px, py) == (0, 0):
        return (qx, qy)
    if (qx, qy) == (0, 0):
        return (px, py)
    if px == qx:
        if py == qy:
            lam = (3 * px * px) * _mod_inv(2 * py, _P) % _P
        else:
            return (0, 0)
    else:
        lam = (qy - py) * _mod_inv(qx - px, _P) % _P
    rx = (lam * lam - px - qx) % _P
    ry = (lam * (px - rx) - py) % _P
    return (rx, ry)


def _point_mul(d: int, x: int, y: int) -> tuple[int, int]:
    """Scalar multiplication d * (x, y) on secp256k1; returns (rx, ry)."""
    d = d % _N
    rx, ry = 0, 0
    while d:
        if d & 1:
            rx, ry = _point_add(rx, ry, x, y)
        x, y = _point_add(x, y, x, y)
        d >>= 1
    return (rx, ry)


def _privkey_scalar(privkey: bytes) -> int:
    if len(privkey) != 32:
        raise ValueError("privkey must be 32 bytes")
    d = int.from_bytes(privkey, "big")
    if d == 0 or d >= _N:
        raise ValueError("invalid privkey")
    return d


def hex_to_privkey(key_hex: str) -> bytes:
    """
    Parse a hex-encoded secp256k1 private key.

    Args:
        key_hex: 64 hex digits, upper- or lowercase, optionally "0x"-prefixed.

    Returns:
        32-byte big-endian private key.

    Raises:
        InvalidKeyFormat: not 64 hex digits, or the scalar is not in [1, n-1].
    """
    if not isinstance(key_hex, str):
        raise InvalidKeyFormat(
            f"private key must be a hex string, got {type(key_hex).__name__}"
        )
    digits = key_hex[2:] if key_hex[:2] in ("0x", "0X") else key_hex
    if len(digits) != 64:
        raise InvalidKeyFormat(
            f"invalid length, need 256 bits (64 hex digits), got {len(digits)} digits"
        )
    if not set(digits) <= _HEX_DIGITS:
        raise InvalidKeyFormat("invalid hex character in private key")
    d = int(digits, 16)
    if d == 0 or d >= _N:
        raise InvalidKeyFormat("invalid private key, scalar out of range [1, n-1]")
    return d.to_bytes(32, "big")


def privkey_to_pubkey(privkey: bytes) -> bytes:
    """
    Derive uncompressed public key (65 bytes: 0x04 || x || y) from 32-byte private key.

    Args:
        privkey: 32-byte secp256k1 private key.

    Returns:
        65-byte uncompressed public key.
    """
    d = _privkey_scalar(privkey)
    x, y = _point_mul(d, _Gx, _Gy)
    return bytes([0x04]) + x.to_bytes(32, "big") + y.to_bytes(32, "big")


def pubkey_to_address(pubkey: bytes) -> str:
    """
    Ethereum address of an uncompressed public key.

    Args:
        pubkey: 65-byte uncompressed public key (0x04 || x || y).

    Returns:
        "0x" plus 40 lowercase hex chars (keccak256(x || y)[12:32]).
    """
    if len(pubkey) != 65 or pubkey[0] != 0x04:
        raise ValueError("pubkey must be 65 bytes, uncompressed (0x04 prefix)")
    return "0x" + keccak256(pubkey[1:])[12:].hex()


def privkey_to_address(privkey: bytes) -> str:
    """
    Ethereum address (0x + 40 hex) from 32-byte private key.

    Args:
        privkey: 32-byte secp256k1 private key.

    Returns:
        "0x" plus 40 hex chars.
    """
    return pubkey_to_address(privkey_to_pubkey(privkey))


def _recover_pubkey_from_sig(
    msg_hash: bytes, r: int, s: int, recid: int
) -> tuple[int, int]:
    """Recover public key from (r, s, recid). recid 0,1: x=r; recid 2,3: x=r+n; recid&1 selects y parity."""
    if not (0 < r < _N and 0 < s < _N):
        raise ValueError("r and s must be in [1, n-1]")
    if not 0 <= recid <= 3:
        raise ValueError(f"recid must be in 0..3, got {recid}")
    if recid & 2:
        if r + _N >= _P:
            raise ValueError("recid 2/3 but r+n >= p")
        x = r + _N
    else:
        x = r
    rhs = (x * x * x + 7) % _P
    y_cand = pow(rhs, (_P + 1) // 4, _P)
    if (y_cand * y_cand) % _P != rhs:
        raise ValueError("no square root")
    if (recid & 1) != (y_cand & 1):
        y_cand = (_P - y_cand) % _P
    r_inv = _mod_inv(r, _N)
    z = int.from_bytes(msg_hash, "big") % _N
    u1 = (-z * r_inv) % _N
    u2 = (s * r_inv) % _N
    g_mul = _point_mul(u1, _Gx, _Gy)
    r_mul = _point_mul(u2, x, y_cand)
    qx, qy = _point_add(g_mul[0], g_mul[1], r_mul[0], r_mul[1])
    if (qx, qy) == (0, 0):
        raise ValueError("recovered point at infinity")
    return (qx, qy)


def recover_pubkey(msg_hash: bytes, r: int, s: int, recid: int) -> bytes:
    """
    Recover uncompressed public key (65 bytes) from ECDSA signature (msg_hash, r, s, recid).

    Args:
        msg_hash: 32-byte message hash that was signed.
        r, s: Signature components (scalars).
        recid: Recovery id (0-3) indicating which public key.

    Returns:
        65-byte uncompressed public key.
    """
    if len(msg_hash) != 32:
        raise ValueError("msg_hash must be 32 bytes")
    qx, qy = _recover_pubkey_from_sig(msg_hash, r, s, recid)
    return bytes([0x04]) + qx.to_bytes(32, "big") + qy.to_bytes(32, "big")


def rfc6979_nonce(privkey: bytes, msg_hash: bytes) -> Iterator[int]:
    """
    Candidate nonces k per RFC 6979 section 3.2 (HMAC-SHA256, qlen = 256).

    The first value is the one used in practice; later values are only drawn
    when a candidate yields r == 0 or s == 0.
    """
    x = _privkey_scalar(privkey)
    h1 = (int.from_bytes(msg_hash, "big") % _N).to_bytes(32, "big")
    seed = x.to_bytes(32, "big") + h1
    v = b"\x01" * 32
    k = b"\x00" * 32
    k = hmac.new(k, v + b"\x00" + seed, hashlib.sha256).digest()
    v = hmac.new(k, v, hashlib.sha256).digest()
    k = hmac.new(k, v + b"\x01" + seed, hashlib.sha256).digest()
    v = hmac.new(k, v, hashlib.sha256).digest()
    while True:
        v = hmac.new(k, v, hashlib.sha256).digest()
        candidate = int.from_bytes(v, "big")
        if 0 < candidate < _N:
            yield candidate
        k = hmac.new(k, v + b"\x00", hashlib.sha256).digest()
        v = hmac.new(k, v, hashlib.sha256).digest()


def sign(msg_hash: bytes, privkey: bytes) -> bytes:
    """
    Deterministic ECDSA signature with recovery id.

    The nonce is derived with RFC 6979 and s is normalised to the lower half
    of the group order, so the output matches libsecp256k1 bit for bit.

    Args:
        msg_hash: 32-byte message hash to sign.
        privkey: 32-byte private key.

    Returns:
        65 bytes: r (32, big-endian) || s (32, big-endian) || recid (0 or 1).
    """
    if len(msg_hash) != 32:
        raise ValueError(f"hash is required to be exactly 32 bytes ({len(msg_hash)})")
    d = _privkey_scalar(privkey)
    z = int.from_bytes(msg_hash, "big")
    nonces = rfc6979_nonce(privkey, msg_hash)
    while True:
        k = next(nonces)
        kx, ky = _point_mul(k, _Gx, _Gy)
        r = kx % _N
        if r == 0:
            continue
        s = (_mod_inv(k, _N) * (z + r * d)) % _N
        if s == 0:
            continue
        recid = (ky & 1) | (2 if kx >= _N else 0)
        if s > _N // 2:
            s = _N - s
            recid ^= 1
        return r.to_bytes(32, "big") + s.to_bytes(32, "big") + bytes([recid])


def sign_recoverable(privkey: bytes, msg_hash: bytes) -> tuple[int, int, int]:
    """
    ECDSA sign with recovery id; returns (r, s, v) with v in {27, 28}.

    Args:
        privkey: 32-byte private key.
        msg_hash: 32-byte message hash to sign.

    Returns:
        (r, s, v) where v is 27 or 28 for Ethereum-style recovery.
    """
    sig = sign(msg_hash, privkey)
    return (
        int.from_bytes(sig[:32], "big"),
        int.from_bytes(sig[32:64], "big"),
        sig[64] + 27,
    )


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
