"""
Ethereum personal messages ("personal_sign", EIP-191 version 0x45).

The signed payload is "\\x19Ethereum Signed Message:\\n" + decimal length +
message, hashed with keccak256. Signatures are 65 bytes r || s || v with
v = recovery id + 27, the layout wallets and ecrecover-based contracts expect.
"""

from __future__ import annotations

import logging

from ..curves import hex_to_privkey, pubkey_to_address, recover_pubkey, sign
from ..errors import InvalidSignature, SigningFailure
from ..hashes import keccak256
from ..serde import decode_hex, encode_hex

logger = logging.getLogger(__name__)

PERSONAL_MESSAGE_PREFIX = b"\x19Ethereum Signed Message:\n"

# Offset added to the recovery id, inherited from Bitcoin's signed-message header.
V_OFFSET = 27


def _as_bytes(message: bytes | str) -> bytes:
    if isinstance(message, str):
        return message.encode("utf-8")
    return bytes(message)


def signed_message_hash(message: bytes | str) -> bytes:
    """
    keccak256 of the prefixed personal message.

    Args:
        message: Message bytes (str is encoded as UTF-8).

    Returns:
        32-byte digest that is actually signed.
    """
    data = _as_bytes(message)
    payload = PERSONAL_MESSAGE_PREFIX + str(len(data)).encode("ascii") + data
    return keccak256(payload)


def signature_values(sig: bytes) -> tuple[int, int, int]:
    """
    Split a raw 65-byte signature (r || s || recid) into (r, s, v).

    v is the recovery id plus 27. Any length other than 65 is a caller bug,
    not a signing outcome, and raises ValueError.
    """
    if len(sig) != 65:
        raise ValueError(f"wrong size for signature: got {len(sig)}, want 65")
    r = int.from_bytes(sig[:32], "big")
    s = int.from_bytes(sig[32:64], "big")
    v = sig[64] + V_OFFSET
    return r, s, v


def sign_message(message: bytes | str, private_key_hex: str) -> bytes:
    """
    Sign a personal message with a hex-encoded private key.

    Signing is deterministic (RFC 6979): the same message and key always give
    the same signature.

    Args:
        message: Message bytes of any length (str is encoded as UTF-8).
        private_key_hex: 64 hex digits, optionally "0x"-prefixed.

    Returns:
        65 bytes: r (32) || s (32) || v, with v in {27, 28}.

    Raises:
        InvalidKeyFormat: private_key_hex is not a valid secp256k1 key.
        SigningFailure: the ECDSA primitive rejected the hash or key.
    """
    msg_hash = signed_message_hash(message)
    logger.debug("Hash is %s", msg_hash.hex())
    privkey = hex_to_privkey(private_key_hex)
    try:
        raw = sign(msg_hash, privkey)
    except ValueError as exc:
        raise SigningFailure(str(exc)) from exc
    r, s, v = signature_values(raw)
    return r.to_bytes(32, "big") + s.to_bytes(32, "big") + bytes([v])


def sign_message_hex(message: bytes | str, private_key_hex: str) -> str:
    """sign_message rendered as "0x" + 130 hex digits."""
    return encode_hex(sign_message(message, private_key_hex))


def recover_message_signer(message: bytes | str, signature: bytes | str) -> str:
    """
    Recover the address that signed a personal message.

    Args:
        message: Message that was signed.
        signature: 65 bytes (or hex text) r || s || v; v may be 27/28 or a
            raw recovery id 0/1.

    Returns:
        Signer address, "0x" plus 40 lowercase hex chars.

    Raises:
        InvalidSignature: the signature is malformed or does not recover.
    """
    if isinstance(signature, str):
        try:
            signature = decode_hex(signature)
        except ValueError as exc:
            raise InvalidSignature(str(exc)) from exc
    if len(signature) != 65:
        raise InvalidSignature(
            f"signature must be 65 bytes, got {len(signature)}"
        )
    r = int.from_bytes(signature[:32], "big")
    s = int.from_bytes(signature[32:64], "big")
    v = signature[64]
    recid = v - V_OFFSET if v >= V_OFFSET else v
    if recid not in (0, 1):
        raise InvalidSignature(f"invalid recovery byte v={v}")
    try:
        pubkey = recover_pubkey(signed_message_hash(message), r, s, recid)
    except ValueError as exc:
        raise InvalidSignature(str(exc)) from exc
    return pubkey_to_address(pubkey)


def verify_message(
    message: bytes | str, signature: bytes | str, address: str
) -> bool:
    """
    Check that a personal-message signature was produced by address.

    Returns:
        True iff the recovered signer equals address (case-insensitive).
        Malformed signatures give False.
    """
    try:
        recovered = recover_message_signer(message, signature)
    except InvalidSignature:
        return False
    return recovered.lower() == address.lower()


__all__: tuple[str, ...] = (
    "PERSONAL_MESSAGE_PREFIX",
    "recover_message_signer",
    "sign_message",
    "sign_message_hex",
    "signature_values",
    "signed_message_hash",
    "verify_message",
)
