"""Exceptions raised by ethsign."""

from __future__ import annotations


class EthSignError(Exception):
    """Base class for all ethsign errors."""


class InvalidKeyFormat(EthSignError, ValueError):
    """Private key is not 32 bytes of hex, or is not a scalar in [1, n-1]."""


class SigningFailure(EthSignError, RuntimeError):
    """The ECDSA primitive rejected its input."""


class InvalidSignature(EthSignError, ValueError):
    """Signature is malformed or does not recover to a public key."""


class HexDecodeError(EthSignError, ValueError):
    """Text is not valid hex for the requested quantity."""


__all__: tuple[str, ...] = (
    "EthSignError",
    "HexDecodeError",
    "InvalidKeyFormat",
    "InvalidSignature",
    "SigningFailure",
)
