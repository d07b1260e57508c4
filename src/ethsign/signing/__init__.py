"""Signing schemas: Ethereum personal messages (personal_sign)."""

from .personal import (PERSONAL_MESSAGE_PREFIX, recover_message_signer,
                       sign_message, sign_message_hex, signature_values,
                       signed_message_hash, verify_message)

__all__: tuple[str, ...] = (
    "PERSONAL_MESSAGE_PREFIX",
    "recover_message_signer",
    "sign_message",
    "sign_message_hex",
    "signature_values",
    "signed_message_hash",
    "verify_message",
)
