"""
Ethereum personal-message signing: keccak256, secp256k1 (RFC 6979), personal_sign.
No eth_account dependency. Pure Python; optionally compiled with Cython.
"""

from .__about__ import __version__
from .curves import (
    hex_to_privkey,
    privkey_to_address,
    privkey_to_pubkey,
    pubkey_to_address,
    recover_pubkey,
    sign,
    sign_recoverable,
)
from .errors import (
    EthSignError,
    HexDecodeError,
    InvalidKeyFormat,
    InvalidSignature,
    SigningFailure,
)
from .hashes import keccak256
from .serde import (
    decode_big,
    decode_hex,
    encode_hex,
    hex_to_address,
    int_to_big_endian,
    left_pad32,
    to_checksum_address,
)
from .signing import (
    PERSONAL_MESSAGE_PREFIX,
    recover_message_signer,
    sign_message,
    sign_message_hex,
    signature_values,
    signed_message_hash,
    verify_message,
)

__all__: tuple[str, ...] = (
    # About
    "__version__",
    # Errors
    "EthSignError",
    "HexDecodeError",
    "InvalidKeyFormat",
    "InvalidSignature",
    "SigningFailure",
    # Hashes
    "keccak256",
    # Serde: 0x-hex
    "decode_big",
    "decode_hex",
    "encode_hex",
    "hex_to_address",
    "int_to_big_endian",
    "left_pad32",
    "to_checksum_address",
    # Curves: secp256k1
    "hex_to_privkey",
    "privkey_to_address",
    "privkey_to_pubkey",
    "pubkey_to_address",
    "recover_pubkey",
    "sign",
    "sign_recoverable",
    # Signing: personal messages
    "PERSONAL_MESSAGE_PREFIX",
    "recover_message_signer",
    "sign_message",
    "sign_message_hex",
    "signature_values",
    "signed_message_hash",
    "verify_message",
)
