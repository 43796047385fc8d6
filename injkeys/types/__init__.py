"""Type definitions for Injective key management."""

# Common types
from ..types.common import (
    HexStr,
    Bech32Str,
    SubaccountId,
    PrivateKeyBytes,
    PublicKeyBytes,
    AddressBytes,
    Digest,
    Signature,
    RecoverableSignature,
    SecretInput,
)

# EIP-712 types
from ..types.typed_data import TypedData, TypedDataInput

__all__ = [
    # Common
    "HexStr",
    "Bech32Str",
    "SubaccountId",
    "PrivateKeyBytes",
    "PublicKeyBytes",
    "AddressBytes",
    "Digest",
    "Signature",
    "RecoverableSignature",
    "SecretInput",

    # EIP-712
    "TypedData",
    "TypedDataInput",
]
