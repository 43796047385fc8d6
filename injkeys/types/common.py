"""Common type definitions for Injective key management."""

from typing import NewType, Union

__all__ = [
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
]

# Basic types
HexStr = NewType("HexStr", str)
"""Hexadecimal string representation."""

Bech32Str = NewType("Bech32Str", str)
"""Bech32 encoded string with a human-readable prefix."""

SubaccountId = NewType("SubaccountId", str)
"""Address hex followed by a 24 digit subaccount index."""

# Crypto types
PrivateKeyBytes = NewType("PrivateKeyBytes", bytes)
"""32-byte private key."""

PublicKeyBytes = NewType("PublicKeyBytes", bytes)
"""33 or 65 byte public key."""

AddressBytes = NewType("AddressBytes", bytes)
"""20-byte account address."""

Digest = NewType("Digest", bytes)
"""32-byte message digest."""

Signature = NewType("Signature", bytes)
"""64-byte compact signature (r || s)."""

RecoverableSignature = NewType("RecoverableSignature", bytes)
"""65-byte signature (r || s || v)."""

# Type aliases
SecretInput = Union[str, bytes, bytearray, memoryview]
"""Private key as hex string or raw bytes."""
