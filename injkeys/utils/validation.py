"""Validation utilities for Injective key management."""

import re
from typing import Union

from ..constants import (
    ADDRESS_LENGTH,
    DIGEST_LENGTH,
    PRIVATE_KEY_LENGTH,
    SECP256K1_ORDER,
)
from ..exceptions import (
    AddressError,
    InvalidDerivationPathError,
    InvalidSecretLengthError,
    InvalidSecretValueError,
    SigningError,
    ValidationError,
)
from ..types.common import Digest, SecretInput
from ..utils.encoding import strip_hex_prefix

__all__ = [
    "is_valid_private_key",
    "validate_private_key",
    "is_valid_derivation_path",
    "validate_derivation_path",
    "is_valid_address_hex",
    "validate_address_hex",
    "is_valid_public_key",
    "validate_public_key",
    "validate_digest",
]

# Regex patterns
HEX_PATTERN = re.compile(r"^[0-9a-fA-F]*$")
ADDRESS_HEX_PATTERN = re.compile(rf"^(0[xX])?[0-9a-fA-F]{{{ADDRESS_LENGTH * 2}}}$")
DERIVATION_PATH_PATTERN = re.compile(r"^m(/[0-9]+'?)+$")

HARDENED_OFFSET = 0x80000000


def is_valid_private_key(key: SecretInput) -> bool:
    """
    Check if private key is valid.

    Args:
        key: Private key as hex string or bytes

    Returns:
        True if valid, False otherwise
    """
    try:
        validate_private_key(key)
        return True
    except (InvalidSecretLengthError, InvalidSecretValueError):
        return False


def validate_private_key(key: SecretInput) -> bytes:
    """
    Validate private key and return as bytes.

    Args:
        key: Private key as hex string (0x prefix optional, any case) or bytes

    Returns:
        Private key as 32 bytes

    Raises:
        InvalidSecretLengthError: If key is not 32 bytes
        InvalidSecretValueError: If key is not hex, zero, or not below the curve order
    """
    if isinstance(key, str):
        key = strip_hex_prefix(key.strip())
        if not HEX_PATTERN.fullmatch(key):
            raise InvalidSecretValueError("Private key must be hexadecimal")
        if len(key) % 2:
            raise InvalidSecretValueError("Private key hex must have an even number of digits")
        key = bytes.fromhex(key)
    elif isinstance(key, (bytes, bytearray, memoryview)):
        key = bytes(key)
    else:
        raise InvalidSecretValueError(
            f"Private key must be hex string or bytes, got {type(key).__name__}"
        )

    if len(key) != PRIVATE_KEY_LENGTH:
        raise InvalidSecretLengthError(len(key))

    # Check range
    key_int = int.from_bytes(key, "big")

    if key_int == 0:
        raise InvalidSecretValueError("Private key cannot be zero")
    if key_int >= SECP256K1_ORDER:
        raise InvalidSecretValueError("Private key exceeds curve order")

    return key


def is_valid_derivation_path(path: str) -> bool:
    """Check if BIP32 derivation path is valid."""
    try:
        validate_derivation_path(path)
        return True
    except InvalidDerivationPathError:
        return False


def validate_derivation_path(path: str) -> str:
    """
    Validate BIP32 derivation path like m/44'/60'/0'/0/0.

    Args:
        path: Derivation path

    Returns:
        The path unchanged

    Raises:
        InvalidDerivationPathError: If path is malformed or an index overflows
    """
    if not isinstance(path, str) or not DERIVATION_PATH_PATTERN.fullmatch(path):
        raise InvalidDerivationPathError(path)

    for component in path.split("/")[1:]:
        if int(component.rstrip("'")) >= HARDENED_OFFSET:
            raise InvalidDerivationPathError(
                path, f"Derivation index out of range in {path!r}: {component}"
            )

    return path


def is_valid_address_hex(address: str) -> bool:
    """Check if string is a 20-byte hex address."""
    return isinstance(address, str) and bool(ADDRESS_HEX_PATTERN.fullmatch(address))


def validate_address_hex(address: str) -> bytes:
    """
    Validate hex address and return its bytes.

    Args:
        address: Address hex, 0x prefix optional, any case

    Returns:
        20 address bytes

    Raises:
        AddressError: If address is malformed
    """
    if not is_valid_address_hex(address):
        raise AddressError(f"Invalid hex address: {address!r}")
    return bytes.fromhex(strip_hex_prefix(address))


def validate_digest(digest: Union[bytes, bytearray, memoryview]) -> Digest:
    """
    Validate a message digest before signing.

    Args:
        digest: Pre-hashed message

    Returns:
        Digest as 32 bytes

    Raises:
        SigningError: If digest is not 32 bytes
    """
    if not isinstance(digest, (bytes, bytearray, memoryview)):
        raise SigningError(f"Digest must be bytes, got {type(digest).__name__}")
    digest = bytes(digest)
    if len(digest) != DIGEST_LENGTH:
        raise SigningError(f"Digest must be {DIGEST_LENGTH} bytes, got {len(digest)}")
    return Digest(digest)


def is_valid_public_key(key: Union[str, bytes]) -> bool:
    """
    Check if public key format is valid.

    Args:
        key: Public key as hex string or bytes

    Returns:
        True if valid, False otherwise
    """
    try:
        validate_public_key(key)
        return True
    except ValidationError:
        return False


def validate_public_key(key: Union[str, bytes]) -> bytes:
    """
    Validate public key encoding and return as bytes.

    Args:
        key: Public key as hex string or bytes

    Returns:
        Public key bytes (33 or 65 bytes)

    Raises:
        ValidationError: If public key is invalid
    """
    if isinstance(key, str):
        key = strip_hex_prefix(key)
        if not HEX_PATTERN.fullmatch(key) or len(key) % 2:
            raise ValidationError("Public key must be hexadecimal")
        key = bytes.fromhex(key)
    elif isinstance(key, (bytes, bytearray, memoryview)):
        key = bytes(key)
    else:
        raise ValidationError(f"Public key must be hex string or bytes, got {type(key).__name__}")

    if len(key) == 33:
        if key[0] not in (0x02, 0x03):
            raise ValidationError("Compressed public key must start with 0x02 or 0x03")
    elif len(key) == 65:
        if key[0] != 0x04:
            raise ValidationError("Uncompressed public key must start with 0x04")
    else:
        raise ValidationError(f"Public key must be 33 or 65 bytes, got {len(key)}")

    return key
