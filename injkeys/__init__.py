"""
Injective Key Management Library

secp256k1 keys, addresses and signatures for the Injective wallet SDK:
mnemonic and raw-secret key construction, hex and bech32 addresses, and
the raw, hashed and EIP-712 signing formats used by the chain.
"""

from .constants import Bech32Prefix, DEFAULT_DERIVATION_PATH
from .exceptions import (
    InjKeysError,
    ValidationError,
    InvalidMnemonicError,
    InvalidSecretLengthError,
    InvalidSecretValueError,
    InvalidDerivationPathError,
    AddressError,
    CryptoError,
    SigningError,
    InvalidTypedDataError,
    SignerUnavailableError,
)
from .crypto import (
    Address,
    ExternalSigner,
    GeneratedKey,
    MnemonicSigner,
    PrivateKey,
    PublicKey,
)
from .types import TypedData

__version__ = "1.0.0"

__all__ = [
    # Configuration
    "Bech32Prefix",
    "DEFAULT_DERIVATION_PATH",

    # Exceptions
    "InjKeysError",
    "ValidationError",
    "InvalidMnemonicError",
    "InvalidSecretLengthError",
    "InvalidSecretValueError",
    "InvalidDerivationPathError",
    "AddressError",
    "CryptoError",
    "SigningError",
    "InvalidTypedDataError",
    "SignerUnavailableError",

    # Crypto
    "PrivateKey",
    "PublicKey",
    "GeneratedKey",
    "Address",
    "ExternalSigner",
    "MnemonicSigner",

    # Types
    "TypedData",
]
