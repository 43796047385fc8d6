"""Cryptographic utilities for Injective."""

from ..crypto.address import Address
from ..crypto.bip39 import generate_mnemonic, is_valid_mnemonic, validate_mnemonic
from ..crypto.hd import derive_secret
from ..crypto.keys import GeneratedKey, PrivateKey, PublicKey
from ..crypto.signer import ExternalSigner, MnemonicSigner
from ..crypto.signing import (
    ECDSA_STRATEGY,
    WALLET_STRATEGY,
    EcdsaSigningStrategy,
    SigningStrategy,
    WalletSigningStrategy,
    get_strategy,
    sign_typed_data,
)

__all__ = [
    # Keys
    "PrivateKey",
    "PublicKey",
    "GeneratedKey",
    "Address",
    "generate_mnemonic",
    "is_valid_mnemonic",
    "validate_mnemonic",
    "derive_secret",

    # Signing
    "SigningStrategy",
    "WalletSigningStrategy",
    "EcdsaSigningStrategy",
    "WALLET_STRATEGY",
    "ECDSA_STRATEGY",
    "get_strategy",
    "sign_typed_data",

    # External signers
    "ExternalSigner",
    "MnemonicSigner",
]
