"""Constants for Injective key management."""

from enum import Enum

__all__ = [
    "Bech32Prefix",
    "DEFAULT_BECH32_PREFIX",
    "DEFAULT_DERIVATION_PATH",
    "SECP256K1_ORDER",
    "PRIVATE_KEY_LENGTH",
    "ADDRESS_LENGTH",
    "DIGEST_LENGTH",
    "SIGNATURE_LENGTH",
    "RECOVERABLE_SIGNATURE_LENGTH",
    "MNEMONIC_STRENGTH",
    "MNEMONIC_LANGUAGE",
    "SUBACCOUNT_INDEX_WIDTH",
]


class Bech32Prefix(str, Enum):
    """Human-readable parts used by the chain."""

    ACCOUNT = "inj"
    VALIDATOR = "injvaloper"
    CONSENSUS = "injvalcons"


DEFAULT_BECH32_PREFIX = Bech32Prefix.ACCOUNT.value

# BIP44 path with Ethereum's coin type, shared with MetaMask-derived keys
DEFAULT_DERIVATION_PATH = "m/44'/60'/0'/0/0"

SECP256K1_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

PRIVATE_KEY_LENGTH = 32
ADDRESS_LENGTH = 20
DIGEST_LENGTH = 32
SIGNATURE_LENGTH = 64
RECOVERABLE_SIGNATURE_LENGTH = 65

MNEMONIC_STRENGTH = 128
MNEMONIC_LANGUAGE = "english"

# Subaccount ids are the address followed by the index as 24 hex digits
SUBACCOUNT_INDEX_WIDTH = 24
