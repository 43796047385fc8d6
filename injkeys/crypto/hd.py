"""Hierarchical Deterministic key derivation for Injective."""

import logging

from eth_account.hdaccount import key_from_seed

from ..constants import DEFAULT_DERIVATION_PATH
from ..crypto.bip39 import mnemonic_to_seed, validate_mnemonic
from ..exceptions import CryptoError, InvalidDerivationPathError
from ..utils.validation import validate_derivation_path

__all__ = ["derive_secret_from_seed", "derive_secret"]

logger = logging.getLogger(__name__)


def derive_secret_from_seed(seed: bytes, path: str = DEFAULT_DERIVATION_PATH) -> bytes:
    """
    Derive a 32-byte private key from a BIP39 seed (BIP32).

    Args:
        seed: Seed bytes, 16 to 64 long
        path: BIP32 path like m/44'/60'/0'/0/0

    Returns:
        32-byte secret scalar

    Raises:
        InvalidDerivationPathError: If path is malformed
        CryptoError: If seed length is invalid
    """
    validate_derivation_path(path)

    if len(seed) < 16 or len(seed) > 64:
        raise CryptoError("Seed must be between 16 and 64 bytes")

    try:
        secret = key_from_seed(bytes(seed), path)
    except ValueError as e:
        raise InvalidDerivationPathError(path, f"Cannot derive along {path!r}: {e}") from e

    logger.debug(f"Derived key along {path}")
    return secret


def derive_secret(
    mnemonic: str,
    path: str = DEFAULT_DERIVATION_PATH,
    passphrase: str = ""
) -> bytes:
    """
    Derive private key bytes from mnemonic (BIP39/BIP32).

    The mnemonic and path are both validated before any seed is computed.
    """
    mnemonic = validate_mnemonic(mnemonic)
    validate_derivation_path(path)

    seed = mnemonic_to_seed(mnemonic, passphrase)
    return derive_secret_from_seed(seed, path)
