"""BIP39 mnemonic handling for Injective key management."""

import logging

from mnemonic import Mnemonic

from ..constants import MNEMONIC_LANGUAGE, MNEMONIC_STRENGTH
from ..exceptions import InvalidMnemonicError

__all__ = [
    "generate_mnemonic",
    "normalize_mnemonic",
    "is_valid_mnemonic",
    "validate_mnemonic",
    "mnemonic_to_seed",
]

logger = logging.getLogger(__name__)

VALID_STRENGTHS = (128, 160, 192, 224, 256)


def generate_mnemonic(strength: int = MNEMONIC_STRENGTH, language: str = MNEMONIC_LANGUAGE) -> str:
    """Generate BIP39 mnemonic phrase from OS entropy."""
    if strength not in VALID_STRENGTHS:
        raise ValueError("Strength must be 128, 160, 192, 224, or 256")

    phrase = Mnemonic(language).generate(strength=strength)
    logger.info(f"Generated {len(phrase.split())}-word mnemonic")
    return phrase


def normalize_mnemonic(phrase: str) -> str:
    """Collapse whitespace between words."""
    return " ".join(phrase.split())


def is_valid_mnemonic(phrase: str, language: str = MNEMONIC_LANGUAGE) -> bool:
    """Check word list membership and checksum."""
    if not isinstance(phrase, str):
        return False
    return Mnemonic(language).check(normalize_mnemonic(phrase))


def validate_mnemonic(phrase: str, language: str = MNEMONIC_LANGUAGE) -> str:
    """
    Validate mnemonic and return it normalized.

    Raises:
        InvalidMnemonicError: If a word is unknown or the checksum fails
    """
    if not is_valid_mnemonic(phrase, language):
        raise InvalidMnemonicError("Invalid BIP39 mnemonic phrase")
    return normalize_mnemonic(phrase)


def mnemonic_to_seed(phrase: str, passphrase: str = "", language: str = MNEMONIC_LANGUAGE) -> bytes:
    """Convert validated mnemonic to a 64-byte seed using PBKDF2."""
    phrase = validate_mnemonic(phrase, language)
    return Mnemonic.to_seed(phrase, passphrase=passphrase)
