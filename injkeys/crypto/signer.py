"""External signer boundary.

Hardware wallets and other devices that hold keys outside the process are
consumed through :class:`ExternalSigner`: they receive a payload and a
derivation path and return a signature in the same 64-byte ``r || s``
layout as :meth:`PrivateKey.sign`.
"""

import logging
from typing import Dict, Optional, Protocol, runtime_checkable

from ..constants import DEFAULT_DERIVATION_PATH
from ..crypto.bip39 import validate_mnemonic
from ..crypto.keys import PrivateKey
from ..exceptions import SignerUnavailableError
from ..types.common import Signature

__all__ = ["ExternalSigner", "MnemonicSigner"]

logger = logging.getLogger(__name__)


@runtime_checkable
class ExternalSigner(Protocol):
    """Anything able to sign a payload for a derivation path."""

    async def sign(self, payload: bytes, derivation_path: str = DEFAULT_DERIVATION_PATH) -> Signature:
        """
        Sign keccak256(payload) with the key at derivation_path.

        Returns:
            64-byte signature (r || s)

        Raises:
            SignerUnavailableError: If no session with the signer is open
        """
        ...


class MnemonicSigner:
    """
    Software ExternalSigner backed by a mnemonic.

    Derives the key for each requested path and signs through
    :meth:`PrivateKey.sign`. Derived keys are kept per path until the
    session is closed.
    """

    def __init__(self, mnemonic: str, passphrase: str = "", name: Optional[str] = None) -> None:
        """
        Open a signing session.

        Args:
            mnemonic: BIP39 phrase
            passphrase: Optional BIP39 passphrase
            name: Label used in log records

        Raises:
            InvalidMnemonicError: If the phrase is invalid
        """
        self._mnemonic: Optional[str] = validate_mnemonic(mnemonic)
        self._passphrase = passphrase
        self._keys: Dict[str, PrivateKey] = {}
        self.name = name or "default"
        self._logger = logging.getLogger(f"{__name__}.MnemonicSigner.{self.name}")

    @property
    def is_open(self) -> bool:
        return self._mnemonic is not None

    def get_key(self, derivation_path: str = DEFAULT_DERIVATION_PATH) -> PrivateKey:
        """
        Get the key at derivation_path.

        Raises:
            SignerUnavailableError: If the session is closed
            InvalidDerivationPathError: If path is malformed
        """
        if self._mnemonic is None:
            raise SignerUnavailableError(f"Signer {self.name} is closed")

        key = self._keys.get(derivation_path)
        if key is None:
            key = PrivateKey.from_mnemonic(self._mnemonic, derivation_path, self._passphrase)
            self._keys[derivation_path] = key
            self._logger.debug(f"Opened key {key.to_hex()} at {derivation_path}")
        return key

    async def sign(self, payload: bytes, derivation_path: str = DEFAULT_DERIVATION_PATH) -> Signature:
        """Sign keccak256(payload) with the key at derivation_path."""
        return await self.get_key(derivation_path).sign(payload)

    def close(self) -> None:
        """End the session and drop the mnemonic and derived keys."""
        if self._mnemonic is not None:
            self._logger.info(f"Closed signer {self.name}")
        self._mnemonic = None
        self._keys.clear()

    async def __aenter__(self) -> "MnemonicSigner":
        if self._mnemonic is None:
            raise SignerUnavailableError(f"Signer {self.name} is closed")
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
