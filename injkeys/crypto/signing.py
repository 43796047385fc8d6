"""Digest signing strategies for Injective keys.

Two strategies produce the 64-byte ``r || s`` layout:

* ``wallet`` goes through the eth-keys signing key the way an Ethereum
  wallet signs a digest, then reassembles the integer ``r`` and ``s``.
* ``ecdsa`` calls the secp256k1 primitive directly and keeps its compact
  serialization.

Both use RFC 6979 nonces on libsecp256k1 and agree byte for byte on the
same digest and key. EIP-712 typed data is signed separately and keeps
the trailing recovery byte.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

from coincurve import PrivateKey as SecpPrivateKey
from coincurve.ecdsa import der_to_cdata, serialize_compact
from eth_account import Account
from eth_keys import KeyAPI
from eth_keys.backends import CoinCurveECCBackend
from eth_utils import encode_hex

from ..exceptions import SigningError
from ..types.common import RecoverableSignature, Signature
from ..types.typed_data import TypedData, TypedDataInput
from ..utils.encoding import hex_to_bytes
from ..utils.validation import validate_digest

__all__ = [
    "SigningStrategy",
    "WalletSigningStrategy",
    "EcdsaSigningStrategy",
    "WALLET_STRATEGY",
    "ECDSA_STRATEGY",
    "get_strategy",
    "sign_typed_data",
]

logger = logging.getLogger(__name__)


class SigningStrategy(ABC):
    """Signs a 32-byte digest with a raw secret, returning ``r || s``."""

    name: str = ""

    @abstractmethod
    def sign_digest(self, secret: bytes, digest: bytes) -> Signature:
        """
        Sign a pre-hashed message.

        Args:
            secret: 32-byte private key
            digest: 32-byte message digest

        Returns:
            64-byte signature (r || s)

        Raises:
            SigningError: If the digest or key is rejected
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"


class WalletSigningStrategy(SigningStrategy):
    """
    Wallet signing path.

    The signing key returns ``r`` and ``s`` as integers, which may have
    fewer than 32 significant bytes and are left-padded on reassembly.
    """

    name = "wallet"

    def __init__(self, keys: Optional[KeyAPI] = None) -> None:
        self._keys = keys or KeyAPI(backend=CoinCurveECCBackend())

    def sign_digest(self, secret: bytes, digest: bytes) -> Signature:
        digest = validate_digest(digest)

        try:
            signing_key = self._keys.PrivateKey(bytes(secret), backend=self._keys.backend)
            signature = signing_key.sign_msg_hash(digest)
        except Exception as e:
            logger.error(f"Wallet signing failed: {e}")
            raise SigningError(f"Wallet signing failed: {e}") from e

        return Signature(signature.r.to_bytes(32, "big") + signature.s.to_bytes(32, "big"))


class EcdsaSigningStrategy(SigningStrategy):
    """Direct secp256k1 signing over the raw secret bytes."""

    name = "ecdsa"

    def sign_digest(self, secret: bytes, digest: bytes) -> Signature:
        digest = validate_digest(digest)

        try:
            der = SecpPrivateKey(bytes(secret)).sign(digest, hasher=None)
            return Signature(serialize_compact(der_to_cdata(der)))
        except Exception as e:
            logger.error(f"ECDSA signing failed: {e}")
            raise SigningError(f"ECDSA signing failed: {e}") from e


WALLET_STRATEGY = WalletSigningStrategy()
ECDSA_STRATEGY = EcdsaSigningStrategy()

_STRATEGIES: Dict[str, SigningStrategy] = {
    WALLET_STRATEGY.name: WALLET_STRATEGY,
    ECDSA_STRATEGY.name: ECDSA_STRATEGY,
}


def get_strategy(name: str) -> SigningStrategy:
    """Look up a signing strategy by name ('wallet' or 'ecdsa')."""
    try:
        return _STRATEGIES[name]
    except KeyError:
        raise ValueError(f"Unknown signing strategy: {name}") from None


def sign_typed_data(secret: bytes, typed_data: TypedDataInput) -> RecoverableSignature:
    """
    Sign EIP-712 typed data (``eth_signTypedData_v4``).

    Args:
        secret: 32-byte private key
        typed_data: TypedData or its JSON-style mapping

    Returns:
        65-byte signature (r || s || v) with v in {27, 28}

    Raises:
        InvalidTypedDataError: If the payload is malformed
        SigningError: If signing fails
    """
    if not isinstance(typed_data, TypedData):
        typed_data = TypedData.from_dict(typed_data)

    signable = typed_data.signable()

    try:
        signed = Account.sign_message(signable, private_key=bytes(secret))
    except Exception as e:
        logger.error(f"Typed data signing failed: {e}")
        raise SigningError(f"Typed data signing failed: {e}") from e

    return RecoverableSignature(hex_to_bytes(encode_hex(signed.signature)))
