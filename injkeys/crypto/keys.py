"""Key management for Injective."""

import base64
import binascii
import logging
import warnings
from typing import NamedTuple, Optional, Union

from coincurve import PrivateKey as SecpPrivateKey, PublicKey as SecpPublicKey
from coincurve.ecdsa import cdata_to_der, deserialize_compact

from ..constants import (
    DEFAULT_BECH32_PREFIX,
    DEFAULT_DERIVATION_PATH,
    DIGEST_LENGTH,
    MNEMONIC_STRENGTH,
    RECOVERABLE_SIGNATURE_LENGTH,
    SIGNATURE_LENGTH,
)
from ..crypto.address import Address
from ..crypto.bip39 import generate_mnemonic
from ..crypto.hd import derive_secret
from ..crypto.signing import ECDSA_STRATEGY, WALLET_STRATEGY, sign_typed_data
from ..exceptions import SigningError, ValidationError
from ..types.common import (
    Bech32Str,
    HexStr,
    PrivateKeyBytes,
    PublicKeyBytes,
    RecoverableSignature,
    SecretInput,
    Signature,
)
from ..types.typed_data import TypedDataInput
from ..utils.encoding import add_hex_prefix, bytes_to_hex, keccak256
from ..utils.validation import validate_private_key, validate_public_key

__all__ = ["PrivateKey", "PublicKey", "GeneratedKey"]

logger = logging.getLogger(__name__)


class GeneratedKey(NamedTuple):
    """Fresh key together with the mnemonic it was derived from."""

    private_key: "PrivateKey"
    mnemonic: str


def _message_bytes(message: Union[bytes, bytearray, memoryview]) -> bytes:
    if not isinstance(message, (bytes, bytearray, memoryview)):
        raise SigningError(f"Message must be bytes, got {type(message).__name__}")
    return bytes(message)


class PrivateKey:
    """
    secp256k1 private key wrapper.

    Holds the 32-byte secret scalar and derives the public key and account
    address from it. Instances are read-only after construction, so one key
    can be shared by concurrent signing tasks.
    """

    def __init__(self, key: Union[SecretInput, "PrivateKey"]) -> None:
        """
        Initialize private key.

        Args:
            key: Private key as 32 bytes, hex string, or another PrivateKey

        Raises:
            InvalidSecretLengthError: If key is not 32 bytes
            InvalidSecretValueError: If key is zero, too large, or not hex
        """
        if isinstance(key, PrivateKey):
            self._secret = key._secret
            self._key = key._key
            return

        # Validate and normalize key
        self._secret = PrivateKeyBytes(validate_private_key(key))

        # Initialize crypto library
        self._key = SecpPrivateKey(self._secret)

    @classmethod
    def generate(cls, strength: int = MNEMONIC_STRENGTH) -> GeneratedKey:
        """
        Create a key from a freshly generated mnemonic.

        The mnemonic is returned once and cannot be recovered from the key,
        so the caller is responsible for storing it safely.

        Args:
            strength: Entropy bits of the mnemonic

        Returns:
            GeneratedKey(private_key, mnemonic)
        """
        mnemonic = generate_mnemonic(strength)
        return GeneratedKey(cls.from_mnemonic(mnemonic), mnemonic)

    @classmethod
    def from_mnemonic(
        cls,
        mnemonic: str,
        path: str = DEFAULT_DERIVATION_PATH,
        passphrase: str = ""
    ) -> "PrivateKey":
        """
        Derive private key from a BIP39 mnemonic along a BIP32 path.

        Args:
            mnemonic: BIP39 phrase
            path: Derivation path
            passphrase: Optional BIP39 passphrase

        Returns:
            New PrivateKey instance

        Raises:
            InvalidMnemonicError: If the phrase fails word list or checksum checks
            InvalidDerivationPathError: If path is malformed
        """
        key = cls(derive_secret(mnemonic, path, passphrase))
        logger.debug(f"Derived key {key.to_hex()} along {path}")
        return key

    @classmethod
    def from_hex(cls, private_key: SecretInput) -> "PrivateKey":
        """
        Create private key from hex string or raw bytes.

        Args:
            private_key: Hex with or without 0x (any case) or 32 bytes

        Returns:
            New PrivateKey instance
        """
        return cls(private_key)

    @classmethod
    def from_private_key(cls, private_key: str) -> "PrivateKey":
        """
        Create private key from hex string.

        Deprecated: use from_hex, which also accepts bytes.
        """
        warnings.warn(
            "PrivateKey.from_private_key is deprecated, use PrivateKey.from_hex",
            DeprecationWarning,
            stacklevel=2,
        )
        if not isinstance(private_key, str):
            raise ValidationError("from_private_key only accepts hex strings")
        return cls.from_hex(private_key)

    def to_private_key_hex(self) -> HexStr:
        """Get private key as 0x-prefixed lowercase hex."""
        return add_hex_prefix(bytes_to_hex(self._secret))

    def to_public_key(self, compressed: bool = True) -> "PublicKey":
        """
        Get corresponding public key.

        Args:
            compressed: Return compressed format

        Returns:
            PublicKey instance
        """
        serialized = self._key.public_key.format(compressed=compressed)
        return PublicKey(serialized, compressed=compressed)

    def to_hex(self) -> HexStr:
        """Get account address as 0x-prefixed lowercase hex."""
        return add_hex_prefix(self.to_public_key().to_address().to_hex())

    def to_address(self) -> Address:
        """Get account address."""
        return Address.from_hex(self.to_hex())

    def to_bech32(self, prefix: str = DEFAULT_BECH32_PREFIX) -> Bech32Str:
        """Get account address as bech32."""
        return Address.from_hex(self.to_hex()).to_bech32(prefix)

    async def sign(self, message: bytes) -> Signature:
        """
        Sign keccak256(message) through the wallet signing path.

        Args:
            message: Message bytes, hashed before signing

        Returns:
            64-byte signature (r || s)

        Raises:
            SigningError: If signing fails
        """
        digest = keccak256(_message_bytes(message))
        return WALLET_STRATEGY.sign_digest(self._secret, digest)

    async def sign_hashed(self, message_hash: bytes) -> Signature:
        """Sign a 32-byte digest through the wallet signing path."""
        return WALLET_STRATEGY.sign_digest(self._secret, message_hash)

    async def sign_ecda(self, message: bytes) -> Signature:
        """
        Sign keccak256(message) with the secp256k1 primitive.

        Returns:
            64-byte signature (r || s), no recovery byte
        """
        digest = keccak256(_message_bytes(message))
        return ECDSA_STRATEGY.sign_digest(self._secret, digest)

    async def sign_hashed_ecda(self, message_hash: bytes) -> Signature:
        """Sign a 32-byte digest with the secp256k1 primitive."""
        return ECDSA_STRATEGY.sign_digest(self._secret, message_hash)

    async def sign_typed_data(self, typed_data: TypedDataInput) -> RecoverableSignature:
        """
        Sign EIP-712 typed data.

        Unlike the other signing methods the result keeps the recovery
        byte, as typed data verifiers expect it.

        Args:
            typed_data: TypedData or mapping with domain, types,
                primaryType and message

        Returns:
            65-byte signature (r || s || v)

        Raises:
            InvalidTypedDataError: If the payload is malformed
            SigningError: If signing fails
        """
        return sign_typed_data(self._secret, typed_data)

    async def sign_hashed_typed_data(self, typed_data_hash: bytes) -> Signature:
        """Sign a 32-byte EIP-712 digest with the secp256k1 primitive."""
        return ECDSA_STRATEGY.sign_digest(self._secret, typed_data_hash)

    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, PrivateKey):
            return False
        return self._secret == other._secret

    def __hash__(self) -> int:
        return hash(self._secret)

    def __repr__(self) -> str:
        """String representation."""
        # Show the address only, never the secret
        return f"PrivateKey({self.to_hex()})"


class PublicKey:
    """
    secp256k1 public key wrapper.

    Handles address derivation, signature verification and the hex and
    base64 encodings.
    """

    def __init__(
        self,
        key: Union[bytes, str, "PublicKey"],
        compressed: Optional[bool] = None
    ) -> None:
        """
        Initialize public key.

        Args:
            key: Public key as bytes, hex string, or another PublicKey
            compressed: Whether key is compressed (auto-detected if None)

        Raises:
            ValidationError: If key format is invalid
        """
        if isinstance(key, PublicKey):
            self._key = key._key
            self._compressed = key._compressed if compressed is None else compressed
            return

        # Validate and normalize key
        key_bytes = validate_public_key(key)

        # Detect compression
        if compressed is None:
            self._compressed = len(key_bytes) == 33
        else:
            self._compressed = compressed

        # Initialize crypto library
        try:
            self._key = SecpPublicKey(key_bytes)
        except ValueError as e:
            raise ValidationError(f"Public key is not on the curve: {e}") from e

    @classmethod
    def from_hex(cls, key: str) -> "PublicKey":
        """Create public key from hex string."""
        return cls(key)

    @classmethod
    def from_base64(cls, key: str) -> "PublicKey":
        """Create public key from base64 string."""
        try:
            key_bytes = base64.b64decode(key, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ValidationError(f"Invalid base64 public key: {e}") from e
        return cls(key_bytes)

    @classmethod
    def from_private_key_hex(cls, private_key: SecretInput) -> "PublicKey":
        """Derive public key from a private key hex string or bytes."""
        return PrivateKey(private_key).to_public_key()

    @property
    def point(self) -> PublicKeyBytes:
        """Get public key as bytes in its configured format."""
        return self.to_bytes()

    @property
    def compressed(self) -> bool:
        return self._compressed

    def to_bytes(self, compressed: Optional[bool] = None) -> PublicKeyBytes:
        """Get public key as bytes, compressed by default for compressed keys."""
        if compressed is None:
            compressed = self._compressed
        return PublicKeyBytes(self._key.format(compressed=compressed))

    def to_hex(self) -> HexStr:
        """Get public key as hex string."""
        return bytes_to_hex(self.to_bytes())

    def to_base64(self) -> str:
        """Get public key as base64 string."""
        return base64.b64encode(self.to_bytes()).decode("ascii")

    def to_address(self) -> Address:
        """Get account address: last 20 bytes of keccak256 of the uncompressed point."""
        uncompressed = self._key.format(compressed=False)
        return Address(keccak256(uncompressed[1:])[-20:])

    def verify(self, signature: bytes, message_hash: bytes) -> bool:
        """
        Verify signature.

        Args:
            signature: 64-byte r || s, or 65 bytes with a trailing recovery byte
            message_hash: 32-byte message hash

        Returns:
            True if signature is valid
        """
        if len(message_hash) != DIGEST_LENGTH:
            return False
        if len(signature) not in (SIGNATURE_LENGTH, RECOVERABLE_SIGNATURE_LENGTH):
            return False

        try:
            der = cdata_to_der(deserialize_compact(bytes(signature[:SIGNATURE_LENGTH])))
            return self._key.verify(der, bytes(message_hash), hasher=None)
        except Exception:
            return False

    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, PublicKey):
            return False
        return self._key.format(compressed=True) == other._key.format(compressed=True)

    def __hash__(self) -> int:
        return hash(self._key.format(compressed=True))

    def __repr__(self) -> str:
        """String representation."""
        return f"PublicKey({self.to_hex()})"
