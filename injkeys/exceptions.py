"""Injective key management exceptions hierarchy."""

from typing import Any, Optional

__all__ = [
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
]


class InjKeysError(Exception):
    """Base exception for all key management errors."""

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        data: Optional[Any] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.data = data

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ValidationError(InjKeysError):
    """Raised when input validation fails."""
    pass


class InvalidMnemonicError(ValidationError):
    """Raised when a mnemonic fails the BIP39 word list or checksum check."""
    pass


class InvalidSecretLengthError(ValidationError):
    """Raised when a private key is not exactly 32 bytes."""

    def __init__(self, length: int, message: Optional[str] = None) -> None:
        if message is None:
            message = f"Private key must be 32 bytes, got {length}"
        super().__init__(message)
        self.length = length


class InvalidSecretValueError(ValidationError):
    """Raised when a private key is zero, not below the curve order, or not hex."""
    pass


class InvalidDerivationPathError(ValidationError):
    """Raised when a BIP32 derivation path cannot be parsed."""

    def __init__(self, path: Any, message: Optional[str] = None) -> None:
        if message is None:
            message = f"Invalid derivation path: {path!r}"
        super().__init__(message)
        self.path = path


class AddressError(ValidationError):
    """Raised when an address cannot be parsed or encoded."""
    pass


class CryptoError(InjKeysError):
    """Raised when a cryptographic operation fails."""
    pass


class SigningError(CryptoError):
    """Raised when a signature cannot be produced."""
    pass


class InvalidTypedDataError(SigningError):
    """Raised when an EIP-712 payload is malformed."""
    pass


class SignerUnavailableError(SigningError):
    """Raised when an external signer has no open session."""
    pass
