"""Account address for Injective."""

from typing import Optional, Union

from eth_utils import to_checksum_address

from ..constants import ADDRESS_LENGTH, DEFAULT_BECH32_PREFIX, SUBACCOUNT_INDEX_WIDTH
from ..exceptions import AddressError, ValidationError
from ..types.common import AddressBytes, Bech32Str, HexStr, SubaccountId
from ..utils.encoding import bytes_to_hex, decode_bech32, encode_bech32
from ..utils.validation import validate_address_hex

__all__ = ["Address"]


class Address:
    """
    20-byte account address.

    The same bytes are shown as lowercase ``0x`` hex (Ethereum form) or
    bech32 with a chain prefix (Cosmos form).
    """

    def __init__(self, data: Union[bytes, bytearray, "Address"]) -> None:
        """
        Initialize address.

        Args:
            data: 20 address bytes or another Address

        Raises:
            AddressError: If data is not 20 bytes
        """
        if isinstance(data, Address):
            self._bytes = data._bytes
            return

        if not isinstance(data, (bytes, bytearray)):
            raise AddressError(f"Address must be bytes, got {type(data).__name__}")
        if len(data) != ADDRESS_LENGTH:
            raise AddressError(f"Address must be {ADDRESS_LENGTH} bytes, got {len(data)}")

        self._bytes = AddressBytes(bytes(data))

    @classmethod
    def from_hex(cls, address: str) -> "Address":
        """Parse a 0x hex address, any case."""
        return cls(validate_address_hex(address))

    @classmethod
    def from_bech32(cls, address: str, prefix: Optional[str] = None) -> "Address":
        """
        Parse a bech32 address.

        Args:
            address: Bech32 string such as inj1...
            prefix: Expected human-readable part, or None to accept any

        Raises:
            AddressError: If the string, checksum or prefix is invalid
        """
        try:
            hrp, data = decode_bech32(address)
        except ValidationError as e:
            raise AddressError(f"Invalid bech32 address {address!r}: {e.message}") from e

        if prefix is not None and hrp != prefix:
            raise AddressError(f"Wrong bech32 prefix: expected {prefix}, got {hrp}")

        return cls(data)

    def to_bytes(self) -> AddressBytes:
        """Get address as bytes."""
        return self._bytes

    def to_hex(self) -> HexStr:
        """Get address as 0x-prefixed lowercase hex."""
        return bytes_to_hex(self._bytes, prefix=True)

    def to_checksum(self) -> str:
        """Get address as EIP-55 mixed-case hex."""
        return to_checksum_address(self._bytes)

    def to_bech32(self, prefix: str = DEFAULT_BECH32_PREFIX) -> Bech32Str:
        """Get address as bech32 with the given human-readable part."""
        return Bech32Str(encode_bech32(prefix, self._bytes))

    def to_subaccount_id(self, index: int = 0) -> SubaccountId:
        """
        Get the exchange subaccount id for this address.

        Args:
            index: Subaccount index, 0 is the default subaccount

        Returns:
            0x + 40 address hex digits + index as 24 hex digits
        """
        if index < 0 or index >= 1 << (SUBACCOUNT_INDEX_WIDTH * 4):
            raise AddressError(f"Subaccount index out of range: {index}")
        return SubaccountId(f"{self.to_hex()}{index:0{SUBACCOUNT_INDEX_WIDTH}x}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return False
        return self._bytes == other._bytes

    def __hash__(self) -> int:
        return hash(self._bytes)

    def __str__(self) -> str:
        return self.to_bech32()

    def __repr__(self) -> str:
        return f"Address({self.to_hex()})"
