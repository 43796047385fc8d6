"""Encoding and decoding utilities for Injective key management."""

from typing import Iterable, List, Tuple, Union

from eth_utils import keccak

from ..exceptions import ValidationError
from ..types.common import HexStr

__all__ = [
    "has_hex_prefix",
    "add_hex_prefix",
    "strip_hex_prefix",
    "hex_to_bytes",
    "bytes_to_hex",
    "keccak256",
    "convertbits",
    "encode_bech32",
    "decode_bech32",
]

# Constants
BECH32_CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
BECH32_MAX_LENGTH = 90


def has_hex_prefix(value: str) -> bool:
    """Check for a leading 0x or 0X."""
    return value[:2] in ("0x", "0X")


def add_hex_prefix(value: str) -> HexStr:
    """
    Ensure a hex string carries the 0x prefix exactly once.

    Args:
        value: Hex string with or without prefix

    Returns:
        Hex string starting with 0x
    """
    if has_hex_prefix(value):
        return HexStr("0x" + value[2:])
    return HexStr(f"0x{value}")


def strip_hex_prefix(value: str) -> str:
    """Remove a leading 0x if present."""
    if has_hex_prefix(value):
        return value[2:]
    return value


def hex_to_bytes(hex_str: Union[HexStr, str]) -> bytes:
    """
    Convert hex string to bytes.

    Args:
        hex_str: Hex string with or without 0x prefix, any case

    Returns:
        Decoded bytes

    Raises:
        ValidationError: If hex string is invalid
    """
    if not isinstance(hex_str, str):
        raise ValidationError(f"Expected hex string, got {type(hex_str).__name__}")
    try:
        return bytes.fromhex(strip_hex_prefix(hex_str))
    except ValueError as e:
        raise ValidationError(f"Invalid hex string: {hex_str}") from e


def bytes_to_hex(data: bytes, prefix: bool = False) -> HexStr:
    """
    Convert bytes to lowercase hex string.

    Args:
        data: Bytes to encode
        prefix: Add 0x prefix

    Returns:
        Hex string
    """
    hex_str = bytes(data).hex()
    if prefix:
        hex_str = f"0x{hex_str}"
    return HexStr(hex_str)


def keccak256(data: bytes) -> bytes:
    """Perform Keccak-256 (pre-standard SHA3) hash."""
    return keccak(primitive=bytes(data))


def convertbits(data: Iterable[int], frombits: int, tobits: int, pad: bool = True) -> List[int]:
    """
    Regroup a sequence of integers between bit widths.

    Args:
        data: Input values, each below 2**frombits
        frombits: Width of input values
        tobits: Width of output values
        pad: Pad the final group with zero bits

    Returns:
        Output values

    Raises:
        ValidationError: If an input value is out of range or padding is invalid
    """
    acc = 0
    bits = 0
    result = []
    maxv = (1 << tobits) - 1
    max_acc = (1 << (frombits + tobits - 1)) - 1

    for value in data:
        if value < 0 or (value >> frombits):
            raise ValidationError(f"Value {value} does not fit in {frombits} bits")
        acc = ((acc << frombits) | value) & max_acc
        bits += frombits
        while bits >= tobits:
            bits -= tobits
            result.append((acc >> bits) & maxv)

    if pad:
        if bits:
            result.append((acc << (tobits - bits)) & maxv)
    elif bits >= frombits or ((acc << (tobits - bits)) & maxv):
        raise ValidationError("Invalid padding in bit conversion")

    return result


def _bech32_polymod(values: List[int]) -> int:
    """Compute Bech32 checksum polymod."""
    generator = [0x3b6a57b2, 0x26508e6d, 0x1ea119fa, 0x3d4233dd, 0x2a1462b3]
    chk = 1
    for value in values:
        top = chk >> 25
        chk = (chk & 0x1ffffff) << 5 ^ value
        for i in range(5):
            chk ^= generator[i] if ((top >> i) & 1) else 0
    return chk


def _bech32_hrp_expand(hrp: str) -> List[int]:
    """Expand human-readable part for Bech32."""
    return [ord(x) >> 5 for x in hrp] + [0] + [ord(x) & 31 for x in hrp]


def encode_bech32(hrp: str, data: bytes) -> str:
    """
    Encode bytes as a Bech32 string.

    Args:
        hrp: Human-readable part
        data: Payload bytes

    Returns:
        Bech32 encoded string

    Raises:
        ValidationError: If hrp is empty or contains invalid characters
    """
    if not hrp or any(ord(x) < 33 or ord(x) > 126 for x in hrp):
        raise ValidationError(f"Invalid Bech32 prefix: {hrp!r}")
    hrp = hrp.lower()

    values = convertbits(bytes(data), 8, 5)

    # Calculate checksum
    polymod = _bech32_polymod(_bech32_hrp_expand(hrp) + values + [0, 0, 0, 0, 0, 0]) ^ 1
    checksum = [(polymod >> 5 * (5 - i)) & 31 for i in range(6)]

    return hrp + "1" + "".join(BECH32_CHARSET[v] for v in values + checksum)


def decode_bech32(string: str) -> Tuple[str, bytes]:
    """
    Decode a Bech32 string.

    Args:
        string: Bech32 string, all lowercase or all uppercase

    Returns:
        Tuple of (hrp, payload)

    Raises:
        ValidationError: If the string or its checksum is invalid
    """
    if not isinstance(string, str):
        raise ValidationError(f"Expected Bech32 string, got {type(string).__name__}")
    if string.lower() != string and string.upper() != string:
        raise ValidationError("Invalid Bech32 string: mixed case")
    if len(string) > BECH32_MAX_LENGTH:
        raise ValidationError(f"Invalid Bech32 string: longer than {BECH32_MAX_LENGTH}")

    string = string.lower()

    # Find separator
    pos = string.rfind("1")
    if pos < 1 or pos + 7 > len(string):
        raise ValidationError("Invalid Bech32 string: no separator")

    hrp = string[:pos]
    if any(ord(x) < 33 or ord(x) > 126 for x in hrp):
        raise ValidationError(f"Invalid Bech32 prefix: {hrp!r}")

    # Decode data
    values = []
    for char in string[pos + 1:]:
        try:
            values.append(BECH32_CHARSET.index(char))
        except ValueError:
            raise ValidationError(f"Invalid Bech32 character: {char}")

    # Verify checksum
    if _bech32_polymod(_bech32_hrp_expand(hrp) + values) != 1:
        raise ValidationError("Invalid Bech32 checksum")

    payload = convertbits(values[:-6], 5, 8, pad=False)
    return hrp, bytes(payload)
