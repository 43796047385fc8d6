import pytest

from injkeys.exceptions import ValidationError
from injkeys.utils.encoding import (
    add_hex_prefix, strip_hex_prefix, hex_to_bytes, bytes_to_hex,
    keccak256, convertbits, encode_bech32, decode_bech32
)


def test_hex_bytes_roundtrip():
    data = b"\x00\x01deadbeef"
    hex_str = bytes_to_hex(data, prefix=True)
    assert hex_str.startswith("0x")
    assert hex_to_bytes(hex_str) == data
    assert hex_to_bytes(hex_str.upper().replace("0X", "0x")) == data
    with pytest.raises(ValidationError):
        hex_to_bytes("zzzz")


def test_hex_prefix_added_exactly_once():
    assert add_hex_prefix("abcd") == "0xabcd"
    assert add_hex_prefix("0xabcd") == "0xabcd"
    assert add_hex_prefix("0Xabcd") == "0xabcd"
    assert strip_hex_prefix("0xabcd") == "abcd"
    assert strip_hex_prefix("abcd") == "abcd"


def test_keccak256_known_vectors():
    assert keccak256(b"").hex() == "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
    assert keccak256(b"hello").hex() == "1c8aff950685c2ed4bc3174f3472287b56d9517b9c948127319a09a7a36deac8"


def test_convertbits_rejects_out_of_range_values():
    assert convertbits([0xff], 8, 5) == [31, 28]
    with pytest.raises(ValidationError):
        convertbits([32], 5, 8)


def test_bech32_roundtrip():
    payload = bytes(range(20))
    encoded = encode_bech32("inj", payload)
    assert encoded.startswith("inj1")
    assert decode_bech32(encoded) == ("inj", payload)
    assert decode_bech32(encoded.upper()) == ("inj", payload)


def test_bech32_rejects_bad_input():
    encoded = encode_bech32("inj", b"\x11" * 20)
    flipped = encoded[:-1] + ("q" if encoded[-1] != "q" else "p")
    with pytest.raises(ValidationError):
        decode_bech32(flipped)
    with pytest.raises(ValidationError):
        decode_bech32(encoded[:5] + encoded[5:].upper())
    with pytest.raises(ValidationError):
        decode_bech32("injqqqqqq")
    with pytest.raises(ValidationError):
        encode_bech32("", b"\x00")
