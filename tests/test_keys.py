import pytest

from injkeys.constants import DEFAULT_DERIVATION_PATH
from injkeys.crypto.keys import PrivateKey, PublicKey
from injkeys.exceptions import (
    InvalidDerivationPathError,
    InvalidMnemonicError,
    InvalidSecretLengthError,
    InvalidSecretValueError,
    ValidationError,
)
from injkeys.utils.encoding import decode_bech32

HARDHAT_MNEMONIC = "test test test test test test test test test test test junk"
HARDHAT_KEY_0 = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
HARDHAT_ADDRESS_0 = "0xf39fd6e51aad88f6f4ce6ab8827279cfffb92266"
HARDHAT_KEY_1 = "0x59c6995e998f97a5a0044966f0945389dc9e86dae88c7a8412f4603b6b78690d"
HARDHAT_ADDRESS_1 = "0x70997970c51812dc3a010c7d01b50e0d17dc79c8"

GENERATOR_COMPRESSED = "0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"


def test_from_mnemonic_default_path():
    key = PrivateKey.from_mnemonic(HARDHAT_MNEMONIC)
    assert key.to_private_key_hex() == HARDHAT_KEY_0
    assert key.to_hex() == HARDHAT_ADDRESS_0


def test_from_mnemonic_custom_path_is_deterministic():
    path = "m/44'/60'/0'/0/1"
    first = PrivateKey.from_mnemonic(HARDHAT_MNEMONIC, path)
    second = PrivateKey.from_mnemonic("  " + HARDHAT_MNEMONIC.replace(" ", "   ") + "\n", path)
    assert first == second
    assert first.to_private_key_hex() == HARDHAT_KEY_1
    assert first.to_hex() == HARDHAT_ADDRESS_1


def test_from_mnemonic_rejects_bad_checksum(monkeypatch):
    import injkeys.crypto.hd as hd

    def fail(*args, **kwargs):
        raise AssertionError("seed must not be derived from an invalid mnemonic")

    monkeypatch.setattr(hd, "mnemonic_to_seed", fail)
    with pytest.raises(InvalidMnemonicError):
        PrivateKey.from_mnemonic(" ".join(["abandon"] * 12))
    with pytest.raises(InvalidMnemonicError):
        PrivateKey.from_mnemonic("test test test test test test test test test test test notaword")


def test_from_mnemonic_rejects_bad_path():
    with pytest.raises(InvalidDerivationPathError):
        PrivateKey.from_mnemonic(HARDHAT_MNEMONIC, "44'/60'/0'/0/0")


def test_generate_returns_key_and_mnemonic():
    generated = PrivateKey.generate()
    assert len(generated.mnemonic.split()) == 12
    assert generated.private_key == PrivateKey.from_mnemonic(generated.mnemonic, DEFAULT_DERIVATION_PATH)
    key, mnemonic = generated
    assert key is generated.private_key
    assert PrivateKey.generate().mnemonic != mnemonic


def test_from_hex_accepts_hex_and_bytes():
    secret = b"\x01" * 32
    expected = PrivateKey.from_hex(secret)
    assert PrivateKey.from_hex("01" * 32) == expected
    assert PrivateKey.from_hex("0x" + "01" * 32) == expected
    assert PrivateKey.from_hex(HARDHAT_KEY_0.upper().replace("0X", "0x")) == PrivateKey.from_hex(HARDHAT_KEY_0)
    assert expected.to_private_key_hex() == "0x" + "01" * 32


def test_private_key_hex_roundtrip():
    key = PrivateKey.from_hex(HARDHAT_KEY_0)
    restored = PrivateKey.from_hex(key.to_private_key_hex())
    assert restored == key
    assert restored.to_public_key() == key.to_public_key()
    assert restored.to_hex() == key.to_hex()
    assert key.to_private_key_hex().count("0x") == 1
    assert key.to_hex().count("0x") == 1


def test_malformed_secret_fails_construction():
    with pytest.raises(InvalidSecretLengthError):
        PrivateKey.from_hex(b"\x01" * 33)
    with pytest.raises(InvalidSecretLengthError):
        PrivateKey.from_hex("0x" + "01" * 33)
    with pytest.raises(InvalidSecretValueError):
        PrivateKey.from_hex(b"\x00" * 32)


def test_from_private_key_is_deprecated():
    with pytest.warns(DeprecationWarning):
        key = PrivateKey.from_private_key(HARDHAT_KEY_0)
    assert key == PrivateKey.from_hex(HARDHAT_KEY_0)
    with pytest.warns(DeprecationWarning), pytest.raises(ValidationError):
        PrivateKey.from_private_key(b"\x01" * 32)


def test_public_key_of_one_is_generator():
    key = PrivateKey.from_hex((1).to_bytes(32, "big"))
    pub = key.to_public_key()
    assert pub.to_hex() == GENERATOR_COMPRESSED
    assert key.to_hex() == "0x7e5f4552091a69125d5dfcb7b8c2659029395bdf"
    uncompressed = key.to_public_key(compressed=False)
    assert len(uncompressed.point) == 65
    assert uncompressed == pub


def test_public_key_encodings():
    pub = PrivateKey.from_hex(HARDHAT_KEY_0).to_public_key()
    assert PublicKey.from_hex(pub.to_hex()) == pub
    assert PublicKey.from_base64(pub.to_base64()) == pub
    assert PublicKey.from_private_key_hex(HARDHAT_KEY_0) == pub
    assert pub.to_address().to_hex() == HARDHAT_ADDRESS_0
    with pytest.raises(ValidationError):
        PublicKey.from_base64("not base64!")


def test_address_views_agree():
    key = PrivateKey.from_hex(HARDHAT_KEY_0)
    address = key.to_address()
    hrp, data = decode_bech32(key.to_bech32())
    assert hrp == "inj"
    assert data == bytes.fromhex(key.to_hex()[2:]) == address.to_bytes()
    assert key.to_bech32("injvaloper").startswith("injvaloper1")


def test_repr_hides_secret():
    key = PrivateKey.from_hex(HARDHAT_KEY_0)
    assert HARDHAT_KEY_0[2:10] not in repr(key)
    assert HARDHAT_ADDRESS_0 in repr(key)
