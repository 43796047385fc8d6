import asyncio

import pytest

from injkeys.crypto.keys import PrivateKey
from injkeys.crypto.signing import (
    ECDSA_STRATEGY,
    WALLET_STRATEGY,
    EcdsaSigningStrategy,
    WalletSigningStrategy,
    get_strategy,
)
from injkeys.exceptions import SigningError
from injkeys.utils.encoding import keccak256

# Account.sign_message example from the eth-account documentation
DOCS_KEY = "0xb25c7db31feed9122727bf0939dc769a96564b2de4c4726d035b36ecf1e5b364"
DOCS_ADDRESS = "0x5ce9454909639d2d17a3f753ce7d93fa0b9ab12e"
DOCS_R = 104389933075820307925104709181714897380569894203213074526835978196648170704563
DOCS_S = 28205917190874851400050446352651915501321657673772411533993420917949420456142
DOCS_SIGNATURE = bytes.fromhex(
    "e6ca9bba58c88611fad66a6ce8f996908195593807c4b38bd528d2cff09d4eb3"
    "3e5bfbbf4d3e39b1a2fd816a7680c19ebebaf3a141b239934ad43cb33fcec8ce"
)

HELLO_SIGNATURE = bytes.fromhex(
    "2a99880c06b5d600a532a98c2b66384c1c76ba0c165b7f233e9541ad33b6007d"
    "3c64279197a569d307dbed301a56ee695c0d82bcb92d67b14eb7617977639d07"
)


def personal_message_hash(text: str) -> bytes:
    data = text.encode("utf-8")
    return keccak256(b"\x19Ethereum Signed Message:\n" + str(len(data)).encode() + data)


@pytest.fixture
def key() -> PrivateKey:
    return PrivateKey.from_hex(b"\x01" * 32)


@pytest.mark.asyncio
async def test_recorded_signature_both_paths():
    key = PrivateKey.from_hex(DOCS_KEY)
    assert key.to_hex() == DOCS_ADDRESS

    digest = personal_message_hash("I♥SF")
    expected = DOCS_R.to_bytes(32, "big") + DOCS_S.to_bytes(32, "big")
    assert expected == DOCS_SIGNATURE

    assert await key.sign_hashed(digest) == DOCS_SIGNATURE
    assert await key.sign_hashed_ecda(digest) == DOCS_SIGNATURE


@pytest.mark.asyncio
async def test_sign_hello_matches_recorded_signature(key):
    assert key.to_public_key().to_hex() == (
        "031b84c5567b126440995d3ed5aaba0565d71e1834604819ff9c17f5e9d5dd078f"
    )
    message = "hello".encode("utf-8")
    first = await key.sign(message)
    second = await key.sign(message)

    assert first == second == HELLO_SIGNATURE
    assert key.to_public_key().verify(first, keccak256(message))
    assert key.to_public_key().verify(first + b"\x1b", keccak256(message))
    assert not key.to_public_key().verify(first + b"\x1b\x00", keccak256(message))
    assert await key.sign_hashed(keccak256(message)) == first


@pytest.mark.asyncio
async def test_wallet_and_ecdsa_paths_agree(key):
    for message in [b"", b"hello", b"\x00" * 100, bytes(range(256))]:
        digest = keccak256(message)
        assert await key.sign(message) == await key.sign_ecda(message)
        assert await key.sign_hashed(digest) == await key.sign_hashed_ecda(digest)
        assert await key.sign_hashed_typed_data(digest) == await key.sign_hashed(digest)


@pytest.mark.asyncio
async def test_signature_lengths(key):
    digest = keccak256(b"payload")
    assert len(await key.sign(b"payload")) == 64
    assert len(await key.sign_ecda(b"payload")) == 64
    assert len(await key.sign_hashed(digest)) == 64
    assert len(await key.sign_hashed_ecda(digest)) == 64
    assert len(await key.sign_hashed_typed_data(digest)) == 64


def test_strategies_sign_digest_directly():
    secret = b"\x01" * 32
    digest = keccak256(b"hello")
    assert WALLET_STRATEGY.sign_digest(secret, digest) == ECDSA_STRATEGY.sign_digest(secret, digest)
    assert WalletSigningStrategy().sign_digest(secret, digest) == EcdsaSigningStrategy().sign_digest(secret, digest)
    assert get_strategy("wallet") is WALLET_STRATEGY
    assert get_strategy("ecdsa") is ECDSA_STRATEGY
    with pytest.raises(ValueError):
        get_strategy("schnorr")


@pytest.mark.asyncio
async def test_malformed_digest_raises_signing_error(key):
    with pytest.raises(SigningError):
        await key.sign_hashed(b"\x00" * 31)
    with pytest.raises(SigningError):
        await key.sign_hashed_ecda(b"\x00" * 33)
    with pytest.raises(SigningError):
        await key.sign_hashed_typed_data(b"")
    with pytest.raises(SigningError):
        await key.sign("hello")


@pytest.mark.asyncio
async def test_concurrent_signing_on_shared_key(key):
    messages = [f"message {i}".encode() for i in range(20)]
    expected = [await key.sign(m) for m in messages]
    results = await asyncio.gather(*(key.sign(m) for m in messages))
    assert list(results) == expected


@pytest.mark.asyncio
async def test_signing_does_not_change_key(key):
    before = key.to_private_key_hex()
    await key.sign(b"hello")
    await key.sign_ecda(b"hello")
    assert key.to_private_key_hex() == before
