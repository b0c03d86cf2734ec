from dataclasses import FrozenInstanceError

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from cryptoh.errors import KeyGenerationError
from cryptoh.keypair import (
    KeyPair,
    PRIVATE_KEY_HEADER,
    PUBLIC_KEY_HEADER,
    RSA_KEY_SIZE,
    generate_key_pair,
)


def test_pem_headers(key_pair):
    assert key_pair.public_key.startswith(PUBLIC_KEY_HEADER)
    assert key_pair.private_key.startswith(PRIVATE_KEY_HEADER)
    assert "-----END PUBLIC KEY-----" in key_pair.public_key
    assert "-----END PRIVATE KEY-----" in key_pair.private_key


def test_keys_are_2048_bit_rsa_and_match(key_pair):
    private_key = serialization.load_pem_private_key(key_pair.private_key.encode(), password=None)
    public_key = serialization.load_pem_public_key(key_pair.public_key.encode())

    assert isinstance(private_key, rsa.RSAPrivateKey)
    assert isinstance(public_key, rsa.RSAPublicKey)
    assert private_key.key_size == RSA_KEY_SIZE == 2048
    assert private_key.public_key().public_numbers() == public_key.public_numbers()


def test_pairs_are_fresh(key_pair, other_key_pair):
    assert key_pair.public_key != other_key_pair.public_key
    assert key_pair.private_key != other_key_pair.private_key


def test_key_pair_is_immutable(key_pair):
    with pytest.raises(FrozenInstanceError):
        key_pair.public_key = "x"


def test_repr_hides_private_key(key_pair):
    assert "PRIVATE" not in repr(key_pair)
    assert isinstance(key_pair, KeyPair)


def test_library_failure_is_wrapped(monkeypatch):
    def fail(**kwargs):
        raise ValueError("entropy unavailable")

    monkeypatch.setattr(rsa, "generate_private_key", fail)

    with pytest.raises(KeyGenerationError, match="entropy unavailable"):
        generate_key_pair()
