"""Shared pytest fixtures."""

import pytest

from cryptoh.keypair import generate_key_pair


@pytest.fixture(scope="session")
def key_pair():
    """One RSA key pair for the whole run; generation is slow."""
    return generate_key_pair()


@pytest.fixture(scope="session")
def other_key_pair():
    """A second, unrelated key pair."""
    return generate_key_pair()
