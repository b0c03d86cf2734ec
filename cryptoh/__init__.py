"""
cryptoh - Cryptography Helpers

A small façade over well-established primitives from the
cryptography library:
- hashing    : hex digests and constant-time hash verification
- randomness : CSPRNG salts
- keypair    : 2048-bit RSA key pairs in PEM
- signing    : RSA signatures and verification

Every operation is stateless and safe to call from any thread.

Example:
    >>> import cryptoh
    >>> salt = cryptoh.generate_salt(16)
    >>> stored = cryptoh.digest("My$ecureP@ssword123" + salt)
    >>> cryptoh.verify_hash("My$ecureP@ssword123" + salt, stored)
    True
"""

__version__ = "1.3.0"
__author__ = "cryptoh contributors"

from .algorithms import (
    HashAlgorithm,
    ALGORITHMS,
    DIGEST_SIZES,
)

from .errors import (
    CryptohError,
    InvalidInputError,
    UnsupportedAlgorithmError,
    InvalidLengthError,
    InvalidKeyError,
    KeyGenerationError,
)

from .hashing import (
    digest,
    verify_hash,
)

from .randomness import (
    generate_salt,
)

from .keypair import (
    KeyPair,
    generate_key_pair,
)

from .signing import (
    sign,
    verify_signature,
)

__all__ = [
    # Algorithms
    'HashAlgorithm',
    'ALGORITHMS',
    'DIGEST_SIZES',
    # Errors
    'CryptohError',
    'InvalidInputError',
    'UnsupportedAlgorithmError',
    'InvalidLengthError',
    'InvalidKeyError',
    'KeyGenerationError',
    # Hashing
    'digest',
    'verify_hash',
    # Random
    'generate_salt',
    # Key pairs
    'KeyPair',
    'generate_key_pair',
    # Signatures
    'sign',
    'verify_signature',
]
