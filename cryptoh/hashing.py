"""
cryptoh Hashing

Hex digests of text and constant-time verification of a text
against a previously computed digest.

Example:
    >>> salt = generate_salt(16)
    >>> stored = digest(password + salt, HashAlgorithm.SHA512)
    >>> verify_hash(attempt + salt, stored, HashAlgorithm.SHA512)
    False
"""

import logging
from typing import Union

from cryptography.hazmat.primitives import hashes

from .algorithms import HashAlgorithm, hash_for
from .primitives import constant_time_compare, decode_hex
from .validation import validate_input


logger = logging.getLogger(__name__)


def digest(
    text: str,
    algorithm: Union[HashAlgorithm, str] = HashAlgorithm.SHA512,
) -> str:
    """
    Compute the hex digest of text.
    
    The text is hashed as UTF-8. Same text and algorithm always
    give the same digest.
    
    Args:
        text: Input text (non-empty, not only whitespace)
        algorithm: Digest algorithm (default SHA512)
        
    Returns:
        str: Lowercase hex digest
        
    Raises:
        InvalidInputError: If text is not a non-blank string
        UnsupportedAlgorithmError: If algorithm is not supported
    """
    validate_input(text, "text")
    
    hasher = hashes.Hash(hash_for(algorithm))
    hasher.update(text.encode("utf-8"))
    return hasher.finalize().hex()


def verify_hash(
    text: str,
    hash_value: str,
    algorithm: Union[HashAlgorithm, str] = HashAlgorithm.SHA512,
) -> bool:
    """
    Check whether text hashes to hash_value.
    
    The digest of text is recomputed and both digests are decoded
    from hex before a constant-time comparison. A hash_value that is
    not valid hex, or decodes to the wrong length, is simply not a
    match.
    
    Args:
        text: Input text to check
        hash_value: Previously computed hex digest
        algorithm: Digest algorithm hash_value was made with
        
    Returns:
        bool: True only if the digests are byte-for-byte equal
        
    Raises:
        InvalidInputError: If text or hash_value is not a non-blank string
        UnsupportedAlgorithmError: If algorithm is not supported
    """
    validate_input(text, "text")
    validate_input(hash_value, "hash")
    
    expected = bytes.fromhex(digest(text, algorithm))
    supplied = decode_hex(hash_value)
    
    if supplied is None:
        logger.debug("Hash verification: supplied hash is not valid hex")
        return False
    
    return constant_time_compare(expected, supplied)
