"""
cryptoh Hash Algorithms

The closed set of digest algorithms accepted by hashing and
signing operations, and the table mapping each tag to the
primitive identifier and to the cryptography hash object.
"""

from enum import Enum
from typing import Dict, Union

from cryptography.hazmat.primitives import hashes

from .errors import UnsupportedAlgorithmError


class HashAlgorithm(str, Enum):
    """
    Supported digest algorithms.
    
    Members compare equal to their identifier strings, so
    HashAlgorithm.SHA256 == "sha256".
    """
    
    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA512 = "sha512"
    MD5 = "md5"
    
    def __str__(self) -> str:
        return self.value
    
    @classmethod
    def parse(cls, value: Union["HashAlgorithm", str]) -> "HashAlgorithm":
        """
        Resolve a member or identifier string to a HashAlgorithm.
        
        Identifier strings are matched case-insensitively
        ("SHA512" and "sha512" are the same tag).
        
        Args:
            value: HashAlgorithm member or identifier string
            
        Returns:
            HashAlgorithm: Resolved member
            
        Raises:
            UnsupportedAlgorithmError: If value is not a known tag
        """
        if isinstance(value, cls):
            return value
        
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        
        raise UnsupportedAlgorithmError(f"Unsupported hash algorithm: {value!r}")


# Tag -> primitive identifier string
ALGORITHMS: Dict[HashAlgorithm, str] = {
    algorithm: algorithm.value for algorithm in HashAlgorithm
}

# Native digest length in bytes (hex digests are twice as long)
DIGEST_SIZES: Dict[HashAlgorithm, int] = {
    HashAlgorithm.SHA1: 20,
    HashAlgorithm.SHA256: 32,
    HashAlgorithm.SHA512: 64,
    HashAlgorithm.MD5: 16,
}

_HASH_FACTORIES = {
    HashAlgorithm.SHA1: hashes.SHA1,
    HashAlgorithm.SHA256: hashes.SHA256,
    HashAlgorithm.SHA512: hashes.SHA512,
    HashAlgorithm.MD5: hashes.MD5,
}


def hash_for(algorithm: Union[HashAlgorithm, str]) -> hashes.HashAlgorithm:
    """
    Get a fresh cryptography hash object for an algorithm tag.
    
    Raises:
        UnsupportedAlgorithmError: If algorithm is not a known tag
    """
    return _HASH_FACTORIES[HashAlgorithm.parse(algorithm)]()
