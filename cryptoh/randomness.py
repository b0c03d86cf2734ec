"""
cryptoh Random Values

Hex-encoded salts drawn from the kernel CSPRNG.
"""

from .errors import InvalidLengthError
from .primitives import random_bytes


# 16 bytes (128 bits) is the usual baseline for a salt
DEFAULT_SALT_LENGTH = 16


def generate_salt(length: int = DEFAULT_SALT_LENGTH) -> str:
    """
    Generate a random salt as a lowercase hex string.
    
    Args:
        length: Number of random bytes (the hex string is twice as long)
        
    Returns:
        str: Hex-encoded salt
        
    Raises:
        InvalidLengthError: If length is not a positive integer
    """
    if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
        raise InvalidLengthError("Salt length must be greater than 0.")
    
    return random_bytes(length).hex()
