"""
cryptoh Primitives

Low-level helpers shared by the hashing, salt and signing modules.

SECURITY NOTES:
- All randomness from os.urandom (kernel CSPRNG)
- Digest comparisons use constant-time operations
- Hex decoding never raises; malformed input is reported as None
"""

import hmac
import os
from typing import Optional


def random_bytes(length: int) -> bytes:
    """Draw length bytes from the kernel CSPRNG; callers check length."""
    return os.urandom(length)


def decode_hex(value: str) -> Optional[bytes]:
    """
    Decode a hex string, returning None if it is malformed.
    
    Odd length, non-hex characters and embedded whitespace all
    count as malformed. Upper and lower case digits are accepted.
    
    Args:
        value: Hex-encoded string
        
    Returns:
        Optional[bytes]: Decoded bytes, or None
    """
    if len(value) % 2 != 0:
        return None
    
    try:
        decoded = bytes.fromhex(value)
    except ValueError:
        return None
    
    # fromhex() skips whitespace between byte pairs
    if len(decoded) * 2 != len(value):
        return None
    
    return decoded


def constant_time_compare(a: bytes, b: bytes) -> bool:
    """
    Compare two byte strings in constant time.
    
    A length mismatch returns False immediately; the length of a
    digest is public for a known algorithm. Equal-length inputs are
    compared with hmac.compare_digest(), which inspects every byte
    pair regardless of where the first difference is.
    
    Args:
        a: First byte string
        b: Second byte string
        
    Returns:
        bool: True if equal, False otherwise
    """
    if len(a) != len(b):
        return False
    return hmac.compare_digest(a, b)
