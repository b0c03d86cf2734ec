"""
cryptoh Exceptions

Every failure the library reports is one of the classes below.
Verification operations never raise for a mismatch; they return
False. An exception from a verify call means the inputs could not
be evaluated at all.
"""


class CryptohError(Exception):
    """Base class for all cryptoh errors."""
    pass


class InvalidInputError(CryptohError, ValueError):
    """A required string parameter was non-string, empty or whitespace."""
    pass


class UnsupportedAlgorithmError(CryptohError, ValueError):
    """The requested hash algorithm is not one of HashAlgorithm."""
    pass


class InvalidLengthError(CryptohError, ValueError):
    """A requested salt length is not a positive integer."""
    pass


class InvalidKeyError(CryptohError):
    """A supplied PEM key cannot be used for the requested operation."""
    pass


class KeyGenerationError(CryptohError):
    """The underlying primitive failed to produce a key pair."""
    pass
