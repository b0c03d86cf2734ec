"""
cryptoh Digital Signatures

RSA signatures over UTF-8 text, hex-encoded.

Signatures use RSASSA-PKCS1-v1_5 with the requested digest, so the
same data, key and algorithm always give the same signature.

SECURITY NOTES:
- A malformed or tampered signature is a mismatch (False), never
  an exception
- A key that cannot be parsed is a caller error (InvalidKeyError)
- Only RSA keys are accepted
"""

import logging
from typing import Union

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from .algorithms import HashAlgorithm, hash_for
from .errors import InvalidKeyError
from .primitives import decode_hex
from .validation import validate_input


logger = logging.getLogger(__name__)


def _load_private_key(pem: str) -> rsa.RSAPrivateKey:
    """Load an unencrypted PEM private key, RSA only."""
    try:
        key = serialization.load_pem_private_key(pem.encode("utf-8"), password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise InvalidKeyError(f"Invalid private key: {e}") from e
    
    if not isinstance(key, rsa.RSAPrivateKey):
        raise InvalidKeyError(
            f"Unsupported private key type: {type(key).__name__} (expected RSA)"
        )
    
    return key


def _load_public_key(pem: str) -> rsa.RSAPublicKey:
    """
    Load a PEM public key, RSA only.
    
    A PEM private key is also accepted; its public half is used.
    """
    data = pem.encode("utf-8")
    
    try:
        key = serialization.load_pem_public_key(data)
    except (ValueError, UnsupportedAlgorithm) as public_error:
        try:
            key = serialization.load_pem_private_key(data, password=None).public_key()
        except (ValueError, TypeError, UnsupportedAlgorithm):
            raise InvalidKeyError(f"Invalid public key: {public_error}") from public_error
    
    if not isinstance(key, rsa.RSAPublicKey):
        raise InvalidKeyError(
            f"Unsupported public key type: {type(key).__name__} (expected RSA)"
        )
    
    return key


def sign(
    data: str,
    private_key: str,
    algorithm: Union[HashAlgorithm, str] = HashAlgorithm.SHA256,
) -> str:
    """
    Sign data with a PEM private key.
    
    Args:
        data: Text to sign (hashed as UTF-8)
        private_key: PEM private key ("BEGIN PRIVATE KEY")
        algorithm: Digest algorithm (default SHA256)
        
    Returns:
        str: Lowercase hex signature
        
    Raises:
        InvalidInputError: If data or private_key is not a non-blank string
        UnsupportedAlgorithmError: If algorithm is not supported
        InvalidKeyError: If private_key is not a usable RSA private key
    """
    validate_input(data, "data")
    validate_input(private_key, "privateKey")
    
    hash_algorithm = hash_for(algorithm)
    key = _load_private_key(private_key)
    
    signature = key.sign(data.encode("utf-8"), padding.PKCS1v15(), hash_algorithm)
    return signature.hex()


def verify_signature(
    data: str,
    signature: str,
    public_key: str,
    algorithm: Union[HashAlgorithm, str] = HashAlgorithm.SHA256,
) -> bool:
    """
    Verify a hex signature over data.
    
    Args:
        data: Text that was signed
        signature: Hex signature produced by sign()
        public_key: PEM public key matching the signing key
        algorithm: Digest algorithm the signature was made with
        
    Returns:
        bool: True if the signature is valid for data under public_key
        
    Raises:
        InvalidInputError: If any string argument is not a non-blank string
        UnsupportedAlgorithmError: If algorithm is not supported
        InvalidKeyError: If public_key is not a usable RSA key
    """
    validate_input(data, "data")
    validate_input(signature, "signature")
    validate_input(public_key, "publicKey")
    
    hash_algorithm = hash_for(algorithm)
    key = _load_public_key(public_key)
    
    signature_bytes = decode_hex(signature)
    if signature_bytes is None:
        logger.debug("Signature verification: signature is not valid hex")
        return False
    
    try:
        key.verify(signature_bytes, data.encode("utf-8"), padding.PKCS1v15(), hash_algorithm)
    except InvalidSignature:
        logger.debug("Signature verification: signature does not match")
        return False
    
    return True
