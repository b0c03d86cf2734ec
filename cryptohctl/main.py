#!/usr/bin/env python3
"""
cryptohctl - cryptoh CLI

Command-line interface over the cryptoh library.

Usage:
    cryptohctl algorithms        - List supported hash algorithms
    cryptohctl hash              - Print the digest of a text
    cryptohctl verify-hash       - Check a text against a digest
    cryptohctl salt              - Generate a random salt
    cryptohctl keypair           - Generate an RSA key pair
    cryptohctl sign              - Sign data with a private key
    cryptohctl verify-signature  - Check a signature with a public key

Exit codes:
    0  success, or verification matched
    1  verification did not match
    2  usage or configuration error
    3  operation error (invalid input, bad key, unreadable file)
"""

import os
import stat
import sys
import logging
import argparse
from pathlib import Path
from typing import List, Optional

from cryptoh import __version__
from cryptoh.algorithms import HashAlgorithm, ALGORITHMS, DIGEST_SIZES
from cryptoh.errors import CryptohError
from cryptoh.hashing import digest, verify_hash
from cryptoh.keypair import generate_key_pair
from cryptoh.randomness import generate_salt
from cryptoh.signing import sign, verify_signature

from .config import Config, DEFAULT_CONFIG_PATH


logger = logging.getLogger("cryptohctl")

# Exit codes
EXIT_OK = 0
EXIT_MISMATCH = 1      # verification ran and did not match
EXIT_USAGE_ERROR = 2   # same code argparse uses
EXIT_CONFIG_ERROR = 2
EXIT_ERROR = 3         # operation could not be evaluated


def _read_text(value: str) -> str:
    """Return value, or standard input when value is '-'."""
    if value == "-":
        return sys.stdin.read()
    return value


def _read_key(path: Path) -> str:
    """Read a PEM key file."""
    return Path(path).read_text(encoding="utf-8")


class CryptohCtl:
    """cryptohctl CLI application."""
    
    def __init__(self, config: Config):
        """Initialize CLI with loaded configuration."""
        self.config = config
    
    def algorithms(self) -> int:
        """List supported hash algorithms."""
        print(f"{'Tag':<8} {'Identifier':<12} {'Digest (bytes)':<16} {'Hex length':<10}")
        print("-" * 50)
        
        for algorithm, identifier in ALGORITHMS.items():
            size = DIGEST_SIZES[algorithm]
            print(f"{algorithm.name:<8} {identifier:<12} {size:<16} {size * 2:<10}")
        
        return EXIT_OK
    
    def hash(self, text: str, algorithm: Optional[str] = None) -> int:
        """Print the digest of text."""
        algorithm = algorithm or self.config.hash.algorithm
        print(digest(_read_text(text), algorithm))
        return EXIT_OK
    
    def verify_hash(self, text: str, hash_value: str, algorithm: Optional[str] = None) -> int:
        """Check text against a digest."""
        algorithm = algorithm or self.config.hash.algorithm
        
        if verify_hash(_read_text(text), hash_value, algorithm):
            print("valid")
            return EXIT_OK
        
        print("invalid")
        return EXIT_MISMATCH
    
    def salt(self, length: Optional[int] = None) -> int:
        """Print a random salt."""
        if length is None:
            length = self.config.salt.length
        print(generate_salt(length))
        return EXIT_OK
    
    def keypair(self, output_dir: Optional[Path] = None, name: str = "cryptoh") -> int:
        """Generate a key pair and print it or write it to output_dir."""
        pair = generate_key_pair()
        
        if output_dir is None:
            print(pair.public_key, end="")
            print(pair.private_key, end="")
            return EXIT_OK
        
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        
        public_path = output_dir / f"{name}_public.pem"
        private_path = output_dir / f"{name}_private.pem"
        
        public_path.write_text(pair.public_key, encoding="ascii")
        
        # Private key file is 0600 before any key material is written,
        # including when an existing file is overwritten
        fd = os.open(private_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, stat.S_IRUSR | stat.S_IWUSR)
        with os.fdopen(fd, "w", encoding="ascii") as f:
            os.fchmod(f.fileno(), stat.S_IRUSR | stat.S_IWUSR)  # 0600
            f.write(pair.private_key)
        
        logger.info(f"Wrote key pair to {output_dir}")
        print(f"Public key:  {public_path}")
        print(f"Private key: {private_path}")
        return EXIT_OK
    
    def sign(self, data: str, key_path: Path, algorithm: Optional[str] = None) -> int:
        """Print the signature of data."""
        algorithm = algorithm or self.config.signing.algorithm
        print(sign(_read_text(data), _read_key(key_path), algorithm))
        return EXIT_OK
    
    def verify_signature(
        self,
        data: str,
        signature: str,
        key_path: Path,
        algorithm: Optional[str] = None,
    ) -> int:
        """Check a signature over data."""
        algorithm = algorithm or self.config.signing.algorithm
        
        if verify_signature(_read_text(data), signature, _read_key(key_path), algorithm):
            print("valid")
            return EXIT_OK
        
        print("invalid")
        return EXIT_MISMATCH


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    algorithm_choices = [a.value for a in HashAlgorithm]
    
    parser = argparse.ArgumentParser(
        prog="cryptohctl",
        description="cryptoh cryptography helper CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  algorithms        List supported hash algorithms
  hash              Print the digest of a text
  verify-hash       Check a text against a digest
  salt              Generate a random salt
  keypair           Generate an RSA key pair
  sign              Sign data with a private key
  verify-signature  Check a signature with a public key

Examples:
  cryptohctl hash "hello"
  cryptohctl hash -a sha256 "hello"
  cryptohctl salt -n 32
  cryptohctl keypair -o keys/ --name dev
  cryptohctl sign payload.json -k keys/dev_private.pem
  echo -n "hello" | cryptohctl sign - -k keys/dev_private.pem
""",
    )
    
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        help="Configuration file path",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"cryptohctl {__version__}",
    )
    
    subparsers = parser.add_subparsers(dest="command", help="Command")
    
    # algorithms command
    subparsers.add_parser("algorithms", help="List supported hash algorithms")
    
    # hash command
    hash_parser = subparsers.add_parser("hash", help="Print the digest of a text")
    hash_parser.add_argument("text", help="Text to hash ('-' reads stdin)")
    hash_parser.add_argument("-a", "--algorithm", choices=algorithm_choices, help="Hash algorithm")
    
    # verify-hash command
    verify_hash_parser = subparsers.add_parser("verify-hash", help="Check a text against a digest")
    verify_hash_parser.add_argument("text", help="Text to check ('-' reads stdin)")
    verify_hash_parser.add_argument("hash", help="Hex digest")
    verify_hash_parser.add_argument("-a", "--algorithm", choices=algorithm_choices, help="Hash algorithm")
    
    # salt command
    salt_parser = subparsers.add_parser("salt", help="Generate a random salt")
    salt_parser.add_argument("-n", "--length", type=int, help="Salt length in bytes")
    
    # keypair command
    keypair_parser = subparsers.add_parser("keypair", help="Generate an RSA key pair")
    keypair_parser.add_argument("-o", "--output-dir", type=Path, help="Write PEM files to this directory")
    keypair_parser.add_argument("--name", default="cryptoh", help="Key file name prefix")
    
    # sign command
    sign_parser = subparsers.add_parser("sign", help="Sign data with a private key")
    sign_parser.add_argument("data", help="Data to sign ('-' reads stdin)")
    sign_parser.add_argument("-k", "--key", type=Path, required=True, help="PEM private key file")
    sign_parser.add_argument("-a", "--algorithm", choices=algorithm_choices, help="Hash algorithm")
    
    # verify-signature command
    verify_sig_parser = subparsers.add_parser("verify-signature", help="Check a signature with a public key")
    verify_sig_parser.add_argument("data", help="Signed data ('-' reads stdin)")
    verify_sig_parser.add_argument("signature", help="Hex signature")
    verify_sig_parser.add_argument("-k", "--key", type=Path, required=True, help="PEM public key file")
    verify_sig_parser.add_argument("-a", "--algorithm", choices=algorithm_choices, help="Hash algorithm")
    
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    
    if not args.command:
        parser.print_help()
        return EXIT_USAGE_ERROR
    
    # Load configuration
    try:
        config = Config.load(args.config)
        config.validate()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, config.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    
    cli = CryptohCtl(config)
    
    # Dispatch command
    try:
        if args.command == "algorithms":
            return cli.algorithms()
        elif args.command == "hash":
            return cli.hash(args.text, args.algorithm)
        elif args.command == "verify-hash":
            return cli.verify_hash(args.text, args.hash, args.algorithm)
        elif args.command == "salt":
            return cli.salt(args.length)
        elif args.command == "keypair":
            return cli.keypair(args.output_dir, args.name)
        elif args.command == "sign":
            return cli.sign(args.data, args.key, args.algorithm)
        elif args.command == "verify-signature":
            return cli.verify_signature(args.data, args.signature, args.key, args.algorithm)
        else:
            parser.print_help()
            return EXIT_USAGE_ERROR
    except (CryptohError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
