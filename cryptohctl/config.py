"""
cryptohctl Configuration

Handles loading and validation of CLI defaults from a TOML file.
The cryptoh library itself reads no configuration.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, field

import toml

from cryptoh.algorithms import HashAlgorithm
from cryptoh.errors import UnsupportedAlgorithmError
from cryptoh.randomness import DEFAULT_SALT_LENGTH


logger = logging.getLogger(__name__)


# Default configuration path
DEFAULT_CONFIG_PATH = Path("~/.config/cryptoh/config.toml").expanduser()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    """Get a TOML table by name; a missing table is empty."""
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ValueError(f"Invalid [{name}] section: expected a table, got {type(section).__name__}")
    return section


@dataclass
class HashConfig:
    """Hashing defaults."""
    algorithm: str = HashAlgorithm.SHA512.value


@dataclass
class SigningConfig:
    """Signature defaults."""
    algorithm: str = HashAlgorithm.SHA256.value


@dataclass
class SaltConfig:
    """Salt defaults."""
    length: int = DEFAULT_SALT_LENGTH  # bytes


@dataclass
class Config:
    """
    Complete cryptohctl configuration.
    """
    # Sub-configurations
    hash: HashConfig = field(default_factory=HashConfig)
    signing: SigningConfig = field(default_factory=SigningConfig)
    salt: SaltConfig = field(default_factory=SaltConfig)
    
    # Paths
    config_path: Path = field(default_factory=lambda: DEFAULT_CONFIG_PATH)
    
    # Logging
    log_level: str = "WARNING"
    
    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> 'Config':
        """
        Load configuration from file.
        
        A missing file is not an error; defaults are used.
        
        Args:
            config_path: Path to config file (default: ~/.config/cryptoh/config.toml)
            
        Returns:
            Loaded configuration
            
        Raises:
            ValueError: If the file is not valid TOML or has mistyped values
        """
        path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        config = cls()
        config.config_path = path
        
        if not path.exists():
            return config
        
        try:
            data = toml.load(path)
        except toml.TomlDecodeError as e:
            raise ValueError(f"Invalid TOML in {path}: {e}") from e
        
        config._apply_dict(data)
        logger.debug(f"Loaded configuration from {path}")
        return config
    
    def _apply_dict(self, data: Dict[str, Any]) -> None:
        """Apply dictionary data to config."""
        if "log_level" in data:
            self.log_level = str(data["log_level"]).upper()
        
        h = _section(data, "hash")
        if "algorithm" in h:
            self.hash.algorithm = str(h["algorithm"])
        
        s = _section(data, "signing")
        if "algorithm" in s:
            self.signing.algorithm = str(s["algorithm"])
        
        s = _section(data, "salt")
        if "length" in s:
            length = s["length"]
            if isinstance(length, bool) or not isinstance(length, int):
                raise ValueError(f"Invalid salt length: {length!r} (expected an integer)")
            self.salt.length = length
    
    def validate(self) -> None:
        """
        Validate configuration.
        
        Raises:
            ValueError: If configuration is invalid
        """
        for section, algorithm in (("hash", self.hash.algorithm),
                                   ("signing", self.signing.algorithm)):
            try:
                HashAlgorithm.parse(algorithm)
            except UnsupportedAlgorithmError:
                raise ValueError(f"Invalid {section} algorithm: {algorithm}")
        
        if self.salt.length < 1:
            raise ValueError(f"Invalid salt length: {self.salt.length}")
        
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {self.log_level}")
