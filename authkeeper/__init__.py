"""
authkeeper Python Package

Secret storage strategies and startup configuration validation for an
OAuth authorization server.
"""

__version__ = "0.1.0"

from .config import (
    Configuration,
    ConfigValidator,
    ModelSchema,
    validate_configuration,
)
from .errors import (
    AuthKeeperError,
    ConfigurationError,
    InvalidArgumentError,
    UnsupportedOperationError,
)
from .secret_storing import (
    SecretStrategy,
    SecretUsage,
    Plain,
    Sha256Hash,
    Encrypted,
    Pbkdf2Hash,
    build_strategy,
)

__all__ = [
    "Configuration",
    "ConfigValidator",
    "ModelSchema",
    "validate_configuration",
    "AuthKeeperError",
    "ConfigurationError",
    "InvalidArgumentError",
    "UnsupportedOperationError",
    "SecretStrategy",
    "SecretUsage",
    "Plain",
    "Sha256Hash",
    "Encrypted",
    "Pbkdf2Hash",
    "build_strategy",
]
