"""
Registry mapping strategy names to strategy factories.
"""

from typing import Any, Callable, Dict, List

from ..errors import ConfigurationError
from .base import SecretStrategy
from .encrypted import Encrypted
from .pbkdf2_hash import Pbkdf2Hash
from .plain import Plain
from .sha256_hash import Sha256Hash

StrategyFactory = Callable[..., SecretStrategy]

_STRATEGIES: Dict[str, StrategyFactory] = {
    Plain.name: Plain,
    Sha256Hash.name: Sha256Hash,
    Encrypted.name: Encrypted,
    Pbkdf2Hash.name: Pbkdf2Hash,
}


def register_strategy(name: str, factory: StrategyFactory) -> None:
    """Make a custom strategy available by name."""
    _STRATEGIES[name] = factory


def available_strategies() -> List[str]:
    return sorted(_STRATEGIES)


def build_strategy(name: str, **options: Any) -> SecretStrategy:
    """
    Create the strategy registered under ``name``.

    Args:
        name: Registered strategy name, e.g. ``"sha256_hash"``
        options: Keyword arguments passed to the strategy factory

    Raises:
        ConfigurationError: unknown name, or options the factory rejects
    """
    normalized = name.strip().lower()
    factory = _STRATEGIES.get(normalized)
    if factory is None:
        raise ConfigurationError(
            f"Unknown secret strategy '{name}'. "
            f"Available strategies: {', '.join(available_strategies())}",
            setting="secret_strategy"
        )

    try:
        return factory(**options)
    except TypeError as e:
        raise ConfigurationError(
            f"Invalid options for secret strategy '{normalized}': {e}",
            setting="secret_strategy",
            cause=e
        ) from e
