"""
Plain strategy: secrets are stored as given.
"""

from typing import Any

from .base import SecretStrategy


class Plain(SecretStrategy):
    """Stores the plaintext unchanged. Restoring is reading the attribute."""

    name = "plain"

    def transform_secret(self, plain_secret: str) -> str:
        return plain_secret

    def restore_secret(self, resource: Any, attribute: str) -> str:
        return getattr(resource, attribute)

    def allows_restoring_secrets(self) -> bool:
        return True
