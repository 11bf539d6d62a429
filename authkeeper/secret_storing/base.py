# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Secret strategy contract.

A secret strategy decides how a plaintext secret (an access token, a client
secret) is turned into the value that gets stored, whether that value can be
turned back into the plaintext, and how a presented secret is checked against
a stored value.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Optional, Union

from ..errors import InvalidArgumentError, UnsupportedOperationError
from ..util.encoding import secure_compare


class SecretUsage(str, Enum):
    """What a strategy is asked to store."""
    TOKEN = "token"
    APPLICATION = "application"

    def __str__(self) -> str:
        return self.value


class SecretStrategy(ABC):
    """
    Base class for secret strategies.

    Strategies hold no mutable state. The same instance may be shared by any
    number of threads.
    """

    name: str = "secret_strategy"

    @abstractmethod
    def transform_secret(self, plain_secret: str) -> str:
        """Return the storable representation of ``plain_secret``."""

    def restore_secret(self, resource: Any, attribute: str) -> str:
        """
        Return the plaintext of ``resource.<attribute>``.

        Irreversible strategies raise ``UnsupportedOperationError``; check
        ``allows_restoring_secrets()`` first.
        """
        raise UnsupportedOperationError(
            f"{self} does not support restoring secrets",
            operation="restore_secret"
        )

    def store_secret(self, resource: Any, attribute: str, plain_secret: str) -> str:
        """Transform ``plain_secret`` and assign it to ``resource.<attribute>``."""
        stored_value = self.transform_secret(plain_secret)
        setattr(resource, attribute, stored_value)
        return stored_value

    def allows_restoring_secrets(self) -> bool:
        return False

    def validate_for(self, usage: Union[SecretUsage, str]) -> bool:
        """
        Check this strategy may be used to store secrets of ``usage``.

        Returns True, or raises ``InvalidArgumentError`` naming the usage.
        """
        self._coerce_usage(usage)
        return True

    def secret_matches(self, input: Optional[str], stored_value: Optional[str]) -> bool:
        """
        Securely compare ``input`` against ``stored_value``.

        Nothing to compare is never a match.
        """
        if not input or not stored_value:
            return False

        return secure_compare(self.transform_secret(input), stored_value)

    def _coerce_usage(self, usage: Union[SecretUsage, str]) -> SecretUsage:
        try:
            return SecretUsage(usage)
        except ValueError:
            raise InvalidArgumentError(
                f"{self} can not be used for {usage}.",
                argument="usage",
                value=usage
            ) from None

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
