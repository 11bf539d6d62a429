# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Encrypted strategy: reversible, keyed storage of secrets using Fernet.
"""

import base64
import logging
from typing import Any, Optional, Sequence, Union

from cryptography.fernet import Fernet, InvalidToken, MultiFernet
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from ..errors import ConfigurationError, InvalidArgumentError
from ..util.encoding import secure_compare, to_bytes
from .base import SecretStrategy

logger = logging.getLogger(__name__)

KeyType = Union[str, bytes]


class Encrypted(SecretStrategy):
    """
    Stores secrets as Fernet tokens.

    The first key encrypts; every key is tried when decrypting, so a new key
    can be put in front while values written under older keys stay readable.
    Fernet tokens embed a random IV and a timestamp, so ``transform_secret``
    yields a different value on every call. Matching therefore decrypts the
    stored value and compares plaintexts instead of comparing ciphertexts.
    """

    name = "encrypted"

    def __init__(self, keys: Union[KeyType, Sequence[KeyType]]):
        if isinstance(keys, (str, bytes)):
            keys = [keys]
        if not keys:
            raise ConfigurationError(
                "Encrypted strategy requires at least one key",
                setting="secret_keys"
            )

        try:
            fernets = [Fernet(to_bytes(key)) for key in keys]
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid encryption key: {e}",
                setting="secret_keys",
                cause=e
            ) from e

        self._fernet = MultiFernet(fernets)
        self._key_count = len(fernets)

    @classmethod
    def from_passphrase(cls, passphrase: str, salt: KeyType,
                        iterations: int = 100000) -> "Encrypted":
        """Derive the key from a passphrase with PBKDF2-HMAC-SHA256."""
        kdf = PBKDF2HMAC(
            algorithm=hashes.SHA256(),
            length=32,
            salt=to_bytes(salt),
            iterations=iterations,
        )
        key = base64.urlsafe_b64encode(kdf.derive(to_bytes(passphrase)))
        return cls(key)

    @staticmethod
    def generate_key() -> str:
        """Generate a fresh key suitable for this strategy."""
        return Fernet.generate_key().decode('ascii')

    def transform_secret(self, plain_secret: str) -> str:
        return self._fernet.encrypt(to_bytes(plain_secret)).decode('ascii')

    def restore_secret(self, resource: Any, attribute: str) -> str:
        stored_value = getattr(resource, attribute)
        plain_secret = self._decrypt(stored_value)
        if plain_secret is None:
            raise InvalidArgumentError(
                f"Stored value of '{attribute}' can not be decrypted",
                argument=attribute
            )
        return plain_secret

    def allows_restoring_secrets(self) -> bool:
        return True

    def secret_matches(self, input: Optional[str], stored_value: Optional[str]) -> bool:
        if not input or not stored_value:
            return False

        plain_secret = self._decrypt(stored_value)
        if plain_secret is None:
            return False

        return secure_compare(plain_secret, input)

    def _decrypt(self, stored_value: Optional[str]) -> Optional[str]:
        if not stored_value:
            return None

        try:
            return self._fernet.decrypt(to_bytes(stored_value)).decode('utf-8')
        except (InvalidToken, UnicodeDecodeError):
            logger.debug("Stored value could not be decrypted with any configured key")
            return None

    def __repr__(self) -> str:
        return f"Encrypted(keys={self._key_count})"
