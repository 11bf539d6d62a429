"""
Salted PBKDF2 strategy for application secrets.
"""

import hmac
import os
from typing import Optional, Union

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from ..errors import InvalidArgumentError
from ..util.encoding import to_bytes, url_safe_decode, url_safe_encode
from .base import SecretStrategy, SecretUsage

ALGORITHM = "pbkdf2_sha256"
DEFAULT_ITERATIONS = 600000
MAX_ITERATIONS = 10 * DEFAULT_ITERATIONS
SALT_LENGTH = 16
HASH_LENGTH = 32


class Pbkdf2Hash(SecretStrategy):
    """
    Stores ``pbkdf2_sha256$<iterations>$<salt>$<hash>`` with a random salt.

    Tokens are looked up by their stored value, which needs a deterministic
    transform, so this strategy refuses to store tokens. Application secrets
    are checked against an already loaded record and are fine.
    """

    name = "pbkdf2_hash"

    def __init__(self, iterations: int = DEFAULT_ITERATIONS):
        if not _is_valid_iterations(iterations):
            raise InvalidArgumentError(
                f"iterations must be an integer between 1 and {MAX_ITERATIONS}",
                argument="iterations",
                value=iterations
            )
        self.iterations = iterations

    def transform_secret(self, plain_secret: str) -> str:
        salt = os.urandom(SALT_LENGTH)
        derived = self._derive(plain_secret, salt, self.iterations)
        return "$".join([
            ALGORITHM,
            str(self.iterations),
            url_safe_encode(salt),
            url_safe_encode(derived),
        ])

    def validate_for(self, usage: Union[SecretUsage, str]) -> bool:
        if self._coerce_usage(usage) is SecretUsage.TOKEN:
            raise InvalidArgumentError(
                f"{self} can only be used for storing application secrets.",
                argument="usage",
                value=usage
            )
        return True

    def secret_matches(self, input: Optional[str], stored_value: Optional[str]) -> bool:
        if not input or not stored_value:
            return False

        if isinstance(stored_value, bytes):
            stored_value = stored_value.decode("ascii", "ignore")
        elif not isinstance(stored_value, str):
            return False

        parts = stored_value.split("$")
        if len(parts) != 4 or parts[0] != ALGORITHM or not parts[1].isdecimal():
            return False

        iterations = int(parts[1])
        salt = url_safe_decode(parts[2])
        expected = url_safe_decode(parts[3])
        if not _is_valid_iterations(iterations) or not salt or not expected:
            return False

        try:
            derived = self._derive(input, salt, iterations)
        except (OverflowError, ValueError):
            return False
        return hmac.compare_digest(derived, expected)

    @staticmethod
    def _derive(plain_secret: str, salt: bytes, iterations: int) -> bytes:
        kdf = PBKDF2HMAC(
            algorithm=hashes.SHA256(),
            length=HASH_LENGTH,
            salt=salt,
            iterations=iterations,
        )
        return kdf.derive(to_bytes(plain_secret))

    def __repr__(self) -> str:
        return f"Pbkdf2Hash(iterations={self.iterations})"


def _is_valid_iterations(iterations: object) -> bool:
    if isinstance(iterations, bool) or not isinstance(iterations, int):
        return False
    return 1 <= iterations <= MAX_ITERATIONS
