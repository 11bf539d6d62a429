"""
SHA-256 strategy: one-way digest of the secret.
"""

import hashlib

from ..util.encoding import to_bytes
from .base import SecretStrategy


class Sha256Hash(SecretStrategy):
    """
    Stores the lowercase hex SHA-256 digest of the secret.

    Stored digests outlive the process, so the digest format is fixed:
    changing it would orphan every secret already stored.
    """

    name = "sha256_hash"

    def transform_secret(self, plain_secret: str) -> str:
        return hashlib.sha256(to_bytes(plain_secret)).hexdigest()
