# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Package secret_storing provides the pluggable strategies used to store and
verify access tokens and application secrets.

Strategies:
- Plain:       stores the secret unchanged (restorable)
- Sha256Hash:  one-way SHA-256 digest
- Encrypted:   Fernet encryption with key rotation (restorable)
- Pbkdf2Hash:  salted PBKDF2 digest, application secrets only
"""

from .base import SecretStrategy, SecretUsage
from .plain import Plain
from .sha256_hash import Sha256Hash
from .encrypted import Encrypted
from .pbkdf2_hash import Pbkdf2Hash
from .registry import available_strategies, build_strategy, register_strategy

__all__ = [
    # Contract
    "SecretStrategy",
    "SecretUsage",

    # Strategies
    "Plain",
    "Sha256Hash",
    "Encrypted",
    "Pbkdf2Hash",

    # Registry
    "available_strategies",
    "build_strategy",
    "register_strategy",
]
