# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Utility package with helpers shared by the secret strategies and the
configuration layer.

This package includes:
- Encoding helpers and the fixed-time secret comparison
- Environment lookup helpers for building configuration
"""

from .encoding import to_bytes, secure_compare, url_safe_encode, url_safe_decode
from .config import (
    DEFAULT_ENV_PREFIX, get_config_value, get_bool_config, get_int_config,
    get_list_config
)

__all__ = [
    # Encoding utilities
    'to_bytes', 'secure_compare', 'url_safe_encode', 'url_safe_decode',

    # Configuration utilities
    'DEFAULT_ENV_PREFIX', 'get_config_value', 'get_bool_config',
    'get_int_config', 'get_list_config',
]
