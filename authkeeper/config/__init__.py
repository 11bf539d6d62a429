"""
Configuration object, model schemas and startup validation.
"""

from .models import AttributeModel, ModelSchema, ACCESS_TOKEN_SCHEMA, ACCESS_GRANT_SCHEMA
from .validations import ConfigValidator, LOG_TAG, validate_configuration
from .config import Configuration

__all__ = [
    "Configuration",
    "ConfigValidator",
    "validate_configuration",
    "LOG_TAG",
    "AttributeModel",
    "ModelSchema",
    "ACCESS_TOKEN_SCHEMA",
    "ACCESS_GRANT_SCHEMA",
]
