"""
Configuration module for authkeeper.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from ..errors import ConfigurationError
from ..secret_storing import Encrypted, Plain, SecretStrategy, build_strategy
from ..util.config import (
    DEFAULT_ENV_PREFIX, get_bool_config, get_config_value, get_int_config,
    get_list_config
)
from .models import ACCESS_GRANT_SCHEMA, ACCESS_TOKEN_SCHEMA, AttributeModel
from .validations import DEFAULT_TOKEN_REUSE_LIMIT, ConfigValidator


@dataclass
class Configuration:
    """
    Settings read by the authorization server.

    Populated once at startup, validated once with ``validate()``, and
    treated as read-only afterwards.
    """
    reuse_access_token: bool = False
    token_reuse_limit: int = DEFAULT_TOKEN_REUSE_LIMIT
    token_secret_strategy: SecretStrategy = field(default_factory=Plain)
    application_secret_strategy: SecretStrategy = field(default_factory=Plain)
    custom_access_token_attributes: List[str] = field(default_factory=list)
    access_token_model: AttributeModel = ACCESS_TOKEN_SCHEMA
    access_grant_model: AttributeModel = ACCESS_GRANT_SCHEMA

    def __post_init__(self):
        self.custom_access_token_attributes = [
            str(attribute) for attribute in self.custom_access_token_attributes
        ]

    @classmethod
    def from_env(cls, prefix: str = DEFAULT_ENV_PREFIX,
                 environ: Optional[Mapping[str, str]] = None,
                 **overrides: Any) -> "Configuration":
        """
        Create configuration from environment variables.

        Keyword arguments override whatever the environment supplies. The
        result is not validated; call ``validate()`` before serving.
        """
        settings = {
            "reuse_access_token": get_bool_config(
                "reuse_access_token", False, prefix, environ),
            "token_reuse_limit": get_int_config(
                "token_reuse_limit", DEFAULT_TOKEN_REUSE_LIMIT, prefix, environ),
            "custom_access_token_attributes": get_list_config(
                "custom_access_token_attributes", None, prefix, environ),
        }

        keys = get_list_config("secret_keys", None, prefix, environ)
        for setting in ("token_secret_strategy", "application_secret_strategy"):
            if setting in overrides:
                continue
            name = get_config_value(setting, Plain.name, None, prefix, environ)
            settings[setting] = _strategy_from_setting(setting, name, keys)

        settings.update(overrides)
        return cls(**settings)

    def validate(self, logger: Optional[logging.Logger] = None) -> List[str]:
        """Validate and repair this configuration; return the warnings emitted."""
        return ConfigValidator(logger).validate(self)


def _strategy_from_setting(setting: str, name: str, keys: List[str]) -> SecretStrategy:
    if name.strip().lower() == Encrypted.name:
        if not keys:
            raise ConfigurationError(
                f"{setting} is '{Encrypted.name}' but no secret_keys are configured",
                setting="secret_keys"
            )
        return build_strategy(name, keys=keys)

    return build_strategy(name)
