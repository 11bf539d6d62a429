# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Startup validation of a populated configuration.

Tuning mistakes (reuse with an irreversible strategy, an out-of-range reuse
limit, unknown custom attributes) are corrected in place and reported as
warnings. A strategy used for something it refuses to store has no safe
substitute and raises ``InvalidArgumentError``.
"""

import logging
from typing import TYPE_CHECKING, Callable, List, Optional

from ..secret_storing import SecretUsage

if TYPE_CHECKING:
    from .config import Configuration

LOG_TAG = "[AUTHKEEPER]"
DEFAULT_TOKEN_REUSE_LIMIT = 100


class ConfigValidator:
    """
    Runs the configuration checks in a fixed order.

    Every warning goes to the injected logger's ``warning`` method, prefixed
    with ``LOG_TAG``. Running the validator again on its own output changes
    nothing and warns about nothing.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    @property
    def checks(self) -> List[Callable[["Configuration"], List[str]]]:
        return [
            self.validate_reuse_access_token_value,
            self.validate_token_reuse_limit,
            self.validate_secret_strategies,
            self.validate_custom_access_token_attributes,
        ]

    def validate(self, config: "Configuration") -> List[str]:
        """
        Validate ``config`` in place.

        Returns:
            The warning messages emitted, in order

        Raises:
            InvalidArgumentError: a secret strategy rejects its usage
        """
        warnings: List[str] = []
        for check in self.checks:
            for message in check(config):
                self.logger.warning(message)
                warnings.append(message)
        return warnings

    def validate_reuse_access_token_value(self, config: "Configuration") -> List[str]:
        """Disable token reuse when the token strategy cannot restore tokens."""
        strategy = config.token_secret_strategy
        if not config.reuse_access_token or strategy.allows_restoring_secrets():
            return []

        config.reuse_access_token = False
        return [
            f"{LOG_TAG} You have configured both reuse_access_token "
            f"AND '{strategy}' strategy which cannot restore tokens. "
            f"This combination is unsupported. reuse_access_token will be disabled"
        ]

    def validate_token_reuse_limit(self, config: "Configuration") -> List[str]:
        """Reset an out-of-range token_reuse_limit; only relevant with reuse on."""
        if not config.reuse_access_token or _is_valid_reuse_limit(config.token_reuse_limit):
            return []

        invalid_limit = config.token_reuse_limit
        config.token_reuse_limit = DEFAULT_TOKEN_REUSE_LIMIT
        return [
            f"{LOG_TAG} You have configured an invalid value ({invalid_limit!r}) "
            f"for token_reuse_limit option. "
            f"It will be set to default {DEFAULT_TOKEN_REUSE_LIMIT}"
        ]

    def validate_secret_strategies(self, config: "Configuration") -> List[str]:
        """Let each strategy refuse the usage it is configured for."""
        config.token_secret_strategy.validate_for(SecretUsage.TOKEN)
        config.application_secret_strategy.validate_for(SecretUsage.APPLICATION)
        return []

    def validate_custom_access_token_attributes(self, config: "Configuration") -> List[str]:
        """Drop custom attributes missing from either the token or grant model."""
        attributes = config.custom_access_token_attributes
        if not attributes:
            return []

        messages = []
        unrecognized = set()
        models = [config.access_token_model, config.access_grant_model]
        for attribute in dict.fromkeys(attributes):
            for model in models:
                if model.has_attribute(attribute):
                    continue

                unrecognized.add(attribute)
                messages.append(
                    f"{LOG_TAG} {model} does not respond to custom attribute "
                    f"'{attribute}'. This custom attribute will be ignored."
                )

        if unrecognized:
            config.custom_access_token_attributes = [
                attribute for attribute in attributes if attribute not in unrecognized
            ]
        return messages


def _is_valid_reuse_limit(limit: object) -> bool:
    if isinstance(limit, bool) or not isinstance(limit, int):
        return False
    return 0 < limit <= 100


def validate_configuration(config: "Configuration",
                           logger: Optional[logging.Logger] = None) -> List[str]:
    """Validate ``config`` with a ``ConfigValidator``; see ``ConfigValidator.validate``."""
    return ConfigValidator(logger).validate(config)
