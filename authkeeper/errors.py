# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Error types and error codes for authkeeper.

Every error carries an ``ErrorCode`` and also subclasses the closest builtin
exception, so callers may catch either ``AuthKeeperError`` or the plain
Python type (``NotImplementedError``, ``ValueError``).
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    """Error codes used across authkeeper."""
    UNSUPPORTED_OPERATION = "unsupported_operation"
    INVALID_ARGUMENT = "invalid_argument"
    CONFIGURATION_ERROR = "configuration_error"
    INTERNAL_ERROR = "internal_error"

    def __str__(self) -> str:
        return self.value


class AuthKeeperError(Exception):
    """Base exception for all authkeeper errors."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            'error': self.error_code.value,
            'message': self.message,
            'details': self.details
        }

        if self.cause:
            result['cause'] = str(self.cause)

        return result

    def __str__(self) -> str:
        return self.message


class UnsupportedOperationError(AuthKeeperError, NotImplementedError):
    """Raised when a strategy is asked for something it cannot do."""

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(message, ErrorCode.UNSUPPORTED_OPERATION)
        self.operation = operation

        if operation:
            self.details['operation'] = operation


class InvalidArgumentError(AuthKeeperError, ValueError):
    """Raised for an argument that has no meaningful interpretation."""

    def __init__(
        self,
        message: str,
        argument: Optional[str] = None,
        value: Optional[Any] = None
    ):
        super().__init__(message, ErrorCode.INVALID_ARGUMENT)
        self.argument = argument
        self.value = value

        if argument:
            self.details['argument'] = argument
        if value is not None:
            self.details['value'] = str(value)


class ConfigurationError(AuthKeeperError, ValueError):
    """Raised when configuration cannot be built from the supplied settings."""

    def __init__(self, message: str, setting: Optional[str] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.CONFIGURATION_ERROR, cause=cause)
        self.setting = setting

        if setting:
            self.details['setting'] = setting
