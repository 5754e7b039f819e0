# eshop/common/__init__.py
"""
Shared utilities, constants, errors and the logger.
"""

from eshop.common.logger import get_logger, log_info, log_error, log_warning, log_debug
from eshop.common.constants import TypeMsg
from eshop.common.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    AuthenticationError,
    PermissionDeniedError,
)

__all__ = [
    "get_logger",
    "log_info",
    "log_error",
    "log_warning",
    "log_debug",
    "TypeMsg",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "AuthenticationError",
    "PermissionDeniedError",
]
