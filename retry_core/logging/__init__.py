"""
Retry Core Logging Module

Structured logging setup shared by services that embed retry_core.
"""

from .structured import (
    setup_logging,
    get_logger,
    add_service_name,
    service_name_var,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "add_service_name",
    "service_name_var",
]
