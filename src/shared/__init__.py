"""
Shared module - Cross-cutting concerns / Shared Layer

This module provides shared utilities, constants, and enums that are used
across multiple layers of the application.

Its primary responsibilities include:
- Defining cross-layer constants (environment names, log levels, HTTP
  methods and media types)
- Configuring structured logging
- Resolving Docker style secret files into environment variables

Following Clean Architecture principles:
- Shared module contains only *cross-cutting concerns*
- It must not depend on Infrastructure or Frameworks
"""

from .consts import (
    ANY_MEDIA_TYPE,
    BODY_METHODS,
    JSON_MEDIA_TYPE,
    EnumEnvironment,
    EnumHttpMethod,
    EnumLogLevel,
)
from .logging import (
    bind_request_context,
    clear_request_context,
    configure_logging,
    get_logger,
    update_logging_from_settings,
)

__all__ = [
    "ANY_MEDIA_TYPE",
    "BODY_METHODS",
    "JSON_MEDIA_TYPE",
    "EnumEnvironment",
    "EnumHttpMethod",
    "EnumLogLevel",
    "bind_request_context",
    "clear_request_context",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
