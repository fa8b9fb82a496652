"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
"""

from typing import Any, Dict, List, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ResourceNotFoundError(DomainError):
    """Raised when a device or task cannot be found."""

    def __init__(
        self,
        resource: str,
        resource_id: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.resource = resource
        self.resource_id = resource_id
        message = f"{resource.capitalize()} with ID {resource_id} not found"
        super().__init__(message, details)


class TaskValidationError(DomainError):
    """Raised when a task payload misses required fields."""

    def __init__(self, errors: List[str], details: Optional[Dict[str, Any]] = None):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors), details)


class TaskOperationError(DomainError):
    """Raised when a task cannot be cast or stored."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class PersistenceError(DomainError):
    """Raised by the document store when the database rejects an operation."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class DocumentNotFoundError(PersistenceError):
    """Raised by the document store when a write targets a missing document."""
