"""
Domain Entities Package

This package contains the core domain entities and business logic.
"""

from .device import Device
from .errors import (
    DocumentNotFoundError,
    DomainError,
    PersistenceError,
    ResourceNotFoundError,
    TaskOperationError,
    TaskValidationError,
)
from .task import TASK_REQUIRED_FIELDS, Task

__all__ = [
    "Device",
    "Task",
    "TASK_REQUIRED_FIELDS",
    "DocumentNotFoundError",
    "DomainError",
    "PersistenceError",
    "ResourceNotFoundError",
    "TaskOperationError",
    "TaskValidationError",
]
