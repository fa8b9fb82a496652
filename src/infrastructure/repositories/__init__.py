"""
Repositories Package - Infrastructure Layer

This package contains concrete implementations of the repository
interfaces defined in the domain layer. These implementations
handle the details of data persistence.
"""

from .device_repository import DeviceRepository
from .task_repository import TaskRepository

__all__ = ["DeviceRepository", "TaskRepository"]
