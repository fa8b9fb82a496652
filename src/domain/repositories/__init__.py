"""
Repositories Package

This package contains interfaces defining repository contracts
for data access operations. Specific implementations are provided
by the infrastructure layer.
"""

from .device_repository import IDeviceRepository
from .task_repository import ITaskRepository

__all__ = ["IDeviceRepository", "ITaskRepository"]
