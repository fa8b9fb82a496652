"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer.
"""

from .device_dto import DeviceResponseDTO
from .task_dto import TaskResponseDTO, TaskWriteDTO

__all__ = [
    "DeviceResponseDTO",
    "TaskResponseDTO",
    "TaskWriteDTO",
]
