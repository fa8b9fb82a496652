"""
Use Cases Package - Application Layer

This package contains use cases that implement the business logic
of the application. Use cases orchestrate the flow of data to and from
the entities and implement the business rules of the application.
"""

from .device_use_cases import GetDeviceByIdUseCase, GetDevicesUseCase
from .task_use_cases import (
    CreateTaskUseCase,
    DeleteTaskUseCase,
    GetTaskByIdUseCase,
    GetTasksUseCase,
    UpdateTaskUseCase,
)

__all__ = [
    "GetDevicesUseCase",
    "GetDeviceByIdUseCase",
    "GetTasksUseCase",
    "GetTaskByIdUseCase",
    "CreateTaskUseCase",
    "UpdateTaskUseCase",
    "DeleteTaskUseCase",
]
