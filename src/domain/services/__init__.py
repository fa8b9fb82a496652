"""Domain services."""

from .task_validator import validate_task

__all__ = ["validate_task"]
