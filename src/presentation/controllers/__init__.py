"""
Controllers Package - Presentation Layer

This package contains the resource handlers the router dispatches to.
Controllers run application use cases and map their results and errors
to HTTP responses.
"""

from .devices_controller import DevicesController
from .tasks_controller import TasksController

__all__ = ["DevicesController", "TasksController"]
