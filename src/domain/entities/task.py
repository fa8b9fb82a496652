"""
Domain Entities - Task

A task records an observation or job against a device: how critical it is,
which device it targets, when it was recorded and what state it is in.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

# Wire names of the fields a client must supply, in validation order.
TASK_REQUIRED_FIELDS: Tuple[str, ...] = (
    "criticality",
    "target",
    "recordTime",
    "description",
    "state",
)


@dataclass
class Task:
    """Represents a task attached to a device."""

    criticality: str
    target: str
    record_time: datetime
    description: str
    state: str
    id: Optional[str] = None

    def replace_with(self, other: "Task") -> "Task":
        """Return ``other`` carrying this task's identity."""
        return Task(
            id=self.id,
            criticality=other.criticality,
            target=other.target,
            record_time=other.record_time,
            description=other.description,
            state=other.state,
        )
