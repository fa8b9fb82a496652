"""
Task DTOs - Application Layer

``TaskWriteDTO`` casts an already validated payload into typed task fields
the way the stored schema expects them: strings trimmed, numbers accepted
for string fields, ``recordTime`` parsed into a UTC datetime.
``TaskResponseDTO`` renders a task as the JSON document returned by the API.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from src.domain.entities.task import Task


class TaskWriteDTO(BaseModel):
    """DTO for the body of task create and replace requests."""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        coerce_numbers_to_str=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "criticality": "high",
                "target": "64b7f3c2a1e4d5f6a7b8c9d0",
                "recordTime": "2023-01-01T00:00:00Z",
                "description": "check valve",
                "state": "open",
            }
        },
    )

    criticality: str = Field(min_length=1, description="How urgent the task is")
    target: str = Field(min_length=1, description="ID of the targeted device")
    record_time: datetime = Field(
        validation_alias=AliasChoices("recordTime", "record_time"),
        description="When the task was recorded",
    )
    description: str = Field(min_length=1, description="What has to be done")
    state: str = Field(min_length=1, description="Workflow state")

    @field_validator("record_time")
    @classmethod
    def _normalize_timezone(cls, value: datetime) -> datetime:
        # BSON dates hold milliseconds
        value = value.replace(microsecond=value.microsecond // 1000 * 1000)
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    def to_entity(self) -> Task:
        return Task(
            criticality=self.criticality,
            target=self.target,
            record_time=self.record_time,
            description=self.description,
            state=self.state,
        )


class TaskResponseDTO(BaseModel):
    """DTO for a task document."""

    id: str = Field(serialization_alias="_id", description="Task ID")
    criticality: str
    target: str
    record_time: datetime = Field(serialization_alias="recordTime")
    description: str
    state: str

    @classmethod
    def from_entity(cls, task: Task) -> "TaskResponseDTO":
        return cls(
            id=task.id or "",
            criticality=task.criticality,
            target=task.target,
            record_time=task.record_time,
            description=task.description,
            state=task.state,
        )

    def to_document(self) -> Dict[str, Any]:
        """Render the task as a JSON document."""
        return self.model_dump(mode="json", by_alias=True)
