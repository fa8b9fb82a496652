"""
Device DTOs - Application Layer

This module defines Data Transfer Objects (DTOs) for device entities.
These DTOs render devices as the JSON documents returned by the API.
"""

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field

from src.domain.entities.device import Device


class DeviceResponseDTO(BaseModel):
    """DTO for a device document."""

    id: str = Field(serialization_alias="_id", description="Device ID")
    name: str = Field(description="Device name")
    year: Optional[Union[int, float]] = Field(
        default=None, description="Year of manufacture"
    )
    type: Optional[str] = Field(default=None, description="Device type")

    model_config = {
        "json_schema_extra": {
            "example": {
                "_id": "64b7f3c2a1e4d5f6a7b8c9d0",
                "name": "Pump 3",
                "year": 2019,
                "type": "centrifugal pump",
            }
        }
    }

    @classmethod
    def from_entity(cls, device: Device) -> "DeviceResponseDTO":
        return cls(
            id=device.id or "",
            name=device.name,
            year=device.year,
            type=device.type,
        )

    def to_document(self) -> Dict[str, Any]:
        """Render the device as a JSON document, omitting unset fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
