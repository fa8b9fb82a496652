"""
Device Repository Interface

Read access to devices. Devices are managed outside this API, so the
repository exposes no write operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities.device import Device


class IDeviceRepository(ABC):
    """Interface for Device repository implementations."""

    @abstractmethod
    async def find_all(self) -> List[Device]:
        pass

    @abstractmethod
    async def find_by_id(self, device_id: str) -> Optional[Device]:
        """
        Find a device by its ID.

        Args:
            device_id: The identifier of the device

        Returns:
            The device if found, None otherwise
        """
        pass
