"""
Device Use Cases - Application Layer

This module defines use cases for reading devices from the
document store.
"""

from typing import List

from dependency_injector.wiring import Provide, inject

from src.application.dtos.device_dto import DeviceResponseDTO
from src.domain.entities.errors import ResourceNotFoundError
from src.domain.repositories.device_repository import IDeviceRepository
from src.shared import get_logger

logger = get_logger(__name__)


class GetDevicesUseCase:
    """Use case for listing every device."""

    @inject
    def __init__(
        self,
        device_repository: IDeviceRepository = Provide["device_repository"],
    ):
        self.device_repository = device_repository

    async def execute(self) -> List[DeviceResponseDTO]:
        devices = await self.device_repository.find_all()
        logger.debug("devices.listed", count=len(devices))
        return [DeviceResponseDTO.from_entity(device) for device in devices]


class GetDeviceByIdUseCase:
    """Use case for retrieving a single device."""

    @inject
    def __init__(
        self,
        device_repository: IDeviceRepository = Provide["device_repository"],
    ):
        self.device_repository = device_repository

    async def execute(self, device_id: str) -> DeviceResponseDTO:
        """
        Retrieve a device by its ID.

        Args:
            device_id: ID of the device

        Returns:
            The device rendered as a DTO

        Raises:
            ResourceNotFoundError: If no device has this ID
        """
        device = await self.device_repository.find_by_id(device_id)
        if device is None:
            raise ResourceNotFoundError("device", device_id)
        return DeviceResponseDTO.from_entity(device)
