"""
Devices Controller - Presentation Layer

Handlers for the device routes. They run the device use cases and
turn the outcome into HTTP responses.
"""

from src.application.use_cases.device_use_cases import (
    GetDeviceByIdUseCase,
    GetDevicesUseCase,
)
from src.domain.entities.errors import ResourceNotFoundError
from src.presentation.http.response import HttpResponse, not_found, send_json
from src.shared import get_logger

logger = get_logger(__name__)


class DevicesController:
    def __init__(
        self,
        get_devices_use_case: GetDevicesUseCase,
        get_device_by_id_use_case: GetDeviceByIdUseCase,
    ):
        self.get_devices_use_case = get_devices_use_case
        self.get_device_by_id_use_case = get_device_by_id_use_case

    async def list_devices(self) -> HttpResponse:
        """Send every device as a JSON array."""
        devices = await self.get_devices_use_case.execute()
        return send_json([device.to_document() for device in devices])

    async def view_device(self, device_id: str) -> HttpResponse:
        """Send one device, or 404 with an empty body."""
        try:
            device = await self.get_device_by_id_use_case.execute(device_id)
        except ResourceNotFoundError:
            logger.info("devices.not_found", device_id=device_id)
            return not_found()
        return send_json(device.to_document())
