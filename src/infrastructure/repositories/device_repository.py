"""
MongoDB Device Repository - Infrastructure Layer

Read-only access to the ``devices`` collection.
"""

from typing import Any, Dict, List, Optional

from src.domain.entities.device import Device
from src.domain.ports.document_store import IDocumentStore
from src.domain.repositories.device_repository import IDeviceRepository
from src.infrastructure.database.mongo_database import DEVICES_COLLECTION


class DeviceRepository(IDeviceRepository):
    """Document store implementation of the DeviceRepository."""

    COLLECTION_NAME = DEVICES_COLLECTION

    def __init__(self, document_store: IDocumentStore):
        self.db = document_store

    def _to_entity(self, document: Dict[str, Any]) -> Device:
        """Convert a stored document to a Device entity."""
        return Device(
            id=document["_id"],
            name=document.get("name", ""),
            year=document.get("year"),
            type=document.get("type"),
        )

    async def find_all(self) -> List[Device]:
        documents = await self.db.find_all(self.COLLECTION_NAME)
        return [self._to_entity(document) for document in documents]

    async def find_by_id(self, device_id: str) -> Optional[Device]:
        document = await self.db.find_by_id(self.COLLECTION_NAME, device_id)
        if document is None:
            return None
        return self._to_entity(document)
