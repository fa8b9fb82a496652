"""
MongoDB Task Repository - Infrastructure Layer

This module implements the TaskRepository interface on top of the
document store port, mapping Task entities to ``tasks`` documents.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from src.domain.entities.errors import PersistenceError
from src.domain.entities.task import Task
from src.domain.ports.document_store import IDocumentStore
from src.domain.repositories.task_repository import ITaskRepository
from src.infrastructure.database.mongo_database import TASKS_COLLECTION


def _as_utc(value: Any) -> datetime:
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if not isinstance(value, datetime):
        raise PersistenceError(f"Stored recordTime is not a date: {value!r}")
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class TaskRepository(ITaskRepository):
    """Document store implementation of the TaskRepository."""

    COLLECTION_NAME = TASKS_COLLECTION

    def __init__(self, document_store: IDocumentStore):
        """
        Initialize the task repository.

        Args:
            document_store: Persistence collaborator, MongoDB in production
        """
        self.db = document_store

    def _to_document(self, task: Task) -> Dict[str, Any]:
        """Convert a Task entity to a document, without its identity."""
        return {
            "criticality": task.criticality,
            "target": task.target,
            "recordTime": task.record_time,
            "description": task.description,
            "state": task.state,
        }

    def _to_entity(self, document: Dict[str, Any]) -> Task:
        """Convert a stored document to a Task entity."""
        return Task(
            id=document["_id"],
            criticality=document.get("criticality", ""),
            target=str(document.get("target", "")),
            record_time=_as_utc(document.get("recordTime")),
            description=document.get("description", ""),
            state=document.get("state", ""),
        )

    async def find_all(self) -> List[Task]:
        documents = await self.db.find_all(self.COLLECTION_NAME)
        return [self._to_entity(document) for document in documents]

    async def find_by_id(self, task_id: str) -> Optional[Task]:
        document = await self.db.find_by_id(self.COLLECTION_NAME, task_id)
        if document is None:
            return None
        return self._to_entity(document)

    async def create(self, task: Task) -> Task:
        document = await self.db.insert(self.COLLECTION_NAME, self._to_document(task))
        return self._to_entity(document)

    async def update(self, task: Task) -> Task:
        if task.id is None:
            raise PersistenceError("Cannot update a task without an ID")
        document = await self.db.replace(
            self.COLLECTION_NAME, task.id, self._to_document(task)
        )
        return self._to_entity(document)

    async def delete(self, task_id: str) -> None:
        await self.db.delete_by_id(self.COLLECTION_NAME, task_id)
