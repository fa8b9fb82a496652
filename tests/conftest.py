from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Dict, Iterator, List, Sequence

import pytest
from bson import ObjectId

from src.domain.entities.device import Device
from src.domain.entities.errors import DocumentNotFoundError, PersistenceError
from src.domain.entities.task import Task
from src.domain.ports.document_store import Document, IDocumentStore

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

DEVICE_ID = "64b7f3c2a1e4d5f6a7b8c9d0"
MISSING_ID = "64b7f3c2a1e4d5f6a7b8c9ff"


@pytest.fixture()
def task_payload() -> Dict[str, Any]:
    return {
        "criticality": "high",
        "target": DEVICE_ID,
        "recordTime": "2023-01-01T00:00:00Z",
        "description": "check valve",
        "state": "open",
    }


@pytest.fixture()
def sample_task() -> Task:
    return Task(
        id="64b7f3c2a1e4d5f6a7b8c9d1",
        criticality="high",
        target=DEVICE_ID,
        record_time=datetime(2023, 1, 1, tzinfo=timezone.utc),
        description="check valve",
        state="open",
    )


@pytest.fixture()
def sample_device() -> Device:
    return Device(id=DEVICE_ID, name="Pump 3", year=2019, type="centrifugal pump")


class FakeCursor:
    def __init__(self, documents: Sequence[Dict[str, Any]]):
        self._documents = list(documents)

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        return iter(self._documents)


class FakeCollection:
    """Mimics the subset of ``pymongo.collection.Collection`` in use."""

    def __init__(self) -> None:
        self.documents: Dict[ObjectId, Dict[str, Any]] = {}
        self.last_query: Dict[str, Any] | None = None
        self.created_indexes: List[tuple[Any, ...]] = []

    def find_one(self, query: Dict[str, Any]) -> Dict[str, Any] | None:
        self.last_query = query
        document = self.documents.get(query.get("_id"))
        return dict(document) if document is not None else None

    def find(self, query: Dict[str, Any]) -> FakeCursor:
        self.last_query = query
        results = [
            dict(doc) for doc in self.documents.values() if self._matches(doc, query)
        ]
        return FakeCursor(results)

    def insert_one(self, document: Dict[str, Any]) -> Any:
        document.setdefault("_id", ObjectId())
        self.documents[document["_id"]] = dict(document)
        return SimpleNamespace(acknowledged=True, inserted_id=document["_id"])

    def replace_one(self, query: Dict[str, Any], document: Dict[str, Any]) -> Any:
        key = query.get("_id")
        if key not in self.documents:
            return SimpleNamespace(matched_count=0, acknowledged=True)
        self.documents[key] = {"_id": key, **document}
        return SimpleNamespace(matched_count=1, acknowledged=True)

    def delete_one(self, query: Dict[str, Any]) -> Any:
        key = query.get("_id")
        if key in self.documents:
            del self.documents[key]
            return SimpleNamespace(deleted_count=1, acknowledged=True)
        return SimpleNamespace(deleted_count=0, acknowledged=True)

    def create_index(self, keys: Any, name: str | None = None, **kwargs: Any) -> Any:
        self.created_indexes.append((keys, name, kwargs))
        return name or keys

    @staticmethod
    def _matches(document: Dict[str, Any], query: Dict[str, Any]) -> bool:
        for key, value in query.items():
            if document.get(key) != value:
                return False
        return True


class FakeMongoDatabase(IDocumentStore):
    """In-memory document store with MongoDB style string identifiers."""

    def __init__(self) -> None:
        self.collections: Dict[str, Dict[str, Document]] = {}
        self.indexes_created = False
        self.closed = False

    def get_collection(self, name: str) -> Dict[str, Document]:
        return self.collections.setdefault(name, {})

    def seed(self, collection_name: str, document: Document) -> Document:
        stored = {"_id": document.get("_id") or str(ObjectId()), **document}
        self.get_collection(collection_name)[stored["_id"]] = stored
        return dict(stored)

    async def find_all(self, collection_name: str) -> List[Document]:
        return [dict(doc) for doc in self.get_collection(collection_name).values()]

    async def find_by_id(self, collection_name: str, document_id: str) -> Any:
        document = self.get_collection(collection_name).get(document_id)
        return dict(document) if document is not None else None

    async def insert(self, collection_name: str, document: Document) -> Document:
        payload = {key: value for key, value in document.items() if key != "_id"}
        return self.seed(collection_name, {"_id": str(ObjectId()), **payload})

    async def replace(
        self, collection_name: str, document_id: str, document: Document
    ) -> Document:
        collection = self.get_collection(collection_name)
        if document_id not in collection:
            raise DocumentNotFoundError(f"Document not found in {collection_name}")
        payload = {key: value for key, value in document.items() if key != "_id"}
        collection[document_id] = {"_id": document_id, **payload}
        return dict(collection[document_id])

    async def delete_by_id(self, collection_name: str, document_id: str) -> None:
        collection = self.get_collection(collection_name)
        if document_id not in collection:
            raise DocumentNotFoundError(f"Document not found in {collection_name}")
        del collection[document_id]

    async def create_indexes(self) -> None:
        self.indexes_created = True

    def close(self) -> None:
        self.closed = True


class FailingDocumentStore(FakeMongoDatabase):
    """Document store whose writes are always rejected."""

    def __init__(self, message: str = "E11000 duplicate key error") -> None:
        super().__init__()
        self.message = message

    async def insert(self, collection_name: str, document: Document) -> Document:
        raise PersistenceError(self.message)

    async def replace(
        self, collection_name: str, document_id: str, document: Document
    ) -> Document:
        raise PersistenceError(self.message)

    async def delete_by_id(self, collection_name: str, document_id: str) -> None:
        raise PersistenceError(self.message)


@pytest.fixture()
def fake_mongo_database() -> FakeMongoDatabase:
    return FakeMongoDatabase()


@pytest.fixture()
def dummy_now() -> datetime:
    return datetime.now(timezone.utc)


@pytest.fixture(autouse=True)
def _reset_container_wiring() -> Iterator[None]:
    """Keep container wiring from leaking between tests."""
    import src.application
    import src.presentation
    from dependency_injector.wiring import unwire

    packages = [src.application, src.presentation]
    unwire(packages=packages)
    yield
    unwire(packages=packages)
