"""
MongoDB Database - Infrastructure Layer

This module provides the MongoDB implementation of the document store port.
It handles the connection, translates string identifiers to ObjectIds and
wraps driver failures into domain errors.
"""

from typing import Any, Dict, List, Optional

import pymongo.errors
from bson import ObjectId
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from src.domain.entities.errors import DocumentNotFoundError, PersistenceError
from src.domain.ports.document_store import Document, IDocumentStore
from src.shared import get_logger

logger = get_logger(__name__)

TASKS_COLLECTION = "tasks"
DEVICES_COLLECTION = "devices"


class MongoDatabase(IDocumentStore):
    """MongoDB database client."""

    def __init__(self, mongo_uri: str, db_name: str):
        """
        Initialize the MongoDB database client.

        Args:
            mongo_uri: MongoDB connection URI
            db_name: Name of the database to use
        """
        self.client: MongoClient = MongoClient(mongo_uri, tz_aware=True)
        self.db: Database = self.client[db_name]

    def get_collection(self, collection_name: str) -> Collection:
        """
        Get a collection from the database.

        Args:
            collection_name: Name of the collection

        Returns:
            MongoDB collection
        """
        return self.db[collection_name]

    @staticmethod
    def _to_object_id(document_id: str) -> Optional[ObjectId]:
        if isinstance(document_id, str) and ObjectId.is_valid(document_id):
            return ObjectId(document_id)
        return None

    @staticmethod
    def _serialize(document: Dict[str, Any]) -> Document:
        serialized = dict(document)
        if "_id" in serialized:
            serialized["_id"] = str(serialized["_id"])
        return serialized

    async def find_all(self, collection_name: str) -> List[Document]:
        try:
            cursor = self.db[collection_name].find({})
            return [self._serialize(document) for document in cursor]
        except pymongo.errors.PyMongoError as e:
            raise PersistenceError(
                f"Failed to list documents in {collection_name}: {e}"
            ) from e

    async def find_by_id(
        self, collection_name: str, document_id: str
    ) -> Optional[Document]:
        object_id = self._to_object_id(document_id)
        if object_id is None:
            return None
        try:
            document = self.db[collection_name].find_one({"_id": object_id})
        except pymongo.errors.PyMongoError as e:
            raise PersistenceError(
                f"Failed to read document {document_id} in {collection_name}: {e}"
            ) from e
        return self._serialize(document) if document is not None else None

    async def insert(self, collection_name: str, document: Document) -> Document:
        """
        Insert a document into a collection.

        Any ``_id`` in the input is ignored; MongoDB generates a new one.

        Raises:
            PersistenceError: If the insert fails
        """
        payload = {key: value for key, value in document.items() if key != "_id"}
        try:
            result = self.db[collection_name].insert_one(payload)
        except pymongo.errors.PyMongoError as e:
            raise PersistenceError(
                f"Failed to insert document in {collection_name}: {e}"
            ) from e
        if not result.acknowledged:
            raise PersistenceError(f"Failed to insert document in {collection_name}")
        payload["_id"] = result.inserted_id
        return self._serialize(payload)

    async def replace(
        self, collection_name: str, document_id: str, document: Document
    ) -> Document:
        """
        Replace a document in a collection.

        Raises:
            DocumentNotFoundError: If the document does not exist
            PersistenceError: If the replace fails
        """
        object_id = self._to_object_id(document_id)
        if object_id is None:
            raise DocumentNotFoundError(f"Document not found in {collection_name}")

        payload = {key: value for key, value in document.items() if key != "_id"}
        try:
            result = self.db[collection_name].replace_one({"_id": object_id}, payload)
        except pymongo.errors.PyMongoError as e:
            raise PersistenceError(
                f"Failed to replace document in {collection_name}: {e}"
            ) from e
        if result.matched_count == 0:
            raise DocumentNotFoundError(f"Document not found in {collection_name}")
        if not result.acknowledged:
            raise PersistenceError(f"Failed to replace document in {collection_name}")
        return self._serialize({"_id": object_id, **payload})

    async def delete_by_id(self, collection_name: str, document_id: str) -> None:
        """
        Delete a document from a collection.

        Raises:
            DocumentNotFoundError: If the document does not exist
            PersistenceError: If the delete fails
        """
        object_id = self._to_object_id(document_id)
        if object_id is None:
            raise DocumentNotFoundError(f"Document not found in {collection_name}")
        try:
            result = self.db[collection_name].delete_one({"_id": object_id})
        except pymongo.errors.PyMongoError as e:
            raise PersistenceError(
                f"Failed to delete document in {collection_name}: {e}"
            ) from e
        if result.deleted_count == 0:
            raise DocumentNotFoundError(f"Document not found in {collection_name}")
        if not result.acknowledged:
            raise PersistenceError(f"Failed to delete document in {collection_name}")

    def close(self) -> None:
        """Close the database connection."""
        self.client.close()

    async def create_indexes(self) -> None:
        """
        Create the indexes used by the task listing queries.
        Called once during application startup.
        """
        try:
            self.db[TASKS_COLLECTION].create_index("target", name="target_idx")
            self.db[TASKS_COLLECTION].create_index("state", name="state_idx")
            self.db[TASKS_COLLECTION].create_index(
                [("target", 1), ("recordTime", -1)],
                name="target_record_time_idx",
                background=True,
            )
        except pymongo.errors.OperationFailure as e:
            logger.warning("mongo.indexes.create_failed", error=str(e))
