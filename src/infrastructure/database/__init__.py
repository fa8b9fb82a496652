"""
Database package - Infrastructure Layer

This package contains the MongoDB implementation of the document store
port used by the device and task repositories.
"""

from src.infrastructure.database.mongo_database import (
    DEVICES_COLLECTION,
    TASKS_COLLECTION,
    MongoDatabase,
)

__all__ = ["MongoDatabase", "DEVICES_COLLECTION", "TASKS_COLLECTION"]
