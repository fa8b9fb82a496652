"""
Document Store Port

Contract of the persistence collaborator used by the repositories. Documents
are plain dictionaries; identities travel as strings under ``_id``.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

Document = Dict[str, Any]


class IDocumentStore(ABC):
    """Narrow CRUD interface over a document database."""

    @abstractmethod
    async def find_all(self, collection_name: str) -> List[Document]:
        """Return every document of a collection."""

    @abstractmethod
    async def find_by_id(
        self, collection_name: str, document_id: str
    ) -> Optional[Document]:
        """
        Find a document by its identifier.

        Args:
            collection_name: Name of the collection
            document_id: Identifier as rendered to clients

        Returns:
            The document if found, None otherwise (also for identifiers the
            store could never have generated)
        """

    @abstractmethod
    async def insert(self, collection_name: str, document: Document) -> Document:
        """
        Insert a document, generating its identifier.

        Returns:
            The stored document including ``_id``

        Raises:
            PersistenceError: If the database rejects the document
        """

    @abstractmethod
    async def replace(
        self, collection_name: str, document_id: str, document: Document
    ) -> Document:
        """
        Replace the whole document stored under ``document_id``.

        Raises:
            DocumentNotFoundError: If the document does not exist
            PersistenceError: If the write fails
        """

    @abstractmethod
    async def delete_by_id(self, collection_name: str, document_id: str) -> None:
        """
        Delete the document stored under ``document_id``.

        Raises:
            DocumentNotFoundError: If the document does not exist
            PersistenceError: If the delete fails
        """
