"""Domain ports package."""

from .document_store import Document, IDocumentStore

__all__ = ["Document", "IDocumentStore"]
