"""
Task Repository Interface

This module defines the interface for task repositories following the
repository pattern, decoupling use cases from the document store.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities.task import Task


class ITaskRepository(ABC):
    """Interface for Task repository implementations."""

    @abstractmethod
    async def find_all(self) -> List[Task]:
        """Return every stored task."""
        pass

    @abstractmethod
    async def find_by_id(self, task_id: str) -> Optional[Task]:
        """
        Find a task by its ID.

        Args:
            task_id: The identifier of the task to find

        Returns:
            The task if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, task: Task) -> Task:
        """
        Store a new task.

        Args:
            task: The task to create, without an ID

        Returns:
            The created task with its generated ID

        Raises:
            PersistenceError: If the store rejects the task
        """
        pass

    @abstractmethod
    async def update(self, task: Task) -> Task:
        """
        Replace an existing task.

        Args:
            task: The task with its ID and new field values

        Returns:
            The updated task

        Raises:
            PersistenceError: If the task does not exist or the write fails
        """
        pass

    @abstractmethod
    async def delete(self, task_id: str) -> None:
        """
        Delete a task by its ID.

        Raises:
            PersistenceError: If the task does not exist or the delete fails
        """
        pass
