"""
Task Use Cases - Application Layer

This module defines use cases for task operations. They validate
payloads, cast them into Task entities and orchestrate the repository
calls; the presentation layer maps their errors to HTTP statuses.
"""

from typing import Any, List

from dependency_injector.wiring import Provide, inject
from pydantic import ValidationError

from src.application.dtos.task_dto import TaskResponseDTO, TaskWriteDTO
from src.domain.entities.errors import (
    DocumentNotFoundError,
    PersistenceError,
    ResourceNotFoundError,
    TaskOperationError,
    TaskValidationError,
)
from src.domain.entities.task import Task
from src.domain.repositories.task_repository import ITaskRepository
from src.domain.services import validate_task
from src.shared import get_logger

logger = get_logger(__name__)


def _describe_cast_error(error: ValidationError) -> str:
    parts = []
    for detail in error.errors():
        location = ".".join(str(item) for item in detail.get("loc", ()))
        parts.append(f"{location}: {detail.get('msg', 'invalid value')}")
    return "Task validation failed: " + "; ".join(parts)


def _build_task(payload: Any) -> Task:
    """Validate a payload and cast it into a Task without an ID."""
    errors = validate_task(payload)
    if errors:
        raise TaskValidationError(errors)

    try:
        return TaskWriteDTO.model_validate(payload).to_entity()
    except ValidationError as e:
        raise TaskOperationError(_describe_cast_error(e)) from e


class GetTasksUseCase:
    """Use case for listing every task."""

    @inject
    def __init__(
        self,
        task_repository: ITaskRepository = Provide["task_repository"],
    ):
        self.task_repository = task_repository

    async def execute(self) -> List[TaskResponseDTO]:
        tasks = await self.task_repository.find_all()
        return [TaskResponseDTO.from_entity(task) for task in tasks]


class GetTaskByIdUseCase:
    """Use case for retrieving a single task."""

    @inject
    def __init__(
        self,
        task_repository: ITaskRepository = Provide["task_repository"],
    ):
        self.task_repository = task_repository

    async def execute(self, task_id: str) -> TaskResponseDTO:
        """
        Raises:
            ResourceNotFoundError: If no task has this ID
        """
        task = await self.task_repository.find_by_id(task_id)
        if task is None:
            raise ResourceNotFoundError("task", task_id)
        return TaskResponseDTO.from_entity(task)


class CreateTaskUseCase:
    """Use case for creating a task."""

    @inject
    def __init__(
        self,
        task_repository: ITaskRepository = Provide["task_repository"],
    ):
        self.task_repository = task_repository

    async def execute(self, payload: Any) -> TaskResponseDTO:
        """
        Create a task from a request payload.

        Only the five task fields are stored; anything else in the
        payload is dropped.

        Args:
            payload: Decoded JSON body of the request

        Returns:
            The created task, including its generated ID

        Raises:
            TaskValidationError: If required fields are missing
            TaskOperationError: If the payload cannot be cast or stored
        """
        task = _build_task(payload)
        try:
            created = await self.task_repository.create(task)
        except PersistenceError as e:
            logger.warning("tasks.create_failed", error=e.message)
            raise TaskOperationError(e.message, e.details) from e

        logger.info("tasks.created", task_id=created.id, target=created.target)
        return TaskResponseDTO.from_entity(created)


class UpdateTaskUseCase:
    """Use case for replacing an existing task."""

    @inject
    def __init__(
        self,
        task_repository: ITaskRepository = Provide["task_repository"],
    ):
        self.task_repository = task_repository

    async def execute(self, task_id: str, payload: Any) -> TaskResponseDTO:
        """
        Replace every field of a task with the values in ``payload``.

        Args:
            task_id: ID of the task to replace
            payload: Decoded JSON body holding the complete new task

        Returns:
            The updated task

        Raises:
            ResourceNotFoundError: If the task does not exist
            TaskValidationError: If required fields are missing
            TaskOperationError: If the payload cannot be cast or stored
        """
        existing = await self.task_repository.find_by_id(task_id)
        if existing is None:
            raise ResourceNotFoundError("task", task_id)

        replacement = existing.replace_with(_build_task(payload))
        try:
            updated = await self.task_repository.update(replacement)
        except DocumentNotFoundError as e:
            logger.info("tasks.update_missing", task_id=task_id)
            raise ResourceNotFoundError("task", task_id) from e
        except PersistenceError as e:
            logger.warning("tasks.update_failed", task_id=task_id, error=e.message)
            raise TaskOperationError(e.message, e.details) from e

        logger.info("tasks.updated", task_id=task_id)
        return TaskResponseDTO.from_entity(updated)


class DeleteTaskUseCase:
    """Use case for deleting a task."""

    @inject
    def __init__(
        self,
        task_repository: ITaskRepository = Provide["task_repository"],
    ):
        self.task_repository = task_repository

    async def execute(self, task_id: str) -> TaskResponseDTO:
        """
        Delete a task and return it as it was before deletion.

        Raises:
            ResourceNotFoundError: If the task does not exist
            TaskOperationError: If the delete fails
        """
        existing = await self.task_repository.find_by_id(task_id)
        if existing is None:
            raise ResourceNotFoundError("task", task_id)

        try:
            await self.task_repository.delete(task_id)
        except DocumentNotFoundError as e:
            logger.info("tasks.delete_missing", task_id=task_id)
            raise ResourceNotFoundError("task", task_id) from e
        except PersistenceError as e:
            logger.warning("tasks.delete_failed", task_id=task_id, error=e.message)
            raise TaskOperationError(e.message, e.details) from e

        logger.info("tasks.deleted", task_id=task_id)
        return TaskResponseDTO.from_entity(existing)
