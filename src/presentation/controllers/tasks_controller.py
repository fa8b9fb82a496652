"""
Tasks Controller - Presentation Layer

Handlers for the task routes. Each handler runs one task use case and
decides the status code for its outcome:

- missing task: 404 with an empty body
- missing required fields: 400 with ``{"error": [messages]}``
- cast or persistence failure: 400 with ``{"error": message}``
"""

from typing import Any, Dict

from src.application.use_cases.task_use_cases import (
    CreateTaskUseCase,
    DeleteTaskUseCase,
    GetTaskByIdUseCase,
    GetTasksUseCase,
    UpdateTaskUseCase,
)
from src.domain.entities.errors import (
    ResourceNotFoundError,
    TaskOperationError,
    TaskValidationError,
)
from src.presentation.http.response import (
    HttpResponse,
    bad_request,
    created_resource,
    not_found,
    send_json,
)
from src.shared import get_logger

logger = get_logger(__name__)


class TasksController:
    def __init__(
        self,
        get_tasks_use_case: GetTasksUseCase,
        get_task_by_id_use_case: GetTaskByIdUseCase,
        create_task_use_case: CreateTaskUseCase,
        update_task_use_case: UpdateTaskUseCase,
        delete_task_use_case: DeleteTaskUseCase,
    ):
        self.get_tasks_use_case = get_tasks_use_case
        self.get_task_by_id_use_case = get_task_by_id_use_case
        self.create_task_use_case = create_task_use_case
        self.update_task_use_case = update_task_use_case
        self.delete_task_use_case = delete_task_use_case

    async def list_tasks(self) -> HttpResponse:
        tasks = await self.get_tasks_use_case.execute()
        return send_json([task.to_document() for task in tasks])

    async def view_task(self, task_id: str) -> HttpResponse:
        try:
            task = await self.get_task_by_id_use_case.execute(task_id)
        except ResourceNotFoundError:
            return not_found()
        return send_json(task.to_document())

    async def create_task(self, payload: Dict[str, Any]) -> HttpResponse:
        try:
            task = await self.create_task_use_case.execute(payload)
        except TaskValidationError as e:
            logger.info("tasks.create_rejected", errors=e.errors)
            return bad_request(e.errors)
        except TaskOperationError as e:
            return bad_request(e.message)
        return created_resource(task.to_document())

    async def update_task(self, task_id: str, payload: Dict[str, Any]) -> HttpResponse:
        try:
            task = await self.update_task_use_case.execute(task_id, payload)
        except ResourceNotFoundError:
            return not_found()
        except TaskValidationError as e:
            logger.info("tasks.update_rejected", task_id=task_id, errors=e.errors)
            return bad_request(e.errors)
        except TaskOperationError as e:
            return bad_request(e.message)
        return send_json(task.to_document())

    async def delete_task(self, task_id: str) -> HttpResponse:
        """Delete a task and send it back as it was before deletion."""
        try:
            task = await self.delete_task_use_case.execute(task_id)
        except ResourceNotFoundError:
            return not_found()
        except TaskOperationError as e:
            return bad_request(e.message)
        return send_json(task.to_document())
