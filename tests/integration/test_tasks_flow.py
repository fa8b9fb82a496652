from __future__ import annotations

from typing import cast

import pytest

from src.application.use_cases.task_use_cases import (
    CreateTaskUseCase,
    GetTasksUseCase,
)
from src.infrastructure.database.mongo_database import MongoDatabase
from src.infrastructure.repositories.task_repository import TaskRepository
from tests.conftest import FakeMongoDatabase


@pytest.mark.asyncio
async def test_create_and_list_task_integration(task_payload):
    database = cast(MongoDatabase, FakeMongoDatabase())
    task_repo = TaskRepository(database)

    create_use_case = CreateTaskUseCase(task_repository=task_repo)
    list_use_case = GetTasksUseCase(task_repository=task_repo)

    created = await create_use_case.execute(task_payload)
    assert created.target == task_payload["target"]

    tasks = await list_use_case.execute()
    assert any(task.id == created.id for task in tasks)
