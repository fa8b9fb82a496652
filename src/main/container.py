"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from src.application.use_cases.device_use_cases import (
    GetDeviceByIdUseCase,
    GetDevicesUseCase,
)
from src.application.use_cases.task_use_cases import (
    CreateTaskUseCase,
    DeleteTaskUseCase,
    GetTaskByIdUseCase,
    GetTasksUseCase,
    UpdateTaskUseCase,
)
from src.infrastructure.database import MongoDatabase
from src.infrastructure.repositories import DeviceRepository, TaskRepository
from src.presentation.controllers import DevicesController, TasksController
from src.presentation.http.cors import CorsPolicy
from src.presentation.http.router import Router
from src.presentation.http.routes import build_route_table
from src.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependecy-injector."""

    wiring_config = containers.WiringConfiguration(
        packages=["..presentation", "..application"]
    )

    # Settings
    config = providers.Configuration()

    # Infrastructure
    mongo_database = providers.Singleton(
        MongoDatabase,
        mongo_uri=config.database.mongo_uri,
        db_name=config.database.database_name,
    )

    device_repository = providers.Singleton(
        DeviceRepository,
        document_store=mongo_database,
    )

    task_repository = providers.Singleton(
        TaskRepository,
        document_store=mongo_database,
    )

    # Application (use cases)
    get_devices_use_case = providers.Factory(
        GetDevicesUseCase,
        device_repository=device_repository,
    )

    get_device_by_id_use_case = providers.Factory(
        GetDeviceByIdUseCase,
        device_repository=device_repository,
    )

    get_tasks_use_case = providers.Factory(
        GetTasksUseCase,
        task_repository=task_repository,
    )

    get_task_by_id_use_case = providers.Factory(
        GetTaskByIdUseCase,
        task_repository=task_repository,
    )

    create_task_use_case = providers.Factory(
        CreateTaskUseCase,
        task_repository=task_repository,
    )

    update_task_use_case = providers.Factory(
        UpdateTaskUseCase,
        task_repository=task_repository,
    )

    delete_task_use_case = providers.Factory(
        DeleteTaskUseCase,
        task_repository=task_repository,
    )

    # Presentation
    devices_controller = providers.Singleton(
        DevicesController,
        get_devices_use_case=get_devices_use_case,
        get_device_by_id_use_case=get_device_by_id_use_case,
    )

    tasks_controller = providers.Singleton(
        TasksController,
        get_tasks_use_case=get_tasks_use_case,
        get_task_by_id_use_case=get_task_by_id_use_case,
        create_task_use_case=create_task_use_case,
        update_task_use_case=update_task_use_case,
        delete_task_use_case=delete_task_use_case,
    )

    route_table = providers.Singleton(
        build_route_table,
        prefix=config.api.prefix,
    )

    cors_policy = providers.Singleton(
        CorsPolicy,
        allow_headers=config.cors.allow_headers,
        max_age=config.cors.max_age,
        expose_headers=config.cors.expose_headers,
    )

    http_router = providers.Singleton(
        Router,
        route_table=route_table,
        cors_policy=cors_policy,
        devices_controller=devices_controller,
        tasks_controller=tasks_controller,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Centralized lifecycle management for external resources.

    Used by the FastAPI lifespan: ensures the MongoDB indexes exist on
    startup and closes the client on shutdown.
    """
    container = get_container()
    mongo_database = container.mongo_database()

    try:
        logger.info("container.mongo.ensure_indexes")
        await mongo_database.create_indexes()

        logger.info("container.resources.initialized")
        yield container

    finally:
        logger.info("container.mongo.close")
        mongo_database.close()
        logger.info("container.resources.shutdown")
