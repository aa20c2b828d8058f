# Copyright 2026 Dell Inc. or its subsidiaries. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""FastAPI application factory and process entry point."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import uvicorn
from fastapi import FastAPI

from build_dispatch.api.builds.routes import router as builds_router
from build_dispatch.api.dependencies import ServiceContainer
from build_dispatch.api.errors import register_exception_handlers
from build_dispatch.api.health.routes import router as health_router
from build_dispatch.config import Settings
from build_dispatch.core.builds.executor import BuildExecutor, SimulatedBuildExecutor
from build_dispatch.core.builds.manager import BuildQueueManager
from build_dispatch.core.tasks.registry import TaskRegistry
from build_dispatch.core.tasks.repositories import TaskDefinitionStore, TaskIdGenerator
from build_dispatch.infra.file_store import JsonFileTaskStore
from build_dispatch.infra.id_generator import UUIDv4TaskIdGenerator
from build_dispatch.logging_config import configure_logging
from build_dispatch.orchestrator.tasks.use_cases import (
    CreateTaskUseCase,
    GetTaskUseCase,
    ListTasksUseCase,
    LoadTasksUseCase,
    StartBuildUseCase,
    UpdateTaskUseCase,
)

logger = logging.getLogger(__name__)


def build_container(
    settings: Settings,
    store: TaskDefinitionStore,
    executor: BuildExecutor,
    task_id_generator: TaskIdGenerator,
) -> ServiceContainer:
    """Wire the registry, queue manager and use cases together."""
    registry = TaskRegistry()
    queue_manager = BuildQueueManager(
        executor,
        capacity=settings.queue_size,
        join_timeout=settings.worker_join_timeout,
    )
    return ServiceContainer(
        registry=registry,
        queue_manager=queue_manager,
        load_tasks=LoadTasksUseCase(registry, store, queue_manager),
        create_task=CreateTaskUseCase(registry, store, queue_manager, task_id_generator),
        update_task=UpdateTaskUseCase(registry, store, queue_manager),
        get_task=GetTaskUseCase(registry),
        list_tasks=ListTasksUseCase(registry),
        start_build=StartBuildUseCase(registry, queue_manager),
    )


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[TaskDefinitionStore] = None,
    executor: Optional[BuildExecutor] = None,
    task_id_generator: Optional[TaskIdGenerator] = None,
) -> FastAPI:
    """Create the application.

    Stored task definitions are loaded when the app starts; a corrupt
    record makes startup fail. Every build worker is retired on shutdown.

    Args:
        settings: Runtime settings; read from the environment if omitted.
        store: Task definition store; a JSON directory store by default.
        executor: Build executor; the simulated executor by default.
        task_id_generator: Task id source; random UUIDs by default.

    Returns:
        Configured FastAPI application.
    """
    settings = settings or Settings.from_env()
    container = build_container(
        settings,
        store or JsonFileTaskStore(settings.db_dir),
        executor or SimulatedBuildExecutor(settings.build_duration),
        task_id_generator or UUIDv4TaskIdGenerator(),
    )

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        container.load_tasks.execute()
        try:
            yield
        finally:
            container.queue_manager.shutdown()

    app = FastAPI(title="Build Dispatch", lifespan=lifespan)
    app.state.container = container
    register_exception_handlers(app)
    app.include_router(health_router)
    app.include_router(builds_router)
    return app


def main() -> None:
    """Run the service with uvicorn."""
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    logger.info("Starting builder on %s:%d", settings.host, settings.port)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
