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

"""CreateTask use case implementation."""

import logging

from build_dispatch.core.builds.manager import BuildQueueManager
from build_dispatch.core.tasks.entities import TaskDefinition
from build_dispatch.core.tasks.exceptions import PersistenceError, TaskIdExhaustionError
from build_dispatch.core.tasks.repositories import (
    TaskDefinitionStore,
    TaskIdGenerator,
    TaskRepository,
)

from ..commands import CreateTaskCommand
from ..dtos import TaskResponse

logger = logging.getLogger(__name__)

MAX_ID_ATTEMPTS = 5


class CreateTaskUseCase:
    """Use case for registering a new build task definition.

    This use case orchestrates task creation with the following guarantees:
    - Identity: a fresh random id, never one already registered
    - Visibility: the registry holds the task before a queue is started
    - Dispatch: a queue and worker exist for the task on return
    - Durability: best effort; a failed write is logged, not raised

    Attributes:
        task_repo: In-memory task registry.
        store: Durable task definition store.
        queue_manager: Owner of per-task build queues.
        task_id_generator: Source of new task ids.
    """

    def __init__(
        self,
        task_repo: TaskRepository,
        store: TaskDefinitionStore,
        queue_manager: BuildQueueManager,
        task_id_generator: TaskIdGenerator,
    ) -> None:
        self._task_repo = task_repo
        self._store = store
        self._queue_manager = queue_manager
        self._task_id_generator = task_id_generator

    def execute(self, command: CreateTaskCommand) -> TaskResponse:
        """Create, register, dispatch and persist a task definition.

        The new id's mutation lock is held from the uniqueness check
        until the definition is persisted.

        Args:
            command: CreateTask command with validated fields.

        Returns:
            TaskResponse DTO with the created definition.

        Raises:
            TaskIdExhaustionError: If no unused id could be generated.
        """
        for _ in range(MAX_ID_ATTEMPTS):
            task_id = self._task_id_generator.generate()
            with self._task_repo.mutation_lock(task_id):
                if self._task_repo.exists(task_id):
                    logger.warning(
                        "Generated task id %s collides with an existing task", task_id
                    )
                    continue
                definition = TaskDefinition.create(task_id, command.fields)
                self._task_repo.save(definition)
                self._queue_manager.init_build_queue(definition)
                persist_definition(self._store, definition)

            logger.info("Created task %s (%s)", task_id, definition.name)
            return TaskResponse.from_entity(definition)
        raise TaskIdExhaustionError(MAX_ID_ATTEMPTS)


def persist_definition(store: TaskDefinitionStore, definition: TaskDefinition) -> None:
    """Write the definition, logging instead of raising on failure.

    The in-memory registry has already been updated when this runs, so a
    failure here leaves the task live but not durable.
    """
    try:
        store.save(definition)
    except PersistenceError as exc:
        logger.error("Error writing task definition %s: %s", definition.task_id, exc.reason)
