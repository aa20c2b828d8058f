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

"""UpdateTask use case implementation."""

import logging

from build_dispatch.core.builds.manager import BuildQueueManager
from build_dispatch.core.tasks.repositories import TaskDefinitionStore, TaskRepository

from ..commands import UpdateTaskCommand
from ..dtos import TaskResponse
from .create_task import persist_definition
from .get_task import find_task_or_raise

logger = logging.getLogger(__name__)


class UpdateTaskUseCase:
    """Use case for rewriting an existing task definition.

    The task keeps its id and creation time. Its build queue and worker
    are replaced so later builds use the new definition; requests still
    pending in the old queue are abandoned.
    """

    def __init__(
        self,
        task_repo: TaskRepository,
        store: TaskDefinitionStore,
        queue_manager: BuildQueueManager,
    ) -> None:
        self._task_repo = task_repo
        self._store = store
        self._queue_manager = queue_manager

    def execute(self, command: UpdateTaskCommand) -> TaskResponse:
        """Apply the update.

        The task's mutation lock is held from reading the current
        definition until the new one is persisted, so concurrent updates
        of one task leave the registry, the worker and the stored record
        on the same definition.

        Args:
            command: UpdateTask command with the task id and new fields.

        Returns:
            TaskResponse DTO with the updated definition.

        Raises:
            TaskNotFoundError: If the task id is unknown.
        """
        task_id = find_task_or_raise(self._task_repo, command.task_id).task_id
        with self._task_repo.mutation_lock(task_id):
            current = find_task_or_raise(self._task_repo, str(task_id))
            updated = current.with_fields(command.fields)

            self._task_repo.save(updated)
            self._queue_manager.init_build_queue(updated)
            persist_definition(self._store, updated)

        logger.info("Updated task %s", task_id)
        return TaskResponse.from_entity(updated)
