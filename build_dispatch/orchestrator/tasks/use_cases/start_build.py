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

"""StartBuild use case implementation."""

import logging

from build_dispatch.core.builds.manager import BuildQueueManager
from build_dispatch.core.tasks.exceptions import TaskNotFoundError, TaskValidationError
from build_dispatch.core.tasks.repositories import TaskRepository

from ..commands import StartBuildCommand
from ..dtos import StartBuildResponse
from .get_task import find_task_or_raise

logger = logging.getLogger(__name__)


class StartBuildUseCase:
    """Use case for requesting a build of a registered task.

    Admission is decided by the task's bounded queue and never waits for
    a build; a full queue is a normal outcome reported in the response.
    """

    def __init__(self, task_repo: TaskRepository, queue_manager: BuildQueueManager) -> None:
        self._task_repo = task_repo
        self._queue_manager = queue_manager

    def execute(self, command: StartBuildCommand) -> StartBuildResponse:
        """Try to enqueue a build.

        Args:
            command: StartBuild command with the caller-supplied id.

        Returns:
            StartBuildResponse telling whether the request was admitted.

        Raises:
            TaskValidationError: If the id is blank.
            TaskNotFoundError: If no task or queue exists for the id.
        """
        if not command.task_id or not command.task_id.strip():
            raise TaskValidationError("id", "build identifier is required")

        task_id = str(find_task_or_raise(self._task_repo, command.task_id).task_id)
        try:
            accepted = self._queue_manager.enqueue(task_id)
        except TaskNotFoundError:
            logger.error("Task %s is registered but has no build queue", task_id)
            raise

        if accepted:
            logger.info("Build enqueued for task %s", task_id)
        else:
            logger.warning("Build request for task %s rejected, queue full", task_id)
        return StartBuildResponse(task_id=task_id, accepted=accepted)
