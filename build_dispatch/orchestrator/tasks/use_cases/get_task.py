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

"""Read-side use cases for task definitions."""

from build_dispatch.core.tasks.entities import TaskDefinition
from build_dispatch.core.tasks.exceptions import TaskNotFoundError
from build_dispatch.core.tasks.repositories import TaskRepository
from build_dispatch.core.tasks.value_objects import TaskId

from ..dtos import TaskListResponse, TaskResponse


def find_task_or_raise(task_repo: TaskRepository, raw_task_id: str) -> TaskDefinition:
    """Look up a task by a caller-supplied id.

    Ids that are not well-formed UUIDs cannot name a task, so they are
    reported as not found rather than invalid.

    Raises:
        TaskNotFoundError: If no task has this id.
    """
    try:
        task_id = TaskId(raw_task_id.strip().lower())
    except ValueError:
        raise TaskNotFoundError(raw_task_id) from None
    definition = task_repo.find_by_id(task_id)
    if definition is None:
        raise TaskNotFoundError(raw_task_id)
    return definition


class GetTaskUseCase:  # pylint: disable=too-few-public-methods
    """Use case for fetching one task definition."""

    def __init__(self, task_repo: TaskRepository) -> None:
        self._task_repo = task_repo

    def execute(self, task_id: str) -> TaskResponse:
        """Return the definition registered under ``task_id``.

        Raises:
            TaskNotFoundError: If the id is unknown.
        """
        return TaskResponse.from_entity(find_task_or_raise(self._task_repo, task_id))


class ListTasksUseCase:  # pylint: disable=too-few-public-methods
    """Use case for listing every task definition."""

    def __init__(self, task_repo: TaskRepository) -> None:
        self._task_repo = task_repo

    def execute(self) -> TaskListResponse:
        return TaskListResponse(
            definitions=[
                TaskResponse.from_entity(definition)
                for definition in self._task_repo.list_all()
            ]
        )
