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

"""Repository port interfaces (Protocols) for the build task domain.

These define the contracts that infrastructure implementations must satisfy.
Using Protocol instead of ABC allows for structural subtyping (duck typing).
"""

from typing import Any, ContextManager, Dict, List, Optional, Protocol

from .entities import TaskDefinition
from .value_objects import TaskId


class TaskIdGenerator(Protocol):
    """Generator port for creating task identifiers."""

    def generate(self) -> TaskId:
        """Generate a new task identifier.

        Returns:
            A new, random TaskId.

        Raises:
            TaskDomainError: If the generator cannot produce an ID.
        """
        ...


class TaskRepository(Protocol):
    """Repository port for the in-memory task definition registry."""

    def save(self, definition: TaskDefinition) -> None:
        """Insert or replace a task definition.

        Args:
            definition: Task definition to store.
        """
        ...

    def find_by_id(self, task_id: TaskId) -> Optional[TaskDefinition]:
        """Retrieve a task definition by its identifier.

        Args:
            task_id: Unique task identifier.

        Returns:
            TaskDefinition if found, None otherwise.
        """
        ...

    def exists(self, task_id: TaskId) -> bool:
        """Check if a task definition exists.

        Args:
            task_id: Unique task identifier.

        Returns:
            True if the task exists, False otherwise.
        """
        ...

    def list_all(self) -> List[TaskDefinition]:
        """Return every stored task definition in no particular order."""
        ...

    def mutation_lock(self, task_id: TaskId) -> ContextManager[Any]:
        """Return the lock serializing create and update of one task.

        Holders keep it from reading the current definition until the
        new one is registered, dispatched and persisted.

        Args:
            task_id: Unique task identifier.
        """
        ...


class TaskDefinitionStore(Protocol):
    """Durable storage port for task definitions."""

    def save(self, definition: TaskDefinition) -> None:
        """Upsert the serialized definition under its task id.

        Args:
            definition: Task definition to persist.

        Raises:
            PersistenceError: If the record could not be written.
        """
        ...

    def load_all(self) -> Dict[str, TaskDefinition]:
        """Load every persisted definition keyed by task id.

        Returns:
            Mapping of task id string to TaskDefinition (may be empty).

        Raises:
            PersistenceLoadError: If any record is unreadable or corrupt.
        """
        ...
