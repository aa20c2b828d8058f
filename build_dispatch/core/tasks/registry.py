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

"""In-memory registry of task definitions."""

import threading
from typing import Dict, Iterable, List, Optional

from .entities import TaskDefinition
from .value_objects import TaskId


class TaskRegistry:
    """Thread-safe mapping of task id to task definition.

    The registry is the source of truth for reads. A single lock guards
    the whole mapping. Multi-step changes of one task (read, register,
    dispatch, persist) hold that task's mutation lock instead, so
    changes to different tasks do not wait on each other.
    """

    def __init__(self) -> None:
        self._definitions: Dict[str, TaskDefinition] = {}
        self._mutation_locks: Dict[str, threading.Lock] = {}
        self._lock = threading.Lock()

    def seed(self, definitions: Iterable[TaskDefinition]) -> None:
        """Replace the registry contents with the given definitions."""
        with self._lock:
            self._definitions = {
                str(definition.task_id): definition for definition in definitions
            }

    def save(self, definition: TaskDefinition) -> None:
        with self._lock:
            self._definitions[str(definition.task_id)] = definition

    def find_by_id(self, task_id: TaskId) -> Optional[TaskDefinition]:
        with self._lock:
            return self._definitions.get(str(task_id))

    def exists(self, task_id: TaskId) -> bool:
        with self._lock:
            return str(task_id) in self._definitions

    def list_all(self) -> List[TaskDefinition]:
        with self._lock:
            return list(self._definitions.values())

    def mutation_lock(self, task_id: TaskId) -> threading.Lock:
        with self._lock:
            return self._mutation_locks.setdefault(str(task_id), threading.Lock())

    def __len__(self) -> int:
        with self._lock:
            return len(self._definitions)
