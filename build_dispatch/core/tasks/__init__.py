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

"""Build task domain module for Build Dispatch."""

from .entities import TaskDefinition
from .exceptions import (
    TaskDomainError,
    TaskValidationError,
    TaskNotFoundError,
    TaskIdExhaustionError,
    PersistenceError,
    PersistenceLoadError,
)
from .registry import TaskRegistry
from .repositories import (
    TaskIdGenerator,
    TaskRepository,
    TaskDefinitionStore,
)
from .value_objects import TaskId, TaskFields, WorkerState

__all__ = [
    "TaskDefinition",
    "TaskDomainError",
    "TaskValidationError",
    "TaskNotFoundError",
    "TaskIdExhaustionError",
    "PersistenceError",
    "PersistenceLoadError",
    "TaskRegistry",
    "TaskIdGenerator",
    "TaskRepository",
    "TaskDefinitionStore",
    "TaskId",
    "TaskFields",
    "WorkerState",
]
