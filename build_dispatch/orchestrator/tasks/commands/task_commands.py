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

"""Task command DTOs."""

from dataclasses import dataclass

from build_dispatch.core.tasks.value_objects import TaskFields


@dataclass(frozen=True)
class CreateTaskCommand:
    """Command to register a new build task definition.

    Attributes:
        fields: Validated user-supplied task fields.
    """

    fields: TaskFields


@dataclass(frozen=True)
class UpdateTaskCommand:
    """Command to rewrite every mutable field of an existing task.

    Attributes:
        task_id: Identifier supplied by the caller.
        fields: Validated replacement fields.
    """

    task_id: str
    fields: TaskFields


@dataclass(frozen=True)
class StartBuildCommand:
    """Command to request a build of a task.

    The raw id is kept as a string; the use case decides whether it is
    blank or unknown.

    Attributes:
        task_id: Identifier supplied by the caller.
    """

    task_id: str
