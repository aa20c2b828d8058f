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

"""Task definition aggregate root entity."""

from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone
from typing import Optional

from ..value_objects import TaskFields, TaskId


@dataclass(frozen=True)
class TaskDefinition:
    """Task definition aggregate root.

    Describes what a build of this task would do: which repository and
    branch to check out and which docker repository receives the image.
    Identity (task_id, created_at) never changes after creation; changes
    produce a new instance through ``with_fields``.

    Attributes:
        task_id: Unique task identifier.
        name: Human readable task name.
        description: Free-form description.
        git_url: Repository to build from.
        branch: Branch to build.
        docker_hub_url: Registry the image is pushed to.
        docker_repo_name: Repository name within the registry.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.
    """

    task_id: TaskId
    name: str
    description: str
    git_url: str
    branch: str
    docker_hub_url: str
    docker_repo_name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        if self.created_at is None:
            object.__setattr__(self, "created_at", datetime.now(timezone.utc))
        if self.updated_at is None:
            object.__setattr__(self, "updated_at", self.created_at)

    @classmethod
    def create(
        cls,
        task_id: TaskId,
        fields: TaskFields,
        now: Optional[datetime] = None
    ) -> "TaskDefinition":
        """Build a new definition with both timestamps set to ``now``.

        Args:
            task_id: Freshly generated identifier.
            fields: Validated user-supplied fields.
            now: Creation time; defaults to the current UTC time.

        Returns:
            New TaskDefinition with created_at == updated_at.
        """
        stamp = now or datetime.now(timezone.utc)
        return cls(
            task_id=task_id,
            name=fields.name,
            description=fields.description,
            git_url=fields.git_url,
            branch=fields.branch,
            docker_hub_url=fields.docker_hub_url,
            docker_repo_name=fields.docker_repo_name,
            created_at=stamp,
            updated_at=stamp,
        )

    def with_fields(
        self,
        fields: TaskFields,
        now: Optional[datetime] = None
    ) -> "TaskDefinition":
        """Return a copy with every mutable field rewritten.

        updated_at always moves forward, even when the clock has not
        advanced since the previous write.

        Args:
            fields: Validated replacement fields.
            now: Modification time; defaults to the current UTC time.

        Returns:
            Updated TaskDefinition sharing task_id and created_at.
        """
        stamp = now or datetime.now(timezone.utc)
        if stamp <= self.updated_at:
            stamp = self.updated_at + timedelta(microseconds=1)
        return replace(
            self,
            name=fields.name,
            description=fields.description,
            git_url=fields.git_url,
            branch=fields.branch,
            docker_hub_url=fields.docker_hub_url,
            docker_repo_name=fields.docker_repo_name,
            updated_at=stamp,
        )
