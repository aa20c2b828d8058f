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

"""Task response DTOs."""

from dataclasses import dataclass, field
from typing import Any, Dict, List

QUEUED_MESSAGE = "New build enqueued"
REJECTED_MESSAGE = "Rejected, build queue full"


@dataclass(frozen=True)
class TaskResponse:
    """Response DTO for a single task definition.

    Immutable data transfer object for returning task information
    to the API layer. All timestamps are ISO 8601 formatted strings.

    Attributes:
        task_id: Unique task identifier.
        name: Task name.
        description: Task description.
        git_url: Repository to build from.
        branch: Branch to build.
        docker_hub_url: Registry the image is pushed to.
        docker_repo_name: Repository name within the registry.
        created_at: Creation timestamp (ISO 8601).
        updated_at: Last modification timestamp (ISO 8601).
    """

    task_id: str
    name: str
    description: str
    git_url: str
    branch: str
    docker_hub_url: str
    docker_repo_name: str
    created_at: str
    updated_at: str

    @staticmethod
    def from_entity(definition) -> "TaskResponse":
        """Create response DTO from a TaskDefinition entity.

        Args:
            definition: TaskDefinition domain entity.

        Returns:
            TaskResponse DTO with serialized values.
        """
        return TaskResponse(
            task_id=str(definition.task_id),
            name=definition.name,
            description=definition.description,
            git_url=definition.git_url,
            branch=definition.branch,
            docker_hub_url=definition.docker_hub_url,
            docker_repo_name=definition.docker_repo_name,
            created_at=definition.created_at.isoformat(),
            updated_at=definition.updated_at.isoformat(),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return the camelCase wire representation."""
        return {
            "id": self.task_id,
            "name": self.name,
            "description": self.description,
            "gitUrl": self.git_url,
            "branch": self.branch,
            "dockerHubUrl": self.docker_hub_url,
            "dockerRepoName": self.docker_repo_name,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }


@dataclass(frozen=True)
class TaskListResponse:
    """Response DTO listing every registered task definition.

    Attributes:
        count: Number of definitions; always equals len(definitions).
        definitions: Definitions in no particular order.
    """

    definitions: List[TaskResponse] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.definitions)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "count": self.count,
            "definitions": [definition.to_dict() for definition in self.definitions],
        }


@dataclass(frozen=True)
class StartBuildResponse:
    """Outcome of a build request.

    Attributes:
        task_id: Task the build was requested for.
        accepted: True if the request was admitted to the queue.
    """

    task_id: str
    accepted: bool

    @property
    def message(self) -> str:
        return QUEUED_MESSAGE if self.accepted else REJECTED_MESSAGE
