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

"""Serialized form of a task definition as stored on disk."""

import re
from datetime import datetime, timezone
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from build_dispatch.core.tasks.entities import TaskDefinition
from build_dispatch.core.tasks.value_objects import TaskId

# Older records carry nanosecond timestamps and a capitalized "Branch" key.
_FRACTION_PATTERN = re.compile(r"(\.\d{6})\d+")


class TaskDefinitionRecord(BaseModel):
    """camelCase JSON record for one task definition."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    name: str
    description: str
    git_url: str = Field(alias="gitUrl")
    branch: str = Field(validation_alias=AliasChoices("branch", "Branch"))
    docker_hub_url: str = Field(alias="dockerHubUrl")
    docker_repo_name: str = Field(alias="dockerRepoName")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def _truncate_fraction(cls, value: Any) -> Any:
        if isinstance(value, str):
            return _FRACTION_PATTERN.sub(r"\1", value)
        return value

    @classmethod
    def from_entity(cls, definition: TaskDefinition) -> "TaskDefinitionRecord":
        return cls(
            id=str(definition.task_id),
            name=definition.name,
            description=definition.description,
            git_url=definition.git_url,
            branch=definition.branch,
            docker_hub_url=definition.docker_hub_url,
            docker_repo_name=definition.docker_repo_name,
            created_at=definition.created_at,
            updated_at=definition.updated_at,
        )

    def to_entity(self) -> TaskDefinition:
        """Rehydrate the domain entity.

        Raises:
            ValueError: If the stored id is not a valid UUID.
        """
        return TaskDefinition(
            task_id=TaskId(self.id),
            name=self.name,
            description=self.description,
            git_url=self.git_url,
            branch=self.branch,
            docker_hub_url=self.docker_hub_url,
            docker_repo_name=self.docker_repo_name,
            created_at=_as_utc(self.created_at),
            updated_at=_as_utc(self.updated_at),
        )

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
