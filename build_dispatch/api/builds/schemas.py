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

"""Request schemas for the build task endpoints."""

from pydantic import AliasChoices, BaseModel, Field, ValidationError

from build_dispatch.core.tasks.exceptions import TaskValidationError
from build_dispatch.core.tasks.value_objects import TaskFields


class TaskDefinitionRequest(BaseModel):
    """Body of create-build and update-build requests.

    ``git-url`` is accepted alongside ``gitUrl`` for older clients.
    """

    name: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1, max_length=255)
    git_url: str = Field(
        validation_alias=AliasChoices("gitUrl", "git-url"),
        min_length=1,
        max_length=255,
    )
    branch: str = Field(min_length=1, max_length=64)
    docker_hub_url: str = Field(
        validation_alias="dockerHubUrl",
        min_length=1,
        max_length=255,
    )
    docker_repo_name: str = Field(
        validation_alias="dockerRepoName",
        min_length=1,
        max_length=64,
    )

    def to_fields(self) -> TaskFields:
        return TaskFields(
            name=self.name,
            description=self.description,
            git_url=self.git_url,
            branch=self.branch,
            docker_hub_url=self.docker_hub_url,
            docker_repo_name=self.docker_repo_name,
        )


def parse_task_fields(body: bytes) -> TaskFields:
    """Decode and validate a raw request body.

    Args:
        body: Raw HTTP request body.

    Returns:
        Validated TaskFields.

    Raises:
        TaskValidationError: If the body is not JSON or a field is invalid.
    """
    try:
        request = TaskDefinitionRequest.model_validate_json(body or b"")
    except ValidationError as exc:
        error = exc.errors()[0]
        location = ".".join(str(part) for part in error["loc"]) or "body"
        raise TaskValidationError(location, error["msg"]) from exc
    return request.to_fields()
