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

"""Value objects for the build task domain.

All value objects are immutable and defined by their values, not identity.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Dict

from .exceptions import TaskValidationError


@dataclass(frozen=True)
class TaskId:
    """UUID identifier for a build task definition.

    Attributes:
        value: String representation of the UUID.

    Raises:
        ValueError: If value does not match the UUID pattern or exceeds length.
    """

    value: str

    UUID_PATTERN: ClassVar[str] = (
        r'^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$'
    )
    MAX_LENGTH: ClassVar[int] = 36

    def __post_init__(self) -> None:
        """Validate UUID format and length."""
        if len(self.value) > self.MAX_LENGTH:
            raise ValueError(
                f"TaskId length cannot exceed {self.MAX_LENGTH} characters, "
                f"got {len(self.value)}"
            )
        if not re.match(self.UUID_PATTERN, self.value.lower()):
            raise ValueError(f"Invalid UUID format: {self.value}")

    def __str__(self) -> str:
        """Return string representation."""
        return self.value


@dataclass(frozen=True)
class TaskFields:
    """Mutable, user-supplied part of a task definition.

    Every field is required and must not exceed its maximum length.

    Raises:
        TaskValidationError: If a field is blank or out of bounds.
    """

    name: str
    description: str
    git_url: str
    branch: str
    docker_hub_url: str
    docker_repo_name: str

    MAX_LENGTHS: ClassVar[Dict[str, int]] = {
        "name": 255,
        "description": 255,
        "git_url": 255,
        "branch": 64,
        "docker_hub_url": 255,
        "docker_repo_name": 64,
    }

    def __post_init__(self) -> None:
        """Validate presence and maximum length of every field."""
        for field_name, max_length in self.MAX_LENGTHS.items():
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value.strip():
                raise TaskValidationError(field_name, "value is required")
            if len(value) > max_length:
                raise TaskValidationError(
                    field_name,
                    f"length cannot exceed {max_length} characters, got {len(value)}"
                )


class WorkerState(str, Enum):
    """Build worker lifecycle states.

    STOPPED is terminal: a worker never resumes once its queue is retired.
    """

    RUNNING = "RUNNING"
    STOPPED = "STOPPED"

    def is_terminal(self) -> bool:
        """Check if state is terminal."""
        return self == WorkerState.STOPPED
