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

"""Infrastructure layer for TaskId generation."""

import uuid

from build_dispatch.core.tasks.exceptions import TaskDomainError
from build_dispatch.core.tasks.repositories import TaskIdGenerator
from build_dispatch.core.tasks.value_objects import TaskId


class UUIDv4TaskIdGenerator(TaskIdGenerator):
    """Random UUID v4 generator for task identifiers."""

    def generate(self) -> TaskId:
        """Generate a new random TaskId.

        Returns:
            TaskId: A new UUID v4 identifier.

        Raises:
            TaskDomainError: If TaskId generation fails.
        """
        try:
            return TaskId(str(uuid.uuid4()))
        except ValueError:
            raise
        except Exception as exc:
            raise TaskDomainError(f"Failed to generate TaskId: {exc}") from exc
