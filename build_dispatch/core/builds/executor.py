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

"""Build executor port and the simulated implementation."""

import logging
import threading
from typing import Protocol

from build_dispatch.core.tasks.entities import TaskDefinition

logger = logging.getLogger(__name__)

DEFAULT_BUILD_DURATION_SECONDS = 60.0


class BuildExecutor(Protocol):
    """Port for running a single build of a task definition.

    Implementations should return soon after ``cancel_event`` is set.
    Re-initializing a task waits for its running build to return before
    the replacement worker starts.
    """

    def execute(self, definition: TaskDefinition, cancel_event: threading.Event) -> bool:
        """Run one build.

        A real implementation clones ``git_url`` at ``branch``, builds the
        container image and pushes it to ``docker_repo_name``.

        Args:
            definition: Definition the build is bound to.
            cancel_event: Set when the owning worker is being retired.

        Returns:
            True if the build ran to completion, False if it was cancelled.
        """
        ...


class SimulatedBuildExecutor:  # pylint: disable=too-few-public-methods
    """Executor that stands in for a build with a fixed pause."""

    def __init__(self, duration_seconds: float = DEFAULT_BUILD_DURATION_SECONDS) -> None:
        if duration_seconds < 0:
            raise ValueError(
                f"Build duration cannot be negative, got {duration_seconds}"
            )
        self.duration_seconds = duration_seconds

    def execute(self, definition: TaskDefinition, cancel_event: threading.Event) -> bool:
        logger.debug(
            "Simulating build of %s@%s for %.1fs",
            definition.git_url,
            definition.branch,
            self.duration_seconds,
        )
        return not cancel_event.wait(self.duration_seconds)
