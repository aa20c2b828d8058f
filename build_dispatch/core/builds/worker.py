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

"""Background worker that drains one task's build queue."""

import logging
import threading
from typing import Optional

from build_dispatch.core.tasks.entities import TaskDefinition
from build_dispatch.core.tasks.value_objects import WorkerState

from .executor import BuildExecutor
from .queue import BuildQueue

logger = logging.getLogger(__name__)


class BuildWorker(threading.Thread):
    """Serial consumer bound to exactly one BuildQueue.

    The worker is RUNNING from construction until its queue is closed,
    then moves to STOPPED exactly once. Builds for the bound task never
    overlap; a failing build is recorded and the loop carries on.

    Attributes:
        definition: Task definition every build of this worker uses.
        queue: The queue this worker drains.
        processed: Builds that ran to completion.
        failed: Builds whose executor raised.
        last_error: Message of the most recent executor failure.
    """

    def __init__(
        self,
        definition: TaskDefinition,
        queue: BuildQueue,
        executor: BuildExecutor,
    ) -> None:
        super().__init__(name=f"build-worker-{definition.task_id}", daemon=True)
        self.definition = definition
        self.queue = queue
        self.executor = executor
        self.processed = 0
        self.failed = 0
        self.last_error = ""
        self._cancel_event = threading.Event()
        self._state = WorkerState.RUNNING
        self._state_lock = threading.Lock()

    @property
    def state(self) -> WorkerState:
        with self._state_lock:
            return self._state

    def run(self) -> None:
        try:
            while True:
                token = self.queue.get_next()
                if token is None:
                    break
                try:
                    self._build(token)
                finally:
                    self.queue.mark_done()
        finally:
            self._mark_stopped()

    def stop(self, timeout: Optional[float] = None) -> bool:
        """Signal the worker to stop and wait for it to acknowledge.

        Closes the bound queue and interrupts a build in progress.

        Args:
            timeout: Seconds to wait for the thread to exit.

        Returns:
            True if the worker is STOPPED when this returns.
        """
        self._cancel_event.set()
        self.queue.close()
        if self.is_alive():
            self.join(timeout)
        elif self.ident is None:
            self._mark_stopped()
        return self.state.is_terminal()

    def _build(self, token: str) -> None:
        definition = self.definition
        logger.info(
            "Building %s (%s@%s -> %s)",
            token,
            definition.git_url,
            definition.branch,
            definition.docker_repo_name,
        )
        try:
            completed = self.executor.execute(definition, self._cancel_event)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            self.failed += 1
            self.last_error = str(exc)
            logger.exception("Build of task %s failed", token)
        else:
            if completed:
                self.processed += 1
                logger.info("Build of task %s finished", token)
            else:
                logger.warning("Build of task %s interrupted by queue retirement", token)

    def _mark_stopped(self) -> None:
        with self._state_lock:
            if self._state.is_terminal():
                return
            self._state = WorkerState.STOPPED
        logger.info("Build worker for task %s stopped", self.definition.task_id)
