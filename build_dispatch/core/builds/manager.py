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

"""Lifecycle manager for per-task build queues and workers."""

import logging
import threading
from dataclasses import dataclass
from typing import Dict, List, Optional

from build_dispatch.core.tasks.entities import TaskDefinition
from build_dispatch.core.tasks.exceptions import TaskNotFoundError

from .executor import BuildExecutor
from .queue import DEFAULT_BUILD_QUEUE_SIZE, BuildQueue
from .worker import BuildWorker

logger = logging.getLogger(__name__)

DEFAULT_WORKER_JOIN_TIMEOUT_SECONDS = 5.0


@dataclass(frozen=True)
class BuildPipeline:
    """A build queue together with the worker bound to it."""

    queue: BuildQueue
    worker: BuildWorker


class BuildQueueManager:
    """Creates, replaces and retires the (queue, worker) pair of each task.

    Re-initializing a task retires its current pair before the new one
    starts, so builds of one task never overlap. Retirement abandons
    pending requests and logs how many were dropped. A worker that
    outlives ``join_timeout`` is logged and still awaited; only that
    task's re-initialization waits, other tasks are unaffected.

    Attributes:
        capacity: Capacity given to every new queue.
        join_timeout: Seconds to wait for a retired worker before warning.
    """

    def __init__(
        self,
        executor: BuildExecutor,
        capacity: int = DEFAULT_BUILD_QUEUE_SIZE,
        join_timeout: float = DEFAULT_WORKER_JOIN_TIMEOUT_SECONDS,
    ) -> None:
        self.executor = executor
        self.capacity = capacity
        self.join_timeout = join_timeout
        self._pipelines: Dict[str, BuildPipeline] = {}
        self._task_locks: Dict[str, threading.Lock] = {}
        self._lock = threading.Lock()

    def init_build_queue(self, definition: TaskDefinition) -> BuildPipeline:
        """Start a fresh queue and worker for the definition.

        Any existing pair for the same task is retired first. While it
        is being retired its closed queue stays registered, so build
        requests for the task are rejected rather than lost.

        Args:
            definition: Definition the new worker builds.

        Returns:
            The newly registered pipeline.
        """
        task_id = str(definition.task_id)
        with self._task_lock(task_id):
            previous = self.get(task_id)
            if previous is not None:
                self._retire(task_id, previous, wait_for_stop=True)

            queue = BuildQueue(task_id, capacity=self.capacity)
            worker = BuildWorker(definition, queue, self.executor)
            pipeline = BuildPipeline(queue=queue, worker=worker)
            with self._lock:
                self._pipelines[task_id] = pipeline
            worker.start()

        logger.info(
            "Build queue initialized for task %s (capacity %d)", task_id, self.capacity
        )
        return pipeline

    def enqueue(self, task_id: str) -> bool:
        """Request a build of the task.

        Args:
            task_id: Task to build.

        Returns:
            True if the request was admitted, False if the queue is full.

        Raises:
            TaskNotFoundError: If no queue is registered for the task.
        """
        pipeline = self.get(task_id)
        if pipeline is None:
            raise TaskNotFoundError(task_id)
        return pipeline.queue.enqueue(task_id)

    def get(self, task_id: str) -> Optional[BuildPipeline]:
        with self._lock:
            return self._pipelines.get(task_id)

    def task_ids(self) -> List[str]:
        with self._lock:
            return list(self._pipelines)

    def shutdown(self) -> None:
        """Retire every pipeline; used when the process exits.

        Workers still busy after ``join_timeout`` are left behind; they
        are daemon threads and end with the process.
        """
        with self._lock:
            pipelines = self._pipelines
            self._pipelines = {}
        for task_id, pipeline in pipelines.items():
            self._retire(task_id, pipeline, wait_for_stop=False)
        logger.info("Build queue manager shut down (%d pipelines)", len(pipelines))

    def _task_lock(self, task_id: str) -> threading.Lock:
        with self._lock:
            return self._task_locks.setdefault(task_id, threading.Lock())

    def _retire(self, task_id: str, pipeline: BuildPipeline, wait_for_stop: bool) -> None:
        discarded = pipeline.queue.close()
        if discarded:
            logger.warning(
                "Abandoning %d pending build request(s) for task %s", discarded, task_id
            )
        if pipeline.worker.stop(self.join_timeout):
            return
        logger.warning(
            "Build worker for task %s did not stop within %.1fs",
            task_id,
            self.join_timeout,
        )
        if wait_for_stop:
            pipeline.worker.join()
            logger.info("Build worker for task %s stopped after a late build", task_id)
