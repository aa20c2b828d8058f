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

"""Bounded per-task build queue with non-blocking admission."""

import threading
from collections import deque
from typing import Deque, Optional

DEFAULT_BUILD_QUEUE_SIZE = 3


class BuildQueue:
    """Bounded FIFO of build trigger tokens for a single task.

    Admission never blocks: a request is either admitted immediately or
    rejected. A build that the worker has taken but not yet finished
    still occupies a slot, so at most ``capacity`` builds are pending or
    running at any time.

    Attributes:
        task_id: Task this queue belongs to.
        capacity: Maximum number of pending plus running builds.
    """

    def __init__(self, task_id: str, capacity: int = DEFAULT_BUILD_QUEUE_SIZE) -> None:
        if capacity < 1:
            raise ValueError(f"Queue capacity must be at least 1, got {capacity}")
        self.task_id = task_id
        self.capacity = capacity
        self._items: Deque[str] = deque()
        self._in_flight = 0
        self._closed = False
        self._condition = threading.Condition()

    def enqueue(self, token: str) -> bool:
        """Admit a build request if there is room.

        Args:
            token: Build trigger token (the task id).

        Returns:
            True if admitted, False if the queue is full or closed.
        """
        with self._condition:
            if self._closed or self._occupied() >= self.capacity:
                return False
            self._items.append(token)
            self._condition.notify()
            return True

    def get_next(self, timeout: Optional[float] = None) -> Optional[str]:
        """Take the oldest pending token, waiting until one arrives.

        Only the bound worker calls this. The token keeps its slot until
        ``mark_done`` is called.

        Args:
            timeout: Seconds to wait; None waits indefinitely.

        Returns:
            The next token, or None if the queue was closed or the wait
            timed out.
        """
        with self._condition:
            self._condition.wait_for(
                lambda: self._closed or bool(self._items), timeout=timeout
            )
            if self._closed or not self._items:
                return None
            self._in_flight += 1
            return self._items.popleft()

    def mark_done(self) -> None:
        """Release the slot held by the token most recently taken."""
        with self._condition:
            if self._in_flight > 0:
                self._in_flight -= 1

    def close(self) -> int:
        """Retire the queue, discarding pending tokens.

        Returns:
            Number of admitted tokens that will never be processed.
        """
        with self._condition:
            if self._closed:
                return 0
            self._closed = True
            discarded = len(self._items)
            self._items.clear()
            self._condition.notify_all()
            return discarded

    @property
    def closed(self) -> bool:
        with self._condition:
            return self._closed

    def __len__(self) -> int:
        with self._condition:
            return self._occupied()

    def _occupied(self) -> int:
        return len(self._items) + self._in_flight
