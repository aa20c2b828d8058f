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

"""LoadTasks use case: seed in-memory state from durable storage."""

import logging

from build_dispatch.core.builds.manager import BuildQueueManager
from build_dispatch.core.tasks.registry import TaskRegistry
from build_dispatch.core.tasks.repositories import TaskDefinitionStore

logger = logging.getLogger(__name__)


class LoadTasksUseCase:  # pylint: disable=too-few-public-methods
    """Runs once at startup, before any request is served.

    Every stored definition is registered and gets a live queue and
    worker. A corrupt record aborts startup instead of being skipped.
    """

    def __init__(
        self,
        registry: TaskRegistry,
        store: TaskDefinitionStore,
        queue_manager: BuildQueueManager,
    ) -> None:
        self._registry = registry
        self._store = store
        self._queue_manager = queue_manager

    def execute(self) -> int:
        """Load every task definition and start its worker.

        Returns:
            Number of task definitions loaded.

        Raises:
            PersistenceLoadError: If any stored record is unreadable.
        """
        definitions = self._store.load_all()
        self._registry.seed(definitions.values())
        for definition in definitions.values():
            self._queue_manager.init_build_queue(definition)
        logger.info("Loaded %d task definition(s)", len(definitions))
        return len(definitions)
