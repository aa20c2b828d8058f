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

"""Shared pytest fixtures for Build Dispatch tests.

Every fixture builds fresh state, so no test sees another test's tasks,
queues or workers.
"""

from typing import Dict, Generator

import pytest

from build_dispatch.core.builds.manager import BuildQueueManager
from build_dispatch.core.tasks.registry import TaskRegistry
from build_dispatch.core.tasks.value_objects import TaskFields
from build_dispatch.tests.mocks.fakes import (
    BlockingBuildExecutor,
    FakeTaskDefinitionStore,
    FakeTaskIdGenerator,
)


@pytest.fixture
def registry() -> TaskRegistry:
    """Provide an empty task registry."""
    return TaskRegistry()


@pytest.fixture
def store() -> FakeTaskDefinitionStore:
    """Provide fake task definition store."""
    return FakeTaskDefinitionStore()


@pytest.fixture
def task_id_generator() -> FakeTaskIdGenerator:
    """Provide fake TaskId generator."""
    return FakeTaskIdGenerator()


@pytest.fixture
def executor() -> BlockingBuildExecutor:
    """Provide an executor whose builds block until released."""
    return BlockingBuildExecutor()


@pytest.fixture
def queue_manager(executor) -> Generator[BuildQueueManager, None, None]:  # noqa: W0621
    """Provide a queue manager that is shut down after the test."""
    manager = BuildQueueManager(executor, capacity=3, join_timeout=2.0)
    yield manager
    manager.shutdown()


@pytest.fixture
def sample_fields() -> TaskFields:
    """Valid task fields matching the reference scenario."""
    return TaskFields(
        name="svc",
        description="a test service",
        git_url="https://x/y",
        branch="main",
        docker_hub_url="https://hub/x",
        docker_repo_name="x/svc",
    )


@pytest.fixture
def valid_task_request() -> Dict[str, str]:
    """Create a valid create-build request body."""
    return {
        "name": "svc",
        "description": "a test service",
        "gitUrl": "https://x/y",
        "branch": "main",
        "dockerHubUrl": "https://hub/x",
        "dockerRepoName": "x/svc",
    }
