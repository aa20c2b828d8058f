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

"""Shared fixtures for task use case tests."""

import pytest

from build_dispatch.orchestrator.tasks.commands import CreateTaskCommand
from build_dispatch.orchestrator.tasks.use_cases import CreateTaskUseCase


@pytest.fixture
def create_use_case(registry, store, queue_manager, task_id_generator):
    """Create a CreateTaskUseCase wired to fakes."""
    return CreateTaskUseCase(
        task_repo=registry,
        store=store,
        queue_manager=queue_manager,
        task_id_generator=task_id_generator,
    )


@pytest.fixture
def created_task(create_use_case, sample_fields):
    """A task created through the use case."""
    return create_use_case.execute(CreateTaskCommand(fields=sample_fields))
