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

"""Dependency wiring shared by the API routes."""

from dataclasses import dataclass

from fastapi import Request

from build_dispatch.core.builds.manager import BuildQueueManager
from build_dispatch.core.tasks.registry import TaskRegistry
from build_dispatch.orchestrator.tasks.use_cases import (
    CreateTaskUseCase,
    GetTaskUseCase,
    ListTasksUseCase,
    LoadTasksUseCase,
    StartBuildUseCase,
    UpdateTaskUseCase,
)


@dataclass(frozen=True)
class ServiceContainer:  # pylint: disable=too-many-instance-attributes
    """Explicitly owned application state injected into the routes."""

    registry: TaskRegistry
    queue_manager: BuildQueueManager
    load_tasks: LoadTasksUseCase
    create_task: CreateTaskUseCase
    update_task: UpdateTaskUseCase
    get_task: GetTaskUseCase
    list_tasks: ListTasksUseCase
    start_build: StartBuildUseCase


def get_container(request: Request) -> ServiceContainer:
    """FastAPI dependency returning the container attached to the app."""
    return request.app.state.container
