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

"""Fixtures for HTTP API tests.

Each test gets its own app backed by a fresh db directory and an executor
whose builds never finish on their own, so queue occupancy is stable.
"""

from pathlib import Path
from typing import Callable, Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from build_dispatch.config import Settings
from build_dispatch.infra.file_store import JsonFileTaskStore
from build_dispatch.main import create_app
from build_dispatch.tests.mocks.fakes import BlockingBuildExecutor


@pytest.fixture
def db_dir(tmp_path) -> Path:
    """Directory holding persisted task records."""
    return tmp_path / "db"


@pytest.fixture
def app_factory(db_dir) -> Callable[[], FastAPI]:  # noqa: W0621
    """Build apps that share one db directory."""

    def _create() -> FastAPI:
        return create_app(
            Settings(db_dir=db_dir, worker_join_timeout=2.0),
            store=JsonFileTaskStore(db_dir),
            executor=BlockingBuildExecutor(),
        )

    return _create


@pytest.fixture
def app(app_factory) -> FastAPI:  # noqa: W0621
    """Application under test."""
    return app_factory()


@pytest.fixture
def test_client(app) -> Generator[TestClient, None, None]:  # noqa: W0621
    """Client that runs the app lifespan around the test."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def created_task_id(test_client, valid_task_request) -> str:  # noqa: W0621
    """Id of a task created through the API."""
    response = test_client.post("/create-build", json=valid_task_request)
    assert response.status_code == 201
    return response.json()["id"]
