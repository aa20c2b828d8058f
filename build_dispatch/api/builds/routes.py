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

"""Build task endpoints.

Create and update read the raw body themselves so that an unknown id on
update is reported before the body is looked at.
"""

import logging

from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse, PlainTextResponse

from build_dispatch.core.tasks.exceptions import TaskNotFoundError, TaskValidationError
from build_dispatch.orchestrator.tasks.commands import (
    CreateTaskCommand,
    StartBuildCommand,
    UpdateTaskCommand,
)

from ..dependencies import ServiceContainer, get_container
from .schemas import parse_task_fields

logger = logging.getLogger(__name__)

router = APIRouter(tags=["builds"])


def _bad_request(exc: TaskValidationError) -> PlainTextResponse:
    return PlainTextResponse(
        f"Bad request: {exc.message}", status_code=status.HTTP_400_BAD_REQUEST
    )


@router.post("/create-build")
async def create_build(
    request: Request,
    container: ServiceContainer = Depends(get_container),
) -> Response:
    """Register a new task definition and start its build queue."""
    logger.info("Got request /create-build")
    body = await request.body()
    try:
        fields = parse_task_fields(body)
    except TaskValidationError as exc:
        logger.warning("Rejected create-build request: %s", exc.message)
        return _bad_request(exc)

    response = await run_in_threadpool(
        container.create_task.execute, CreateTaskCommand(fields=fields)
    )
    return JSONResponse(response.to_dict(), status_code=status.HTTP_201_CREATED)


@router.get("/get-build")
def get_build(
    task_id: str = Query("", alias="id"),
    container: ServiceContainer = Depends(get_container),
) -> Response:
    logger.info("Got request /get-build?id=%s", task_id)
    try:
        response = container.get_task.execute(task_id)
    except TaskNotFoundError:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return JSONResponse(response.to_dict())


@router.get("/list-all-builds")
def list_all_builds(container: ServiceContainer = Depends(get_container)) -> Response:
    logger.info("Got request /list-all-builds")
    return JSONResponse(container.list_tasks.execute().to_dict())


@router.post("/update-build")
async def update_build(
    request: Request,
    task_id: str = Query("", alias="id"),
    container: ServiceContainer = Depends(get_container),
) -> Response:
    """Rewrite a task definition and refresh its build queue."""
    logger.info("Got request /update-build?id=%s", task_id)
    not_found = PlainTextResponse(
        "Task definition not found", status_code=status.HTTP_404_NOT_FOUND
    )
    try:
        await run_in_threadpool(container.get_task.execute, task_id)
    except TaskNotFoundError:
        return not_found

    body = await request.body()
    try:
        fields = parse_task_fields(body)
    except TaskValidationError as exc:
        logger.warning("Rejected update-build request for %s: %s", task_id, exc.message)
        return _bad_request(exc)

    try:
        response = await run_in_threadpool(
            container.update_task.execute,
            UpdateTaskCommand(task_id=task_id, fields=fields),
        )
    except TaskNotFoundError:
        return not_found
    return JSONResponse(response.to_dict(), status_code=status.HTTP_201_CREATED)


@router.post("/start-build", response_class=PlainTextResponse)
def start_build(
    task_id: str = Query("", alias="id"),
    container: ServiceContainer = Depends(get_container),
) -> Response:
    """Enqueue a build; a full queue is reported with 200 and a message."""
    logger.info("Got request /start-build?id=%s", task_id)
    try:
        response = container.start_build.execute(StartBuildCommand(task_id=task_id))
    except TaskValidationError:
        return PlainTextResponse(
            "Invalid build identifier", status_code=status.HTTP_400_BAD_REQUEST
        )
    except TaskNotFoundError:
        return PlainTextResponse(
            "Not found task definition matching id",
            status_code=status.HTTP_404_NOT_FOUND,
        )
    return PlainTextResponse(response.message)
