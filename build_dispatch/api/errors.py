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

"""Exception handlers mapping domain errors to HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from build_dispatch.core.tasks.exceptions import TaskDomainError

logger = logging.getLogger(__name__)


async def _domain_error_handler(request: Request, exc: TaskDomainError) -> PlainTextResponse:
    logger.error("Unhandled domain error on %s: %s", request.url.path, exc.message)
    return PlainTextResponse(
        "Internal server error",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install handlers for errors the routes do not map themselves."""
    app.add_exception_handler(TaskDomainError, _domain_error_handler)
