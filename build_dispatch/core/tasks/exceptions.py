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

"""Domain exceptions for the build task domain."""

from typing import Optional


class TaskDomainError(Exception):
    """Base exception for all build task domain errors."""

    def __init__(self, message: str, correlation_id: Optional[str] = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error description.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(message)
        self.message = message
        self.correlation_id = correlation_id


class TaskValidationError(TaskDomainError):
    """Task definition fields violate their constraints."""

    def __init__(
        self,
        field_name: str,
        reason: str,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize validation error.

        Args:
            field_name: Name of the offending field.
            reason: Why the value was rejected.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"Invalid value for {field_name}: {reason}",
            correlation_id=correlation_id
        )
        self.field_name = field_name
        self.reason = reason


class TaskNotFoundError(TaskDomainError):
    """Task definition does not exist in the registry."""

    def __init__(self, task_id: str, correlation_id: Optional[str] = None) -> None:
        """Initialize task not found error.

        Args:
            task_id: The task ID that was not found.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"Task definition not found: {task_id}",
            correlation_id=correlation_id
        )
        self.task_id = task_id


class TaskIdExhaustionError(TaskDomainError):
    """The id generator could not produce an unused task identifier."""

    def __init__(self, attempts: int, correlation_id: Optional[str] = None) -> None:
        """Initialize id exhaustion error.

        Args:
            attempts: Number of generation attempts made.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"Failed to generate an unused task id after {attempts} attempts",
            correlation_id=correlation_id
        )
        self.attempts = attempts



class PersistenceError(TaskDomainError):
    """Writing a task definition to durable storage failed."""

    def __init__(
        self,
        task_id: str,
        reason: str,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize persistence error.

        Args:
            task_id: Task whose record could not be written.
            reason: Underlying failure description.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"Failed to persist task {task_id}: {reason}",
            correlation_id=correlation_id
        )
        self.task_id = task_id
        self.reason = reason


class PersistenceLoadError(TaskDomainError):
    """A persisted task record could not be read or parsed at startup."""

    def __init__(
        self,
        location: str,
        reason: str,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize persistence load error.

        Args:
            location: Path or key of the unreadable record.
            reason: Underlying failure description.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"Failed to load task record {location}: {reason}",
            correlation_id=correlation_id
        )
        self.location = location
        self.reason = reason
