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

"""Runtime settings read from the environment."""

import os
from dataclasses import dataclass
from pathlib import Path

from build_dispatch.core.builds.executor import DEFAULT_BUILD_DURATION_SECONDS
from build_dispatch.core.builds.manager import DEFAULT_WORKER_JOIN_TIMEOUT_SECONDS
from build_dispatch.core.builds.queue import DEFAULT_BUILD_QUEUE_SIZE

ENV_PREFIX = "BUILD_DISPATCH_"


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration.

    Attributes:
        db_dir: Directory holding one JSON record per task.
        queue_size: Capacity of every build queue.
        build_duration: Seconds a simulated build takes.
        worker_join_timeout: Seconds to wait for a retired worker to stop.
        host: Interface the HTTP server binds to.
        port: Port the HTTP server listens on.
        log_level: Root logging level name.
    """

    db_dir: Path = Path("db")
    queue_size: int = DEFAULT_BUILD_QUEUE_SIZE
    build_duration: float = DEFAULT_BUILD_DURATION_SECONDS
    worker_join_timeout: float = DEFAULT_WORKER_JOIN_TIMEOUT_SECONDS
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        """Validate numeric ranges."""
        if self.queue_size < 1:
            raise ValueError(f"queue_size must be at least 1, got {self.queue_size}")
        if self.build_duration < 0:
            raise ValueError(
                f"build_duration cannot be negative, got {self.build_duration}"
            )
        if self.worker_join_timeout <= 0:
            raise ValueError(
                f"worker_join_timeout must be positive, got {self.worker_join_timeout}"
            )
        if not 0 < self.port < 65536:
            raise ValueError(f"port must be between 1 and 65535, got {self.port}")

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from BUILD_DISPATCH_* environment variables.

        Raises:
            ValueError: If a variable holds an unparsable or out-of-range value.
        """
        defaults = cls()
        return cls(
            db_dir=Path(os.getenv(f"{ENV_PREFIX}DB_DIR", str(defaults.db_dir))),
            queue_size=_int_env("QUEUE_SIZE", defaults.queue_size),
            build_duration=_float_env("BUILD_DURATION", defaults.build_duration),
            worker_join_timeout=_float_env(
                "WORKER_JOIN_TIMEOUT", defaults.worker_join_timeout
            ),
            host=os.getenv(f"{ENV_PREFIX}HOST", defaults.host),
            port=_int_env("PORT", defaults.port),
            log_level=os.getenv(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level).upper(),
        )


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(f"{ENV_PREFIX}{name}")
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from None


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(f"{ENV_PREFIX}{name}")
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be a number, got {raw!r}") from None
