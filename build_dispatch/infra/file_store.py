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

"""JSON file implementation of the task definition store.

Each definition lives in ``<db_dir>/<task id>.json``. Writes go through a
temporary file and an atomic rename so a crash never leaves a truncated
record behind.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Union

from pydantic import ValidationError

from build_dispatch.core.tasks.entities import TaskDefinition
from build_dispatch.core.tasks.exceptions import PersistenceError, PersistenceLoadError

from .task_record import TaskDefinitionRecord

logger = logging.getLogger(__name__)

RECORD_SUFFIX = ".json"


class JsonFileTaskStore:
    """Directory of JSON records, one file per task."""

    def __init__(self, db_dir: Union[str, Path]) -> None:
        self.db_dir = Path(db_dir)

    def path_for(self, task_id: str) -> Path:
        return self.db_dir / f"{task_id}{RECORD_SUFFIX}"

    def save(self, definition: TaskDefinition) -> None:
        """Write the definition, replacing any previous record.

        Raises:
            PersistenceError: If the directory or file cannot be written.
        """
        task_id = str(definition.task_id)
        payload = TaskDefinitionRecord.from_entity(definition).to_json()
        try:
            self.db_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.db_dir, prefix=f".{task_id}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(payload)
                os.replace(tmp_name, self.path_for(task_id))
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise PersistenceError(task_id, str(exc)) from exc
        logger.debug("Persisted task %s to %s", task_id, self.path_for(task_id))

    def load_all(self) -> Dict[str, TaskDefinition]:
        """Load every record in the directory.

        A missing directory means no tasks have been stored yet.

        Raises:
            PersistenceLoadError: If any record cannot be read or parsed.
        """
        definitions: Dict[str, TaskDefinition] = {}
        if not self.db_dir.exists():
            return definitions

        try:
            paths = sorted(self.db_dir.glob(f"*{RECORD_SUFFIX}"))
        except OSError as exc:
            raise PersistenceLoadError(str(self.db_dir), str(exc)) from exc

        for path in paths:
            try:
                data = path.read_text(encoding="utf-8")
            except OSError as exc:
                raise PersistenceLoadError(str(path), str(exc)) from exc
            try:
                definition = TaskDefinitionRecord.model_validate_json(data).to_entity()
            except (ValidationError, ValueError) as exc:
                raise PersistenceLoadError(str(path), str(exc)) from exc
            definitions[str(definition.task_id)] = definition

        logger.info("Loaded %d task definition(s) from %s", len(definitions), self.db_dir)
        return definitions
