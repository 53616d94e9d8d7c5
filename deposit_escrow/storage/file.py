"""JSON file backed state store."""
from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from ..errors import StateAccessFailure
from .memory import MemoryStore

logger = logging.getLogger(__name__)


class JsonFileStore(MemoryStore):
    """State kept in memory and written to a JSON file on ``flush``.

    The file is replaced atomically, so a crash mid-write leaves the
    previously committed state on disk.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(self._read())

    def _read(self) -> dict:
        if not self.path.exists():
            logger.debug("State file %s does not exist yet", self.path)
            return {}
        try:
            with open(self.path) as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise StateAccessFailure(f"Cannot read state file {self.path}: {e}") from e
        if not isinstance(raw, dict):
            raise StateAccessFailure(f"State file {self.path} is not a JSON object")
        return raw

    def flush(self) -> None:
        directory = self.path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=directory, prefix=f".{self.path.name}.")
            try:
                with os.fdopen(fd, "w") as f:
                    json.dump(self.snapshot(), f, indent=2, sort_keys=True)
                os.replace(tmp_name, self.path)
            except BaseException:
                os.unlink(tmp_name)
                raise
        except OSError as e:
            raise StateAccessFailure(f"Cannot write state file {self.path}: {e}") from e
        logger.debug("State written to %s", self.path)
