"""
Site option stores

Process-wide key/value persistence for small JSON-serializable values.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class JsonFileOptionStore:
    """
    Option store backed by a single JSON document

    Every update rewrites the whole document through a temporary file and
    os.replace(), so readers never observe a half-written file. There is no
    locking: concurrent writers may lose updates.
    """

    def __init__(self, path: Path):
        """
        Initialize option store

        Args:
            path: JSON file holding all options (created on first write)
        """
        self.path = Path(path)

    def _load(self) -> dict:
        if not self.path.exists():
            return {}

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to read options from {self.path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Options file {self.path} does not hold an object, ignoring it")
            return {}
        return data

    def _save(self, data: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".options-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.debug(f"Options saved to {self.path}")

    def get_option(self, key: str, default: Any = None) -> Any:
        return self._load().get(key, default)

    def update_option(self, key: str, value: Any) -> None:
        data = self._load()
        data[key] = value
        self._save(data)


class MemoryOptionStore:
    """In-process option store, for hosts that persist options themselves and for tests"""

    def __init__(self, initial: dict | None = None):
        self.options: dict[str, Any] = dict(initial or {})

    def get_option(self, key: str, default: Any = None) -> Any:
        return self.options.get(key, default)

    def update_option(self, key: str, value: Any) -> None:
        self.options[key] = value
