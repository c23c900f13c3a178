"""
Bounded error log of failed remote checks

The log is a single newest-first sequence kept under one site option. Each
append rewrites the whole sequence; entries only ever leave by truncation.
"""

import logging

from git_update.core.config import DEFAULT_ERROR_LOG_CAPACITY
from git_update.core.interfaces import IOptionStore
from git_update.storage.models import ErrorLogEntry

logger = logging.getLogger(__name__)

ERROR_LOG_OPTION = "git-update-response-error"


class ErrorLog:
    """
    Capacity-bounded, newest-first log persisted in an option store

    Example:
        log = ErrorLog(MemoryOptionStore(), capacity=20)
        log.append(ErrorLogEntry(item="my-plugin/my-plugin.php", status_code=404))
        latest = log.load()[0]
    """

    def __init__(
        self,
        store: IOptionStore,
        capacity: int = DEFAULT_ERROR_LOG_CAPACITY,
        option_key: str = ERROR_LOG_OPTION,
    ):
        if capacity < 1:
            raise ValueError("Error log capacity must be at least 1")
        self.store = store
        self.capacity = capacity
        self.option_key = option_key

    def _load_raw(self) -> list:
        raw = self.store.get_option(self.option_key, [])
        if not isinstance(raw, list):
            if raw is not None:
                logger.warning(f"Stored error log is {type(raw).__name__}, not a list; starting empty")
            return []
        return [item for item in raw if isinstance(item, dict)]

    def load(self) -> list[ErrorLogEntry]:
        """
        Load the persisted log

        Returns:
            Entries newest first; empty if nothing usable is stored
        """
        entries = []
        for item in self._load_raw():
            try:
                entries.append(ErrorLogEntry.from_dict(item))
            except (TypeError, ValueError) as e:
                logger.warning(f"Skipping unreadable error log entry: {e}")
        return entries

    def append(self, entry: ErrorLogEntry) -> None:
        """
        Prepend an entry and persist, dropping anything past capacity

        Args:
            entry: Failure to record
        """
        raw = self._load_raw()
        raw.insert(0, entry.to_dict())
        del raw[self.capacity:]

        self.store.update_option(self.option_key, raw)
        logger.debug(f"Logged fetch failure for {entry.item} ({len(raw)}/{self.capacity} entries)")

    def clear(self) -> None:
        """Drop all entries"""
        self.store.update_option(self.option_key, [])
        logger.info("Error log cleared")

    def __len__(self) -> int:
        return len(self._load_raw())
