import logging
import threading
from typing import Dict, List, Optional

from fastapi import Request

from string_analyzer.errors import Conflict, NotFound
from string_analyzer.schemas import StringRecord

logger = logging.getLogger(__name__)


class StringStore:
    """
    In-memory table of analyzed strings keyed by SHA-256 hash.

    Contents live for the lifetime of the process only. Inserts and deletes
    go through one lock, so concurrent submissions of the same value resolve
    to a single winner.
    """

    def __init__(self):
        self._records: Dict[str, StringRecord] = {}
        self._lock = threading.Lock()

    def insert(self, record: StringRecord) -> None:
        with self._lock:
            if record.id in self._records:
                raise Conflict("String already exists in the system")
            self._records[record.id] = record

    def get(self, string_id: str) -> Optional[StringRecord]:
        return self._records.get(string_id)

    def delete(self, string_id: str) -> None:
        with self._lock:
            if string_id not in self._records:
                raise NotFound("String does not exist in the system")
            del self._records[string_id]

    def list(self) -> List[StringRecord]:
        """All records in insertion order"""
        with self._lock:
            return list(self._records.values())

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, string_id: str) -> bool:
        return string_id in self._records


# ------------------------------------------------------------------------------
# STORE DEPENDENCY
# ------------------------------------------------------------------------------
def get_store(request: Request) -> StringStore:
    """Dependency to provide the application's store."""
    return request.app.state.store
