"""
In‑memory append‑only record store.

A ``RecordStore`` keeps every record submitted for one resource in
insertion order for the lifetime of the object.  Records are arbitrary
JSON objects and are stored verbatim: no identifier is assigned, no
validation is performed and duplicates are allowed.  Nothing is ever
removed or modified once appended, and the store has no size bound.

FastAPI may run handlers concurrently on a thread pool, so both
operations take the store's lock.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, List, Optional

Record = Dict[str, Any]

logger = logging.getLogger(__name__)


class RecordStore:
    """Ordered, append‑only collection of records for one resource."""

    resource: str = "records"

    def __init__(self, resource: Optional[str] = None) -> None:
        if resource is not None:
            self.resource = resource
        self._records: List[Record] = []
        self._lock = threading.Lock()

    def append(self, record: Record) -> Record:
        """Append ``record`` to the end of the store and return it unchanged."""
        with self._lock:
            self._records.append(record)
            size = len(self._records)
        logger.debug("Appended record to %s (total=%d)", self.resource, size)
        return record

    def list_all(self) -> List[Record]:
        """Return a snapshot of all records in insertion order.

        The returned list is a copy, so later appends do not show up in
        it.  An empty store yields an empty list.
        """
        with self._lock:
            return list(self._records)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(resource={self.resource!r}, size={len(self)})"
