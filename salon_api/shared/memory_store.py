"""In-memory repository base - lock-guarded record storage with sequential ids"""

import logging
from collections.abc import Callable, Iterable
from threading import Lock
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class InMemoryRepository(Generic[RecordT]):
    """
    Insertion-ordered record store keyed by integer id.

    Handlers run on several threads (sync endpoints and threadpool work), so
    id assignment and every mutation happen under a single lock. Records
    handed out are copies; callers change state only through the repository.
    """

    def __init__(self, initial: Iterable[RecordT] = ()):
        self._lock = Lock()
        self._records: dict[int, RecordT] = {}
        for record in initial:
            self._records[record.id] = record.model_copy(deep=True)
        # Seeded from existing data; never decremented, so ids are not reused
        self._next_id = max(self._records, default=0) + 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def _allocate_id(self) -> int:
        next_id = self._next_id
        self._next_id += 1
        return next_id

    def add(self, build: Callable[[int], RecordT]) -> RecordT:
        """Assign the next id and store the record built for it"""
        with self._lock:
            record = build(self._allocate_id())
            self._records[record.id] = record
            return record.model_copy(deep=True)

    def list(self, predicate: Optional[Callable[[RecordT], bool]] = None) -> list[RecordT]:
        with self._lock:
            return [
                r.model_copy(deep=True)
                for r in self._records.values()
                if predicate is None or predicate(r)
            ]

    def get(self, record_id: int) -> Optional[RecordT]:
        with self._lock:
            record = self._records.get(record_id)
            return record.model_copy(deep=True) if record else None

    def modify(
        self, record_id: int, compute_changes: Callable[[RecordT], dict]
    ) -> Optional[RecordT]:
        """
        Derive field changes from the stored record and apply them atomically.

        ``compute_changes`` runs under the lock and may raise to abort the
        update. Returns None if the id is absent.
        """
        with self._lock:
            record = self._records.get(record_id)
            if record is None:
                return None
            changes = compute_changes(record.model_copy(deep=True))
            updated = record.model_copy(update=changes, deep=True)
            self._records[record_id] = updated
            return updated.model_copy(deep=True)

    def update(self, record_id: int, **changes) -> Optional[RecordT]:
        """Apply field changes to a stored record; None if the id is absent"""
        return self.modify(record_id, lambda _record: changes)

    def delete(self, record_id: int) -> bool:
        with self._lock:
            return self._records.pop(record_id, None) is not None
