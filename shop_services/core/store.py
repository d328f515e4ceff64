"""
Thread-safe in-memory record storage.

A ``RecordStore`` maps integer identifiers to pydantic records and owns
a monotonically increasing id counter.  Both are guarded by a single
``ReadWriteLock``: ``list``/``get`` take the shared side, ``create``
takes the exclusive side.  Stores are constructed explicitly by the
application factories and live on ``app.state``; there is no
module-level store.

The store performs no validation of field contents.  Records are
copied on the way in and on the way out so callers can never mutate
stored state without going through the lock.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Dict, Generic, Iterable, Iterator, List, Optional, TypeVar

from pydantic import BaseModel

RecordT = TypeVar("RecordT", bound=BaseModel)


class ReadWriteLock:
    """Many readers or one writer.

    Waiting writers block new readers, so a steady stream of reads
    cannot starve ``create``.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class RecordStore(Generic[RecordT]):
    """Keyed storage for one record type.

    Parameters
    ----------
    seed : Iterable[RecordT]
        Fixture records inserted under their own ids at construction.
    start_id : Optional[int]
        First id handed out by ``create``.  Defaults to one past the
        largest seeded id (or 1 for an empty store).
    """

    def __init__(self, seed: Iterable[RecordT] = (), start_id: Optional[int] = None) -> None:
        self._lock = ReadWriteLock()
        self._records: Dict[int, RecordT] = {}
        for record in seed:
            self._records[record.id] = record.model_copy()
        if start_id is None:
            start_id = max(self._records, default=0) + 1
        self._next_id = start_id

    @property
    def next_id(self) -> int:
        """Id the next ``create`` call will assign."""
        with self._lock.read_locked():
            return self._next_id

    def list(self) -> List[RecordT]:
        """Return a snapshot of all records in insertion order."""
        with self._lock.read_locked():
            return [record.model_copy() for record in self._records.values()]

    def get(self, record_id: int) -> Optional[RecordT]:
        """Return the record stored under ``record_id`` or ``None``."""
        with self._lock.read_locked():
            record = self._records.get(record_id)
            return record.model_copy() if record is not None else None

    def create(self, record: RecordT) -> RecordT:
        """Store ``record`` under the next id and return the stored copy.

        Any id supplied by the client is overwritten.
        """
        with self._lock.write_locked():
            stored = record.model_copy(update={"id": self._next_id})
            self._records[stored.id] = stored
            self._next_id += 1
            return stored.model_copy()

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._records)
