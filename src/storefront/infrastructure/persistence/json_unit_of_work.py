"""Unit of Work over a single JSON order file (staging-then-swap).

Entering the unit of work loads the file into memory; the repository
stages writes on that copy.  ``commit()`` serialises the copy to a
temporary file in the same directory, flushes it to disk and moves it
over the original with ``os.replace`` (an atomic rename), so readers
see either the old document or the new one, never a half-written file.
``rollback()`` simply drops the copy.

Commits to the same file from different units of work in one process
are serialised with a per-file lock held for the whole ``with`` block.
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path

from storefront.domain.unit_of_work import AbstractUnitOfWork
from storefront.infrastructure.persistence.json_files import write_json_atomically
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
    empty_document,
)

logger = logging.getLogger(__name__)

_locks: dict[Path, threading.Lock] = {}
_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.Lock:
    with _locks_guard:
        return _locks.setdefault(path, threading.Lock())


class JsonUnitOfWork(AbstractUnitOfWork):

    orders: JsonOrderRepository

    def __init__(self, file_path: Path) -> None:
        self._file_path = Path(file_path).resolve()
        self._lock = _lock_for(self._file_path)

    def _begin(self) -> None:
        self._lock.acquire()
        try:
            self.orders = JsonOrderRepository(self._load())
        except Exception:
            self._lock.release()
            raise

    def commit(self) -> None:
        if not self.orders.dirty:
            return
        write_json_atomically(self._file_path, self.orders.document)
        self.orders.dirty = False
        logger.debug("Swapped in new order document at %s", self._file_path)

    def rollback(self) -> None:
        self.orders = JsonOrderRepository(empty_document())

    def close(self) -> None:
        self._lock.release()

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> dict:
        if not self._file_path.exists():
            return empty_document()
        return json.loads(self._file_path.read_text(encoding="utf-8"))
