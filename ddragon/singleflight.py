# ddragon/singleflight.py
from __future__ import annotations
from contextlib import contextmanager
from threading import Lock
from typing import Dict, Hashable, Iterator, Tuple

class KeyedLock:
    """
    One lock per key, created on demand and dropped when nobody holds or waits on it.
    Concurrent misses on the same key serialise; the second caller finds the file on disk.
    """
    def __init__(self):
        self._guard = Lock()
        self._locks: Dict[Hashable, Tuple[Lock, int]] = {}

    @contextmanager
    def hold(self, key: Hashable) -> Iterator[None]:
        with self._guard:
            lock, users = self._locks.get(key, (None, 0))
            if lock is None:
                lock = Lock()
            self._locks[key] = (lock, users + 1)
        try:
            with lock:
                yield
        finally:
            with self._guard:
                lock, users = self._locks[key]
                if users <= 1:
                    del self._locks[key]
                else:
                    self._locks[key] = (lock, users - 1)

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)
