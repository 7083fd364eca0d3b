from __future__ import annotations

import os
import threading
from collections import OrderedDict, deque
from collections.abc import Iterator
from contextlib import contextmanager
from typing import List, Optional

from .models.run import Run

MAX_RUNS = int(os.getenv("MAX_RUNS", "50"))
MAX_LOG_ENTRIES = int(os.getenv("MAX_LOG_ENTRIES", "1000"))
EVICT_ON_GET = os.getenv("EVICT_ON_GET", "true").lower() != "false"

# Runs are live objects (units, RNG); nothing is serialized or written to disk.
_runs: "OrderedDict[str, Run]" = OrderedDict()
# Guards _runs and _run_locks; route handlers run in a threadpool
_lock = threading.RLock()
# One lock per run so engine calls on a run happen strictly one at a time
_run_locks: dict[str, threading.Lock] = {}


def _touch(rid: str) -> None:
    # most recently used goes last
    _runs.move_to_end(rid)


def _enforce_cap() -> None:
    while len(_runs) > MAX_RUNS:
        rid, _ = _runs.popitem(last=False)
        _run_locks.pop(rid, None)
        logs.drop(rid)


def save(run: Run) -> None:
    with _lock:
        _runs[run.id] = run
        _touch(run.id)
        _enforce_cap()


def get(rid: str) -> Optional[Run]:
    with _lock:
        run = _runs.get(rid)
        if run is None:
            return None
        if EVICT_ON_GET:
            _touch(rid)  # makes policy LRU
        return run


def delete(rid: str) -> bool:
    with _lock:
        logs.drop(rid)
        _run_locks.pop(rid, None)
        return _runs.pop(rid, None) is not None


def list_all() -> List[Run]:
    with _lock:
        return list(reversed(_runs.values()))


def clear() -> None:
    with _lock:
        _runs.clear()
        _run_locks.clear()
        logs.clear()


def run_lock(rid: str) -> threading.Lock:
    with _lock:
        return _run_locks.setdefault(rid, threading.Lock())


@contextmanager
def locked(rid: str) -> Iterator[Optional[Run]]:
    """Hold the run's lock for the whole block; yields None for unknown ids."""
    with run_lock(rid):
        run = get(rid)
        try:
            yield run
        finally:
            if run is None:
                with _lock:
                    _run_locks.pop(rid, None)


class RunLogStore:
    """Per-run ring buffer of JSON-encoded ActionLogEntry records."""

    def __init__(self, maxlen: int = MAX_LOG_ENTRIES) -> None:
        self.maxlen = maxlen
        self._data: dict[str, deque[str]] = {}
        self._lock = threading.Lock()

    def append(self, rid: str, raw: str) -> None:
        with self._lock:
            self._data.setdefault(rid, deque(maxlen=self.maxlen)).append(raw)

    def list(self, rid: str, limit: int = 50) -> List[str]:
        with self._lock:
            entries = self._data.get(rid)
            if not entries:
                return []
            return list(entries)[-limit:]

    def drop(self, rid: str) -> None:
        with self._lock:
            self._data.pop(rid, None)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()


logs = RunLogStore()
