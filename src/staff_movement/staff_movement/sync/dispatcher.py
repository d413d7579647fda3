from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait as wait_futures
from dataclasses import dataclass, replace
from typing import Any, Callable, Optional, Protocol, Set

from ..core.constants import DEFAULT_SYNC_MAX_PENDING, DEFAULT_SYNC_MAX_WORKERS

logger = logging.getLogger(__name__)


@dataclass
class DispatchStats:
    submitted: int = 0
    succeeded: int = 0
    failed: int = 0
    dropped: int = 0


class Dispatcher(Protocol):
    def submit(self, label: str, fn: Callable[..., Any], *args: Any) -> bool:
        raise NotImplementedError

    def stats(self) -> DispatchStats:
        raise NotImplementedError


class UpdateDispatcher:
    """Bounded fire-and-forget queue for corrective store writes.

    Writes run on worker threads, may finish in any order, and a failure is
    logged without affecting the others. When ``max_pending`` writes are
    already in flight new ones are dropped; the next reconciliation pass
    recomputes and resubmits them.
    """

    def __init__(self, *, max_workers: int = DEFAULT_SYNC_MAX_WORKERS, max_pending: int = DEFAULT_SYNC_MAX_PENDING):
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="status-sync")
        self._max_pending = int(max_pending)
        self._lock = threading.Lock()
        self._futures: Set[Future] = set()
        self._pending = 0
        self._stats = DispatchStats()

    def submit(self, label: str, fn: Callable[..., Any], *args: Any) -> bool:
        with self._lock:
            if self._pending >= self._max_pending:
                self._stats.dropped += 1
                logger.warning("Sync queue full (%d pending), dropped: %s", self._pending, label)
                return False
            try:
                future = self._executor.submit(self._run, label, fn, args)
            except RuntimeError:
                # Executor already shut down.
                self._stats.dropped += 1
                logger.warning("Sync queue closed, dropped: %s", label)
                return False
            self._futures.add(future)
            self._pending += 1
            self._stats.submitted += 1
        future.add_done_callback(self._forget)
        return True

    def _run(self, label: str, fn: Callable[..., Any], args: tuple) -> None:
        ok = False
        try:
            fn(*args)
            ok = True
        except Exception:
            logger.exception("Sync error: %s", label)
        finally:
            with self._lock:
                self._pending -= 1
                if ok:
                    self._stats.succeeded += 1
                else:
                    self._stats.failed += 1

    def _forget(self, future: Future) -> None:
        with self._lock:
            self._futures.discard(future)

    @property
    def pending(self) -> int:
        with self._lock:
            return self._pending

    def stats(self) -> DispatchStats:
        with self._lock:
            return replace(self._stats)

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until in-flight writes finish. Returns False on timeout."""
        with self._lock:
            snapshot = list(self._futures)
        _, not_done = wait_futures(snapshot, timeout=timeout)
        return not not_done

    def shutdown(self, *, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)


class InlineDispatcher:
    """Runs writes immediately on the caller's thread, with the same failure policy."""

    def __init__(self):
        self._stats = DispatchStats()

    def submit(self, label: str, fn: Callable[..., Any], *args: Any) -> bool:
        self._stats.submitted += 1
        try:
            fn(*args)
        except Exception:
            logger.exception("Sync error: %s", label)
            self._stats.failed += 1
        else:
            self._stats.succeeded += 1
        return True

    def stats(self) -> DispatchStats:
        return replace(self._stats)
