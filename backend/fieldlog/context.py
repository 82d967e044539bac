# backend/fieldlog/context.py
"""Execution contexts that own the mutable session state.

Every mutation of records, location and authorization runs on exactly one
context. Callbacks arriving from other threads are handed off with
``post``; commands that need an answer use ``call``.
"""
from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InlineContext:
    """Runs work immediately on the calling thread (tests, single-threaded hosts)."""

    def post(self, fn: Callable[..., Any], *args: Any) -> Future:
        fut: Future = Future()
        try:
            fut.set_result(fn(*args))
        except Exception as exc:
            fut.set_exception(exc)
        _log_failure(fut)
        return fut

    def call(self, fn: Callable[..., T], *args: Any) -> T:
        return fn(*args)

    def shutdown(self) -> None:
        pass


class OwnerContext:
    """A single worker thread that serializes all state mutations."""

    def __init__(self, name: str = "fieldlog-owner"):
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix=name)
        self._owner_ident: int | None = None
        self._executor.submit(self._capture_ident).result()

    def _capture_ident(self) -> None:
        self._owner_ident = threading.get_ident()

    def is_owner(self) -> bool:
        return threading.get_ident() == self._owner_ident

    def post(self, fn: Callable[..., Any], *args: Any) -> Future:
        fut = self._executor.submit(fn, *args)
        fut.add_done_callback(_log_failure)
        return fut

    def call(self, fn: Callable[..., T], *args: Any) -> T:
        # Re-entrant calls from the owner thread would deadlock the single worker
        if self.is_owner():
            return fn(*args)
        return self._executor.submit(fn, *args).result()

    def shutdown(self) -> None:
        self._executor.shutdown(wait=True)


def _log_failure(fut: Future) -> None:
    exc = fut.exception()
    if exc is not None:
        logger.error("posted callback failed: %s", exc, exc_info=exc)
