from __future__ import annotations

import logging
import queue
import threading
from concurrent.futures import Future
from typing import Any, Callable, List, Optional

logger = logging.getLogger(__name__)

BusyListener = Callable[[bool], None]

_STOP = object()


class ActionQueue:
    """Runs submitted operations one at a time, in submission order.

    A single daemon worker drains the queue. ``busy`` is true from the first
    submission until the queue is empty again; listeners are told about each
    busy/idle transition. A failing operation resolves its future with the
    exception and the worker moves on to the next one.
    """

    def __init__(self, *, name: str = "action-queue"):
        self._queue: "queue.Queue[Any]" = queue.Queue()
        self._lock = threading.Lock()
        # Held across a pending-count change and its notification so listeners
        # see busy/idle transitions in the order they happened.
        self._transitions = threading.RLock()
        self._pending = 0
        self._listeners: List[BusyListener] = []
        self._closed = False
        self._worker = threading.Thread(target=self._run, name=name, daemon=True)
        self._worker.start()

    @property
    def busy(self) -> bool:
        with self._lock:
            return self._pending > 0

    def subscribe(self, listener: BusyListener) -> Callable[[], None]:
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def submit(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        future: Future = Future()
        with self._transitions:
            with self._lock:
                if self._closed:
                    raise RuntimeError("action queue is shut down")
                self._pending += 1
                became_busy = self._pending == 1
                listeners = list(self._listeners)
            if became_busy:
                self._notify(listeners, True)
            self._queue.put((future, fn, args, kwargs))
        return future

    def join(self, timeout: Optional[float] = None) -> bool:
        """Wait until every submitted operation has finished. False on timeout."""
        done = threading.Event()
        if not self.busy:
            return True
        unsubscribe = self.subscribe(lambda busy: None if busy else done.set())
        try:
            if not self.busy:
                return True
            return done.wait(timeout)
        finally:
            unsubscribe()

    def shutdown(self, *, wait: bool = True) -> None:
        with self._lock:
            if self._closed:
                return
            self._closed = True
        self._queue.put(_STOP)
        if wait:
            self._worker.join()

    def _notify(self, listeners: List[BusyListener], busy: bool) -> None:
        for listener in listeners:
            try:
                listener(busy)
            except Exception:
                logger.exception("Busy listener failed")

    def _run(self) -> None:
        while True:
            item = self._queue.get()
            if item is _STOP:
                return
            future, fn, args, kwargs = item
            if future.set_running_or_notify_cancel():
                try:
                    result = fn(*args, **kwargs)
                except Exception as e:
                    logger.warning("Queued operation %s failed: %s", getattr(fn, "__name__", fn), e)
                    future.set_exception(e)
                else:
                    future.set_result(result)

            with self._transitions:
                with self._lock:
                    self._pending -= 1
                    became_idle = self._pending == 0
                    listeners = list(self._listeners)
                if became_idle:
                    self._notify(listeners, False)
