from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Protocol, runtime_checkable

from .exceptions import InvalidProgressError

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProgressEvent:
    """
    Run progress published by the optimization loop.
    ``progress`` is the consumed share of the evaluation budget, within [0, 1].
    """

    progress: float
    evaluations: int | None = None


@runtime_checkable
class ProgressObserver(Protocol):
    """
    Observer interface for run progress notifications.
    """

    def on_progress(self, event: ProgressEvent) -> None:
        """Called whenever the loop publishes a new progress value."""
        ...


ProgressHandler = Callable[[ProgressEvent], None]


class ProgressPublisher:
    """
    Dispatches progress events to subscribed handlers.

    The loop owns one publisher per run and calls ``publish`` at each evaluation
    or generation boundary. Handlers run synchronously in the publishing thread.
    """

    def __init__(self) -> None:
        self._handlers: list[ProgressHandler] = []
        self._lock = threading.Lock()
        self._last: ProgressEvent | None = None

    def subscribe(self, handler: ProgressHandler | ProgressObserver) -> ProgressHandler:
        """
        Register a handler (callable or ProgressObserver).

        Returns the callable actually stored, to be passed to ``unsubscribe``.
        """
        fn: ProgressHandler = handler.on_progress if isinstance(handler, ProgressObserver) else handler
        with self._lock:
            if fn not in self._handlers:
                self._handlers.append(fn)
        return fn

    def unsubscribe(self, handler: ProgressHandler) -> None:
        with self._lock:
            if handler in self._handlers:
                self._handlers.remove(handler)

    def publish(self, progress: float, evaluations: int | None = None) -> ProgressEvent:
        """Validate and dispatch a progress value to every handler."""
        progress = float(progress)
        if not 0.0 <= progress <= 1.0:
            raise InvalidProgressError(progress)
        event = ProgressEvent(progress=progress, evaluations=evaluations)
        with self._lock:
            handlers = list(self._handlers)
            self._last = event
        _logger.debug("Publishing progress %.4f to %d handler(s)", progress, len(handlers))
        for fn in handlers:
            fn(event)
        return event

    @property
    def last_event(self) -> ProgressEvent | None:
        return self._last

    def __len__(self) -> int:
        return len(self._handlers)


__all__ = ["ProgressEvent", "ProgressObserver", "ProgressPublisher", "ProgressHandler"]
