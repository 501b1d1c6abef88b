import threading
from typing import Any, Callable, Optional


class Debouncer:
    """
    Runs a call only after `wait` seconds without a newer call.
    Every call cancels the pending timer before scheduling its own, so the
    last call wins and earlier ones never fire.
    """

    def __init__(self, wait: float = 0.4, timer_factory: Callable[..., Any] = threading.Timer):
        self.wait = wait
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._pending: Optional[Any] = None
        self._generation = 0

    def call(self, fn: Callable[..., Any], *args: Any) -> None:
        with self._lock:
            self._cancel_pending()
            self._generation += 1
            timer = self._timer_factory(self.wait, self._fire, args=(self._generation, fn, args))
            timer.daemon = True
            self._pending = timer
            timer.start()

    def cancel(self) -> None:
        with self._lock:
            self._cancel_pending()
            self._generation += 1

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _fire(self, generation: int, fn: Callable[..., Any], args: tuple) -> None:
        with self._lock:
            # A timer that already started can still lose to a newer call
            if generation != self._generation:
                return
            self._pending = None
        fn(*args)
