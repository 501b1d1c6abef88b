import threading
from typing import Callable, List, Optional

from skypulse_ui.debounce import Debouncer

MIN_QUERY_LENGTH = 2
DEBOUNCE_SECONDS = 0.4


class Autocomplete:
    """
    Debounced city suggestions.

    `update()` is called with the current input on every change. The search
    runs on the debouncer's timer thread and its result is kept here for the
    page to read on its next rerun.
    """

    def __init__(self, search: Callable[[str], List[dict]], debouncer: Optional[Debouncer] = None):
        self._search = search
        self._debouncer = debouncer or Debouncer(wait=DEBOUNCE_SECONDS)
        self._lock = threading.Lock()
        self._query = ""
        self._suggestions: List[dict] = []

    def update(self, text: str) -> None:
        if text == self._query:
            return
        self._query = text
        if len(text) < MIN_QUERY_LENGTH:
            self._debouncer.cancel()
            self._set_suggestions([])
            return
        self._debouncer.call(self._run, text)

    def clear(self, query: Optional[str] = None) -> None:
        """Drop pending and shown suggestions; `query` marks that text as already handled."""
        if query is not None:
            self._query = query
        self._debouncer.cancel()
        self._set_suggestions([])

    @property
    def suggestions(self) -> List[dict]:
        with self._lock:
            return list(self._suggestions)

    def _run(self, text: str) -> None:
        results = self._search(text)
        # Input may have moved on while the request was in flight
        if text == self._query:
            self._set_suggestions(results)

    def _set_suggestions(self, results: List[dict]) -> None:
        with self._lock:
            self._suggestions = list(results)
