"""Recent-search history kept in the browser's localStorage."""

import json
from typing import List, Optional

from streamlit_js_eval import streamlit_js_eval

HISTORY_STORAGE_KEY = "history"
HISTORY_LIMIT = 5


def add_to_history(history: List[str], city: str, limit: int = HISTORY_LIMIT) -> List[str]:
    """Prepend `city`, keep only the newest copy of each entry, cap at `limit`."""
    updated = []
    for entry in [city, *history]:
        if entry not in updated:
            updated.append(entry)
    return updated[:limit]


def parse_history(raw: Optional[str]) -> List[str]:
    """Decode the stored JSON list; anything unreadable counts as empty."""
    if not raw:
        return []
    try:
        data = json.loads(raw)
    except (TypeError, ValueError):
        return []
    if not isinstance(data, list):
        return []
    return [item for item in data if isinstance(item, str)][:HISTORY_LIMIT]


def load_history() -> Optional[List[str]]:
    """
    Reads history from localStorage.
    Returns None while the browser round-trip is still pending (first run).
    """
    raw = streamlit_js_eval(
        js_expressions=f"localStorage.getItem({json.dumps(HISTORY_STORAGE_KEY)}) || ''",
        key="_history_load",
    )
    if raw is None:
        return None
    return parse_history(raw)


def save_history(history: List[str], seq: int) -> None:
    """Writes history back; `seq` keeps the component key unique per save."""
    payload = json.dumps(json.dumps(history))
    streamlit_js_eval(
        js_expressions=f"localStorage.setItem({json.dumps(HISTORY_STORAGE_KEY)}, {payload})",
        key=f"_history_save_{seq}",
    )
