"""
Page state for the main search view.

The view is always exactly one of Idle, Loaded or Error, so an error can
never be rendered together with a stale snapshot.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

NOT_FOUND_ALERT = "City not found"


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Loaded:
    snapshot: dict


@dataclass(frozen=True)
class Error:
    message: str


ViewState = Union[Idle, Loaded, Error]


def apply_search_result(state: ViewState, result: dict) -> Tuple[ViewState, Optional[str]]:
    """
    Returns the next view state and an alert to show, if any.

    A failed search while weather is displayed keeps that weather on screen
    and only raises the alert.
    """
    if "error" not in result:
        return Loaded(result), None
    if isinstance(state, Loaded):
        return state, NOT_FOUND_ALERT
    return Error(NOT_FOUND_ALERT), NOT_FOUND_ALERT
