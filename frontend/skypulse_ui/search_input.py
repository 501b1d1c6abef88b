from st_keyup import st_keyup

from skypulse_ui.autocomplete import Autocomplete


def city_search_box(autocomplete: Autocomplete, value: str = "", seq: int = 0) -> str:
    """
    Draws the city box and feeds its text to the autocomplete.

    Every key press reruns the page (no component-side debounce), so the
    Debouncer sees each keystroke. Bumping `seq` remounts the box with
    `value`, which is how a settled city is written back into it.
    """
    text = st_keyup(
        "City",
        value=value,
        key=f"city_input_{seq}",
        debounce=None,
        placeholder="Search city...",
        label_visibility="collapsed",
    ) or ""
    autocomplete.update(text)
    return text
