"""Name Matching - Pure functions for matching search queries to player names."""

from typing import Tuple


def split_last_comma_first(display_last_comma_first: str) -> Tuple[str, str]:
    """
    Split a "Last, First" display name into (first_name, last_name).

    Missing parts come back as empty strings, so "Nene" yields ("", "Nene").
    """
    parts = [part.strip() for part in (display_last_comma_first or "").split(",")]
    last_name = parts[0] if parts else ""
    first_name = parts[1] if len(parts) > 1 else ""
    return first_name, last_name


def name_matches(query: str, first_last: str, last_comma_first: str) -> bool:
    """
    Check whether a query matches a player's name.

    Case-insensitive substring match against the whole "First Last" or
    "Last, First" name, or against any single token of either form
    ("First Last" split on spaces, "Last, First" split on ", ").

    Args:
        query: Free-text search query
        first_last: Name in "First Last" form
        last_comma_first: Name in "Last, First" form

    Returns:
        True if the query matches
    """
    needle = (query or "").lower().strip()
    if not needle:
        return False

    first_last = (first_last or "").lower()
    last_comma_first = (last_comma_first or "").lower()

    return (
        needle in first_last
        or needle in last_comma_first
        or any(needle in part for part in first_last.split(" "))
        or any(needle in part for part in last_comma_first.split(", "))
    )
