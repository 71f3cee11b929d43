"""Season Strings - Pure functions for NBA season labels."""

from datetime import date
from typing import Optional

# NBA seasons roll over in October
SEASON_START_MONTH = 10


def format_season(start_year: int) -> str:
    """Format a season label like "2024-25" from its starting year."""
    return f"{start_year}-{str(start_year + 1)[-2:]}"


def season_start_year(today: Optional[date] = None) -> int:
    """Return the starting year of the season in progress on ``today``."""
    today = today or date.today()
    if today.month >= SEASON_START_MONTH:
        return today.year
    return today.year - 1


def get_current_season(today: Optional[date] = None) -> str:
    """
    Get the current NBA season string.

    Before October the season is ``(year-1)-(year)``, otherwise
    ``(year)-(year+1)``.

    Args:
        today: Reference date (defaults to today)

    Returns:
        Season label, e.g. "2024-25"
    """
    return format_season(season_start_year(today))


def get_previous_season(today: Optional[date] = None) -> str:
    """Get the season before the current one, by the same October rule."""
    return format_season(season_start_year(today) - 1)
