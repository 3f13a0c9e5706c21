"""
Helper Functions

Contains utility functions used by the HTTP controllers.
"""

from typing import Optional

from ..models.game import GameMode


def resolve_game_mode(slug: Optional[str]) -> GameMode:
    """Map a URL slug to a puzzle mode. Anything unknown falls back to main."""
    if not slug:
        return GameMode.main
    try:
        return GameMode(slug.strip().lower())
    except ValueError:
        return GameMode.main


def parse_bool(value: Optional[str]) -> bool:
    """Interpret a query string flag such as ``?showTimeSolved=true``."""
    return (value or '').strip().lower() in ('1', 'true', 'yes', 'on')
