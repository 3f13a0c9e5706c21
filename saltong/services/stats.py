"""
Statistics Views

Read-only values derived from a mode's state on demand. Counters themselves
are only ever changed by the game transitions.
"""

from datetime import datetime
from typing import Dict, Iterable, Optional

from ..models.game import Attempt, GameStatus, LetterStatus, ModeGameData

_STATUS_RANK = {
    LetterStatus.wrong: 0,
    LetterStatus.wrongSpot: 1,
    LetterStatus.correct: 2,
}


def win_percentage(mode_state: ModeGameData) -> Optional[float]:
    """Percentage of completed games that were won, or None before the first game."""
    if mode_state.num_played <= 0:
        return None
    return round(mode_state.num_wins * 100 / mode_state.num_played, 1)


def time_solved(game_start_date: Optional[datetime], last_win_date: Optional[datetime]) -> Optional[str]:
    """
    Formats the time between the first attempt and the win.

    Returns ``M:SS`` below one hour and ``H:MM:SS`` otherwise, or None when
    either timestamp is missing or the win predates the start.
    """
    if not game_start_date or not last_win_date:
        return None

    elapsed = int((last_win_date - game_start_date).total_seconds())
    if elapsed < 0:
        return None

    hours, remainder = divmod(elapsed, 3600)
    minutes, seconds = divmod(remainder, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"


def solve_duration(mode_state: ModeGameData) -> Optional[str]:
    """Time to solve the current game; only defined once it has been won."""
    if mode_state.game_status != GameStatus.win:
        return None
    return time_solved(mode_state.game_start_date, mode_state.last_win_date)


def letter_statuses(history: Iterable[Attempt]) -> Dict[str, LetterStatus]:
    """
    Best status seen for every guessed letter, used to color the keyboard.

    A letter never drops back: correct beats wrongSpot, which beats wrong.
    """
    statuses: Dict[str, LetterStatus] = {}
    for attempt in history:
        for letter, status in attempt.word:
            stored = statuses.get(letter)
            if stored is None or _STATUS_RANK[status] > _STATUS_RANK[stored]:
                statuses[letter] = status
    return statuses
