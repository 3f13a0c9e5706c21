"""
Game Transitions

Pure functions folding a submission into one mode's state. Nothing here
touches storage; callers persist the returned snapshot.
"""

from dataclasses import replace
from datetime import datetime, timezone
from typing import Optional

from ..models.errors import GameAlreadyEndedError
from ..models.game import GameStatus, ModeGameData
from .scoring import score_attempt


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def submit(mode_state: ModeGameData, guess: str, num_tries: int,
           now: Optional[datetime] = None) -> ModeGameData:
    """
    Records a guess and returns the next state of the mode.

    Args:
        mode_state: Current state of the mode
        guess: The submitted word
        num_tries: Try limit of the mode
        now: Timestamp of the submission (defaults to the current UTC time)

    Returns:
        ModeGameData: New snapshot with the attempt appended and, when the game
        ended, the win/loss counters, streaks and turn histogram updated

    Raises:
        GameAlreadyEndedError: If the game was already won or lost
        IncompleteGuessError: If the guess length differs from the answer length
    """
    if mode_state.is_finished:
        raise GameAlreadyEndedError()

    attempt = score_attempt(guess, mode_state.correct_answer)
    now = now or _utcnow()

    history = mode_state.history + (attempt,)
    next_state = replace(mode_state, history=history)

    if len(history) == 1:
        next_state = replace(next_state, game_start_date=now)

    if attempt.is_solved:
        return _record_win(next_state, now)
    if len(history) >= num_tries:
        return _record_loss(next_state)
    return next_state


def _record_win(mode_state: ModeGameData, now: datetime) -> ModeGameData:
    win_streak = mode_state.win_streak + 1
    turns = len(mode_state.history)
    turn_stats = dict(mode_state.turn_stats)
    turn_stats[turns] = turn_stats.get(turns, 0) + 1

    return replace(
        mode_state,
        game_status=GameStatus.win,
        num_wins=mode_state.num_wins + 1,
        num_played=mode_state.num_played + 1,
        win_streak=win_streak,
        longest_win_streak=max(mode_state.longest_win_streak, win_streak),
        last_win_date=now,
        turn_stats=turn_stats,
    )


def _record_loss(mode_state: ModeGameData) -> ModeGameData:
    # A loss has no solving turn, so the histogram is left alone
    return replace(
        mode_state,
        game_status=GameStatus.lose,
        num_played=mode_state.num_played + 1,
        win_streak=0,
    )


def start_new_puzzle(mode_state: ModeGameData, game_id: str, correct_answer: str) -> ModeGameData:
    """
    Binds the mode to a new daily puzzle.

    The in-progress game is discarded while the accumulated statistics
    (wins, plays, streaks, turn histogram, last win date) are kept.
    """
    return replace(
        mode_state,
        game_id=game_id,
        correct_answer=correct_answer.upper(),
        game_status=GameStatus.playing,
        history=(),
        game_start_date=None,
    )
