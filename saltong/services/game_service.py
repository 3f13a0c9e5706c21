"""
Game Service

Holds the user data snapshot of the installation and exposes the operations
the client needs: read state, submit a guess, share a result, reset all data.
"""

import threading
from datetime import datetime
from typing import Any, Callable, Dict, Optional

from ..config.game_settings import NUM_TRIES, WORD_LENGTH
from ..models.errors import GameAlreadyEndedError, GameNotFinishedError
from ..models.game import GameMode, GameStatus, ModeGameData, UserData
from . import transitions
from .persistence import PersistenceAdapter
from .share import DEFAULT_DOMAIN, format_share
from .stats import letter_statuses, solve_duration, win_percentage


class GameService:
    """
    Core game service for the three puzzle modes.

    This class handles:
    - Loading the snapshot at startup and re-binding it when the day rolls over
    - Guess evaluation through the pure game transitions
    - Flushing the snapshot after every accepted guess
    - Game state views that never expose the answer of a running game
    """

    def __init__(self, persistence: PersistenceAdapter, domain: str = DEFAULT_DOMAIN,
                 clock: Optional[Callable[[], datetime]] = None):
        self.persistence = persistence
        self.domain = domain
        self.clock = clock
        self._lock = threading.Lock()

        self.user_data: UserData = persistence.load()
        self.first_visit = persistence.first_visit

    def _now(self) -> Optional[datetime]:
        return self.clock() if self.clock else None

    def _refresh(self) -> None:
        """Re-bind modes whose daily puzzle changed since the last request."""
        reconciled = self.persistence.reconcile(self.user_data)
        if reconciled != self.user_data:
            self.user_data = reconciled
            self.persistence.save(reconciled)

    def get_mode_data(self, mode: GameMode) -> ModeGameData:
        """Current state of a mode, including the answer. Internal use only."""
        with self._lock:
            self._refresh()
            return self.user_data.for_mode(mode)

    def get_state(self, mode: GameMode) -> Dict[str, Any]:
        """
        Returns the public state of a mode.

        Args:
            mode: Puzzle mode

        Returns:
            Dict with the stored fields plus wordLength, numTries, letterStatuses,
            timeSolved, winPercentage and firstVisit. ``correctAnswer`` is None
            while the game is being played.
        """
        return self.public_state(mode, self.get_mode_data(mode))

    def public_state(self, mode: GameMode, mode_data: ModeGameData) -> Dict[str, Any]:
        mode = GameMode(mode)
        state = mode_data.to_dict()

        if mode_data.game_status == GameStatus.playing:
            state['correctAnswer'] = None

        state.update({
            'mode': mode.value,
            'wordLength': WORD_LENGTH[mode.value],
            'numTries': NUM_TRIES[mode.value],
            'letterStatuses': {letter: status.value for letter, status in letter_statuses(mode_data.history).items()},
            'timeSolved': solve_duration(mode_data),
            'winPercentage': win_percentage(mode_data),
            'firstVisit': self.first_visit,
        })
        return state

    def submit(self, guess: str, mode: GameMode) -> ModeGameData:
        """
        Scores a guess for a mode and persists the result.

        Args:
            guess: Raw guess from the client
            mode: Puzzle mode

        Returns:
            ModeGameData: The updated state of the mode

        Raises:
            GameAlreadyEndedError: If the mode's game is already won or lost
            IncompleteGuessError: If the guess does not have the mode's word length
        """
        mode = GameMode(mode)
        guess = (guess or '').strip()

        with self._lock:
            self._refresh()
            current = self.user_data.for_mode(mode)

            try:
                updated = transitions.submit(current, guess, NUM_TRIES[mode.value], now=self._now())
            except GameAlreadyEndedError as e:
                e.mode = mode.value
                raise

            self.user_data = self.user_data.with_mode(mode, updated)
            self.persistence.save(self.user_data)
            self.first_visit = False

        return updated

    def get_share_text(self, mode: GameMode, show_time_solved: bool = False, theme: str = 'light') -> str:
        """
        Builds the share text of a finished game.

        Raises:
            GameNotFinishedError: If the mode's game is still being played
        """
        mode = GameMode(mode)
        mode_data = self.get_mode_data(mode)

        if not mode_data.is_finished:
            raise GameNotFinishedError(mode.value)

        return format_share(
            mode_data, mode, NUM_TRIES[mode.value],
            show_time_solved=show_time_solved, theme=theme, domain=self.domain
        )

    def reset_all(self) -> UserData:
        """Erase every mode's data, statistics included, and start today's puzzles afresh."""
        with self._lock:
            self.persistence.reset()
            self.user_data = self.persistence.load()
            self.first_visit = self.persistence.first_visit
            return self.user_data


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(persistence: PersistenceAdapter, domain: str = DEFAULT_DOMAIN,
                            clock: Optional[Callable[[], datetime]] = None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(persistence, domain, clock)
    return _game_service
