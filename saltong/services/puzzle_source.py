"""
Puzzle Source

Supplies the daily puzzle (game id and answer) of every mode.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Dict, List, Optional, Protocol

from ..config.game_settings import NUM_TRIES, PUZZLE_EPOCH, WORD_LENGTH, WORD_LISTS
from ..models.game import GameMode


@dataclass(frozen=True)
class Puzzle:
    """The puzzle a mode is played against on a given day."""
    game_id: str
    correct_answer: str
    word_length: int
    num_tries: int


class PuzzleSource(Protocol):
    """Anything able to tell which puzzle a mode uses today."""

    def get_puzzle(self, mode: GameMode, today: Optional[date] = None) -> Puzzle: ...


class DailyPuzzleSource:
    """
    Rotates through the bundled word lists, one word per day.

    The game id is the puzzle day as an ISO date, counted in the puzzle
    timezone so every player rolls over at the same moment.
    """

    def __init__(self, word_lists: Optional[Dict[str, List[str]]] = None,
                 utc_offset_hours: int = 8, epoch: date = PUZZLE_EPOCH):
        self.word_lists = word_lists or WORD_LISTS
        self.tz = timezone(timedelta(hours=utc_offset_hours))
        self.epoch = epoch

    def today(self) -> date:
        return datetime.now(self.tz).date()

    def get_puzzle(self, mode: GameMode, today: Optional[date] = None) -> Puzzle:
        mode = GameMode(mode)
        today = today or self.today()
        words = self.word_lists[mode.value]

        day_index = (today - self.epoch).days
        answer = words[day_index % len(words)]

        return Puzzle(
            game_id=today.isoformat(),
            correct_answer=answer.upper(),
            word_length=WORD_LENGTH[mode.value],
            num_tries=NUM_TRIES[mode.value],
        )
