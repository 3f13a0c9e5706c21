"""
Game Data Models

Contains all game-related data structures and enums, together with their
conversion to and from the JSON layout used by persistent storage.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class GameMode(str, Enum):
    """Puzzle variant. Each mode keeps its own state and statistics."""
    main = "main"
    mini = "mini"
    max = "max"


class LetterStatus(str, Enum):
    """Letter evaluation status. Values are the persisted strings."""
    correct = "correct"
    wrongSpot = "wrongSpot"
    wrong = "wrong"


class GameStatus(str, Enum):
    """Outcome of the current game instance. ``win`` and ``lose`` are terminal."""
    playing = "playing"
    win = "win"
    lose = "lose"


def _parse_date(value: Any) -> Optional[datetime]:
    if value is None or value == '':
        return None
    if not isinstance(value, str):
        raise ValueError(f"Expected ISO timestamp, got {type(value).__name__}")
    parsed = datetime.fromisoformat(value.replace('Z', '+00:00'))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _format_date(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


@dataclass(frozen=True)
class Attempt:
    """One submitted and scored guess."""
    word: Tuple[Tuple[str, LetterStatus], ...]

    @property
    def letters(self) -> str:
        return ''.join(letter for letter, _ in self.word)

    @property
    def statuses(self) -> Tuple[LetterStatus, ...]:
        return tuple(status for _, status in self.word)

    @property
    def is_solved(self) -> bool:
        return all(status == LetterStatus.correct for _, status in self.word)

    def to_dict(self) -> Dict[str, Any]:
        return {'word': [[letter, status.value] for letter, status in self.word]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Attempt':
        return cls(word=tuple((str(letter), LetterStatus(status)) for letter, status in data['word']))


@dataclass(frozen=True)
class ModeGameData:
    """
    State of one puzzle mode.

    Snapshots are immutable; transitions build new instances with
    ``dataclasses.replace``. ``turn_stats`` maps the number of attempts a win
    took to how many times that happened.
    """
    game_id: str = ''
    correct_answer: str = ''
    game_status: GameStatus = GameStatus.playing
    history: Tuple[Attempt, ...] = ()
    num_wins: int = 0
    num_played: int = 0
    win_streak: int = 0
    longest_win_streak: int = 0
    last_win_date: Optional[datetime] = None
    game_start_date: Optional[datetime] = None
    turn_stats: Dict[int, int] = field(default_factory=dict)

    @property
    def is_finished(self) -> bool:
        return self.game_status != GameStatus.playing

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the camelCase layout of the stored snapshot."""
        return {
            'gameId': self.game_id,
            'correctAnswer': self.correct_answer,
            'gameStatus': self.game_status.value,
            'history': [attempt.to_dict() for attempt in self.history],
            'numWins': self.num_wins,
            'numPlayed': self.num_played,
            'winStreak': self.win_streak,
            'longestWinStreak': self.longest_win_streak,
            'lastWinDate': _format_date(self.last_win_date),
            'gameStartDate': _format_date(self.game_start_date),
            'turnStats': {str(turn): count for turn, count in sorted(self.turn_stats.items())},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ModeGameData':
        """
        Build mode data from a stored snapshot.

        Fields missing from older snapshots fall back to their zeroed defaults.

        Raises:
            ValueError, TypeError, KeyError: If a present field has the wrong shape
        """
        if not isinstance(data, dict):
            raise TypeError(f"Mode data must be an object, got {type(data).__name__}")

        turn_stats = data.get('turnStats') or {}
        if not isinstance(turn_stats, dict):
            raise TypeError(f"turnStats must be an object, got {type(turn_stats).__name__}")

        return cls(
            game_id=str(data.get('gameId') or ''),
            correct_answer=str(data.get('correctAnswer') or ''),
            game_status=GameStatus(data.get('gameStatus') or GameStatus.playing.value),
            history=tuple(Attempt.from_dict(item) for item in data.get('history') or []),
            num_wins=int(data.get('numWins') or 0),
            num_played=int(data.get('numPlayed') or 0),
            win_streak=int(data.get('winStreak') or 0),
            longest_win_streak=int(data.get('longestWinStreak') or 0),
            last_win_date=_parse_date(data.get('lastWinDate')),
            game_start_date=_parse_date(data.get('gameStartDate')),
            turn_stats={int(turn): int(count) for turn, count in turn_stats.items()},
        )


@dataclass(frozen=True)
class UserData:
    """Snapshot of every mode's state, tagged with the schema version."""
    main: ModeGameData = field(default_factory=ModeGameData)
    mini: ModeGameData = field(default_factory=ModeGameData)
    max: ModeGameData = field(default_factory=ModeGameData)
    version: str = ''

    def for_mode(self, mode: GameMode) -> ModeGameData:
        return getattr(self, GameMode(mode).value)

    def with_mode(self, mode: GameMode, mode_data: ModeGameData) -> 'UserData':
        values = {m.value: self.for_mode(m) for m in GameMode}
        values[GameMode(mode).value] = mode_data
        return UserData(version=self.version, **values)

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {mode.value: self.for_mode(mode).to_dict() for mode in GameMode}
        result['version'] = self.version
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'UserData':
        if not isinstance(data, dict):
            raise TypeError(f"User data must be an object, got {type(data).__name__}")

        modes = {
            mode.value: ModeGameData.from_dict(data[mode.value]) if data.get(mode.value) is not None else ModeGameData()
            for mode in GameMode
        }
        return cls(version=str(data.get('version') or ''), **modes)
