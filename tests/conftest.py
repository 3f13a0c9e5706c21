import os
import tempfile
from datetime import datetime, timedelta, timezone

os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='saltong-logs-'))

import pytest

from saltong import create_app
from saltong.config import NUM_TRIES, WORD_LENGTH, TestingConfig
from saltong.models.game import GameMode
from saltong.services.game_service import initialize_game_service
from saltong.services.persistence import PersistenceAdapter
from saltong.services.puzzle_source import Puzzle
from saltong.services.storage import MemoryStorage

GAME_ID = '2022-03-01'
ANSWERS = {
    'main': 'APPLE',
    'mini': 'ARAW',
    'max': 'KALABAW',
}
START = datetime(2022, 3, 1, 8, 0, 0, tzinfo=timezone.utc)


class FixedPuzzleSource:
    """Puzzle source whose puzzles only change when a test rolls them."""

    def __init__(self):
        self.puzzles = {mode: (GAME_ID, answer) for mode, answer in ANSWERS.items()}

    def roll(self, mode, game_id, answer):
        self.puzzles[GameMode(mode).value] = (game_id, answer)

    def get_puzzle(self, mode, today=None):
        mode = GameMode(mode).value
        game_id, answer = self.puzzles[mode]
        return Puzzle(game_id, answer, WORD_LENGTH[mode], NUM_TRIES[mode])


class FakeClock:
    def __init__(self, start=START):
        self.current = start

    def advance(self, seconds):
        self.current += timedelta(seconds=seconds)

    def __call__(self):
        return self.current


@pytest.fixture
def puzzle_source():
    return FixedPuzzleSource()


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def persistence(storage, puzzle_source):
    return PersistenceAdapter(storage, puzzle_source)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def game_service(persistence, clock):
    return initialize_game_service(persistence, domain='saltong.carldegs.com', clock=clock)


@pytest.fixture
def client(game_service):
    app = create_app(TestingConfig)
    with app.test_client() as test_client:
        yield test_client
