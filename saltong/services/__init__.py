"""
Services Package

Contains all business logic: letter scoring, game transitions, statistics,
share text, puzzle source, persistence and the game service.
"""

from .scoring import score, score_attempt
from .transitions import submit, start_new_puzzle
from .share import format_share
from .puzzle_source import DailyPuzzleSource, Puzzle, PuzzleSource
from .storage import JsonFileStorage, MemoryStorage, MongoStorage, build_storage
from .persistence import PersistenceAdapter
from .game_service import GameService, get_game_service, initialize_game_service

__all__ = [
    'score', 'score_attempt',
    'submit', 'start_new_puzzle',
    'format_share',
    'DailyPuzzleSource', 'Puzzle', 'PuzzleSource',
    'JsonFileStorage', 'MemoryStorage', 'MongoStorage', 'build_storage',
    'PersistenceAdapter',
    'GameService', 'get_game_service', 'initialize_game_service'
]
