"""
Data Models Package

Contains all data models, enums and errors used throughout the application.
"""

from .game import Attempt, GameMode, GameStatus, LetterStatus, ModeGameData, UserData
from .errors import (
    SaltongError, IncompleteGuessError, GameAlreadyEndedError, GameNotFinishedError,
    StorageUnavailableError
)

__all__ = [
    'Attempt', 'GameMode', 'GameStatus', 'LetterStatus', 'ModeGameData', 'UserData',
    'SaltongError', 'IncompleteGuessError', 'GameAlreadyEndedError', 'GameNotFinishedError',
    'StorageUnavailableError'
]
