"""
Game Errors

Recoverable conditions signalled by the game engine and storage backends.
"""


class SaltongError(Exception):
    """Base class for all game errors."""


class IncompleteGuessError(SaltongError):
    """The guess does not have the mode's word length."""

    def __init__(self, expected_length: int):
        self.expected_length = expected_length
        super().__init__(f"Guess must be exactly {expected_length} letters")


class GameAlreadyEndedError(SaltongError):
    """A guess was submitted after the game was won or lost."""

    def __init__(self, mode: str = ''):
        self.mode = mode
        super().__init__("Game is already over")


class GameNotFinishedError(SaltongError):
    """Share text was requested while the game is still being played."""

    def __init__(self, mode: str = ''):
        self.mode = mode
        super().__init__("Game is still in progress")


class StorageUnavailableError(SaltongError):
    """The storage backend could not be read or written."""
