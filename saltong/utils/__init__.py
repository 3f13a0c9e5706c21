"""
Utilities Package

Contains utility functions and the game logger.
"""

from .helpers import resolve_game_mode, parse_bool
from .game_logger import game_logger

__all__ = ['resolve_game_mode', 'parse_bool', 'game_logger']
