"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules and constants per puzzle mode
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    MODES, WORD_LENGTH, NUM_TRIES, MODE_TITLES, USER_DATA_VERSION, PUZZLE_EPOCH,
    WORD_LISTS, validate_word_list_integrity
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'MODES', 'WORD_LENGTH', 'NUM_TRIES', 'MODE_TITLES', 'USER_DATA_VERSION', 'PUZZLE_EPOCH',
    'WORD_LISTS', 'validate_word_list_integrity'
]
