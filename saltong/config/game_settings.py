"""
Game Configuration Constants Module

This module defines all game configuration constants. Every puzzle mode has
its own word length, try limit and word list; all of them are centralized
here to enable easy modification.
"""

import json
import os
from datetime import date
from typing import Dict, Final, List

MODES: Final[List[str]] = ['main', 'mini', 'max']
"""Puzzle modes, in display order. ``main`` is the default mode."""

WORD_LENGTH: Final[Dict[str, int]] = {
    'main': 5,
    'mini': 4,
    'max': 7,
}

NUM_TRIES: Final[Dict[str, int]] = {
    'main': 6,
    'mini': 5,
    'max': 8,
}

MODE_TITLES: Final[Dict[str, str]] = {
    'main': 'Saltong',
    'mini': 'Saltong Mini',
    'max': 'Saltong Max',
}

USER_DATA_VERSION: Final[str] = '2022.02.01'
"""
Schema version of the persisted user data snapshot.
Bump it whenever the stored layout changes; stale snapshots are re-validated on load.
"""

PUZZLE_EPOCH: Final[date] = date(2022, 1, 1)
"""Day zero of the daily puzzle rotation."""


def _load_word_list(mode: str) -> List[str]:
    """
    Load the answer list for a mode from ``words_<mode>.json``.

    Returns:
        List[str]: Uppercase words, all exactly WORD_LENGTH[mode] letters long

    Raises:
        FileNotFoundError: If the JSON file is not found
        ValueError: If the JSON is malformed, the list is empty or contains invalid words
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, f'words_{mode}.json')
    expected_length = WORD_LENGTH[mode]

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in words_{mode}.json: {e}")

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not word_list:
        raise ValueError("Word list cannot be empty")

    uppercase_words = [word.upper() for word in word_list]

    for word in uppercase_words:
        if len(word) != expected_length:
            raise ValueError(f"Word '{word}' is not {expected_length} characters long")
        if not word.isalpha():
            raise ValueError(f"Word '{word}' contains non-alphabetic characters")

    return uppercase_words


# Answer lists loaded from the bundled JSON files
WORD_LISTS: Final[Dict[str, List[str]]] = {mode: _load_word_list(mode) for mode in MODES}


def validate_word_list_integrity() -> bool:
    """
    Validates every mode's word list.

    Checks length, alphabetic characters, upper case formatting and uniqueness.

    Returns:
        bool: True if all word lists pass

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    for mode, words in WORD_LISTS.items():
        if not words:
            raise ValueError(f"Word list for '{mode}' cannot be empty")

        for index, word in enumerate(words):
            if len(word) != WORD_LENGTH[mode]:
                raise ValueError(f"Word at index {index} '{word}' in '{mode}' has the wrong length")
            if not word.isalpha():
                raise ValueError(f"Word at index {index} '{word}' in '{mode}' contains non-alphabetic characters")
            if not word.isupper():
                raise ValueError(f"Word at index {index} '{word}' in '{mode}' is not in uppercase format")

        if len(words) != len(set(words)):
            duplicates = sorted({word for word in words if words.count(word) > 1})
            raise ValueError(f"Duplicate words found in '{mode}' word list: {duplicates}")

    return True


if __name__ == "__main__":

    try:
        validate_word_list_integrity()
        for mode in MODES:
            print(f" {mode}: {len(WORD_LISTS[mode])} words, {WORD_LENGTH[mode]} letters, {NUM_TRIES[mode]} tries")
        print(" All configuration validation checks passed")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
