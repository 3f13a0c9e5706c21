"""
Persistence Adapter

Versioned load/save of the whole multi-mode snapshot. Loading never fails:
a missing, unreadable or corrupt snapshot degrades to fresh default data, and
every mode is re-bound to today's puzzle before the data is handed out.
"""

from dataclasses import replace
from datetime import date
from typing import Any, Dict, Optional

from ..config.game_settings import USER_DATA_VERSION
from ..models.errors import StorageUnavailableError
from ..models.game import GameMode, UserData
from ..utils.game_logger import game_logger
from .puzzle_source import PuzzleSource
from .transitions import start_new_puzzle

DEFAULT_STORAGE_KEY = 'saltong-user-data'


class PersistenceAdapter:
    """
    Reads and writes the user data snapshot under a fixed application key.

    Attributes:
        first_visit: True when the last load found no versioned snapshot
    """

    def __init__(self, storage, puzzle_source: PuzzleSource,
                 key: str = DEFAULT_STORAGE_KEY, version: str = USER_DATA_VERSION):
        self.storage = storage
        self.puzzle_source = puzzle_source
        self.key = key
        self.version = version
        self.first_visit = False

    def default_user_data(self) -> UserData:
        """All three modes zeroed, tagged with the current schema version."""
        return UserData(version=self.version)

    def _read_raw(self) -> Optional[Dict[str, Any]]:
        try:
            raw = self.storage.get(self.key)
        except StorageUnavailableError as e:
            game_logger.logger.warning(f"User data unavailable, starting from defaults: {e}")
            return None

        if raw is not None and not isinstance(raw, dict):
            game_logger.logger.warning("Stored user data is not an object, starting from defaults")
            return None
        return raw

    def _parse(self, raw: Optional[Dict[str, Any]]) -> UserData:
        if raw is None:
            return self.default_user_data()
        try:
            return UserData.from_dict(raw)
        except (KeyError, TypeError, ValueError) as e:
            game_logger.logger.warning(f"Stored user data is corrupt, starting from defaults: {e}")
            return self.default_user_data()

    def reconcile(self, user_data: UserData, today: Optional[date] = None) -> UserData:
        """
        Re-binds every mode to the puzzle source and stamps the current version.

        A mode whose game id no longer matches today's puzzle loses its
        in-progress game but keeps its statistics. Other modes are untouched.
        """
        for mode in GameMode:
            puzzle = self.puzzle_source.get_puzzle(mode, today)
            mode_data = user_data.for_mode(mode)

            if mode_data.game_id != puzzle.game_id:
                if mode_data.game_id:
                    game_logger.log_game_event(
                        puzzle.game_id, 'puzzle_rollover',
                        mode=mode.value, previous_game_id=mode_data.game_id
                    )
                mode_data = start_new_puzzle(mode_data, puzzle.game_id, puzzle.correct_answer)
            elif not mode_data.correct_answer:
                mode_data = replace(mode_data, correct_answer=puzzle.correct_answer)

            user_data = user_data.with_mode(mode, mode_data)

        if user_data.version != self.version:
            user_data = replace(user_data, version=self.version)

        return user_data

    def load(self, today: Optional[date] = None) -> UserData:
        """
        Load the snapshot, falling back to defaults, and bind it to today's puzzles.

        When reconciliation changed anything the snapshot is written back
        immediately.
        """
        raw = self._read_raw()
        self.first_visit = raw is None or not raw.get('version')

        user_data = self.reconcile(self._parse(raw), today)

        if user_data.to_dict() != raw:
            self.save(user_data)

        return user_data

    def save(self, user_data: UserData) -> bool:
        """
        Write the snapshot.

        Returns:
            bool: True if the storage accepted the write
        """
        try:
            self.storage.set(self.key, user_data.to_dict())
            return True
        except StorageUnavailableError as e:
            game_logger.logger.error(f"Failed to save user data: {e}")
            return False

    def reset(self) -> UserData:
        """
        Overwrite the stored snapshot with zeroed data for every mode.

        Statistics are erased too. The version stays the current one.
        """
        user_data = self.default_user_data()
        self.save(user_data)
        game_logger.log_game_event(None, 'user_data_reset')
        return user_data
