"""
Storage Backends

Durable key-value stores for the user data snapshot. Every backend stores
JSON-compatible dictionaries under a string key and reports any failure as
StorageUnavailableError.
"""

import copy
import datetime
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pymongo.errors import PyMongoError
from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi

from ..models.errors import StorageUnavailableError


class MemoryStorage:
    """Process-local storage, used by tests and the ``memory`` backend."""

    def __init__(self):
        self.records: Dict[str, Dict[str, Any]] = {}

    def get(self, key: str) -> Optional[Dict[str, Any]]:
        record = self.records.get(key)
        return copy.deepcopy(record) if record is not None else None

    def set(self, key: str, value: Dict[str, Any]) -> None:
        self.records[key] = copy.deepcopy(value)


class JsonFileStorage:
    """
    Keeps every record in a single JSON file on disk.

    Writes go to a temporary file first and replace the original, so a crash
    mid-write never leaves a half-written snapshot behind.
    """

    def __init__(self, path: str):
        self.path = Path(path)

    def _read_all(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                records = json.load(f)
        except (OSError, ValueError) as e:
            # ValueError covers invalid JSON as well as bytes that are not UTF-8
            raise StorageUnavailableError(f"Cannot read {self.path}: {e}") from e

        if not isinstance(records, dict):
            raise StorageUnavailableError(f"Corrupt storage file {self.path}: expected an object")
        return records

    def get(self, key: str) -> Optional[Dict[str, Any]]:
        return self._read_all().get(key)

    def set(self, key: str, value: Dict[str, Any]) -> None:
        try:
            records = self._read_all()
        except StorageUnavailableError:
            # Corrupt contents are replaced by the new snapshot
            records = {}
        records[key] = value

        tmp_path = self.path.with_name(self.path.name + '.tmp')
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, 'w', encoding='utf-8') as f:
                json.dump(records, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise StorageUnavailableError(f"Cannot write {self.path}: {e}") from e


class MongoStorage:
    """
    Stores each record as one MongoDB document whose ``_id`` is the record key.
    """

    def __init__(self, mongo_uri: str, db_name: str = 'saltong', collection_name: str = 'user_data',
                 client: Optional[MongoClient] = None):
        """
        Connect to MongoDB.

        Args:
            mongo_uri: MongoDB connection string
            db_name: Database holding the snapshots
            collection_name: Collection holding the snapshots
            client: Pre-built client, mainly for tests

        Raises:
            StorageUnavailableError: If the server does not answer a ping
        """
        self.client = client or MongoClient(mongo_uri, server_api=ServerApi('1'))
        self.collection = self.client[db_name][collection_name]

        try:
            self.client.admin.command('ping')
        except PyMongoError as e:
            raise StorageUnavailableError(f"MongoDB connection error: {e}") from e

    def get(self, key: str) -> Optional[Dict[str, Any]]:
        try:
            document = self.collection.find_one({'_id': key})
        except PyMongoError as e:
            raise StorageUnavailableError(f"Cannot read '{key}' from MongoDB: {e}") from e
        return document.get('data') if document else None

    def set(self, key: str, value: Dict[str, Any]) -> None:
        document = {
            '_id': key,
            'data': value,
            'updated_at': datetime.datetime.now(datetime.timezone.utc),
        }
        try:
            self.collection.replace_one({'_id': key}, document, upsert=True)
        except PyMongoError as e:
            raise StorageUnavailableError(f"Cannot write '{key}' to MongoDB: {e}") from e

    def close_connection(self):
        """Close the MongoDB connection."""
        if self.client:
            self.client.close()


def build_storage(config_class):
    """
    Create the storage backend selected by ``STORAGE_BACKEND``.

    Raises:
        ValueError: If the backend name is unknown or mongo is selected without MONGO_URI
        StorageUnavailableError: If MongoDB cannot be reached
    """
    backend = (config_class.STORAGE_BACKEND or 'file').lower()

    if backend == 'memory':
        return MemoryStorage()
    if backend == 'file':
        return JsonFileStorage(config_class.STORAGE_PATH)
    if backend == 'mongo':
        if not config_class.MONGO_URI:
            raise ValueError("STORAGE_BACKEND is 'mongo' but MONGO_URI is not configured")
        return MongoStorage(config_class.MONGO_URI, config_class.MONGO_DB)

    raise ValueError(f"Unknown storage backend: {config_class.STORAGE_BACKEND!r}")
