"""
File-backed cache of processed energy data.
One pretty-printed JSON file per (energy type, date) under the data directory.
"""

import json
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from src.exceptions import CacheCorruptionError, CacheWriteError
from src.logging_config import get_logger
from src.models.energy import CacheEntry, EnergyType, parse_energy_type


class CacheService:
    """Reads and writes cache entries on the local filesystem."""

    def __init__(self, data_dir: Union[str, Path], logger=None):
        self.data_dir = Path(data_dir)
        self.logger = logger or get_logger(__name__)

    def filename(self, energy_type: Union[str, EnergyType], date: str) -> Path:
        """Map (type, date) to `data_{type}_{date}.json` inside the data directory."""
        kind = parse_energy_type(energy_type).value
        return self.data_dir / f"data_{kind}_{date}.json"

    def check_cache(self, path: Union[str, Path]) -> Optional[CacheEntry]:
        """
        Load a cache entry if the file exists.

        Returns:
            The parsed entry, or None when there is no file

        Raises:
            CacheCorruptionError: If the file is not valid JSON or not a cache entry
        """
        path = Path(path)
        if not path.exists():
            return None

        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            self.logger.error("Corrupt cache file", path=str(path), error=str(e))
            raise CacheCorruptionError(f"Cache file {path.name} is not valid JSON: {e}") from e

        try:
            entry = CacheEntry.model_validate(payload)
        except ValidationError as e:
            self.logger.error("Corrupt cache file", path=str(path), error=str(e))
            raise CacheCorruptionError(f"Cache file {path.name} has an unexpected structure") from e

        self.logger.debug("Cache hit", path=str(path), count=len(entry.data))
        return entry

    def save(self, entry: CacheEntry, path: Union[str, Path]) -> Path:
        """
        Write the entry as pretty-printed JSON, replacing any existing file.

        Raises:
            CacheWriteError: If the directory or file cannot be written
        """
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(entry.to_dict(), indent=4), encoding="utf-8")
        except OSError as e:
            self.logger.error("Failed to write cache file", path=str(path), error=str(e))
            raise CacheWriteError(f"Error writing file {path.name}: {e}") from e

        self.logger.debug("Saved cache file", path=str(path), count=len(entry.data))
        return path
