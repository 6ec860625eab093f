"""Read-only access to the songs JSON document.

The document is produced outside this service. Every call goes back to the
file; nothing is cached between requests.
"""
import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel

logger = logging.getLogger(__name__)


def _reject_constant(name: str):
    # NaN and Infinity are not JSON, json.load accepts them by default
    raise ValueError(f"Invalid JSON constant: {name}")


class DatabaseState(str, Enum):
    connected = "connected"
    disconnected = "disconnected"
    error = "error"


class HealthReport(BaseModel):
    database: DatabaseState
    message: str

    @property
    def ok(self) -> bool:
        return self.database is DatabaseState.connected


class SongStore:
    def __init__(self, path: Path | str):
        self.path = Path(path)

    def _read(self) -> Any:
        with open(self.path, "r", encoding="utf-8") as f:
            return json.load(f, parse_constant=_reject_constant)

    def list_songs(self) -> Any:
        """Return the parsed document as stored.

        A missing, unreadable or malformed file yields an empty list, so callers
        see the same result for "no songs" and "broken file".
        """
        try:
            return self._read()
        except (OSError, ValueError, RecursionError) as e:
            logger.debug('list_songs: falling back to empty catalog path=%s error=%s', self.path, e)
            return []

    def check_health(self) -> HealthReport:
        """Classify the document as connected, disconnected or error."""
        name = self.path.name
        if not self.path.exists():
            logger.warning('check_health: %s not found at %s', name, self.path)
            return HealthReport(
                database=DatabaseState.disconnected,
                message=f"{name} does not exist",
            )
        try:
            self._read()
        except (OSError, ValueError, RecursionError) as e:
            logger.warning('check_health: %s unreadable: %s', name, e)
            return HealthReport(
                database=DatabaseState.error,
                message=f"Error reading {name}: {e}",
            )
        return HealthReport(
            database=DatabaseState.connected,
            message=f"Server is running and {name} is available",
        )
