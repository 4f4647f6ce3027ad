"""
JSON file persistence for high scores and player preferences.

File layout:
    {"highScore": 320, "highScoreDate": "2024-12-01T12:00:00", "preferences": {"muted": true}}

Read and write failures are logged and degrade to "nothing stored"; they
never raise into the game.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Union

from ..core.ports import ScoreStore

logger = logging.getLogger(__name__)


class JsonScoreStore(ScoreStore):
    """ScoreStore backed by a single JSON file."""

    def __init__(self, path: Union[str, Path]):
        """
        Args:
            path: File to read and write; parent directories are created on save
        """
        self.path = Path(path).expanduser()

    def _load(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, 'r') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Error reading %s: %s", self.path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self, data: Dict[str, Any]) -> bool:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w') as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            logger.error("Error writing %s: %s", self.path, e)
            return False
        return True

    def get_high_score(self) -> int:
        try:
            return int(self._load().get("highScore", 0) or 0)
        except (TypeError, ValueError):
            return 0

    def update_high_score(self, score: int) -> bool:
        """
        Store score if it beats the current best.

        Returns:
            True if a new record was written
        """
        if score <= self.get_high_score():
            return False

        data = self._load()
        data["highScore"] = score
        data["highScoreDate"] = datetime.now().isoformat(timespec="seconds")
        return self._save(data)

    def get_preference(self, key: str, default: Any = None) -> Any:
        prefs = self._load().get("preferences") or {}
        return prefs.get(key, default)

    def set_preference(self, key: str, value: Any) -> bool:
        data = self._load()
        data.setdefault("preferences", {})[key] = value
        return self._save(data)

    def clear_all(self) -> bool:
        """Delete the file. Returns False if it could not be removed."""
        try:
            self.path.unlink()
        except FileNotFoundError:
            return True
        except OSError as e:
            logger.error("Error clearing %s: %s", self.path, e)
            return False
        return True
