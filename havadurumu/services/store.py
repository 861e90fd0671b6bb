"""Simple file-backed key-value store (one slot per file)."""

import logging
from pathlib import Path

from ..errors import PersistenceError

logger = logging.getLogger(__name__)


class KeyValueStore:
    """Stores string values under named keys in a data directory."""

    def __init__(self, data_dir: Path | str):
        self.data_dir = Path(data_dir)

    def _get_path(self, key: str) -> Path:
        """Get file path for a key."""
        safe_key = "".join(c if c.isalnum() else "_" for c in key)
        return self.data_dir / f"{safe_key}.json"

    def get(self, key: str) -> str | None:
        """Return the stored value, or None if the key has never been set."""
        try:
            return self._get_path(key).read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceError(f"Failed to read {key}: {e}") from e

    def set(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""
        path = self._get_path(key)
        tmp_path = path.with_suffix(".tmp")

        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(value, encoding="utf-8")
            tmp_path.replace(path)
        except OSError as e:
            raise PersistenceError(f"Failed to write {key}: {e}") from e

        logger.debug(f"Stored {key}")

    def delete(self, key: str) -> None:
        """Remove a key (no error if it doesn't exist)."""
        try:
            self._get_path(key).unlink(missing_ok=True)
        except OSError as e:
            raise PersistenceError(f"Failed to delete {key}: {e}") from e
