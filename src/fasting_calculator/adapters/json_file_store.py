"""Local JSON file store, one file per key."""

import logging
import os
import re
import tempfile
from dataclasses import dataclass
from pathlib import Path

from fasting_calculator.services.storage import KeyValueStore

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")

_logger = logging.getLogger(__name__)


@dataclass
class JsonFileStore(KeyValueStore):
    """Stores each key as ``<directory>/<key>.json``.

    Writes go to a temporary file in the same directory and are moved into
    place with ``os.replace``, so readers never see a partial record.
    """

    directory: Path

    def get(self, key: str) -> str | None:
        """Return the file contents for ``key``, or None."""
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            _logger.warning("Unable to read %s: %s", path, exc)
            return None

    def set(self, key: str, value: str) -> None:
        """Atomically write ``value`` for ``key``."""
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self._path(key)
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(value)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _path(self, key: str) -> Path:
        return self.directory / f"{_UNSAFE_CHARS.sub('_', key)}.json"
