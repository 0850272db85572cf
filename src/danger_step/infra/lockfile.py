from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class GemfileLock:
    """Reads the project's Gemfile.lock. A missing or undecodable file is not an error."""

    def __init__(self, *, path: Path) -> None:
        self._path = Path(path)

    def read(self) -> Optional[str]:
        try:
            return self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read from {self._path}, error: {e}")
            return None
