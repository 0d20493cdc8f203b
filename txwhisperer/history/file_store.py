from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from txwhisperer.history.manager import CheckHistory, HistoryItem

logger = logging.getLogger(__name__)

_ITEMS = TypeAdapter(list[HistoryItem])


class HistoryFileStore:
    """JSON file backing for ``CheckHistory``; a bad file means an empty history."""

    def __init__(self, path: Path | str):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[HistoryItem]:
        if not self._path.exists():
            return []
        try:
            return _ITEMS.validate_json(self._path.read_bytes())
        except (ValidationError, OSError) as exc:
            logger.warning("Unreadable history file %s, ignoring: %s", self._path, exc)
            return []

    def save(self, history: CheckHistory) -> None:
        payload = [item.model_dump(mode="json") for item in history.items()]
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(payload))
            tmp_path.replace(self._path)
        except OSError as exc:
            logger.warning("Could not write history file %s: %s", self._path, exc)

    def clear(self) -> None:
        self._path.unlink(missing_ok=True)
