from __future__ import annotations

import logging
from pathlib import Path

from txwhisperer.config import settings
from txwhisperer.models.contamination import FlaggedTable

logger = logging.getLogger(__name__)

_table: FlaggedTable | None = None


def load_flagged_table(path: Path | str) -> FlaggedTable:
    path = Path(path)
    table = FlaggedTable.model_validate_json(path.read_text(encoding="utf-8"))
    logger.info(
        "Loaded flagged table v%s (%d entries) from %s", table.version, len(table.entries), path
    )
    return table


def get_flagged_table() -> FlaggedTable:
    global _table
    if _table is None:
        _table = load_flagged_table(settings.flagged_table_file)
    return _table


def reset_flagged_table() -> None:
    global _table
    _table = None
