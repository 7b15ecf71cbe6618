from __future__ import annotations

"""Static state reference table, read from the bundled JSON file."""

import json
import logging
from functools import lru_cache
from typing import List, Optional, Tuple

from states_api.core.config import get_settings, resolve_path

logger = logging.getLogger(__name__)


@lru_cache(maxsize=4)
def _read_table(path: str) -> Tuple[dict, ...]:
    path_obj = resolve_path(path)
    records = json.loads(path_obj.read_text(encoding="utf-8"))
    logger.info("Loaded %d static state records from %s", len(records), path_obj)
    return tuple(records)


def load_static_state_data(path: Optional[str] = None) -> List[dict]:
    """Return a fresh copy of every static state record, in file order."""
    table = _read_table(path or get_settings().static_state_data_path)
    return [dict(record) for record in table]


def find_static_state(code: str, path: Optional[str] = None) -> Optional[dict]:
    """Look up a static record by its two-letter code, ignoring case."""
    code = code.upper()
    for record in load_static_state_data(path):
        if record["code"] == code:
            return record
    return None
