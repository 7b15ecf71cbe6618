from __future__ import annotations

"""Document store for the mutable part of state data, keyed by state code."""

import json
import logging
import threading
from pathlib import Path
from typing import Dict, List, Optional

from states_api.core.config import get_settings, resolve_path
from states_api.domain.models import StateRecord

logger = logging.getLogger(__name__)


class StateRecordStore:
    """Thread-safe in-memory collection of state records.

    When ``path`` is set the collection is written to that JSON file after
    every change, so it can be reloaded with ``load``.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self.lock = threading.Lock()
        self.path = path
        self.reset()

    def reset(self) -> None:
        """Drop all records (the backing file, if any, is left untouched)."""
        with self.lock:
            self.records: Dict[str, StateRecord] = {}

    def load(self, path: Path) -> None:
        """Replace the collection with the documents stored in ``path``."""
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
        records = [StateRecord.model_validate(doc) for doc in payload]
        with self.lock:
            self.records = {r.state_code: r for r in records}
        logger.info("Loaded %d state records from %s", len(records), path)

    def _save(self) -> None:
        if self.path is None:
            return
        docs = [r.to_document() for r in self.records.values()]
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(json.dumps(docs, indent=2), encoding="utf-8")
        tmp.replace(self.path)

    def find_all(self) -> List[StateRecord]:
        with self.lock:
            return [r.model_copy(deep=True) for r in self.records.values()]

    def find_one(self, state_code: str) -> Optional[StateRecord]:
        with self.lock:
            record = self.records.get(state_code)
            return record.model_copy(deep=True) if record else None

    def find_one_and_update(self, state_code: str, update: dict, upsert: bool = True) -> Optional[StateRecord]:
        """Set the fields in ``update`` and return the record as written.

        With ``upsert`` a missing record is created with default fields first;
        otherwise a missing record is left missing and None is returned.
        """
        unknown = set(update) - {"funfacts"}
        if unknown:
            raise ValueError(f"Cannot update fields: {sorted(unknown)}")

        with self.lock:
            record = self.records.get(state_code)
            if record is None:
                if not upsert:
                    return None
                record = StateRecord(state_code=state_code)
            record = StateRecord.model_validate({**record.model_dump(), **update})
            self.records[state_code] = record
            self._save()
            logger.info("Upserted state record %s (%s)", state_code, ", ".join(sorted(update)))
            return record.model_copy(deep=True)

    def unset_field(self, state_code: str, field: str) -> Optional[StateRecord]:
        """Remove ``field`` from a stored record, keeping the record itself."""
        if field != "funfacts":
            raise ValueError(f"Cannot unset field: {field}")

        with self.lock:
            record = self.records.get(state_code)
            if record is None:
                return None
            record = record.model_copy(update={field: None})
            self.records[state_code] = record
            self._save()
            logger.info("Unset %s on state record %s", field, state_code)
            return record.model_copy(deep=True)


def _create_store() -> StateRecordStore:
    settings = get_settings()
    if not settings.state_records_path:
        return StateRecordStore()
    path = resolve_path(settings.state_records_path)
    store = StateRecordStore(path=path)
    if path.exists():
        store.load(path)
    return store


_store = _create_store()


def get_store() -> StateRecordStore:
    """Get the singleton record store."""
    return _store
