# estate_api/storage.py
import json
import logging
from pathlib import Path
from threading import Lock
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


def _read(path: Path) -> List[Record]:
    if not path.exists():
        return []
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        logger.error("Error reading file %s", path, exc_info=True)
        return []
    if not isinstance(data, list):
        logger.error("Error reading file %s: expected a JSON array, got %s", path, type(data).__name__)
        return []
    return data


def _write(path: Path, obj) -> bool:
    try:
        with path.open("w", encoding="utf-8") as f:
            json.dump(obj, f, ensure_ascii=False, indent=2)
    except (OSError, TypeError, ValueError):
        logger.error("Error writing to file %s", path, exc_info=True)
        return False
    return True


class JsonStore:
    """
    One collection of records mirrored to a JSON file.

    The whole array is rewritten after every mutation. A failed write is logged
    and the in-memory change is kept, so memory and disk can drift apart until
    the next successful persist.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._records: List[Record] = []
        self._lock = Lock()

    def load(self) -> "JsonStore":
        with self._lock:
            self._records = _read(self.path)
        logger.info("Loaded %d records from %s", len(self._records), self.path)
        return self

    def list(self) -> List[Record]:
        with self._lock:
            return list(self._records)

    def append(self, build) -> Record:
        """Build a record from the next id, append it and persist.

        ``build`` receives the id so that assignment and insertion happen under one lock.
        """
        with self._lock:
            record = build(len(self._records) + 1)
            self._records.append(record)
            self._persist()
        return record

    def remove_by_id(self, record_id: int) -> Optional[Record]:
        # first match wins; ids can repeat after a delete followed by a create
        with self._lock:
            for index, record in enumerate(self._records):
                if record.get("id") == record_id:
                    del self._records[index]
                    self._persist()
                    return record
        return None

    def persist(self) -> bool:
        with self._lock:
            return self._persist()

    def _persist(self) -> bool:
        return _write(self.path, self._records)
