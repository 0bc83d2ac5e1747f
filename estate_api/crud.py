# estate_api/crud.py
import logging
import re
from typing import Any, Dict, Optional, Sequence

from .config import Settings
from .storage import JsonStore
from .uploads import discard_image

logger = logging.getLogger(__name__)

PROPERTY_FIELDS = ("name", "price", "location", "sqft")
PROJECT_FIELDS = ("name", "location", "description")

_ID_PREFIX = re.compile(r"\s*([+-]?\d+)")


def parse_record_id(raw: str) -> Optional[int]:
    """Integer prefix of ``raw`` ("12abc" -> 12), or None when it has no leading digits."""
    m = _ID_PREFIX.match(raw or "")
    if not m:
        return None
    return int(m.group(1))


def build_record(record_id: int, fields: Sequence[str], values: Dict[str, Any], image: str) -> Dict[str, Any]:
    record: Dict[str, Any] = {"id": record_id}
    for name in fields:
        # fields the client did not send are left out of the record
        if name in values:
            record[name] = values[name]
    record["image"] = image
    return record


def create_record(store: JsonStore, fields: Sequence[str], values: Dict[str, Any], image: str) -> Dict[str, Any]:
    record = store.append(lambda record_id: build_record(record_id, fields, values, image))
    logger.info("Created record %s in %s", record["id"], store.path)
    return record


def delete_record(store: JsonStore, raw_id: str, settings: Settings) -> Optional[Dict[str, Any]]:
    record_id = parse_record_id(raw_id)
    if record_id is None:
        return None
    record = store.remove_by_id(record_id)
    if record is None:
        return None
    discard_image(record.get("image") or "", settings)
    logger.info("Deleted record %s from %s", record_id, store.path)
    return record

# Properties
def create_property(store: JsonStore, values: Dict[str, Any], image: str):
    return create_record(store, PROPERTY_FIELDS, values, image)

def delete_property(store: JsonStore, raw_id: str, settings: Settings):
    return delete_record(store, raw_id, settings)

# Projects
def create_project(store: JsonStore, values: Dict[str, Any], image: str):
    return create_record(store, PROJECT_FIELDS, values, image)

def delete_project(store: JsonStore, raw_id: str, settings: Settings):
    return delete_record(store, raw_id, settings)
