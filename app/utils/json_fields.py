"""
Helpers for list-shaped columns stored as JSON text
(models, gallery, features, benefits, specifications, images).

The database treats these columns as opaque strings; only this module
knows how to read and write them.
"""
import json
import logging
from typing import Any

logger = logging.getLogger(__name__)


def dump_json_list(items: list | None) -> str:
    """Serialize a list for storage. ``None`` is stored as an empty list."""
    return json.dumps(list(items or []), ensure_ascii=False)


def load_json_list(raw: str | None) -> list[Any]:
    """
    Parse a stored JSON list.
    Empty, malformed or non-list values come back as ``[]`` so a single bad row
    cannot break a catalog page.
    """
    if not raw:
        return []
    try:
        value = json.loads(raw)
    except (TypeError, ValueError):
        logger.warning(f"Unparseable JSON list column: {raw[:80]!r}")
        return []
    return value if isinstance(value, list) else []


def coerce_json_list(value: Any) -> Any:
    """
    Accept a JSON-encoded string where a list is expected.
    Used as a ``mode="before"`` validator: admin forms post these fields as text.
    """
    if value is None:
        return []
    if isinstance(value, str):
        if not value.strip():
            return []
        try:
            return json.loads(value)
        except ValueError:
            raise ValueError("Must be a list or a JSON-encoded list")
    return value
