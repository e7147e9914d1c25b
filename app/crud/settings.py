"""
Typed repository over the key/value settings bag.

Known categories are validated against their schema on write and filled
with defaults on read. Unknown keys pass through as raw JSON.
"""

import logging
from typing import Any, Dict

from pydantic import ValidationError as SchemaError
from sqlalchemy.orm import Session

from app.core.exceptions import ValidationError
from app.core.serialization import dump_json, parse_json_field
from app.models.system import KeyValueStore
from app.schemas.settings import SETTINGS_CATEGORIES, SettingsModel, default_settings

logger = logging.getLogger(__name__)


def get_raw(db: Session) -> Dict[str, Any]:
    """Every stored key with its decoded value ([] when undecodable)."""
    rows = db.query(KeyValueStore).all()
    return {row.key_name: parse_json_field(row.value) for row in rows}


def get_settings(db: Session, key: str) -> SettingsModel:
    """
    Read one known category.

    Missing or malformed stored values fall back to the defaults.
    """
    model = SETTINGS_CATEGORIES[key]
    row = db.get(KeyValueStore, key)
    if row is None:
        return model()

    value = parse_json_field(row.value)
    try:
        return model.model_validate(value)
    except SchemaError as e:
        logger.warning(f"Stored {key} does not match its schema, using defaults: {e.error_count()} errors")
        return model()


def put_settings(db: Session, key: str, value: Any) -> Any:
    """
    Validate (for known categories) and upsert one settings object.

    Returns:
        The value as stored

    Raises:
        ValidationError: Value does not match the category schema
    """
    model = SETTINGS_CATEGORIES.get(key)
    if model is not None:
        try:
            value = model.model_validate(value).wire()
        except SchemaError as e:
            first = e.errors()[0]
            location = ".".join(str(part) for part in first["loc"]) or key
            raise ValidationError(f"Validation Error: Invalid {key}: {location}: {first['msg']}")

    row = db.get(KeyValueStore, key)
    if row is None:
        db.add(KeyValueStore(key_name=key, value=dump_json(value)))
    else:
        row.value = dump_json(value)
    db.commit()
    return value


def merged_settings(db: Session) -> Dict[str, Any]:
    """
    Defaults for every known category, overlaid with what is stored.

    A stored known category is filled up to its full shape when it validates,
    and passed through untouched when it does not.
    """
    merged = default_settings()
    for key, value in get_raw(db).items():
        model = SETTINGS_CATEGORIES.get(key)
        if model is not None and isinstance(value, dict):
            try:
                value = model.model_validate(value).wire()
            except SchemaError:
                pass
        merged[key] = value
    return merged
