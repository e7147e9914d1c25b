"""
Base schemas and validation helpers shared by every resource.

Request bodies arrive in camelCase and keep every field optional: required
fields are checked by the per-resource validators so the first missing one
can be named in the error message.
"""

from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional

from pydantic import AliasGenerator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Payload(BaseModel):
    """Request body: camelCase on the wire, unknown keys ignored."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    def wire(self) -> Dict[str, Any]:
        """The fields the client actually sent, keyed by their wire names."""
        return self.model_dump(by_alias=True, exclude_unset=True, mode="json")


class Record(BaseModel):
    """Response row: read from ORM attributes, written in camelCase."""
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=AliasGenerator(serialization_alias=to_camel),
    )

    def wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class DeleteRequest(Payload):
    """Body of every DELETE: a single id, a list of ids, or a clear-all flag."""
    id: Optional[str] = None
    ids: Optional[List[str]] = None
    clear_all: Optional[bool] = None


def parse_date(value: Any) -> Optional[date]:
    """
    Parse YYYY-MM-DD or a full ISO timestamp into a date.

    Returns None when the value cannot be read as a date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def first_missing(data: Dict[str, Any], fields: Iterable[str]) -> Optional[str]:
    """Error message for the first absent or empty field, if any."""
    for field in fields:
        if not data.get(field):
            return f"Missing required field: {field}"
    return None


def first_invalid_choice(data: Dict[str, Any], field: str, choices: Iterable[str]) -> Optional[str]:
    if not data.get(field) or data[field] not in set(choices):
        return f"Invalid or missing field: {field}"
    return None
