# ========================================
# companysite/schemas/common.py
# ========================================

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, HttpUrl, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

_http_url = TypeAdapter(HttpUrl)

# leading error-location entries that name where the value came from, not the field
_SOURCES = ("body", "path", "query", "header", "cookie")


class CamelModel(BaseModel):
    """snake_case attributes in Python, camelCase names on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class FieldError(BaseModel):
    path: List[Union[str, int]]
    message: str


def field_errors(errors: Sequence[Dict[str, Any]]) -> List[FieldError]:
    """Flatten pydantic error dicts into path + message pairs."""
    result = []
    for error in errors:
        loc = list(error.get("loc", ()))
        if loc and loc[0] in _SOURCES:
            loc = loc[1:]
        result.append(FieldError(path=loc, message=error.get("msg", "Invalid value")))
    return result


def check_url(value: Optional[str]) -> Optional[str]:
    """Blank means no URL; anything else must be an http(s) URL."""
    if value is None or not value.strip():
        return None
    try:
        _http_url.validate_python(value)
    except ValidationError:
        raise ValueError("Invalid url")
    return value


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def not_null(value):
    if value is None:
        raise ValueError("Field may not be null")
    return value
