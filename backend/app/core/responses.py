"""
Response envelope shared by every endpoint.

    {"success": bool, "data"?: ..., "error"?: str, "message"?: str,
     "details"?: [str], "pagination"?: {"page", "limit", "total", "pages"}}
"""

import re
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

_DOCUMENT_ID = re.compile(r"^[1-9][0-9]{0,17}$")


class CamelModel(BaseModel):
    """Base for request/response bodies exchanged in camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
    )


class APIError(Exception):
    """An expected failure rendered as an error envelope."""

    def __init__(self, status_code: int, error: str, details: Optional[List[str]] = None):
        super().__init__(error)
        self.status_code = status_code
        self.error = error
        self.details = details


def success_response(
    data: Any = None,
    message: Optional[str] = None,
    status_code: int = 200,
    pagination: Optional[Dict[str, int]] = None,
) -> JSONResponse:
    content: Dict[str, Any] = {"success": True}
    if data is not None:
        content["data"] = data
    if message:
        content["message"] = message
    if pagination is not None:
        content["pagination"] = pagination
    return JSONResponse(status_code=status_code, content=jsonable_encoder(content))


def error_response(
    status_code: int,
    error: str,
    details: Optional[List[str]] = None,
    **extra: Any,
) -> JSONResponse:
    content: Dict[str, Any] = {"success": False, "error": error}
    if details:
        content["details"] = details
    content.update(extra)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(content))


def format_validation_errors(errors: Iterable[Dict[str, Any]]) -> List[str]:
    """Flatten pydantic error dicts into ``"field: message"`` strings."""
    messages = []
    for err in errors:
        location = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        message = err.get("msg", "Invalid value")
        messages.append(f"{'.'.join(location)}: {message}" if location else message)
    return messages


def parse_document_id(raw_id: str, resource: str) -> int:
    """Validate an identifier from the URL before it reaches a query."""
    if not raw_id:
        raise APIError(400, f"{resource.capitalize()} ID is required")
    if not _DOCUMENT_ID.match(raw_id):
        raise APIError(400, f"Invalid {resource} ID format")
    return int(raw_id)


def serialize(schema: type, obj: Any) -> Dict[str, Any]:
    """Render an ORM object through a response schema, camelCase keys."""
    return schema.model_validate(obj).model_dump(by_alias=True, mode="json")


class DocumentResponse(CamelModel):
    """Fields every stored document exposes."""

    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_string(cls, value: Any) -> str:
        return str(value)
