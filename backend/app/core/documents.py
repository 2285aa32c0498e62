"""Helpers for writing validated request bodies onto ORM documents."""

from typing import Any, Dict, Type

from pydantic import BaseModel


def _to_storage(value: Any) -> Any:
    # nested sub-documents are stored as camelCase JSON
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, mode="json")
    if isinstance(value, list):
        return [_to_storage(item) for item in value]
    return value


def apply_document(document: Any, validated: BaseModel) -> Any:
    """Copy every field of a validated body onto the ORM object."""
    for name in type(validated).model_fields:
        setattr(document, name, _to_storage(getattr(validated, name)))
    return document


def merge_update(
    schema: Type[BaseModel],
    document: Any,
    payload: Dict[str, Any],
) -> BaseModel:
    """
    Overlay a partial update on the stored document and validate the result
    as a whole, so cross-field rules still hold after the update.

    Top-level keys replace the stored value entirely; nested objects are not
    merged key by key. Keys the schema does not know are ignored.
    """
    current = schema.model_validate(document).model_dump(by_alias=True)
    for key, value in payload.items():
        field = schema.model_fields.get(key)
        # accept both camelCase and snake_case keys
        if field is not None and field.alias:
            key = field.alias
        current[key] = value
    return schema.model_validate(current)
