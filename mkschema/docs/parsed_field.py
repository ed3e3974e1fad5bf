from __future__ import annotations

from typing import Any, Dict, List

import msgspec

from .parsed_types import FieldSchema


class ParsedField(msgspec.Struct, kw_only=True):
    """Builder record for one documented field.

    ``field`` and ``required`` are transient: they only exist so the
    enclosing schema can key and hoist the field, and ``to_schema()``
    never renders them.
    """

    type: str | None = None
    format: str | None = None
    enum: List[Any] | None = None
    description: str | None = None
    items: ParsedField | None = None
    properties: Dict[str, ParsedField] | None = None
    required_fields: List[str] | None = None
    field: str | None = None
    required: bool | None = None

    @property
    def suppressed(self) -> bool:
        return self.type is None

    def detach(self) -> ParsedField:
        return msgspec.structs.replace(self, field=None)

    def release_required(self) -> ParsedField:
        return msgspec.structs.replace(self, required=None)

    def to_schema(self) -> FieldSchema:
        schema: FieldSchema = {"type": self.type}

        if self.format is not None:
            schema["format"] = self.format

        if isinstance(self.enum, (tuple, set, frozenset)):
            schema["enum"] = list(self.enum)

        elif self.enum is not None:
            schema["enum"] = self.enum

        if self.description is not None:
            schema["description"] = self.description

        if self.items is not None:
            schema["items"] = self.items.to_schema()

        if self.properties is not None:
            schema["properties"] = {
                name: child.to_schema() for name, child in self.properties.items()
            }

        if self.required_fields is not None:
            schema["required"] = list(self.required_fields)

        return schema
