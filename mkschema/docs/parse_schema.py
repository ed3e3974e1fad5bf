from typing import Any, Dict, List, Mapping

import msgspec

from mkschema.env import DEFAULT_ENV, Env
from mkschema.models import Schema

from .classify_type import classify_type
from .descriptor_attributes import (
    first_element,
    is_sequence,
    read_attribute,
    read_option,
    read_schema_type,
)
from .parsed_field import ParsedField
from .parsed_types import (
    DATE_FORMAT,
    DATE_TYPE_NAMES,
    METADATA_FIELDS,
)


def is_date_type(descriptor: Any) -> bool:
    return isinstance(descriptor, type) and descriptor.__name__ in DATE_TYPE_NAMES


def get_schema_tree(schema: Any) -> Dict[str, Any]:
    tree = schema.get("tree") if isinstance(schema, Mapping) else getattr(schema, "tree", None)

    if isinstance(tree, Schema):
        tree = tree.tree

    if not isinstance(tree, Mapping):
        return {}

    return tree


def get_array_element(value: Any) -> Any:
    if is_sequence(value):
        element = first_element(value)

    else:
        element = first_element(read_attribute(value, "type"))

        document_schema = read_attribute(value, "schema")
        if element is None and isinstance(document_schema, Schema):
            element = document_schema

    if element is None:
        return {}

    return element


def get_object_fields(value: Any, env: Env) -> List[ParsedField]:
    if isinstance(value, Schema):
        return parse_schema(value, env=env)

    schema_type = read_schema_type(value)
    if schema_type is not None:
        return parse_schema(schema_type, env=env)

    sub_schema = read_attribute(value, "type")
    if sub_schema is None:
        sub_schema = value

    return parse_schema({"tree": sub_schema}, env=env)


def parse_field(
    value: Any,
    key: str | None = None,
    env: Env | None = None,
) -> ParsedField:
    """Build the field schema for one descriptor.

    ``key`` is ``None`` for array elements, which have no field name.
    Nested objects and array elements are built recursively. Descriptor
    graphs must be acyclic.
    """
    if env is None:
        env = DEFAULT_ENV

    swagger_type = classify_type(value, env=env)
    meta: Dict[str, Any] = {}

    for meta_field in METADATA_FIELDS:
        meta_value = read_option(value, meta_field)
        if meta_value is not None:
            meta[meta_field] = meta_value

    if "required" in meta:
        meta["required"] = bool(meta["required"])

    if is_date_type(value) or is_date_type(read_attribute(value, "type")):
        meta["format"] = DATE_FORMAT

    elif swagger_type == "array":
        meta["items"] = parse_field(get_array_element(value), env=env)

    elif swagger_type == "object":
        meta["properties"] = {
            field.field: field.detach()
            for field in get_object_fields(value, env)
            if not field.suppressed
        }
        meta["required_fields"] = []

    return ParsedField(
        type=swagger_type,
        field=key,
        **meta,
    )


def hoist_object_required(field: ParsedField) -> ParsedField:
    required_names = [
        name for name, child in field.properties.items() if child.required
    ]

    if not required_names:
        return field

    return msgspec.structs.replace(
        field,
        properties={
            name: child.release_required() if child.required else child
            for name, child in field.properties.items()
        },
        required_fields=[*field.required_fields, *required_names],
        required=True,
    )


def hoist_items_required(field: ParsedField) -> ParsedField:
    items = field.items

    required_names = [
        name for name, child in items.properties.items() if child.required
    ]

    items = msgspec.structs.replace(
        items,
        properties={
            name: child.release_required() if child.required else child
            for name, child in items.properties.items()
        },
        required_fields=required_names,
    )

    return msgspec.structs.replace(field, items=items)


def parse_schema(schema: Any, env: Env | None = None) -> List[ParsedField]:
    """Build one field schema per entry of ``schema.tree``, in tree order.

    Required children of an embedded object are listed on the object and
    make the object itself required. Required children of an array's
    element object are listed on ``items`` and leave the array optional.
    """
    if env is None:
        env = DEFAULT_ENV

    skipped_keys = env.skipped_keys
    tree = get_schema_tree(schema)

    fields: List[ParsedField] = []
    for key, value in tree.items():
        if key in skipped_keys:
            continue

        field = parse_field(value, key=key, env=env)

        if field.type == "object" and field.properties is not None:
            field = hoist_object_required(field)

        elif (
            field.type == "array"
            and field.items is not None
            and field.items.type == "object"
            and field.items.properties is not None
        ):
            field = hoist_items_required(field)

        fields.append(field)

    return fields
