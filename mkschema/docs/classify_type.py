import inspect
from typing import Any

from mkschema.env import DEFAULT_ENV, Env
from mkschema.models import ObjectId

from .descriptor_attributes import (
    is_sequence,
    read_attribute,
    read_schema_type,
)
from .parsed_types import (
    CONSTRUCTOR_TYPES,
    DATE_TYPE_NAMES,
    IDENTIFIER_TYPE_NAMES,
    INSTANCE_TYPES,
)


def is_type_alias(descriptor: Any, alias: str) -> bool:
    return isinstance(descriptor, str) and descriptor.lower() == alias


def is_constructor(descriptor: Any) -> bool:
    return inspect.isclass(descriptor) or inspect.isroutine(descriptor)


def classify_type(descriptor: Any, env: Env | None = None) -> str | None:
    """Map a field descriptor to its OpenAPI type name.

    Returns ``None`` for fields that must not be documented (virtuals and
    empty descriptors). Unrecognized constructors map to their lowercased
    name, or to ``object`` when ``MKSCHEMA_STRICT_TYPES`` is set.

    Rules are checked in order and the first match wins: a ``{"type": ...}``
    wrapper is only unwrapped after the bare constructor and alias checks,
    and an unknown ``instance`` tag falls through to the remaining rules.
    """
    if env is None:
        env = DEFAULT_ENV

    if descriptor is None or (isinstance(descriptor, str) and not descriptor):
        return None

    if descriptor is int or descriptor is float or is_type_alias(descriptor, "number"):
        return "number"

    if descriptor is str or is_type_alias(descriptor, "string"):
        return "string"

    if descriptor is ObjectId:
        return "string"

    if descriptor is bool or is_type_alias(descriptor, "boolean"):
        return "boolean"

    if is_constructor(descriptor):
        name: str = getattr(descriptor, "__name__", "")

        if name in IDENTIFIER_TYPE_NAMES or name in DATE_TYPE_NAMES:
            return "string"

        if descriptor in CONSTRUCTOR_TYPES:
            return CONSTRUCTOR_TYPES[descriptor]

        if env.MKSCHEMA_STRICT_TYPES or not name:
            return "object"

        return name.lower()

    nested_type = read_attribute(descriptor, "type")
    if nested_type is not None:
        return classify_type(nested_type, env=env)

    instance = read_attribute(descriptor, "instance")
    if isinstance(instance, str) and instance in INSTANCE_TYPES:
        return INSTANCE_TYPES[instance]

    if is_sequence(descriptor):
        return "array"

    schema_type = read_schema_type(descriptor)
    if schema_type is not None:
        return classify_type(read_attribute(schema_type, "tree"), env=env)

    getters = read_attribute(descriptor, "getters")
    if isinstance(getters, list) and read_attribute(descriptor, "path") is not None:
        return None

    return "object"
