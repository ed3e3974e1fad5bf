from typing import Any, Mapping

from mkschema.models import SchemaType

OPAQUE_TYPES = (str, bytes, list, tuple, type)


def read_attribute(descriptor: Any, name: str) -> Any:
    if isinstance(descriptor, Mapping):
        return descriptor.get(name)

    if descriptor is None or isinstance(descriptor, OPAQUE_TYPES) or callable(descriptor):
        return None

    return getattr(descriptor, name, None)


def read_option(descriptor: Any, name: str) -> Any:
    value = read_attribute(descriptor, name)
    if value is None and isinstance(descriptor, SchemaType):
        return descriptor.options.get(name)

    return value


def read_schema_type(descriptor: Any) -> Any:
    if isinstance(descriptor, Mapping):
        return descriptor.get("$schemaType")

    return read_attribute(descriptor, "schema_type")


def is_sequence(descriptor: Any) -> bool:
    return isinstance(descriptor, (list, tuple))


def first_element(descriptor: Any) -> Any:
    if is_sequence(descriptor) and len(descriptor) > 0:
        return descriptor[0]

    return None
