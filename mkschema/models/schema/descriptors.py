from __future__ import annotations

from typing import Any, Dict, List, Mapping


class ObjectId:
    """Marker type for document identifier fields."""


class Mixed:
    """Marker type for free-form, schemaless object fields."""


class Schema:
    """A (sub-)schema exposing its field descriptors as ``tree``."""

    def __init__(self, tree: Mapping[str, Any] | None = None):
        self.tree: Dict[str, Any] = dict(tree or {})

    def virtual(self, name: str) -> VirtualType:
        virtual = VirtualType(name)
        self.tree[name] = virtual
        return virtual

    def __repr__(self):
        return f"Schema({list(self.tree)!r})"


class SchemaType:
    """A compiled schema path, tagged with the schema library's
    internal type name in ``instance``."""

    def __init__(
        self,
        instance: str,
        path: str | None = None,
        options: Mapping[str, Any] | None = None,
    ):
        self.instance = instance
        self.path = path
        self.options: Dict[str, Any] = dict(options or {})

    def __repr__(self):
        return f"SchemaType({self.instance!r}, path={self.path!r})"


class DocumentArrayType(SchemaType):
    def __init__(
        self,
        schema: Schema,
        path: str | None = None,
        options: Mapping[str, Any] | None = None,
    ):
        super().__init__("DocumentArray", path=path, options=options)
        self.schema = schema


class EmbeddedSchemaType:
    """Single nested sub-document. Points at its schema via ``schema_type``."""

    def __init__(self, schema: Schema, path: str | None = None):
        self.schema_type = schema
        self.path = path


class VirtualType:
    """Computed field. Never stored, never documented."""

    def __init__(self, path: str):
        self.path = path
        self.getters: List[Any] = []

    def get(self, getter):
        self.getters.append(getter)
        return self


class Model:
    def __init__(self, model_name: str, schema: Schema):
        self.model_name = model_name
        self.schema = schema

    def __repr__(self):
        return f"Model({self.model_name!r})"
