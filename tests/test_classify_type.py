"""
Unit tests for descriptor type classification.
"""

import datetime
import decimal

import pytest

from mkschema import (
    DocumentArrayType,
    EmbeddedSchemaType,
    Env,
    Mixed,
    ObjectId,
    Schema,
    SchemaType,
    VirtualType,
    classify_type,
)


class ObjectID:
    pass


def Point():
    return None


class TestPrimitives:
    """Native types and lowercase aliases."""

    @pytest.mark.parametrize("descriptor", [None, ""])
    def test_empty_descriptor_is_suppressed(self, descriptor):
        assert classify_type(descriptor) is None

    @pytest.mark.parametrize("descriptor", [int, float, "number", "Number", "NUMBER"])
    def test_number(self, descriptor):
        assert classify_type(descriptor) == "number"

    @pytest.mark.parametrize("descriptor", [str, "string", "String"])
    def test_string(self, descriptor):
        assert classify_type(descriptor) == "string"

    @pytest.mark.parametrize("descriptor", [bool, "boolean", "Boolean"])
    def test_boolean(self, descriptor):
        assert classify_type(descriptor) == "boolean"

    def test_object_id_marker(self):
        assert classify_type(ObjectId) == "string"


class TestConstructors:
    """Class and function descriptors."""

    @pytest.mark.parametrize(
        "descriptor",
        [ObjectID, datetime.datetime, datetime.date],
    )
    def test_identifier_and_date_names(self, descriptor):
        assert classify_type(descriptor) == "string"

    @pytest.mark.parametrize(
        "descriptor,expected",
        [(list, "array"), (tuple, "array"), (dict, "object")],
    )
    def test_builtin_containers(self, descriptor, expected):
        assert classify_type(descriptor) == expected
        assert classify_type({"type": descriptor}) == expected
        assert classify_type(descriptor, env=Env(MKSCHEMA_STRICT_TYPES=True)) == expected

    def test_unknown_class_uses_lowercase_name(self):
        assert classify_type(decimal.Decimal) == "decimal"
        assert classify_type(Mixed) == "mixed"

    def test_unknown_function_uses_lowercase_name(self):
        assert classify_type(Point) == "point"

    def test_strict_types_fall_back_to_object(self):
        env = Env(MKSCHEMA_STRICT_TYPES=True)

        assert classify_type(decimal.Decimal, env=env) == "object"
        assert classify_type(datetime.datetime, env=env) == "string"
        assert classify_type(int, env=env) == "number"


class TestWrappers:
    """Type wrappers, instance tags, sequences and nested schemas."""

    def test_type_wrapper_recurses(self):
        assert classify_type({"type": int}) == "number"
        assert classify_type({"type": {"type": "boolean"}}) == "boolean"
        assert classify_type({"type": [str]}) == "array"

    def test_null_type_is_not_unwrapped(self):
        assert classify_type({"type": None}) == "object"

    def test_type_wins_over_instance(self):
        assert classify_type({"type": str, "instance": "Number"}) == "string"

    @pytest.mark.parametrize(
        "instance,expected",
        [
            ("Array", "array"),
            ("DocumentArray", "array"),
            ("ObjectId", "string"),
            ("ObjectID", "string"),
            ("SchemaDate", "string"),
            ("Mixed", "object"),
            ("String", "string"),
            ("SchemaString", "string"),
            ("SchemaBuffer", "string"),
            ("SchemaObjectId", "string"),
            ("SchemaArray", "array"),
            ("Boolean", "boolean"),
            ("SchemaBoolean", "boolean"),
            ("Number", "number"),
            ("SchemaNumber", "number"),
        ],
    )
    def test_instance_table(self, instance, expected):
        assert classify_type(SchemaType(instance, path="field")) == expected
        assert classify_type({"instance": instance}) == expected

    def test_unknown_instance_falls_through(self):
        assert classify_type(SchemaType("Decimal128")) == "object"
        assert classify_type({"instance": "Decimal128", "getters": [], "path": "p"}) is None

    def test_unhashable_instance_does_not_raise(self):
        assert classify_type({"instance": ["Number"]}) == "object"

    def test_document_array(self):
        assert classify_type(DocumentArrayType(Schema({"name": str}))) == "array"

    @pytest.mark.parametrize("descriptor", [[str], [], ()])
    def test_sequences(self, descriptor):
        assert classify_type(descriptor) == "array"

    def test_schema_type_recurses_into_tree(self):
        embedded = EmbeddedSchemaType(Schema({"street": str}), path="address")

        assert classify_type(embedded) == "object"
        assert classify_type({"$schemaType": Schema({"street": str})}) == "object"
        assert classify_type({"$schemaType": {"tree": None}}) is None


class TestVirtuals:
    """Computed fields never render."""

    def test_virtual_type(self):
        assert classify_type(VirtualType("full_name")) is None

    def test_virtual_signature(self):
        assert classify_type({"getters": [], "path": "full_name"}) is None

    def test_getters_without_path_is_an_object(self):
        assert classify_type({"getters": [], "path": None}) == "object"


class TestDefault:
    """Anything unrecognized is an object."""

    @pytest.mark.parametrize("descriptor", [{}, object(), Schema({"a": str})])
    def test_default_object(self, descriptor):
        assert classify_type(descriptor) == "object"

    def test_repeated_calls_agree(self):
        descriptor = {"type": [{"name": str}]}

        assert classify_type(descriptor) == classify_type(descriptor) == "array"
