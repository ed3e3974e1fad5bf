from typing import (
    Any,
    Dict,
    List,
    Literal,
    Union,
)

SchemaKind = Literal[
    "string",
    "number",
    "boolean",
    "array",
    "object",
]

FieldSchema = Dict[
    Literal["type", "format", "enum", "description", "items", "properties", "required"]
    | str,
    Union[str, List[Any], Dict[str, Any]],
]

ModelSchema = Dict[
    Literal["title", "required", "properties"],
    Union[str, List[str], Dict[str, FieldSchema]],
]

DATE_TYPE_NAMES = {"Date", "date", "datetime"}
DATE_FORMAT = "date-time"

IDENTIFIER_TYPE_NAMES = {"ObjectId", "ObjectID"}

CONSTRUCTOR_TYPES: Dict[type, SchemaKind] = {
    list: "array",
    tuple: "array",
    dict: "object",
}

INSTANCE_TYPES: Dict[str, SchemaKind] = {
    "Array": "array",
    "DocumentArray": "array",
    "ObjectId": "string",
    "ObjectID": "string",
    "SchemaDate": "string",
    "Mixed": "object",
    "String": "string",
    "SchemaString": "string",
    "SchemaBuffer": "string",
    "SchemaObjectId": "string",
    "SchemaArray": "array",
    "Boolean": "boolean",
    "SchemaBoolean": "boolean",
    "Number": "number",
    "SchemaNumber": "number",
}

METADATA_FIELDS = (
    "enum",
    "required",
    "description",
)
