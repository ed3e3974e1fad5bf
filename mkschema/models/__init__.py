from .logging import Event as Event
from .logging import FieldEvent as FieldEvent
from .schema import (
    DocumentArrayType as DocumentArrayType,
)
from .schema import (
    EmbeddedSchemaType as EmbeddedSchemaType,
)
from .schema import Mixed as Mixed
from .schema import Model as Model
from .schema import ModelDefinition as ModelDefinition
from .schema import ObjectId as ObjectId
from .schema import Schema as Schema
from .schema import SchemaType as SchemaType
from .schema import VirtualType as VirtualType
from .schema import load_model_definition as load_model_definition
from .validation import DuplicateModelError as DuplicateModelError
