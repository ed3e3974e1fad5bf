from .descriptors import DocumentArrayType as DocumentArrayType
from .descriptors import EmbeddedSchemaType as EmbeddedSchemaType
from .descriptors import Mixed as Mixed
from .descriptors import Model as Model
from .descriptors import ObjectId as ObjectId
from .descriptors import Schema as Schema
from .descriptors import SchemaType as SchemaType
from .descriptors import VirtualType as VirtualType
from .model_definition import ModelDefinition as ModelDefinition
from .model_definition import load_model_definition as load_model_definition
