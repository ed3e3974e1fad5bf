from .docs import ParsedAPIMetadata as ParsedAPIMetadata
from .docs import ParsedField as ParsedField
from .docs import classify_type as classify_type
from .docs import create_api_definition as create_api_definition
from .docs import document_model as document_model
from .docs import dump_schema as dump_schema
from .docs import parse_field as parse_field
from .docs import parse_model as parse_model
from .docs import parse_schema as parse_schema
from .env import Env as Env
from .env import load_env as load_env
from .models import DocumentArrayType as DocumentArrayType
from .models import DuplicateModelError as DuplicateModelError
from .models import EmbeddedSchemaType as EmbeddedSchemaType
from .models import Mixed as Mixed
from .models import Model as Model
from .models import ObjectId as ObjectId
from .models import Schema as Schema
from .models import SchemaType as SchemaType
from .models import VirtualType as VirtualType
from .models import load_model_definition as load_model_definition
