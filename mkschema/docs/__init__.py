from .classify_type import classify_type as classify_type
from .parse_model import document_model as document_model
from .parse_model import parse_model as parse_model
from .parse_schema import parse_field as parse_field
from .parse_schema import parse_schema as parse_schema
from .parsed_api_metadata import ParsedAPIMetadata as ParsedAPIMetadata
from .parsed_docs import create_api_definition as create_api_definition
from .parsed_docs import dump_schema as dump_schema
from .parsed_field import ParsedField as ParsedField
