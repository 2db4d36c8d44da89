"""Core abstractions for Structify"""

from .models import *
from .enums import *
from .exceptions import *
from .interfaces import *
from .validation import validate_input_table, validate_schema_table
from .schema import parse_schema, unparse_schema, generate_example_record

__all__ = [
    # Models
    "Table",
    "OutputRow",
    "InputRow",
    "FieldDescriptor",
    "SchemaItem",
    # Enums
    "FieldType",
    "RowFailurePolicy",
    "PromptStyle",
    "CredentialScope",
    # Exceptions
    "StructifyError",
    "ValidationError",
    "CredentialMissingError",
    "LLMError",
    "ApiError",
    "RefusalError",
    "MalformedResponseError",
    "ParseError",
    "FileParseError",
    "ROW_ERRORS",
    # Interfaces
    "LLMTask",
    "ModelGateway",
    "PropertyStore",
    # Validation and schema
    "validate_input_table",
    "validate_schema_table",
    "parse_schema",
    "unparse_schema",
    "generate_example_record",
]
