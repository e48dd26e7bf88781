"""Schema validation and type compatibility checks."""

from .async_validator import AsyncSchemaValidator, validate_async
from .compatibility import TypeCompatibility, are_schemas_compatible, check_schema_compatibility
from .validator import DEFAULT_MAX_DEPTH, SchemaValidator, runtime_type_name, validate

__all__ = [
    "AsyncSchemaValidator",
    "SchemaValidator",
    "TypeCompatibility",
    "DEFAULT_MAX_DEPTH",
    "are_schemas_compatible",
    "check_schema_compatibility",
    "runtime_type_name",
    "validate",
    "validate_async",
]
