"""Schema model, builder and type registry."""

from .builder import BOOLEAN_TYPE, BUILTIN_TYPES, NUMBER_TYPE, STRING_TYPE, SchemaBuilder
from .errors import (
    AlohomoraError,
    AsyncValidatorError,
    DuplicateTypeError,
    NodeValidationError,
    RegistryLoadError,
    SchemaDepthError,
    UnknownSchemaKindError,
    UnknownTypeError,
)
from .registry import TypeRegistry, define_type, load_type_definitions
from .types import (
    ArraySchema,
    CompatibilityResult,
    CustomSchema,
    ObjectSchema,
    PrimitiveSchema,
    PrimitiveType,
    Schema,
    SchemaKind,
    TypeDefinition,
    ValidationResult,
    ValueNode,
    schema_adapter,
    schema_to_dict,
)

__all__ = [
    "SchemaBuilder",
    "STRING_TYPE",
    "NUMBER_TYPE",
    "BOOLEAN_TYPE",
    "BUILTIN_TYPES",
    "TypeRegistry",
    "define_type",
    "load_type_definitions",
    "ArraySchema",
    "CompatibilityResult",
    "CustomSchema",
    "ObjectSchema",
    "PrimitiveSchema",
    "PrimitiveType",
    "Schema",
    "SchemaKind",
    "TypeDefinition",
    "ValidationResult",
    "ValueNode",
    "schema_adapter",
    "schema_to_dict",
    "AlohomoraError",
    "AsyncValidatorError",
    "DuplicateTypeError",
    "NodeValidationError",
    "RegistryLoadError",
    "SchemaDepthError",
    "UnknownSchemaKindError",
    "UnknownTypeError",
]
