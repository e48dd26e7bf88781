"""alohomora - Runtime schema description and validation.

Describe the shape of data with primitive, array, object and custom schemas,
check values against those descriptions, and check whether one named type is
structurally compatible with another.
"""

__version__ = "1.0.0"
__author__ = "alohomora contributors"
__description__ = "Runtime schema validation and type compatibility checks"

from alohomora.config import AlohomoraConfig
from alohomora.core import (
    CompatibilityResult,
    SchemaBuilder,
    TypeDefinition,
    TypeRegistry,
    ValidationResult,
    ValueNode,
    define_type,
)
from alohomora.factory import AsyncValueNodeFactory, ValueNodeFactory, validate_type_value
from alohomora.validation import (
    AsyncSchemaValidator,
    SchemaValidator,
    TypeCompatibility,
    validate,
    validate_async,
)

__all__ = [
    "__version__",
    "__author__",
    "__description__",
    "AlohomoraConfig",
    "AsyncSchemaValidator",
    "AsyncValueNodeFactory",
    "CompatibilityResult",
    "SchemaBuilder",
    "SchemaValidator",
    "TypeCompatibility",
    "TypeDefinition",
    "TypeRegistry",
    "ValidationResult",
    "ValueNode",
    "ValueNodeFactory",
    "define_type",
    "validate",
    "validate_async",
    "validate_type_value",
]
