"""Exception types raised by alohomora.

Mismatches between values and schemas are reported as values
(``ValidationResult`` / ``CompatibilityResult``). The exceptions below are
reserved for API misuse and for the node-construction boundary.
"""


class AlohomoraError(Exception):
    """Base class for all alohomora errors."""


class UnknownSchemaKindError(AlohomoraError):
    """Raised when a schema carries a kind outside primitive/array/object/custom."""

    def __init__(self, kind: object):
        self.kind = kind
        super().__init__(f"Unknown schema kind: {kind}")


class SchemaDepthError(AlohomoraError):
    """Raised when schema nesting exceeds the configured maximum depth."""

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(f"Schema nesting exceeds maximum depth of {max_depth}")


class AsyncValidatorError(AlohomoraError):
    """Raised when the synchronous validator meets an awaitable custom predicate."""

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(
            f"Custom validator for type '{type_name}' returned an awaitable; "
            "use AsyncSchemaValidator for asynchronous validators"
        )


class DuplicateTypeError(AlohomoraError):
    """Raised when registering a type name that already exists."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Type '{name}' is already registered")


class UnknownTypeError(AlohomoraError):
    """Raised when a type name cannot be resolved through the registry."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = available
        super().__init__(f"Unknown type: {name}. Available types: {', '.join(available)}")


class NodeValidationError(AlohomoraError):
    """Raised when a value does not satisfy the schema of the requested node type."""

    def __init__(self, type_name: str, errors: list[str]):
        self.type_name = type_name
        self.errors = errors
        super().__init__(f"Schema validation failed for type '{type_name}': {'; '.join(errors)}")


class RegistryLoadError(AlohomoraError):
    """Raised when a type definitions document cannot be loaded."""
