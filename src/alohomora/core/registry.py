"""Type registry: a uniqueness-checked store of named type definitions."""

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .builder import BUILTIN_TYPES
from .errors import DuplicateTypeError, RegistryLoadError
from .types import Schema, TypeDefinition

logger = logging.getLogger(__name__)


class TypeRegistry:
    """Holds type definitions keyed by unique name.

    Registries are plain instances; pass one to whatever needs name lookups.
    The built-in ``string``, ``number`` and ``boolean`` types are registered
    on construction unless ``include_builtins`` is False.
    """

    def __init__(self, include_builtins: bool = True):
        self._types: dict[str, TypeDefinition] = {}
        if include_builtins:
            for definition in BUILTIN_TYPES:
                self.register_type(definition)

    def register_type(self, definition: TypeDefinition) -> None:
        """Register a type definition.

        Raises:
            DuplicateTypeError: If the name is already registered
        """
        if definition.name in self._types:
            raise DuplicateTypeError(definition.name)
        self._types[definition.name] = definition
        logger.debug(f"Registered type '{definition.name}' ({definition.schema.kind})")

    def get_type(self, name: str) -> TypeDefinition | None:
        return self._types.get(name)

    def has_type(self, name: str) -> bool:
        return name in self._types

    def get_all_types(self) -> Mapping[str, TypeDefinition]:
        """Read-only view of all definitions in registration order."""
        return MappingProxyType(self._types)

    def get_type_names(self) -> list[str]:
        return list(self._types)

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __len__(self) -> int:
        return len(self._types)

    @classmethod
    def from_file(cls, path: str | Path, include_builtins: bool = True) -> "TypeRegistry":
        """Create a registry populated from a type definitions document."""
        registry = cls(include_builtins=include_builtins)
        for definition in load_type_definitions(path):
            registry.register_type(definition)
        return registry


def define_type(
    registry: TypeRegistry,
    name: str,
    schema: Schema,
    description: str | None = None,
) -> TypeDefinition:
    """Create a type definition and register it.

    Raises:
        DuplicateTypeError: If the name is already registered
    """
    definition = TypeDefinition(name=name, schema=schema, description=description)
    registry.register_type(definition)
    return definition


class TypeEntry(BaseModel):
    """One entry of a type definitions document."""
    name: str
    type_schema: Schema = Field(alias="schema")
    description: str | None = None

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class TypeDefinitionsDocument(BaseModel):
    """Type definitions document: ``{"types": [{"name", "schema", "description"}]}``."""
    types: list[TypeEntry] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


def load_type_definitions(path: str | Path) -> list[TypeDefinition]:
    """Load type definitions from a JSON document.

    Custom validators cannot be expressed in JSON, so custom schemas loaded
    this way only carry their type name and inner schema.

    Raises:
        RegistryLoadError: If the file is missing, not JSON, or not a valid document
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise RegistryLoadError(f"Type definitions file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise RegistryLoadError(f"Invalid JSON in type definitions file {path}: {e}") from e

    try:
        document = TypeDefinitionsDocument.model_validate(data)
    except ValidationError as e:
        raise RegistryLoadError(f"Invalid type definitions in {path}: {e}") from e

    logger.debug(f"Loaded {len(document.types)} type definitions from {path}")
    return [
        TypeDefinition(name=entry.name, schema=entry.type_schema, description=entry.description)
        for entry in document.types
    ]
