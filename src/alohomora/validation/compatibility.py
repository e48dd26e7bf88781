"""Structural compatibility between schemas and between registered types.

Compatibility is directional: the source must satisfy the constraints of the
target. Custom types are compared by name only.
"""

import logging

from ..core.errors import SchemaDepthError, UnknownSchemaKindError
from ..core.registry import TypeRegistry
from ..core.types import (
    ArraySchema,
    CompatibilityResult,
    ObjectSchema,
    PrimitiveType,
    Schema,
    SchemaKind,
    ValueNode,
)
from .validator import DEFAULT_MAX_DEPTH

logger = logging.getLogger(__name__)

_KNOWN_KINDS = {kind.value for kind in SchemaKind}


def _kind_of(schema: Schema) -> str:
    kind = getattr(schema, "kind", None)
    if kind not in _KNOWN_KINDS:
        raise UnknownSchemaKindError(kind)
    return SchemaKind(kind).value


class TypeCompatibility:
    """Checks whether one schema, or one registered type, can stand in for another.

    Name-based checks resolve both names through ``registry``; schema-based
    checks need no registry.
    """

    def __init__(self, registry: TypeRegistry | None = None, max_depth: int = DEFAULT_MAX_DEPTH):
        if max_depth < 1:
            raise ValueError("max_depth must be >= 1")
        self.registry = registry
        self.max_depth = max_depth

    def are_compatible(self, source_type_name: str, target_type_name: str) -> bool:
        """Check two registered types by name."""
        return self.check_compatibility(source_type_name, target_type_name).is_compatible

    def check_compatibility(self, source_type_name: str, target_type_name: str) -> CompatibilityResult:
        """Check two registered types by name, explaining any incompatibility.

        Example::

            checker.check_compatibility("number", "string")
            # CompatibilityResult(is_compatible=False,
            #     reason="Type mismatch: number is not compatible with string")
        """
        if source_type_name == target_type_name:
            return CompatibilityResult.compatible()

        source_type = self.registry.get_type(source_type_name) if self.registry else None
        target_type = self.registry.get_type(target_type_name) if self.registry else None

        if source_type is None:
            return CompatibilityResult.incompatible(f"Unknown source type: {source_type_name}")
        if target_type is None:
            return CompatibilityResult.incompatible(f"Unknown target type: {target_type_name}")

        if not self.are_schemas_compatible(source_type.schema, target_type.schema):
            logger.debug(f"Type '{source_type_name}' rejected for '{target_type_name}'")
            return CompatibilityResult.incompatible(
                f"Type mismatch: {source_type_name} is not compatible with {target_type_name}"
            )

        return CompatibilityResult.compatible()

    def is_node_compatible(self, node: ValueNode, target_type_name: str) -> CompatibilityResult:
        """Check a typed value node against a registered type."""
        return self.check_compatibility(node.type, target_type_name)

    def are_schemas_compatible(self, source: Schema, target: Schema) -> bool:
        return self._mismatch(source, target, 1) is None

    def check_schema_compatibility(self, source: Schema, target: Schema) -> CompatibilityResult:
        """Check two schemas, naming the first place where the source falls short.

        Example::

            checker.check_schema_compatibility(
                SchemaBuilder.object({"id": SchemaBuilder.string()}),
                SchemaBuilder.object({"id": SchemaBuilder.number()}),
            ).reason
            # "Schema mismatch: Property 'id': string is not compatible with number"
        """
        mismatch = self._mismatch(source, target, 1)
        if mismatch is None:
            return CompatibilityResult.compatible()
        return CompatibilityResult.incompatible(f"Schema mismatch: {mismatch}")

    def _mismatch(self, source: Schema, target: Schema, depth: int) -> str | None:
        """Describe the first incompatibility, or None when the schemas are compatible."""
        if depth > self.max_depth:
            raise SchemaDepthError(self.max_depth)

        source_kind = _kind_of(source)
        target_kind = _kind_of(target)
        if source_kind != target_kind:
            return f"{source_kind} is not compatible with {target_kind}"

        if source_kind == SchemaKind.PRIMITIVE:
            if source.type == target.type:
                return None
            return f"{PrimitiveType(source.type).value} is not compatible with {PrimitiveType(target.type).value}"
        if source_kind == SchemaKind.ARRAY:
            return self._array_mismatch(source, target, depth)
        if source_kind == SchemaKind.OBJECT:
            return self._object_mismatch(source, target, depth)

        if source.type_name == target.type_name:
            return None
        return f"custom type {source.type_name} is not compatible with custom type {target.type_name}"

    def _array_mismatch(self, source: ArraySchema, target: ArraySchema, depth: int) -> str | None:
        if source.items is None and target.items is None:
            return None

        if source.is_homogeneous and target.is_homogeneous:
            nested = self._mismatch(source.items[0], target.items[0], depth + 1)
            return None if nested is None else f"Item[*]: {nested}"

        # Tuples (empty included) of equal length; a homogeneous array never matches a tuple
        if source.is_tuple and target.is_tuple and len(source.items) == len(target.items):
            for index, (source_item, target_item) in enumerate(zip(source.items, target.items)):
                nested = self._mismatch(source_item, target_item, depth + 1)
                if nested is not None:
                    return f"Item at index {index}: {nested}"
            return None

        return f"{_array_shape(source)} is not compatible with {_array_shape(target)}"

    def _object_mismatch(self, source: ObjectSchema, target: ObjectSchema, depth: int) -> str | None:
        for name in target.required or ():
            if name not in source.properties:
                return f"Missing required property: '{name}'"

        for key, target_property in target.properties.items():
            if key in source.properties:
                nested = self._mismatch(source.properties[key], target_property, depth + 1)
                if nested is not None:
                    return f"Property '{key}': {nested}"

        return None


def _array_shape(schema: ArraySchema) -> str:
    if schema.items is None:
        return "array without items"
    if not schema.items:
        return "empty tuple"
    if schema.is_homogeneous:
        return "homogeneous array"
    return f"tuple of {len(schema.items)} elements"


_default_checker = TypeCompatibility()


def are_schemas_compatible(source: Schema, target: Schema) -> bool:
    """Check two schemas with the default depth limit."""
    return _default_checker.are_schemas_compatible(source, target)


def check_schema_compatibility(source: Schema, target: Schema) -> CompatibilityResult:
    """Check two schemas with the default depth limit, explaining any incompatibility."""
    return _default_checker.check_schema_compatibility(source, target)
