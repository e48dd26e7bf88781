"""Typed value nodes: values checked against a registered type on creation."""

import logging
from dataclasses import dataclass
from typing import Any

from .core.errors import NodeValidationError, UnknownTypeError
from .core.registry import TypeRegistry
from .core.types import ValueNode
from .validation.async_validator import AsyncSchemaValidator
from .validation.validator import SchemaValidator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NodeCreationResult:
    """Outcome of a non-raising node creation."""
    success: bool
    node: ValueNode | None = None
    error: str | None = None


class ValueNodeFactory:
    """Creates value nodes whose values satisfy their type's schema."""

    def __init__(self, registry: TypeRegistry, validator: SchemaValidator | None = None):
        self.registry = registry
        self.validator = validator or SchemaValidator()

    def create_typed_node(self, type_name: str, value: Any) -> ValueNode:
        """Create a node for ``value`` typed as ``type_name``.

        Raises:
            UnknownTypeError: If the type is not registered
            NodeValidationError: If the value does not satisfy the type's schema
        """
        definition = self.registry.get_type(type_name)
        if definition is None:
            raise UnknownTypeError(type_name, self.registry.get_type_names())

        validation = self.validator.validate(value, definition.schema)
        if not validation.is_valid:
            raise NodeValidationError(type_name, validation.errors)

        return ValueNode(type=type_name, value=value)

    def create_string_node(self, value: str) -> ValueNode:
        return self.create_typed_node("string", value)

    def create_number_node(self, value: int | float) -> ValueNode:
        return self.create_typed_node("number", value)

    def create_boolean_node(self, value: bool) -> ValueNode:
        return self.create_typed_node("boolean", value)

    def try_create_node(self, type_name: str, value: Any) -> NodeCreationResult:
        """Like ``create_typed_node`` but reports failure instead of raising."""
        try:
            node = self.create_typed_node(type_name, value)
        except (UnknownTypeError, NodeValidationError) as e:
            logger.debug(f"Node creation failed: {e}")
            return NodeCreationResult(success=False, error=str(e))
        return NodeCreationResult(success=True, node=node)


class AsyncValueNodeFactory:
    """Coroutine counterpart of ``ValueNodeFactory`` for asynchronous custom validators."""

    def __init__(self, registry: TypeRegistry, validator: AsyncSchemaValidator | None = None):
        self.registry = registry
        self.validator = validator or AsyncSchemaValidator()

    async def create_typed_node(self, type_name: str, value: Any) -> ValueNode:
        definition = self.registry.get_type(type_name)
        if definition is None:
            raise UnknownTypeError(type_name, self.registry.get_type_names())

        validation = await self.validator.validate(value, definition.schema)
        if not validation.is_valid:
            raise NodeValidationError(type_name, validation.errors)

        return ValueNode(type=type_name, value=value)

    async def create_string_node(self, value: str) -> ValueNode:
        return await self.create_typed_node("string", value)

    async def create_number_node(self, value: int | float) -> ValueNode:
        return await self.create_typed_node("number", value)

    async def create_boolean_node(self, value: bool) -> ValueNode:
        return await self.create_typed_node("boolean", value)

    async def try_create_node(self, type_name: str, value: Any) -> NodeCreationResult:
        try:
            node = await self.create_typed_node(type_name, value)
        except (UnknownTypeError, NodeValidationError) as e:
            logger.debug(f"Node creation failed: {e}")
            return NodeCreationResult(success=False, error=str(e))
        return NodeCreationResult(success=True, node=node)


def validate_type_value(
    registry: TypeRegistry,
    type_name: str,
    value: Any,
    validator: SchemaValidator | None = None,
) -> list[str]:
    """Errors for ``value`` against a registered type; empty when valid."""
    definition = registry.get_type(type_name)
    if definition is None:
        return [f"Unknown type: {type_name}"]
    return (validator or SchemaValidator()).validate(value, definition.schema).errors


async def validate_type_value_async(
    registry: TypeRegistry,
    type_name: str,
    value: Any,
    validator: AsyncSchemaValidator | None = None,
) -> list[str]:
    definition = registry.get_type(type_name)
    if definition is None:
        return [f"Unknown type: {type_name}"]
    result = await (validator or AsyncSchemaValidator()).validate(value, definition.schema)
    return result.errors
