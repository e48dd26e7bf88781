"""Factory functions for schema values and the built-in type definitions."""

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from .types import (
    ArraySchema,
    CustomSchema,
    ObjectSchema,
    PrimitiveSchema,
    PrimitiveType,
    Schema,
    TypeDefinition,
)


class SchemaBuilder:
    """Builds schema values, one method per schema kind.

    Example::

        point = SchemaBuilder.object(
            {"x": SchemaBuilder.number(), "y": SchemaBuilder.number()},
            required=["x", "y"],
        )
        tags = SchemaBuilder.array([SchemaBuilder.string()], min_items=1)
        pair = SchemaBuilder.array([SchemaBuilder.string(), SchemaBuilder.number()])
    """

    @staticmethod
    def string() -> PrimitiveSchema:
        return PrimitiveSchema(type=PrimitiveType.STRING)

    @staticmethod
    def number() -> PrimitiveSchema:
        return PrimitiveSchema(type=PrimitiveType.NUMBER)

    @staticmethod
    def boolean() -> PrimitiveSchema:
        return PrimitiveSchema(type=PrimitiveType.BOOLEAN)

    @staticmethod
    def array(
        items: Iterable[Schema],
        min_items: int | None = None,
        max_items: int | None = None,
    ) -> ArraySchema:
        """Create an array schema.

        Args:
            items: A single schema for a homogeneous array, several schemas for a
                tuple, or none for the empty tuple.
            min_items: Minimum number of elements.
            max_items: Maximum number of elements.
        """
        return ArraySchema(items=tuple(items), min_items=min_items, max_items=max_items)

    @staticmethod
    def object(
        properties: Mapping[str, Schema],
        required: Iterable[str] | None = None,
        additional_properties: bool = False,
    ) -> ObjectSchema:
        """Create an object schema.

        Args:
            properties: Property name to schema mapping.
            required: Property names that must be present.
            additional_properties: Whether keys outside ``properties`` are accepted.
        """
        return ObjectSchema(
            properties=dict(properties),
            required=tuple(required) if required is not None else None,
            additional_properties=additional_properties,
        )

    @staticmethod
    def custom(
        type_name: str,
        validator: Callable[[Any], Any] | None = None,
        inner_schema: Schema | None = None,
    ) -> CustomSchema:
        """Create a custom schema.

        Args:
            type_name: Name identifying the type; the sole key for compatibility.
            validator: Predicate returning True for acceptable values. It may
                return an awaitable when used with the async validator.
            inner_schema: Schema the value must also satisfy.
        """
        return CustomSchema(type_name=type_name, validator=validator, inner_schema=inner_schema)


STRING_TYPE = TypeDefinition(
    name="string",
    schema=SchemaBuilder.string(),
    description="Text string value",
)

NUMBER_TYPE = TypeDefinition(
    name="number",
    schema=SchemaBuilder.number(),
    description="Numeric value",
)

BOOLEAN_TYPE = TypeDefinition(
    name="boolean",
    schema=SchemaBuilder.boolean(),
    description="True or false value",
)

BUILTIN_TYPES = (STRING_TYPE, NUMBER_TYPE, BOOLEAN_TYPE)
