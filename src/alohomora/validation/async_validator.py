"""Asynchronous variant of the schema validator.

Custom predicates may return awaitables. They are awaited one at a time in
the same order the synchronous validator visits them, so both variants
produce identical error lists for the same input.
"""

import inspect
import logging
from typing import Any

from ..core.errors import SchemaDepthError, UnknownSchemaKindError
from ..core.types import ArraySchema, CustomSchema, ObjectSchema, Schema, SchemaKind, ValidationResult
from .validator import (
    DEFAULT_MAX_DEPTH,
    EMPTY_TUPLE_ERROR,
    check_array_bounds,
    check_primitive,
    check_required,
    check_unexpected,
    custom_failure,
    is_array_value,
    is_object_value,
    prefixed,
    runtime_type_name,
    tuple_length_error,
)

logger = logging.getLogger(__name__)


class AsyncSchemaValidator:
    """Validates values against schemas whose custom predicates may be asynchronous."""

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH):
        if max_depth < 1:
            raise ValueError("max_depth must be >= 1")
        self.max_depth = max_depth

    async def validate(self, value: Any, schema: Schema) -> ValidationResult:
        result = ValidationResult(errors=await self._validate(value, schema, 1))
        logger.debug(f"Validated {runtime_type_name(value)} against {schema.kind} schema: {len(result.errors)} errors")
        return result

    async def _validate(self, value: Any, schema: Schema, depth: int) -> list[str]:
        if depth > self.max_depth:
            raise SchemaDepthError(self.max_depth)

        errors: list[str] = []
        kind = getattr(schema, "kind", None)

        if kind == SchemaKind.PRIMITIVE:
            check_primitive(value, schema, errors)
        elif kind == SchemaKind.ARRAY:
            await self._validate_array(value, schema, errors, depth)
        elif kind == SchemaKind.OBJECT:
            await self._validate_object(value, schema, errors, depth)
        elif kind == SchemaKind.CUSTOM:
            await self._validate_custom(value, schema, errors, depth)
        else:
            raise UnknownSchemaKindError(kind)

        return errors

    async def _validate_array(self, value: Any, schema: ArraySchema, errors: list[str], depth: int) -> None:
        if not is_array_value(value):
            errors.append("Expected array")
            return

        check_array_bounds(value, schema, errors)

        items = schema.items
        if items is None:
            return

        if schema.is_homogeneous:
            for index, item in enumerate(value):
                nested = await self._validate(item, items[0], depth + 1)
                errors.extend(prefixed(f"Item[{index}]: ", nested))
        elif items:
            if len(value) != len(items):
                errors.append(tuple_length_error(len(items), len(value)))
            for index, (item_schema, item) in enumerate(zip(items, value)):
                nested = await self._validate(item, item_schema, depth + 1)
                errors.extend(prefixed(f"Item at index {index}: ", nested))
        elif value:
            errors.append(EMPTY_TUPLE_ERROR)

    async def _validate_object(self, value: Any, schema: ObjectSchema, errors: list[str], depth: int) -> None:
        if not is_object_value(value):
            errors.append("Expected object")
            return

        check_required(value, schema, errors)

        for key, property_schema in schema.properties.items():
            if key in value:
                nested = await self._validate(value[key], property_schema, depth + 1)
                errors.extend(prefixed(f"Property '{key}': ", nested))

        check_unexpected(value, schema, errors)

    async def _validate_custom(self, value: Any, schema: CustomSchema, errors: list[str], depth: int) -> None:
        if schema.validator is not None:
            try:
                outcome = schema.validator(value)
                if inspect.isawaitable(outcome):
                    outcome = await outcome
            except Exception as e:
                logger.debug(f"Custom validator for '{schema.type_name}' raised {type(e).__name__}: {e}")
                errors.append(custom_failure(schema, e))
            else:
                if not outcome:
                    errors.append(custom_failure(schema))

        if schema.inner_schema is not None:
            errors.extend(await self._validate(value, schema.inner_schema, depth + 1))


_default_validator = AsyncSchemaValidator()


async def validate_async(value: Any, schema: Schema) -> ValidationResult:
    """Validate ``value`` against ``schema`` with the default depth limit."""
    return await _default_validator.validate(value, schema)
