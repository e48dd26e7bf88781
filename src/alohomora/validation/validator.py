"""Recursive validation of values against schemas.

Errors are collected as strings; each nesting level prefixes the messages of
the level below, so a failure deep in a structure reads as a breadcrumb path
such as ``Property 'tags': Item[2]: Expected string, got number``.
"""

import inspect
import logging
import math
from collections.abc import Mapping
from typing import Any

from ..core.errors import AsyncValidatorError, SchemaDepthError, UnknownSchemaKindError
from ..core.types import (
    ArraySchema,
    CustomSchema,
    ObjectSchema,
    PrimitiveSchema,
    PrimitiveType,
    Schema,
    SchemaKind,
    ValidationResult,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 100


def runtime_type_name(value: Any) -> str:
    """Name of the value's runtime type as used in error messages."""
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if value is None:
        return "null"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    if callable(value):
        return "function"
    return type(value).__name__


def is_array_value(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_object_value(value: Any) -> bool:
    return isinstance(value, Mapping)


def check_primitive(value: Any, schema: PrimitiveSchema, errors: list[str]) -> None:
    expected = PrimitiveType(schema.type).value
    actual = runtime_type_name(value)

    if expected == "number" and isinstance(value, float) and math.isnan(value):
        errors.append("Number value cannot be NaN")
        return

    if actual != expected:
        errors.append(f"Expected {expected}, got {actual}")


def check_array_bounds(value: list | tuple, schema: ArraySchema, errors: list[str]) -> None:
    if schema.min_items is not None and len(value) < schema.min_items:
        errors.append(f"Array must have at least {schema.min_items} items, got {len(value)}")
    if schema.max_items is not None and len(value) > schema.max_items:
        errors.append(f"Array must have at most {schema.max_items} items, got {len(value)}")


def tuple_length_error(expected: int, actual: int) -> str:
    return f"Expected tuple of {expected} elements, but got {actual} elements"


EMPTY_TUPLE_ERROR = "Array schema defines an empty tuple, but received a non-empty array."


def check_required(value: Mapping, schema: ObjectSchema, errors: list[str]) -> None:
    for name in schema.required or ():
        if name not in value:
            errors.append(f"Missing required property: '{name}'")


def check_unexpected(value: Mapping, schema: ObjectSchema, errors: list[str]) -> None:
    if schema.additional_properties:
        return
    for key in value:
        if key not in schema.properties:
            errors.append(f"Unexpected property: '{key}'")


def custom_failure(schema: CustomSchema, error: Exception | None = None) -> str:
    message = f"Custom validation failed for type: {schema.type_name}"
    if error is not None:
        message += f" ({type(error).__name__}: {error})"
    return message


def prefixed(prefix: str, errors: list[str]) -> list[str]:
    return [f"{prefix}{error}" for error in errors]


class SchemaValidator:
    """Validates values against schemas.

    Mismatches never raise; they are returned as errors on the result. Only
    misuse of the API raises: a schema of unknown kind, nesting deeper than
    ``max_depth``, or an asynchronous custom validator.
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH):
        if max_depth < 1:
            raise ValueError("max_depth must be >= 1")
        self.max_depth = max_depth

    def validate(self, value: Any, schema: Schema) -> ValidationResult:
        """Validate ``value`` against ``schema``.

        Example::

            result = SchemaValidator().validate("hello", SchemaBuilder.string())
            assert result.is_valid
        """
        result = ValidationResult(errors=self._validate(value, schema, 1))
        logger.debug(f"Validated {runtime_type_name(value)} against {schema.kind} schema: {len(result.errors)} errors")
        return result

    def _validate(self, value: Any, schema: Schema, depth: int) -> list[str]:
        if depth > self.max_depth:
            raise SchemaDepthError(self.max_depth)

        errors: list[str] = []
        kind = getattr(schema, "kind", None)

        if kind == SchemaKind.PRIMITIVE:
            check_primitive(value, schema, errors)
        elif kind == SchemaKind.ARRAY:
            self._validate_array(value, schema, errors, depth)
        elif kind == SchemaKind.OBJECT:
            self._validate_object(value, schema, errors, depth)
        elif kind == SchemaKind.CUSTOM:
            self._validate_custom(value, schema, errors, depth)
        else:
            raise UnknownSchemaKindError(kind)

        return errors

    def _validate_array(self, value: Any, schema: ArraySchema, errors: list[str], depth: int) -> None:
        if not is_array_value(value):
            errors.append("Expected array")
            return

        check_array_bounds(value, schema, errors)

        items = schema.items
        if items is None:
            return

        if schema.is_homogeneous:
            for index, item in enumerate(value):
                nested = self._validate(item, items[0], depth + 1)
                errors.extend(prefixed(f"Item[{index}]: ", nested))
        elif items:
            if len(value) != len(items):
                errors.append(tuple_length_error(len(items), len(value)))
            for index, (item_schema, item) in enumerate(zip(items, value)):
                nested = self._validate(item, item_schema, depth + 1)
                errors.extend(prefixed(f"Item at index {index}: ", nested))
        elif value:
            errors.append(EMPTY_TUPLE_ERROR)

    def _validate_object(self, value: Any, schema: ObjectSchema, errors: list[str], depth: int) -> None:
        if not is_object_value(value):
            errors.append("Expected object")
            return

        check_required(value, schema, errors)

        for key, property_schema in schema.properties.items():
            if key in value:
                nested = self._validate(value[key], property_schema, depth + 1)
                errors.extend(prefixed(f"Property '{key}': ", nested))

        check_unexpected(value, schema, errors)

    def _validate_custom(self, value: Any, schema: CustomSchema, errors: list[str], depth: int) -> None:
        if schema.validator is not None:
            try:
                outcome = schema.validator(value)
            except Exception as e:
                logger.debug(f"Custom validator for '{schema.type_name}' raised {type(e).__name__}: {e}")
                errors.append(custom_failure(schema, e))
            else:
                if inspect.isawaitable(outcome):
                    if inspect.iscoroutine(outcome):
                        outcome.close()
                    raise AsyncValidatorError(schema.type_name)
                if not outcome:
                    errors.append(custom_failure(schema))

        if schema.inner_schema is not None:
            errors.extend(self._validate(value, schema.inner_schema, depth + 1))


_default_validator = SchemaValidator()


def validate(value: Any, schema: Schema) -> ValidationResult:
    """Validate ``value`` against ``schema`` with the default depth limit."""
    return _default_validator.validate(value, schema)
