"""Shared fixtures for alohomora tests."""

import pytest

from alohomora.core.builder import SchemaBuilder
from alohomora.core.registry import TypeRegistry
from alohomora.validation import SchemaValidator, TypeCompatibility


@pytest.fixture
def registry():
    """Registry with the built-in types only."""
    return TypeRegistry()


@pytest.fixture
def validator():
    return SchemaValidator()


@pytest.fixture
def checker(registry):
    return TypeCompatibility(registry)


@pytest.fixture
def string_schema():
    return SchemaBuilder.string()


@pytest.fixture
def number_schema():
    return SchemaBuilder.number()


@pytest.fixture
def user_schema():
    """Object schema with a nested homogeneous array."""
    return SchemaBuilder.object(
        {
            "id": SchemaBuilder.number(),
            "name": SchemaBuilder.string(),
            "tags": SchemaBuilder.array([SchemaBuilder.string()]),
        },
        required=["id", "name"],
    )


@pytest.fixture
def types_document():
    """Type definitions document as loaded by TypeRegistry.from_file."""
    return {
        "types": [
            {
                "name": "user",
                "description": "A user record",
                "schema": {
                    "kind": "object",
                    "properties": {
                        "id": {"kind": "primitive", "type": "number"},
                        "name": {"kind": "primitive", "type": "string"},
                    },
                    "required": ["id", "name"],
                },
            },
            {
                "name": "account",
                "schema": {
                    "kind": "object",
                    "properties": {"id": {"kind": "primitive", "type": "number"}},
                    "required": ["id"],
                    "additionalProperties": True,
                },
            },
            {
                "name": "point",
                "schema": {
                    "kind": "array",
                    "items": [
                        {"kind": "primitive", "type": "number"},
                        {"kind": "primitive", "type": "number"},
                    ],
                },
            },
        ]
    }
