"""Tests for schema variants and result types."""

import pytest
from pydantic import ValidationError

from alohomora.core.types import (
    ArraySchema,
    CompatibilityResult,
    CustomSchema,
    ObjectSchema,
    PrimitiveSchema,
    PrimitiveType,
    SchemaKind,
    ValidationResult,
    schema_adapter,
    schema_to_dict,
)


class TestSchemaModels:
    """Test schema variant models."""

    def test_primitive_kind_and_type(self):
        schema = PrimitiveSchema(type=PrimitiveType.NUMBER)
        assert schema.kind == SchemaKind.PRIMITIVE
        assert schema.type == "number"

    def test_primitive_rejects_unknown_type(self):
        with pytest.raises(ValidationError):
            PrimitiveSchema(type="date")

    def test_schemas_are_frozen(self):
        schema = ArraySchema(items=[PrimitiveSchema(type="string")])
        with pytest.raises(ValidationError):
            schema.min_items = 3

    def test_array_accepts_wire_aliases(self):
        schema = ArraySchema(items=[PrimitiveSchema(type="string")], minItems=1, maxItems=3)
        assert schema.min_items == 1
        assert schema.max_items == 3

    def test_array_rejects_negative_bounds(self):
        with pytest.raises(ValidationError):
            ArraySchema(items=[], min_items=-1)

    def test_array_shape_properties(self):
        single = ArraySchema(items=[PrimitiveSchema(type="string")])
        pair = ArraySchema(items=[PrimitiveSchema(type="string"), PrimitiveSchema(type="number")])
        empty = ArraySchema(items=[])
        assert single.is_homogeneous and not single.is_tuple
        assert pair.is_tuple and not pair.is_homogeneous
        assert empty.is_tuple

    def test_object_defaults(self):
        schema = ObjectSchema(properties={"x": PrimitiveSchema(type="number")})
        assert schema.required is None
        assert schema.additional_properties is False

    def test_custom_validator_excluded_from_dump(self):
        schema = CustomSchema(type_name="email", validator=lambda v: True)
        assert schema_to_dict(schema) == {"kind": "custom", "typeName": "email"}

    def test_custom_rejects_non_callable_validator(self):
        with pytest.raises(ValidationError):
            CustomSchema(type_name="email", validator="not callable")


class TestSchemaAdapter:
    """Test loading schemas from plain data."""

    def test_nested_schema_from_dict(self):
        schema = schema_adapter.validate_python({
            "kind": "object",
            "properties": {
                "tags": {"kind": "array", "items": [{"kind": "primitive", "type": "string"}], "minItems": 1},
                "code": {"kind": "custom", "typeName": "code", "innerSchema": {"kind": "primitive", "type": "string"}},
            },
            "required": ["tags"],
        })

        assert isinstance(schema, ObjectSchema)
        assert isinstance(schema.properties["tags"], ArraySchema)
        assert schema.properties["tags"].min_items == 1
        assert isinstance(schema.properties["code"].inner_schema, PrimitiveSchema)
        assert schema.required == ("tags",)

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            schema_adapter.validate_python({"kind": "enum", "values": [1, 2]})

    @pytest.mark.parametrize("data", [
        {"kind": "primitive", "type": "string", "format": "email"},
        {"kind": "array", "items": [], "minitems": 3},
        {"kind": "object", "properties": {}, "additional_properties_": True},
        {"kind": "custom", "typeName": "email", "inner": {"kind": "primitive", "type": "string"}},
    ])
    def test_unknown_keys_rejected(self, data):
        with pytest.raises(ValidationError):
            schema_adapter.validate_python(data)

    def test_dump_uses_wire_keys(self):
        schema = ObjectSchema(properties={}, additional_properties=True)
        assert schema_to_dict(schema) == {"kind": "object", "properties": {}, "additionalProperties": True}


class TestValidationResult:
    """Test ValidationResult class."""

    def test_valid_when_no_errors(self):
        result = ValidationResult()
        assert result.is_valid
        assert result.errors == []

    def test_invalid_when_errors(self):
        result = ValidationResult(errors=["Expected string, got number"])
        assert not result.is_valid

    def test_to_dict(self):
        result = ValidationResult(errors=["Expected array"])
        assert result.to_dict() == {"isValid": False, "errors": ["Expected array"]}


class TestCompatibilityResult:
    """Test CompatibilityResult class."""

    def test_compatible_has_no_reason(self):
        result = CompatibilityResult.compatible()
        assert result.is_compatible
        assert result.reason is None
        assert result.to_dict() == {"isCompatible": True}

    def test_incompatible_has_reason(self):
        result = CompatibilityResult.incompatible("Unknown source type: foo")
        assert result.to_dict() == {"isCompatible": False, "reason": "Unknown source type: foo"}

    def test_reason_required_when_incompatible(self):
        with pytest.raises(ValueError):
            CompatibilityResult(is_compatible=False)

    def test_reason_forbidden_when_compatible(self):
        with pytest.raises(ValueError):
            CompatibilityResult(is_compatible=True, reason="fine")
