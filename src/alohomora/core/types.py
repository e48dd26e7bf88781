"""Schema variants and result types for alohomora.

A schema is one of four frozen pydantic models discriminated by ``kind``.
Schemas never change after construction; the validator and the
compatibility checker only read them.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class SchemaKind(str, Enum):
    """Schema variant tags."""
    PRIMITIVE = "primitive"
    ARRAY = "array"
    OBJECT = "object"
    CUSTOM = "custom"


class PrimitiveType(str, Enum):
    """Primitive value types."""
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"


class PrimitiveSchema(BaseModel):
    """A single string, number or boolean value."""
    kind: Literal["primitive"] = "primitive"
    type: PrimitiveType

    model_config = ConfigDict(frozen=True, extra="forbid", use_enum_values=True)


class ArraySchema(BaseModel):
    """An array of values.

    One entry in ``items`` describes a homogeneous array, two or more entries
    describe a fixed-length tuple, and no entries describe the empty tuple.
    """
    kind: Literal["array"] = "array"
    items: "tuple[Schema, ...] | None" = None
    min_items: int | None = Field(alias="minItems", default=None, ge=0)
    max_items: int | None = Field(alias="maxItems", default=None, ge=0)

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    @property
    def is_homogeneous(self) -> bool:
        return self.items is not None and len(self.items) == 1

    @property
    def is_tuple(self) -> bool:
        return self.items is not None and len(self.items) != 1


class ObjectSchema(BaseModel):
    """A mapping of named properties.

    ``required`` names are not cross-checked against ``properties``.
    """
    kind: Literal["object"] = "object"
    properties: "dict[str, Schema]" = Field(default_factory=dict)
    required: tuple[str, ...] | None = None
    additional_properties: bool = Field(alias="additionalProperties", default=False)

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class CustomSchema(BaseModel):
    """A named type with an optional predicate and an optional wrapped schema."""
    kind: Literal["custom"] = "custom"
    type_name: str = Field(alias="typeName")
    validator: Callable[[Any], Any] | None = Field(default=None, exclude=True, repr=False)
    inner_schema: "Schema | None" = Field(alias="innerSchema", default=None)

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


Schema = Annotated[
    Union[PrimitiveSchema, ArraySchema, ObjectSchema, CustomSchema],
    Field(discriminator="kind"),
]

ArraySchema.model_rebuild()
ObjectSchema.model_rebuild()
CustomSchema.model_rebuild()

schema_adapter: TypeAdapter = TypeAdapter(Schema)


def schema_to_dict(schema: Schema) -> dict[str, Any]:
    """Serialize a schema with its wire (camelCase) keys, omitting unset options."""
    return schema.model_dump(by_alias=True, exclude_none=True)


@dataclass(frozen=True)
class TypeDefinition:
    """A schema registered under a unique name."""
    name: str
    schema: Schema
    description: str | None = None


@dataclass(frozen=True)
class ValueNode:
    """A value tagged with the name of the type it was validated against."""
    type: str
    value: Any


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a value; valid exactly when there are no errors."""
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {"isValid": self.is_valid, "errors": list(self.errors)}


@dataclass(frozen=True)
class CompatibilityResult:
    """Outcome of a compatibility check; ``reason`` is set only when incompatible."""
    is_compatible: bool
    reason: str | None = None

    def __post_init__(self) -> None:
        if self.is_compatible and self.reason is not None:
            raise ValueError("Compatible result cannot carry a reason")
        if not self.is_compatible and not self.reason:
            raise ValueError("Incompatible result requires a reason")

    @classmethod
    def compatible(cls) -> "CompatibilityResult":
        return cls(is_compatible=True)

    @classmethod
    def incompatible(cls, reason: str) -> "CompatibilityResult":
        return cls(is_compatible=False, reason=reason)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        data: dict[str, Any] = {"isCompatible": self.is_compatible}
        if self.reason is not None:
            data["reason"] = self.reason
        return data
