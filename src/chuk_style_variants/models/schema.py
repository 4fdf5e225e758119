"""
Schema models - the declarative data behind a styled component.

A schema is assembled once and never mutated afterwards. Every check that
can be made without a caller's selection is made here, at declaration time,
so resolution only has to deal with the selection itself.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, field_validator, model_validator

from chuk_style_variants.constants import BOOLEAN_VALUE_KEYS, ErrorMessages
from chuk_style_variants.errors import (
    DuplicateDimensionName,
    EmptyVariantDimension,
    InvalidCompoundRule,
    InvalidVariantValue,
    UnknownVariantDimension,
)

if TYPE_CHECKING:
    from chuk_style_variants.styles.component import ComponentStyles

# A computed producer receives the effective selection (every dimension's
# chosen value-key) and returns tokens as a list or a whitespace-separated string.
TokenProducer = Callable[[dict[str, str]], Any]


def normalize_value_key(value: Any) -> str:
    """
    Reduce a selection value or declared key to its value-key string.

    Enum members use their value, booleans map to yes/no.
    """
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return BOOLEAN_VALUE_KEYS[value]
    return str(value)


def as_tokens(value: Any) -> list[str]:
    """Coerce None, a whitespace-separated string or a sequence into a token list."""
    if value is None:
        return []
    if isinstance(value, str):
        return value.split()
    return [str(token) for token in value]


def _coerce_producer(producer: Any) -> Any:
    if callable(producer):
        return producer
    return as_tokens(producer)


def _coerce_value_table(values: Any) -> Any:
    if isinstance(values, Mapping):
        return {normalize_value_key(key): _coerce_producer(p) for key, p in values.items()}
    return values


class VariantDimension(BaseModel):
    """
    A named axis of choice with a closed set of value-keys.

    Each value-key maps to a fixed token list or to a producer computed
    from the full effective selection.
    """

    name: str = Field(..., description="Dimension name, unique within a schema")
    values: dict[str, list[str] | TokenProducer] = Field(
        ...,
        description="Ordered value-key -> tokens or token producer",
    )

    model_config = {"frozen": True}

    @field_validator("values", mode="before")
    @classmethod
    def _normalize_values(cls, v: Any) -> Any:
        return _coerce_value_table(v)

    @model_validator(mode="after")
    def _require_values(self) -> VariantDimension:
        if not self.values:
            raise EmptyVariantDimension(self.name)
        return self

    @property
    def value_keys(self) -> list[str]:
        """Declared value-keys in declaration order."""
        return list(self.values)

    def has_value(self, key: str) -> bool:
        """Check if a value-key is declared."""
        return key in self.values

    def is_computed(self, key: str) -> bool:
        """Check if a value-key's tokens depend on the selection."""
        return callable(self.values[key])

    def produce(self, key: str, selection: dict[str, str]) -> list[str]:
        """
        Get the tokens for a value-key.

        Args:
            key: Declared value-key
            selection: Effective selection, passed to computed producers

        Returns:
            Token list for the value
        """
        producer = self.values[key]
        if callable(producer):
            return as_tokens(producer(dict(selection)))
        return list(producer)


class DimensionPatch(BaseModel):
    """
    A partial redeclaration of a dimension in a schema delta.

    Only the value-keys listed here are touched when the delta is applied;
    contrast with a VariantDimension in a delta, which declares the whole axis.
    """

    name: str = Field(..., description="Name of the dimension being patched")
    values: dict[str, list[str] | TokenProducer] = Field(
        ...,
        description="Value-keys to add or replace",
    )

    model_config = {"frozen": True}

    @field_validator("values", mode="before")
    @classmethod
    def _normalize_values(cls, v: Any) -> Any:
        return _coerce_value_table(v)

    @model_validator(mode="after")
    def _require_values(self) -> DimensionPatch:
        if not self.values:
            raise EmptyVariantDimension(self.name)
        return self

    def as_dimension(self) -> VariantDimension:
        """Treat the patch as a complete dimension declaration."""
        return VariantDimension(name=self.name, values=dict(self.values))


class CompoundRule(BaseModel):
    """
    Extra tokens emitted when several dimensions hold specific values at once.

    The rule fires only if every listed dimension matches exactly; dimensions
    it does not mention never block it.
    """

    when: dict[str, str] = Field(..., description="Dimension -> required value-key")
    tokens: list[str] = Field(default_factory=list, description="Tokens emitted on match")

    model_config = {"frozen": True}

    @field_validator("when", mode="before")
    @classmethod
    def _normalize_when(cls, v: Any) -> Any:
        if isinstance(v, Mapping):
            return {str(dim): normalize_value_key(key) for dim, key in v.items()}
        return v

    @field_validator("tokens", mode="before")
    @classmethod
    def _normalize_tokens(cls, v: Any) -> Any:
        return as_tokens(v)

    @model_validator(mode="after")
    def _require_condition(self) -> CompoundRule:
        if not self.when:
            raise InvalidCompoundRule(None)
        return self

    def matches(self, selection: Mapping[str, str]) -> bool:
        """Check if the rule fires for an effective selection."""
        return all(selection.get(dim) == key for dim, key in self.when.items())


def _dimensions_from_mapping(v: Any) -> Any:
    """Accept {name: {value: tokens}} as shorthand for a dimension list."""
    if isinstance(v, Mapping):
        return [{"name": name, "values": values} for name, values in v.items()]
    return v


class StyleSchema(BaseModel):
    """
    Base tokens, variant dimensions, compound rules and defaults.

    Dimension order decides emission order. Any dimension without a
    default must be selected by the caller.
    """

    base: list[str] = Field(default_factory=list, description="Tokens always emitted first")
    dimensions: list[VariantDimension] = Field(
        default_factory=list,
        description="Variant dimensions in emission order",
    )
    compounds: list[CompoundRule] = Field(
        default_factory=list,
        description="Compound rules in emission order",
    )
    defaults: dict[str, str] = Field(
        default_factory=dict,
        description="Dimension -> default value-key",
    )

    model_config = {"frozen": True}

    @field_validator("base", mode="before")
    @classmethod
    def _normalize_base(cls, v: Any) -> Any:
        return as_tokens(v)

    @field_validator("dimensions", mode="before")
    @classmethod
    def _normalize_dimensions(cls, v: Any) -> Any:
        return _dimensions_from_mapping(v)

    @field_validator("defaults", mode="before")
    @classmethod
    def _normalize_defaults(cls, v: Any) -> Any:
        if isinstance(v, Mapping):
            return {str(dim): normalize_value_key(key) for dim, key in v.items() if key is not None}
        return v

    @model_validator(mode="after")
    def _validate_references(self) -> StyleSchema:
        by_name: dict[str, VariantDimension] = {}
        for dimension in self.dimensions:
            if dimension.name in by_name:
                raise DuplicateDimensionName(dimension.name)
            by_name[dimension.name] = dimension

        for rule in self.compounds:
            for dim in rule.when:
                if dim not in by_name:
                    raise InvalidCompoundRule(dim)

        for dim, key in self.defaults.items():
            if dim not in by_name:
                raise UnknownVariantDimension(dim)
            if not by_name[dim].has_value(key):
                raise InvalidVariantValue(dim, key)

        return self

    @property
    def dimension_names(self) -> list[str]:
        """Dimension names in declaration order."""
        return [d.name for d in self.dimensions]

    @property
    def required_dimensions(self) -> list[str]:
        """Dimensions the caller must always select."""
        return [d.name for d in self.dimensions if d.name not in self.defaults]

    def dimension(self, name: str) -> VariantDimension | None:
        """Get a dimension by name."""
        for dimension in self.dimensions:
            if dimension.name == name:
                return dimension
        return None

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-serializable dictionary."""
        variants: dict[str, dict[str, list[str]]] = {}
        for dimension in self.dimensions:
            table: dict[str, list[str]] = {}
            for key, producer in dimension.values.items():
                if callable(producer):
                    raise ValueError(
                        ErrorMessages.CALLABLE_NOT_SERIALIZABLE.format(
                            dimension=dimension.name, value=key
                        )
                    )
                table[key] = list(producer)
            variants[dimension.name] = table

        return {
            "base": list(self.base),
            "variants": variants,
            "compounds": [
                {"when": dict(rule.when), "tokens": list(rule.tokens)} for rule in self.compounds
            ],
            "defaults": dict(self.defaults),
        }


class SchemaDelta(BaseModel):
    """
    The declarations a derived schema adds on top of its parent.

    Unlike StyleSchema nothing here is cross-checked: references are
    validated once the delta has been composed with a parent.
    """

    base: list[str] = Field(default_factory=list)
    dimensions: list[VariantDimension | DimensionPatch] = Field(
        default_factory=list,
        description="Whole-dimension declarations and single-key patches",
    )
    compounds: list[CompoundRule] = Field(default_factory=list)
    defaults: dict[str, str] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @field_validator("base", mode="before")
    @classmethod
    def _normalize_base(cls, v: Any) -> Any:
        return as_tokens(v)

    @field_validator("defaults", mode="before")
    @classmethod
    def _normalize_defaults(cls, v: Any) -> Any:
        if isinstance(v, Mapping):
            return {str(dim): normalize_value_key(key) for dim, key in v.items() if key is not None}
        return v


class StyleSlot(BaseModel):
    """A named, independently resolvable schema of a component."""

    name: str = Field(..., description="Slot name, 'default' for the unnamed slot")
    style_schema: StyleSchema = Field(..., alias="schema")

    model_config = {"frozen": True, "populate_by_name": True}


class ComponentMetadata(BaseModel):
    """Lightweight metadata for listing components."""

    name: str
    description: str = ""
    slots: list[str] = Field(default_factory=list)
    extends: str | None = None
    path: str | None = None

    model_config = {"frozen": True}

    @classmethod
    def from_component(
        cls,
        component: ComponentStyles,
        extends: str | None = None,
        path: str | None = None,
    ) -> ComponentMetadata:
        """Create metadata from a component."""
        return cls(
            name=component.name,
            description=component.description,
            slots=component.slot_names,
            extends=extends,
            path=path,
        )
