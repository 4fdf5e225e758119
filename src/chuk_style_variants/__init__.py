"""
chuk-style-variants - declarative style variant resolution.

Describe a component's styling as base tokens, variant dimensions,
compound rules and defaults; resolve a selection to a class list.
"""

from chuk_style_variants.constants import DEFAULT_SLOT, CompositionStrategy
from chuk_style_variants.errors import (
    DuplicateDimensionName,
    EmptyVariantDimension,
    InvalidCompoundRule,
    InvalidVariantValue,
    MissingRequiredVariant,
    StyleVariantError,
    UnknownStyleSlot,
    UnknownVariantDimension,
)
from chuk_style_variants.models import (
    CompoundRule,
    DimensionPatch,
    SchemaDelta,
    StyleSchema,
    StyleSlot,
    VariantDimension,
)
from chuk_style_variants.styles import (
    ComponentLoader,
    ComponentStyles,
    VariantResolver,
    compose,
    define_delta,
    define_schema,
    resolve,
    resolve_tokens,
    unique_tokens,
)

__all__ = [
    "DEFAULT_SLOT",
    "ComponentLoader",
    "ComponentStyles",
    "CompositionStrategy",
    "CompoundRule",
    "DimensionPatch",
    "DuplicateDimensionName",
    "EmptyVariantDimension",
    "InvalidCompoundRule",
    "InvalidVariantValue",
    "MissingRequiredVariant",
    "SchemaDelta",
    "StyleSchema",
    "StyleSlot",
    "StyleVariantError",
    "UnknownStyleSlot",
    "UnknownVariantDimension",
    "VariantDimension",
    "VariantResolver",
    "compose",
    "define_delta",
    "define_schema",
    "resolve",
    "resolve_tokens",
    "unique_tokens",
]
