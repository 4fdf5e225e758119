"""
Pydantic models for the style variant system.

This module provides:
- VariantDimension: Named axis of value-keys and their tokens
- DimensionPatch: Single-key redeclaration used in schema deltas
- CompoundRule: Tokens emitted for a combination of values
- StyleSchema: Base tokens, dimensions, compounds and defaults
- SchemaDelta: A derived schema's own declarations
- StyleSlot: A named schema of a component
"""

from chuk_style_variants.models.schema import (
    ComponentMetadata,
    CompoundRule,
    DimensionPatch,
    SchemaDelta,
    StyleSchema,
    StyleSlot,
    TokenProducer,
    VariantDimension,
)

__all__ = [
    "ComponentMetadata",
    "CompoundRule",
    "DimensionPatch",
    "SchemaDelta",
    "StyleSchema",
    "StyleSlot",
    "TokenProducer",
    "VariantDimension",
]
