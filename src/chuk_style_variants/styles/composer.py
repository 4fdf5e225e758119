"""
Schema composer - derives a schema from a parent and a delta.

Composition happens once, when a derived component is declared. The
parent is never modified; the result is a new, fully validated schema.

Strategies:
- override: the child's dimensions, compounds and defaults replace the parent's
- merge: value-keys are deep-merged (child wins), compounds concatenated,
  defaults shallow-merged
- extend: like merge, except a whole-dimension redeclaration replaces the
  parent's dimension; only patches are merged key by key
"""

from __future__ import annotations

import logging

from chuk_style_variants.constants import CompositionStrategy
from chuk_style_variants.models.schema import (
    DimensionPatch,
    SchemaDelta,
    StyleSchema,
    VariantDimension,
)

logger = logging.getLogger(__name__)


def _merge_values(
    parent: VariantDimension,
    child: VariantDimension | DimensionPatch,
) -> VariantDimension:
    """Union the value-keys of two dimensions, child wins on collision."""
    values = dict(parent.values)
    values.update(child.values)
    return VariantDimension(name=parent.name, values=values)


def _as_dimension(entry: VariantDimension | DimensionPatch) -> VariantDimension:
    if isinstance(entry, DimensionPatch):
        return entry.as_dimension()
    return entry


def _compose_dimensions(
    parent: list[VariantDimension],
    delta: list[VariantDimension | DimensionPatch],
    strategy: CompositionStrategy,
) -> list[VariantDimension]:
    if strategy == CompositionStrategy.OVERRIDE:
        return [_as_dimension(entry) for entry in delta]

    merged: dict[str, VariantDimension] = {d.name: d for d in parent}
    for entry in delta:
        existing = merged.get(entry.name)
        if existing is None:
            merged[entry.name] = _as_dimension(entry)
        elif strategy == CompositionStrategy.EXTEND and isinstance(entry, VariantDimension):
            merged[entry.name] = entry
        else:
            merged[entry.name] = _merge_values(existing, entry)

    # dict preserves parent order, new names land at the end in delta order
    return list(merged.values())


def compose(
    parent: StyleSchema,
    delta: SchemaDelta,
    strategy: CompositionStrategy | str = CompositionStrategy.OVERRIDE,
) -> StyleSchema:
    """
    Derive a new schema from a parent schema and a child delta.

    Args:
        parent: Schema being inherited from
        delta: The child's own declarations
        strategy: Composition strategy (enum or its string value)

    Returns:
        The composed schema

    Raises:
        ValueError: Unknown strategy name
        InvalidCompoundRule: A surviving compound references a dropped dimension
        InvalidVariantValue: A surviving default names a dropped value-key
    """
    strategy = CompositionStrategy(strategy)

    dimensions = _compose_dimensions(parent.dimensions, delta.dimensions, strategy)

    if strategy == CompositionStrategy.OVERRIDE:
        compounds = list(delta.compounds)
        defaults = dict(delta.defaults)
    else:
        compounds = [*parent.compounds, *delta.compounds]
        defaults = {**parent.defaults, **delta.defaults}

    logger.debug(
        "Composing schema (%s): %d dimensions, %d compounds",
        strategy.value,
        len(dimensions),
        len(compounds),
    )

    return StyleSchema(
        base=[*parent.base, *delta.base],
        dimensions=dimensions,
        compounds=compounds,
        defaults=defaults,
    )
