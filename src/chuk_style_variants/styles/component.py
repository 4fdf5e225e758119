"""
Component styles - the named slots a component type declares.

A component owns one unnamed ("default") slot and any number of named
slots. Slots never share state: each is resolved with its own selection.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, PrivateAttr

from chuk_style_variants.constants import DEFAULT_SLOT, CompositionStrategy
from chuk_style_variants.errors import UnknownStyleSlot
from chuk_style_variants.models.schema import (
    CompoundRule,
    DimensionPatch,
    SchemaDelta,
    StyleSchema,
    StyleSlot,
    VariantDimension,
)
from chuk_style_variants.styles.composer import compose
from chuk_style_variants.styles.resolver import Postprocessor, VariantResolver, join_tokens

VariantTable = Mapping[str, Mapping[Any, Any]]
CompoundPairs = list[tuple[Mapping[str, Any], Any]]


def _dimensions(variants: VariantTable | None) -> list[VariantDimension]:
    return [
        VariantDimension(name=name, values=dict(values))
        for name, values in (variants or {}).items()
    ]


def _patches(patches: VariantTable | None) -> list[DimensionPatch]:
    return [
        DimensionPatch(name=name, values=dict(values)) for name, values in (patches or {}).items()
    ]


def _compounds(compounds: CompoundPairs | None) -> list[CompoundRule]:
    return [CompoundRule(when=dict(when), tokens=tokens) for when, tokens in (compounds or [])]


def define_schema(
    base: Any = None,
    variants: VariantTable | None = None,
    compounds: CompoundPairs | None = None,
    defaults: Mapping[str, Any] | None = None,
) -> StyleSchema:
    """
    Declare a schema from plain mappings.

    Args:
        base: Tokens always emitted (list or whitespace-separated string)
        variants: dimension -> {value-key -> tokens or producer}
        compounds: (when, tokens) pairs in emission order
        defaults: dimension -> default value-key

    Returns:
        The validated schema

    Example:
        define_schema(
            base="rounded",
            variants={"size": {"sm": "px-2", "lg": "px-6"}},
            compounds=[({"size": "lg"}, "font-bold")],
            defaults={"size": "sm"},
        )
    """
    return StyleSchema(
        base=base,
        dimensions=_dimensions(variants),
        compounds=_compounds(compounds),
        defaults=dict(defaults or {}),
    )


def define_delta(
    base: Any = None,
    variants: VariantTable | None = None,
    patches: VariantTable | None = None,
    compounds: CompoundPairs | None = None,
    defaults: Mapping[str, Any] | None = None,
) -> SchemaDelta:
    """
    Declare a child delta from plain mappings.

    ``variants`` entries redeclare whole dimensions; ``patches`` entries
    only touch the value-keys they list.
    """
    entries: list[VariantDimension | DimensionPatch] = [*_dimensions(variants), *_patches(patches)]
    return SchemaDelta(
        base=base,
        dimensions=entries,
        compounds=_compounds(compounds),
        defaults=dict(defaults or {}),
    )


class ComponentStyles(BaseModel):
    """
    All style slots of one component type.

    Created once when the component type is declared and shared read-only
    by every render of it.
    """

    name: str = Field(..., description="Component name")
    description: str = Field("", description="Component description")
    slots: dict[str, StyleSlot] = Field(default_factory=dict, description="Slots by name")
    postprocess: Postprocessor | None = Field(
        default=None,
        description="Optional hook applied to every resolved token list",
    )

    model_config = {"frozen": True}

    _resolvers: dict[str, VariantResolver] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context: Any) -> None:
        for slot_name, slot in self.slots.items():
            self._resolvers[slot_name] = VariantResolver(slot.style_schema, self.postprocess)

    @classmethod
    def from_schemas(
        cls,
        name: str,
        schemas: Mapping[str, StyleSchema],
        description: str = "",
        postprocess: Postprocessor | None = None,
    ) -> ComponentStyles:
        """
        Build a component from slot name -> schema.

        Args:
            name: Component name
            schemas: Schemas keyed by slot name ("default" for the unnamed slot)
            description: Optional description
            postprocess: Optional token list hook

        Returns:
            The component
        """
        return cls(
            name=name,
            description=description,
            slots={
                slot_name: StyleSlot(name=slot_name, style_schema=schema)
                for slot_name, schema in schemas.items()
            },
            postprocess=postprocess,
        )

    @property
    def slot_names(self) -> list[str]:
        """Declared slot names."""
        return list(self.slots)

    def slot(self, name: str | None = None) -> StyleSlot:
        """
        Get a slot by name.

        Raises:
            UnknownStyleSlot: The slot is not declared
        """
        slot_name = name or DEFAULT_SLOT
        if slot_name not in self.slots:
            raise UnknownStyleSlot(slot_name)
        return self.slots[slot_name]

    def schema_for(self, name: str | None = None) -> StyleSchema:
        """Get the schema of a slot."""
        return self.slot(name).style_schema

    def resolver(self, name: str | None = None) -> VariantResolver:
        """Get the resolver of a slot."""
        slot_name = self.slot(name).name
        return self._resolvers[slot_name]

    def style_tokens(
        self,
        slot: str | None = None,
        extra: Any = None,
        **selection: Any,
    ) -> list[str]:
        """Resolve one slot to a token list."""
        return self.resolver(slot).resolve_tokens(selection, extra)

    def style(
        self,
        slot: str | None = None,
        extra: Any = None,
        **selection: Any,
    ) -> str:
        """
        Resolve one slot to a class string.

        Args:
            slot: Slot name, None for the default slot
            extra: One-off tokens appended at the end
            **selection: Dimension -> value for this slot only

        Returns:
            Whitespace-joined tokens

        Example:
            button.style(size="lg")
            card.style("image", orient="portrait")
        """
        return join_tokens(self.style_tokens(slot, extra, **selection))

    def derive(
        self,
        name: str,
        deltas: Mapping[str, SchemaDelta],
        strategy: CompositionStrategy | str = CompositionStrategy.OVERRIDE,
        description: str | None = None,
        postprocess: Postprocessor | None = None,
    ) -> ComponentStyles:
        """
        Declare a derived component.

        Slots named in ``deltas`` are composed with this component's slot of
        the same name; other slots are inherited as-is; slots this component
        does not have are composed onto an empty schema.

        Args:
            name: Name of the derived component
            deltas: Slot name -> child delta
            strategy: Composition strategy for every slot delta
            description: Description (inherited when None)
            postprocess: Token hook (inherited when None)

        Returns:
            The derived component; this one is left untouched
        """
        schemas = {slot_name: slot.style_schema for slot_name, slot in self.slots.items()}
        for slot_name, delta in deltas.items():
            parent = schemas.get(slot_name, StyleSchema())
            schemas[slot_name] = compose(parent, delta, strategy)

        return ComponentStyles.from_schemas(
            name=name,
            schemas=schemas,
            description=self.description if description is None else description,
            postprocess=self.postprocess if postprocess is None else postprocess,
        )
