#!/usr/bin/env python3
"""
Example: Using the Style Variant System.

This demonstrates declaring a component in Python, resolving its slots,
deriving components with each composition strategy, and loading the
built-in YAML library.

Usage:
    python examples/use_variants.py
"""

from chuk_style_variants import (
    DEFAULT_SLOT,
    ComponentLoader,
    ComponentStyles,
    CompositionStrategy,
    StyleVariantError,
    define_delta,
    define_schema,
)


def dynamic_theme(selection: dict[str, str]) -> list[str]:
    """Primary buttons shout when they are large."""
    tokens = ["bg-blue-500", "text-white"]
    if selection["size"] == "lg":
        tokens += ["uppercase", "font-bold"]
    return tokens


def main() -> None:
    """Demonstrate the style variant system."""
    print("CHUK Style Variants Demo")
    print("=" * 40)
    print()

    button = ComponentStyles.from_schemas(
        name="button",
        schemas={
            DEFAULT_SLOT: define_schema(
                base="font-medium rounded-lg",
                variants={
                    "size": {"sm": "px-3 py-1.5 text-sm", "md": "px-4 py-2", "lg": "px-6 py-3 text-lg"},
                    "theme": {"primary": dynamic_theme, "outline": "bg-transparent border-2"},
                    "disabled": {True: "opacity-50 cursor-not-allowed", False: "hover:shadow-md"},
                },
                compounds=[({"theme": "outline", "disabled": False}, "border-blue-600 text-blue-600")],
                defaults={"size": "md", "theme": "primary", "disabled": False},
            ),
        },
    )

    print("Button:")
    for selection in ({}, {"size": "lg"}, {"theme": "outline"}, {"theme": "outline", "disabled": True}):
        print(f"  {selection or 'defaults'}: {button.style(**selection)}")
    print(f"  with extra classes: {button.style(extra='w-full mt-4')}")
    print()

    # Errors are raised before any tokens are produced
    try:
        button.style(size="xxl")
    except StyleVariantError as e:
        print(f"Invalid selection: {e}")
    print()

    # Derive the same parent three ways
    delta = define_delta(patches={"size": {"xl": "px-8 py-4 text-xl"}})
    print("Derived size values:")
    for strategy in CompositionStrategy:
        derived = button.derive(f"button-{strategy.value}", {DEFAULT_SLOT: delta}, strategy)
        schema = derived.schema_for()
        print(f"  {strategy.value}: {', '.join(schema.dimension_names)}")
        size = schema.dimension("size")
        print(f"    size: {size.value_keys}")
    print()

    # Built-in library
    loader = ComponentLoader()
    print("Library components:")
    for meta in loader.list_components():
        parent = f" (extends {meta.extends})" if meta.extends else ""
        print(f"  {meta.name}{parent}: slots {meta.slots}")
    print()

    card = loader.get_component("card")
    if card:
        print(f"card: {card.style(variant='glass')}")
        print(f"card image: {card.style('image', orient='portrait')}")


if __name__ == "__main__":
    main()
