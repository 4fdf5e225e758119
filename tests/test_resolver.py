"""
Tests for the variant resolver.

Tests cover:
- Defaulting and the effective selection
- Emission order (base, dimensions, compounds, extra)
- Computed producers seeing the effective selection
- Resolution errors
- Postprocessing
"""

from enum import Enum

import pytest

from chuk_style_variants.errors import InvalidVariantValue, MissingRequiredVariant
from chuk_style_variants.models.schema import CompoundRule, StyleSchema, VariantDimension
from chuk_style_variants.styles import (
    VariantResolver,
    join_tokens,
    resolve,
    resolve_tokens,
    unique_tokens,
)


class Size(str, Enum):
    SM = "sm"
    LG = "lg"


class TestEffectiveSelection:
    """Tests for defaulting and validation."""

    def test_defaults_fill_missing(self, button_schema):
        """Unsupplied dimensions take their defaults."""
        resolver = VariantResolver(button_schema)
        assert resolver.effective_selection({"size": "lg"}) == {"color": "primary", "size": "lg"}

    def test_none_counts_as_unsupplied(self, button_schema):
        """A None value falls back to the default."""
        resolver = VariantResolver(button_schema)
        assert resolver.effective_selection({"color": None})["color"] == "primary"

    def test_enum_values(self, button_schema):
        """Enum members select by value."""
        resolver = VariantResolver(button_schema)
        assert resolver.effective_selection({"size": Size.LG})["size"] == "lg"

    def test_missing_required_variant(self):
        """No selection and no default is an error."""
        schema = StyleSchema(
            dimensions={"color": {"primary": "bg-blue"}, "size": {"sm": "p-2"}},
            defaults={"size": "sm"},
        )
        with pytest.raises(MissingRequiredVariant) as exc_info:
            resolve_tokens(schema, {})
        assert exc_info.value.dimension == "color"

    def test_unknown_value(self, button_schema):
        """Undeclared value-keys are rejected."""
        with pytest.raises(InvalidVariantValue) as exc_info:
            resolve_tokens(button_schema, {"size": "xxl"})
        assert exc_info.value.dimension == "size"
        assert exc_info.value.value == "xxl"

    def test_undeclared_dimension_ignored(self, button_schema):
        """Keys naming no dimension are left out of the effective selection."""
        resolver = VariantResolver(button_schema)
        assert resolver.effective_selection({"shape": "round", "size": "lg"}) == {
            "color": "primary",
            "size": "lg",
        }

    def test_unrelated_dimension_keeps_compound(self, button_schema):
        """An extra unrelated key does not stop a matching compound."""
        tokens = resolve_tokens(button_schema, {"size": "lg", "color": "primary", "shape": "round"})
        assert tokens == ["rounded", "bg-blue", "px-6", "bold"]


class TestResolveTokens:
    """Tests for token emission."""

    def test_end_to_end(self, button_schema):
        """Large primary button gets the compound token."""
        assert resolve_tokens(button_schema, {"size": "lg"}) == ["rounded", "bg-blue", "px-6", "bold"]

    def test_compound_predicate_mismatch(self, button_schema):
        """Danger color blocks the large-primary compound."""
        assert resolve_tokens(button_schema, {"color": "danger", "size": "lg"}) == [
            "rounded",
            "bg-red",
            "px-6",
        ]

    def test_defaults_equal_explicit_defaults(self, button_schema):
        """Resolving {} is the same as resolving the defaults."""
        assert resolve_tokens(button_schema, {}) == resolve_tokens(
            button_schema, button_schema.defaults
        )

    def test_deterministic(self, button_schema):
        """Repeated resolution gives identical output."""
        first = resolve(button_schema, {"size": "lg", "color": "danger"}, extra="mt-2")
        second = resolve(button_schema, {"size": "lg", "color": "danger"}, extra="mt-2")
        assert first == second

    def test_base_is_prefix(self, button_schema):
        """Base tokens always come first, in order."""
        for selection in ({}, {"size": "lg"}, {"color": "danger"}):
            tokens = resolve_tokens(button_schema, selection)
            assert tokens[: len(button_schema.base)] == button_schema.base

    def test_dimension_order_follows_declaration(self):
        """Dimension tokens follow declaration order, not selection order."""
        schema = StyleSchema(
            dimensions={"size": {"lg": "px-6"}, "color": {"primary": "bg-blue"}},
            defaults={"size": "lg", "color": "primary"},
        )
        assert resolve_tokens(schema, {"color": "primary", "size": "lg"}) == ["px-6", "bg-blue"]

    def test_all_firing_compounds_concatenate(self):
        """Every matching compound is appended in declaration order."""
        schema = StyleSchema(
            dimensions={
                "size": {"sm": "text-xs", "lg": "text-base"},
                "status": {"pending": "bg-yellow-100", "archived": "bg-gray-100"},
            },
            compounds=[
                CompoundRule(when={"size": "lg"}, tokens=["font-bold"]),
                CompoundRule(when={"status": "pending", "size": "lg"}, tokens=["animate-pulse"]),
                CompoundRule(when={"status": "archived"}, tokens=["opacity-75"]),
            ],
            defaults={"size": "sm"},
        )
        assert resolve_tokens(schema, {"status": "pending", "size": "lg"}) == [
            "text-base",
            "bg-yellow-100",
            "font-bold",
            "animate-pulse",
        ]

    def test_duplicates_are_kept(self):
        """Repeated tokens are not deduplicated."""
        schema = StyleSchema(
            base=["px-3"],
            dimensions={"size": {"md": "px-3 py-1"}},
            defaults={"size": "md"},
        )
        assert resolve_tokens(schema) == ["px-3", "px-3", "py-1"]

    def test_extra_appended_last(self, button_schema):
        """Extra tokens come after compounds, unvalidated."""
        tokens = resolve_tokens(button_schema, {"size": "lg"}, extra=["not-a-variant", "mt-4"])
        assert tokens[-2:] == ["not-a-variant", "mt-4"]
        assert tokens[-3] == "bold"

    def test_extra_string(self, button_schema):
        """Extra tokens can be a whitespace-separated string."""
        assert resolve(button_schema, extra="extra-class another-class") == (
            "rounded bg-blue px-2 extra-class another-class"
        )

    def test_resolve_joins(self, button_schema):
        """resolve returns the joined class string."""
        assert resolve(button_schema, {"size": "lg"}) == "rounded bg-blue px-6 bold"

    def test_empty_value_tokens(self):
        """Values with no tokens contribute nothing."""
        schema = StyleSchema(
            base="inline-flex",
            dimensions={"with_icon": {True: "pl-2", False: ""}},
            defaults={"with_icon": False},
        )
        assert resolve(schema) == "inline-flex"
        assert resolve(schema, {"with_icon": True}) == "inline-flex pl-2"


class TestComputedProducers:
    """Tests for producers that depend on other dimensions."""

    @pytest.fixture
    def dynamic_schema(self) -> StyleSchema:
        def primary(selection):
            tokens = ["bg-blue-500", "text-white"]
            if selection["size"] == "lg":
                tokens += ["uppercase", "font-bold"]
            return tokens

        return StyleSchema(
            dimensions=[
                VariantDimension(name="size", values={"sm": "text-sm", "md": "text-base", "lg": "px-4 py-3 text-lg"}),
                VariantDimension(name="theme", values={"primary": primary, "secondary": "bg-purple-500 text-white"}),
            ],
            defaults={"size": "md", "theme": "primary"},
        )

    def test_sees_explicit_selection(self, dynamic_schema):
        """Producer reads another dimension's selected value."""
        assert resolve(dynamic_schema, {"size": "lg"}) == (
            "px-4 py-3 text-lg bg-blue-500 text-white uppercase font-bold"
        )

    def test_sees_defaulted_values(self):
        """Producer receives the effective selection, defaults included."""
        seen = []

        def record(selection):
            seen.append(dict(selection))
            return []

        schema = StyleSchema(
            dimensions={"size": {"md": "text-base"}, "tone": {"plain": record}},
            defaults={"size": "md", "tone": "plain"},
        )
        resolve_tokens(schema, {})
        assert seen == [{"size": "md", "tone": "plain"}]

    def test_not_called_for_other_values(self, dynamic_schema):
        """Only the selected value's producer runs."""
        assert resolve(dynamic_schema, {"size": "lg", "theme": "secondary"}) == (
            "px-4 py-3 text-lg bg-purple-500 text-white"
        )


class TestPostprocessing:
    """Tests for the postprocess hook."""

    def test_unique_tokens(self):
        """unique_tokens keeps first occurrences in order."""
        assert unique_tokens(["a", "b", "a", "c", "b"]) == ["a", "b", "c"]

    def test_resolver_applies_postprocess(self):
        """The hook runs on the complete token list."""
        schema = StyleSchema(
            base=["px-3", "py-1"],
            dimensions={"size": {"md": "px-3 py-1 text-sm"}},
            defaults={"size": "md"},
        )
        resolver = VariantResolver(schema, postprocess=unique_tokens)
        assert resolver.resolve_tokens(extra="py-1 mt-2") == ["px-3", "py-1", "text-sm", "mt-2"]

    def test_join_tokens_skips_empty(self):
        """Empty tokens do not produce double spaces."""
        assert join_tokens(["a", "", "b"]) == "a b"


class TestFailFast:
    """Errors abort before any tokens are produced."""

    def test_producer_not_called_on_error(self):
        """A later invalid value stops resolution before producers run."""
        calls = []

        def producer(selection):
            calls.append(selection)
            return ["x"]

        schema = StyleSchema(
            dimensions={"tone": {"plain": producer}, "size": {"sm": "p-2"}},
            defaults={"tone": "plain", "size": "sm"},
        )
        with pytest.raises(InvalidVariantValue):
            resolve_tokens(schema, {"size": "xl"})
        assert calls == []
