"""
Style resolver - turns a selection into the final token list.

Resolution is a pure function of the schema and the caller's input:
defaults are filled in, every choice is validated, and only then are
tokens emitted (base, dimensions, compounds, extra - in that order).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from chuk_style_variants.errors import InvalidVariantValue, MissingRequiredVariant
from chuk_style_variants.models.schema import StyleSchema, as_tokens, normalize_value_key

logger = logging.getLogger(__name__)

Postprocessor = Callable[[list[str]], list[str]]


def unique_tokens(tokens: list[str]) -> list[str]:
    """Drop repeated tokens, keeping the first occurrence."""
    return list(dict.fromkeys(tokens))


# Postprocessors that component definitions can name
POSTPROCESSORS: dict[str, Postprocessor] = {
    "unique": unique_tokens,
}


def join_tokens(tokens: Sequence[str]) -> str:
    """Join tokens for textual consumers, skipping empty ones."""
    return " ".join(token for token in tokens if token)


class VariantResolver:
    """
    Resolves selections against a single schema.

    The resolver holds no state beyond the (immutable) schema and an
    optional postprocessor, so one instance can be shared freely.
    """

    def __init__(self, schema: StyleSchema, postprocess: Postprocessor | None = None):
        """
        Initialize the resolver with a schema.

        Args:
            schema: The schema to resolve against
            postprocess: Optional hook applied to the final token list
        """
        self.schema = schema
        self.postprocess = postprocess

    def effective_selection(self, selection: Mapping[str, Any] | None = None) -> dict[str, str]:
        """
        Complete a caller selection with the schema defaults.

        Args:
            selection: Partial dimension -> value mapping. None values count
                as not supplied; keys naming no dimension are ignored.

        Returns:
            A value-key for every dimension, in dimension order

        Raises:
            MissingRequiredVariant: a dimension has no selection and no default
            InvalidVariantValue: a chosen value-key is not declared
        """
        supplied: dict[str, str] = {}
        for dim, value in (selection or {}).items():
            if value is None:
                continue
            if self.schema.dimension(dim) is None:
                logger.debug("Ignoring selection for undeclared variant '%s'", dim)
                continue
            supplied[dim] = normalize_value_key(value)

        effective: dict[str, str] = {}
        for dimension in self.schema.dimensions:
            if dimension.name in supplied:
                key = supplied[dimension.name]
            elif dimension.name in self.schema.defaults:
                key = self.schema.defaults[dimension.name]
            else:
                raise MissingRequiredVariant(dimension.name)
            effective[dimension.name] = key

        for dimension in self.schema.dimensions:
            key = effective[dimension.name]
            if not dimension.has_value(key):
                raise InvalidVariantValue(dimension.name, key)

        return effective

    def resolve_tokens(
        self,
        selection: Mapping[str, Any] | None = None,
        extra: Sequence[str] | str | None = None,
    ) -> list[str]:
        """
        Resolve a selection to a token list.

        Args:
            selection: Partial dimension -> value mapping
            extra: Tokens appended verbatim at the end

        Returns:
            Base tokens, then each dimension's tokens, then every firing
            compound rule's tokens, then the extra tokens
        """
        effective = self.effective_selection(selection)

        tokens = list(self.schema.base)

        for dimension in self.schema.dimensions:
            tokens.extend(dimension.produce(effective[dimension.name], effective))

        for rule in self.schema.compounds:
            if rule.matches(effective):
                tokens.extend(rule.tokens)

        tokens.extend(as_tokens(extra))

        logger.debug("Resolved %s -> %d tokens", effective, len(tokens))

        if self.postprocess is not None:
            tokens = list(self.postprocess(tokens))

        return tokens

    def resolve(
        self,
        selection: Mapping[str, Any] | None = None,
        extra: Sequence[str] | str | None = None,
    ) -> str:
        """Resolve a selection to a whitespace-joined class string."""
        return join_tokens(self.resolve_tokens(selection, extra))


def resolve_tokens(
    schema: StyleSchema,
    selection: Mapping[str, Any] | None = None,
    extra: Sequence[str] | str | None = None,
) -> list[str]:
    """Resolve a selection against a schema to a token list."""
    return VariantResolver(schema).resolve_tokens(selection, extra)


def resolve(
    schema: StyleSchema,
    selection: Mapping[str, Any] | None = None,
    extra: Sequence[str] | str | None = None,
) -> str:
    """Resolve a selection against a schema to a class string."""
    return VariantResolver(schema).resolve(selection, extra)
