"""
Style system - declarative variants resolved to class tokens.

Schemas are assembled (and composed) once; resolution is a pure,
repeatable computation over a caller's selection.
"""

from chuk_style_variants.styles.component import ComponentStyles, define_delta, define_schema
from chuk_style_variants.styles.composer import compose
from chuk_style_variants.styles.loader import ComponentLoader
from chuk_style_variants.styles.resolver import (
    POSTPROCESSORS,
    VariantResolver,
    join_tokens,
    resolve,
    resolve_tokens,
    unique_tokens,
)

__all__ = [
    "POSTPROCESSORS",
    "ComponentLoader",
    "ComponentStyles",
    "VariantResolver",
    "compose",
    "define_delta",
    "define_schema",
    "join_tokens",
    "resolve",
    "resolve_tokens",
    "unique_tokens",
]
