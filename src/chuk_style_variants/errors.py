"""
Error taxonomy for the style variant system.

Declaration and composition errors are raised while a schema is being
assembled; resolution errors are raised before any tokens are produced.
None of these are transient, so nothing here is retried.
"""

from __future__ import annotations

from chuk_style_variants.constants import ErrorMessages


class StyleVariantError(Exception):
    """Base class for all style variant errors."""


class InvalidVariantValue(StyleVariantError):
    """A selection or default names a value-key the dimension does not declare."""

    def __init__(self, dimension: str, value: str):
        self.dimension = dimension
        self.value = value
        super().__init__(
            ErrorMessages.INVALID_VARIANT_VALUE.format(dimension=dimension, value=value)
        )


class MissingRequiredVariant(StyleVariantError):
    """A dimension has neither a caller selection nor a schema default."""

    def __init__(self, dimension: str):
        self.dimension = dimension
        super().__init__(ErrorMessages.MISSING_REQUIRED_VARIANT.format(dimension=dimension))


class InvalidCompoundRule(StyleVariantError):
    """A compound rule references a dimension missing from its schema."""

    def __init__(self, dimension: str | None):
        self.dimension = dimension
        if dimension is None:
            message = ErrorMessages.EMPTY_COMPOUND_RULE
        else:
            message = ErrorMessages.INVALID_COMPOUND_RULE.format(dimension=dimension)
        super().__init__(message)


class DuplicateDimensionName(StyleVariantError):
    """Two dimensions in one schema share a name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(ErrorMessages.DUPLICATE_DIMENSION.format(name=name))


class EmptyVariantDimension(StyleVariantError):
    """A dimension declares no value-keys."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(ErrorMessages.EMPTY_DIMENSION.format(name=name))


class UnknownVariantDimension(StyleVariantError):
    """A defaults entry or selection names a dimension the schema does not have."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(ErrorMessages.UNKNOWN_DIMENSION.format(name=name))


class UnknownStyleSlot(StyleVariantError):
    """A component was asked for a slot it does not declare."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(ErrorMessages.UNKNOWN_SLOT.format(name=name))
