"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_style_variants.models.schema import CompoundRule, StyleSchema, VariantDimension


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def library_path() -> Path:
    """Path to the built-in component library."""
    return Path(__file__).parent.parent / "src" / "chuk_style_variants" / "styles" / "library"


@pytest.fixture
def button_schema() -> StyleSchema:
    """Rounded button with color and size, one compound for large primary."""
    return StyleSchema(
        base=["rounded"],
        dimensions=[
            VariantDimension(name="color", values={"primary": ["bg-blue"], "danger": ["bg-red"]}),
            VariantDimension(name="size", values={"sm": ["px-2"], "lg": ["px-6"]}),
        ],
        compounds=[CompoundRule(when={"size": "lg", "color": "primary"}, tokens=["bold"])],
        defaults={"color": "primary", "size": "sm"},
    )


@pytest.fixture
def sized_schema() -> StyleSchema:
    """Schema with a single size dimension, sm/md/lg."""
    return StyleSchema(
        base=["card"],
        dimensions=[
            VariantDimension(name="size", values={"sm": ["a"], "md": ["b"], "lg": ["c"]}),
        ],
        defaults={"size": "md"},
    )
