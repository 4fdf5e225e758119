"""
Constants and enums for the style variant system.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Literal


class CompositionStrategy(str, Enum):
    """
    How a derived schema combines its declarations with its parent's.

    The base token list is always concatenated parent-then-child.
    """

    OVERRIDE = "override"  # Child dimensions/compounds/defaults replace the parent's
    MERGE = "merge"  # Deep merge of value-keys, compounds concatenated
    EXTEND = "extend"  # Patches touch single value-keys, whole dimensions replace


# Name of the unnamed slot of a component
DEFAULT_SLOT = "default"

# Value-keys used when a caller selects a boolean dimension with True/False
BOOLEAN_VALUE_KEYS: dict[bool, str] = {
    True: "yes",
    False: "no",
}

# Schema versions - frozen for v1
SchemaVersion = Literal["component/v1"]

COMPONENT_SCHEMA_VERSION: SchemaVersion = "component/v1"

# File suffix for component definitions
COMPONENT_FILE_SUFFIX = ".yaml"


class ErrorMessages:
    """Standardized error messages."""

    INVALID_VARIANT_VALUE = "Invalid value '{value}' for variant '{dimension}'."
    MISSING_REQUIRED_VARIANT = "Variant '{dimension}' has no selection and no default."
    INVALID_COMPOUND_RULE = "Compound rule references unknown variant '{dimension}'."
    EMPTY_COMPOUND_RULE = "Compound rule must name at least one variant."
    DUPLICATE_DIMENSION = "Variant '{name}' is declared more than once."
    EMPTY_DIMENSION = "Variant '{name}' must declare at least one value."
    UNKNOWN_DIMENSION = "Unknown variant '{name}'."
    UNKNOWN_SLOT = "Unknown style slot '{name}'."
    COMPONENT_NOT_FOUND = "Component '{name}' not found."
    INHERITANCE_CYCLE = "Component inheritance cycle: {chain}."
    COMPONENT_EXISTS = "Component '{name}' already exists in project."
    NO_PROJECT_PATH = "No project path configured."
    NOT_A_MAPPING = "Component file {path} must hold a mapping, not {kind}."
    UNSUPPORTED_SCHEMA_VERSION = "Unsupported schema version: {version}."
    UNKNOWN_POSTPROCESSOR = "Unknown postprocessor '{name}'. Available: {available}."
    CALLABLE_NOT_SERIALIZABLE = (
        "Variant '{dimension}' value '{value}' is computed and cannot be exported."
    )
