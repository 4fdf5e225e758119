"""
Component loader - discovers and loads component style definitions.

Components can come from:
1. Built-in library (shipped with package)
2. Project components (user's project/styles directory)

A definition may extend another component by name; the parent is loaded
(from either location) and the child's slots are composed onto it.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Any

import yaml

from chuk_style_variants.constants import (
    COMPONENT_FILE_SUFFIX,
    COMPONENT_SCHEMA_VERSION,
    CompositionStrategy,
    ErrorMessages,
)
from chuk_style_variants.models.schema import (
    ComponentMetadata,
    CompoundRule,
    DimensionPatch,
    SchemaDelta,
    VariantDimension,
)
from chuk_style_variants.styles.component import ComponentStyles
from chuk_style_variants.styles.resolver import POSTPROCESSORS

logger = logging.getLogger(__name__)


class ComponentLoader:
    """
    Discovers and loads component definitions.

    Components are loaded from YAML files in the library and project directories.
    Project components override library components with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the component loader.

        Args:
            library_path: Path to built-in component library
            project_path: Path to project components directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, ComponentStyles] = {}
        self._loading: list[Path] = []

    def list_components(self) -> list[ComponentMetadata]:
        """
        List all available components.

        Returns components from both library and project, with project
        components taking precedence. Files that cannot be read are skipped.
        """
        components: dict[str, ComponentMetadata] = {}

        for base_path in (self.library_path, self.project_path):
            if not base_path or not base_path.exists():
                continue
            for path in sorted(base_path.glob(f"*{COMPONENT_FILE_SUFFIX}")):
                try:
                    data = self._read_file(path)
                except (OSError, ValueError, yaml.YAMLError):
                    logger.warning(f"Skipping unreadable component file: {path}")
                    continue
                meta = ComponentMetadata(
                    name=data.get("name", path.stem),
                    description=data.get("description", ""),
                    slots=list((data.get("slots") or {}).keys()),
                    extends=data.get("extends"),
                    path=str(path),
                )
                components[meta.name] = meta

        return sorted(components.values(), key=lambda m: m.name)

    def get_component(self, name: str) -> ComponentStyles | None:
        """
        Get a component by name.

        Project components take precedence over library components.

        Args:
            name: Component name

        Returns:
            Component if found, None otherwise

        Raises:
            ValueError: Malformed file, missing parent or inheritance cycle
            StyleVariantError: The definition declares an invalid schema
        """
        # Check cache
        if name in self._cache:
            return self._cache[name]

        path = self._find_file(name)
        if path is None:
            return None

        component = self._load_component_file(path)
        self._cache[name] = component
        return component

    def copy_to_project(self, name: str) -> Path | None:
        """
        Copy a library component to the project for customization.

        The copy shadows the library definition from then on; it may also
        extend the library component of the same name.

        Args:
            name: Component name

        Returns:
            Path to copied file, or None if the library has no such component

        Raises:
            ValueError: No project path, or the project already defines it
        """
        if not self.project_path:
            raise ValueError(ErrorMessages.NO_PROJECT_PATH)

        source = self._library_file(name)
        if source is None:
            return None

        target = self.project_path / source.name
        if target.exists():
            raise ValueError(ErrorMessages.COMPONENT_EXISTS.format(name=name))

        self.project_path.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, target)
        self._cache.pop(name, None)

        logger.info(f"Copied component '{name}' to {target}")
        return target

    def clear_cache(self) -> None:
        """Clear the component cache."""
        self._cache.clear()

    def _library_file(self, name: str) -> Path | None:
        candidate = self.library_path / f"{name}{COMPONENT_FILE_SUFFIX}"
        return candidate if candidate.exists() else None

    def _find_file(self, name: str) -> Path | None:
        """Locate a definition, project first."""
        if self.project_path:
            candidate = self.project_path / f"{name}{COMPONENT_FILE_SUFFIX}"
            if candidate.exists():
                return candidate
        return self._library_file(name)

    def _read_file(self, path: Path) -> dict[str, Any]:
        with open(path) as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(
                ErrorMessages.NOT_A_MAPPING.format(path=path, kind=type(data).__name__)
            )
        return data

    def _load_component_file(self, path: Path) -> ComponentStyles:
        """Load a component from a YAML file."""
        if path in self._loading:
            chain = " -> ".join(p.stem for p in [*self._loading, path])
            raise ValueError(ErrorMessages.INHERITANCE_CYCLE.format(chain=chain))

        data = self._read_file(path)

        self._loading.append(path)
        try:
            component = self._parse_component(data, path)
        finally:
            self._loading.pop()

        logger.debug(f"Loaded component '{component.name}' from {path}")
        return component

    def _load_parent(self, parent_name: str, path: Path) -> ComponentStyles:
        """
        Load the component a definition extends.

        A project file extending its own name builds on the library
        definition it shadows; that parent is not cached, since the cache
        entry belongs to the project component.
        """
        shadowed = (
            self.project_path is not None
            and path.parent == self.project_path
            and parent_name == path.stem
        )
        if shadowed:
            library_file = self._library_file(parent_name)
            parent = self._load_component_file(library_file) if library_file else None
        else:
            parent = self.get_component(parent_name)

        if parent is None:
            raise ValueError(ErrorMessages.COMPONENT_NOT_FOUND.format(name=parent_name))
        return parent

    def _parse_component(self, data: dict[str, Any], path: Path) -> ComponentStyles:
        """Parse a component from YAML data."""
        schema_version = data.get("schema", COMPONENT_SCHEMA_VERSION)
        if schema_version != COMPONENT_SCHEMA_VERSION:
            raise ValueError(
                ErrorMessages.UNSUPPORTED_SCHEMA_VERSION.format(version=schema_version)
            )

        name = data.get("name", path.stem)

        parent_name = data.get("extends")
        if parent_name:
            parent = self._load_parent(parent_name, path)
        else:
            parent = ComponentStyles(name=name)

        postprocess_name = data.get("postprocess")
        if postprocess_name and postprocess_name not in POSTPROCESSORS:
            raise ValueError(
                ErrorMessages.UNKNOWN_POSTPROCESSOR.format(
                    name=postprocess_name, available=", ".join(sorted(POSTPROCESSORS))
                )
            )
        postprocess = POSTPROCESSORS[postprocess_name] if postprocess_name else None

        deltas = {
            slot_name: self._parse_delta(slot_data or {})
            for slot_name, slot_data in (data.get("slots") or {}).items()
        }

        return parent.derive(
            name=name,
            deltas=deltas,
            strategy=CompositionStrategy(data.get("strategy", CompositionStrategy.OVERRIDE.value)),
            description=data.get("description"),
            postprocess=postprocess,
        )

    def _parse_delta(self, data: dict[str, Any]) -> SchemaDelta:
        """Parse one slot's declarations from YAML data."""
        entries: list[VariantDimension | DimensionPatch] = [
            VariantDimension(name=dim, values=values or {})
            for dim, values in (data.get("variants") or {}).items()
        ]
        entries.extend(
            DimensionPatch(name=dim, values=values or {})
            for dim, values in (data.get("patch") or {}).items()
        )

        compounds = [
            CompoundRule(when=cdata.get("when", {}), tokens=cdata.get("tokens", []))
            for cdata in data.get("compounds") or []
        ]

        return SchemaDelta(
            base=data.get("base", []),
            dimensions=entries,
            compounds=compounds,
            defaults=data.get("defaults") or {},
        )
