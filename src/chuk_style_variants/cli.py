#!/usr/bin/env python3
"""
Command-line entry point for chuk-style-variants.

Lists, describes and resolves component definitions from the built-in
library and a project styles directory. Every command prints a JSON
document with a "status" of "success" or "error".
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from chuk_style_variants.constants import ErrorMessages
from chuk_style_variants.styles import ComponentLoader, join_tokens

logger = logging.getLogger(__name__)


def parse_assignments(assignments: list[str]) -> dict[str, str]:
    """
    Parse ``dimension=value`` pairs.

    Raises:
        ValueError: A pair has no '='
    """
    selection: dict[str, str] = {}
    for assignment in assignments:
        dim, sep, value = assignment.partition("=")
        if not sep or not dim:
            raise ValueError(f"Expected dimension=value, got '{assignment}'")
        selection[dim.strip()] = value.strip()
    return selection


def list_components(loader: ComponentLoader) -> str:
    """List available components."""
    try:
        components = loader.list_components()
        return json.dumps(
            {
                "status": "success",
                "components": [
                    {
                        "name": c.name,
                        "description": c.description,
                        "slots": c.slots,
                        "extends": c.extends,
                    }
                    for c in components
                ],
                "count": len(components),
            }
        )
    except Exception as e:
        logger.exception("Failed to list components")
        return json.dumps({"status": "error", "message": str(e)})


def describe_component(loader: ComponentLoader, name: str) -> str:
    """Describe every slot of a component."""
    try:
        component = loader.get_component(name)
        if component is None:
            return json.dumps(
                {"status": "error", "message": ErrorMessages.COMPONENT_NOT_FOUND.format(name=name)}
            )

        slots: dict[str, Any] = {}
        for slot_name, slot in component.slots.items():
            schema = slot.style_schema
            slots[slot_name] = {
                **schema.to_yaml_dict(),
                "required": schema.required_dimensions,
            }

        return json.dumps(
            {
                "status": "success",
                "component": {
                    "name": component.name,
                    "description": component.description,
                    "slots": slots,
                },
            }
        )
    except Exception as e:
        logger.exception("Failed to describe component")
        return json.dumps({"status": "error", "message": str(e)})


def resolve_component(
    loader: ComponentLoader,
    name: str,
    selection: dict[str, str],
    slot: str | None = None,
    extra: str | None = None,
) -> str:
    """Resolve one slot of a component to its class string."""
    try:
        component = loader.get_component(name)
        if component is None:
            return json.dumps(
                {"status": "error", "message": ErrorMessages.COMPONENT_NOT_FOUND.format(name=name)}
            )

        resolver = component.resolver(slot)
        tokens = resolver.resolve_tokens(selection, extra)

        return json.dumps(
            {
                "status": "success",
                "component": component.name,
                "slot": component.slot(slot).name,
                "selection": resolver.effective_selection(selection),
                "tokens": tokens,
                "class": join_tokens(tokens),
            }
        )
    except Exception as e:
        logger.exception("Failed to resolve component")
        return json.dumps({"status": "error", "message": str(e)})


def copy_component(loader: ComponentLoader, name: str) -> str:
    """Copy a library component into the project."""
    try:
        path = loader.copy_to_project(name)
        if path is None:
            return json.dumps(
                {"status": "error", "message": ErrorMessages.COMPONENT_NOT_FOUND.format(name=name)}
            )
        return json.dumps({"status": "success", "path": str(path)})
    except Exception as e:
        logger.exception("Failed to copy component")
        return json.dumps({"status": "error", "message": str(e)})


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(description="Resolve declarative style variants")
    parser.add_argument(
        "--library",
        type=Path,
        default=None,
        help="Component library directory (default: built-in library)",
    )
    parser.add_argument(
        "--project",
        type=Path,
        default=Path.cwd() / "styles",
        help="Project components directory (default: ./styles)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("list", help="List available components")

    describe = commands.add_parser("describe", help="Describe a component")
    describe.add_argument("name")

    resolve = commands.add_parser("resolve", help="Resolve a component to classes")
    resolve.add_argument("name")
    resolve.add_argument("--slot", default=None, help="Slot name (default slot if omitted)")
    resolve.add_argument(
        "--set",
        dest="assignments",
        action="append",
        default=[],
        metavar="DIMENSION=VALUE",
        help="Select a variant value (repeatable)",
    )
    resolve.add_argument("--class", dest="extra", default=None, help="Extra tokens to append")

    copy = commands.add_parser("copy", help="Copy a library component into the project")
    copy.add_argument("name")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    logging.basicConfig(level=logging.INFO)

    args = build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    loader = ComponentLoader(library_path=args.library, project_path=args.project)

    if args.command == "list":
        output = list_components(loader)
    elif args.command == "describe":
        output = describe_component(loader, args.name)
    elif args.command == "resolve":
        try:
            selection = parse_assignments(args.assignments)
        except ValueError as e:
            output = json.dumps({"status": "error", "message": str(e)})
        else:
            output = resolve_component(loader, args.name, selection, args.slot, args.extra)
    else:
        output = copy_component(loader, args.name)

    print(output)
    return 0 if json.loads(output)["status"] == "success" else 1


if __name__ == "__main__":
    sys.exit(main())
