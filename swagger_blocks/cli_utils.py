"""
CLI utilities for locating declaring classes.
"""

from __future__ import annotations

import importlib
import inspect
from collections.abc import Iterable
from types import ModuleType
from typing import Any

import click

from .registry import find_declarations


def declaring_classes(module: ModuleType) -> list[type]:
    """Classes defined in `module` that carry swagger declarations, in definition order."""
    return [
        value
        for value in vars(module).values()
        if inspect.isclass(value) and value.__module__ == module.__name__ and find_declarations(value) is not None
    ]


def load_declaring_units(targets: Iterable[str]) -> list[Any]:
    """
    Resolve CLI targets into declaring units.

    Args:
        targets: "package.module:ClassName" or "package.module" strings

    Returns:
        Units in target order; a bare module expands to its declaring classes

    Raises:
        click.BadParameter: If a module or attribute cannot be found
    """
    units: list[Any] = []
    for target in targets:
        module_name, _, attribute = target.partition(":")
        try:
            module = importlib.import_module(module_name)
        except ImportError as e:
            raise click.BadParameter(f"cannot import {module_name!r}: {e}", param_hint="TARGETS") from e

        if not attribute:
            units.extend(declaring_classes(module))
            continue

        unit: Any = module
        for part in attribute.split("."):
            try:
                unit = getattr(unit, part)
            except AttributeError as e:
                raise click.BadParameter(f"{module_name!r} has no attribute {attribute!r}", param_hint="TARGETS") from e
        units.append(unit)
    return units
