"""Style-prop registry: which style families to generate, and how."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from system_css.errors import UnknownStyleFunctionError
from system_css.styles.base import StyleFunction
from system_css.styles.functions import STYLE_FUNCTIONS


@dataclass(frozen=True)
class StylePropDef:
    """One registry entry.

    ``prefix`` replaces each meta's prop name in class names, ``scale``
    bypasses the theme lookup, and non-responsive props only produce base
    rules.
    """

    name: str
    prefix: str | None = None
    scale: Any = None
    responsive: bool = True


DEFAULT_REGISTRY: tuple[StylePropDef, ...] = (
    StylePropDef(name="space"),
    StylePropDef(name="fontSize", prefix="f"),
    StylePropDef(name="color", responsive=False),
)


def parse_prop_spec(spec: str) -> StylePropDef:
    """Parse ``name[:prefix][!]`` into a StylePropDef.

    A trailing ``!`` marks the prop as non-responsive, e.g. ``color!`` or
    ``fontSize:f``.
    """
    spec = spec.strip()
    responsive = not spec.endswith("!")
    spec = spec.rstrip("!")
    name, _, prefix = spec.partition(":")
    if not name:
        raise ValueError(f"Invalid prop spec: {spec!r}")
    return StylePropDef(name=name, prefix=prefix or None, responsive=responsive)


def resolve_style_functions(
    registry: tuple[StylePropDef, ...] | list[StylePropDef],
    functions: Mapping[str, StyleFunction] = STYLE_FUNCTIONS,
) -> list[tuple[StylePropDef, StyleFunction]]:
    """Bind every registry entry to its style function.

    Raises :class:`UnknownStyleFunctionError` for the first unknown name.
    """
    bound: list[tuple[StylePropDef, StyleFunction]] = []
    for prop_def in registry:
        func = functions.get(prop_def.name)
        if func is None:
            raise UnknownStyleFunctionError(prop_def.name, sorted(functions))
        bound.append((prop_def, func))
    return bound
