"""Stylesheet assembler: runs the registry and orders the output."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Union

from system_css.model.breakpoint import build_breakpoints
from system_css.model.diagnostic import Diagnostic, Severity
from system_css.model.theme import Theme, normalize_theme
from system_css.generator.rules import generate_rules
from system_css.styles.base import StyleFunction
from system_css.styles.functions import STYLE_FUNCTIONS
from system_css.styles.registry import DEFAULT_REGISTRY, StylePropDef, resolve_style_functions
from system_css.stylesheet.model import Node, Stylesheet

logger = logging.getLogger(__name__)

ThemeInput = Union[Mapping[str, Any], Theme, None]


@dataclass(frozen=True)
class GenerationResult:
    """The generated stylesheet plus any diagnostics raised along the way."""

    stylesheet: Stylesheet
    diagnostics: list[Diagnostic] = field(default_factory=list)
    options: Mapping[str, Any] = field(default_factory=dict)

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.is_warning]

    def to_css(self) -> str:
        return self.stylesheet.to_css()


def generate_stylesheet(
    theme: ThemeInput = None,
    registry: tuple[StylePropDef, ...] | list[StylePropDef] = DEFAULT_REGISTRY,
    functions: Mapping[str, StyleFunction] = STYLE_FUNCTIONS,
    options: Mapping[str, Any] | None = None,
) -> GenerationResult:
    """Generate the utility-class stylesheet for *theme*.

    Base rules come first, in registry order, followed by one media block
    per breakpoint in the theme's order. Every registry entry is bound to
    its style function before any rule is generated, so an unknown name
    fails the whole run.

    *options* is the pass-through flag bag from the command line; it is
    carried onto the result untouched.
    """
    options = dict(options or {})
    if options:
        logger.debug("generator options: %s", options)
    normalized = normalize_theme(theme)
    bound = resolve_style_functions(registry, functions)
    breakpoints = build_breakpoints(normalized)

    nodes: list[Node] = []
    diagnostics: list[Diagnostic] = []
    for prop_def, func in bound:
        rules = generate_rules(prop_def, func, normalized, breakpoints)
        if not rules:
            logger.warning("no rules for prop: %s", prop_def.name)
            diagnostics.append(
                Diagnostic(
                    severity=Severity.WARNING,
                    message="no rules generated; the resolved scale is empty",
                    prop=prop_def.name,
                )
            )
            continue
        logger.debug("%s: %d base rules", prop_def.name, len(rules))
        diagnostics.append(
            Diagnostic(
                severity=Severity.INFO,
                message=f"generated {len(rules)} base rules",
                prop=prop_def.name,
            )
        )
        nodes.extend(rules)

    for brk in breakpoints[1:]:
        if brk is not None:
            nodes.append(brk.block)

    return GenerationResult(
        stylesheet=Stylesheet(nodes=tuple(nodes)),
        diagnostics=diagnostics,
        options=options,
    )


def generate_css(
    theme: ThemeInput = None,
    options: Mapping[str, Any] | None = None,
    registry: tuple[StylePropDef, ...] | list[StylePropDef] = DEFAULT_REGISTRY,
) -> str:
    """Generate the stylesheet for *theme* and return it as CSS text.

    *options* carries the pass-through command-line flags.
    """
    return generate_stylesheet(theme, registry, options=options).to_css()
