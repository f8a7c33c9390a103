"""Rule generator: one rule per (meta, breakpoint, scale entry)."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from system_css.model.breakpoint import Breakpoint
from system_css.model.scale import ScaleMap, flatten_scale, to_scale
from system_css.model.theme import Theme
from system_css.styles.base import StyleFunction, StyleMeta
from system_css.styles.functions import default_scale_for
from system_css.styles.registry import StylePropDef
from system_css.stylesheet.format import hyphenate, make_selector, px
from system_css.stylesheet.model import Declaration, Rule

logger = logging.getLogger(__name__)


def resolve_scale(prop_def: StylePropDef, meta: StyleMeta, theme: Theme) -> ScaleMap:
    """Pick the scale for *meta*: override, theme, CSS default, meta default.

    The first non-empty candidate wins.
    """
    candidates = (
        ("override", prop_def.scale),
        ("theme", theme.get(meta.theme_key)),
        ("css default", default_scale_for(meta)),
        ("meta default", meta.default_scale),
    )
    for source, raw in candidates:
        scale = to_scale(raw)
        if scale:
            logger.debug("scale for %s.%s from %s (%d keys)", prop_def.name, meta.prop, source, len(scale))
            return scale
    return ScaleMap()


def build_declarations(style: Mapping[str, Any]) -> tuple[Declaration, ...]:
    """Turn raw camelCase property -> value pairs into important declarations."""
    return tuple(
        Declaration(property=hyphenate(prop), value=str(px(value)), important=True)
        for prop, value in style.items()
        if value is not None
    )


def generate_rules(
    prop_def: StylePropDef,
    func: StyleFunction,
    theme: Theme,
    breakpoints: list[Breakpoint | None],
) -> list[Rule]:
    """Generate every rule for one style prop.

    Responsive rules are appended straight into each breakpoint's media
    block; the base-case rules are returned.
    """
    targets = breakpoints if prop_def.responsive else [None]
    base_rules: list[Rule] = []

    for meta in func.metas:
        scale = resolve_scale(prop_def, meta, theme)
        entries = flatten_scale(scale)
        stem = prop_def.prefix or meta.prop
        for brk in targets:
            for entry in entries:
                declarations = build_declarations(func(meta.prop, entry.path, scale))
                if not declarations:
                    continue
                rule = Rule(
                    selector=make_selector(stem, entry.key, brk.name if brk else None),
                    declarations=declarations,
                )
                if brk is None:
                    base_rules.append(rule)
                else:
                    brk.block.append(rule)

    return base_rules
