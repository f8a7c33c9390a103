"""Built-in style families, looked up by name."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from system_css.model.theme import DEFAULT_SPACE
from system_css.styles.base import Style, StyleFunction, StyleMeta
from system_css.stylesheet.format import format_number, is_number

DEFAULT_FONT_SIZES: tuple[int, ...] = (12, 14, 16, 20, 24, 32, 48, 64, 72)


def unitless(value: Any) -> Any:
    """Keep numbers unitless (``400``, ``1.5``) by turning them into strings."""
    return format_number(value) if is_number(value) else value


def percentage(value: Any) -> Any:
    """Numbers in (0, 1] are fractions of the container width."""
    if is_number(value) and 0 < value <= 1:
        return f"{format_number(round(value * 100, 4))}%"
    return value


_SPACE_PROPS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("m", ("margin",)),
    ("mt", ("marginTop",)),
    ("mr", ("marginRight",)),
    ("mb", ("marginBottom",)),
    ("ml", ("marginLeft",)),
    ("mx", ("marginLeft", "marginRight")),
    ("my", ("marginTop", "marginBottom")),
    ("p", ("padding",)),
    ("pt", ("paddingTop",)),
    ("pr", ("paddingRight",)),
    ("pb", ("paddingBottom",)),
    ("pl", ("paddingLeft",)),
    ("px", ("paddingLeft", "paddingRight")),
    ("py", ("paddingTop", "paddingBottom")),
)

space = Style(
    name="space",
    metas=tuple(
        StyleMeta(prop=prop, css_properties=css, theme_key="space", default_scale=DEFAULT_SPACE)
        for prop, css in _SPACE_PROPS
    ),
)

font_size = Style(
    name="fontSize",
    metas=(StyleMeta(prop="fontSize", css_properties=("fontSize",), theme_key="fontSizes"),),
)

color = Style(
    name="color",
    metas=(
        StyleMeta(prop="color", css_properties=("color",), theme_key="colors"),
        StyleMeta(prop="bg", css_properties=("backgroundColor",), theme_key="colors"),
    ),
)

font_family = Style(
    name="fontFamily",
    metas=(StyleMeta(prop="font", css_properties=("fontFamily",), theme_key="fonts"),),
)

font_weight = Style(
    name="fontWeight",
    metas=(
        StyleMeta(
            prop="fontWeight",
            css_properties=("fontWeight",),
            theme_key="fontWeights",
            transform=unitless,
        ),
    ),
)

line_height = Style(
    name="lineHeight",
    metas=(
        StyleMeta(
            prop="lineHeight",
            css_properties=("lineHeight",),
            theme_key="lineHeights",
            transform=unitless,
        ),
    ),
)

letter_spacing = Style(
    name="letterSpacing",
    metas=(StyleMeta(prop="letterSpacing", css_properties=("letterSpacing",), theme_key="letterSpacings"),),
)

width = Style(
    name="width",
    metas=(StyleMeta(prop="w", css_properties=("width",), theme_key="sizes", transform=percentage),),
)

border_radius = Style(
    name="borderRadius",
    metas=(StyleMeta(prop="rounded", css_properties=("borderRadius",), theme_key="radii"),),
)

box_shadow = Style(
    name="boxShadow",
    metas=(StyleMeta(prop="shadow", css_properties=("boxShadow",), theme_key="shadows"),),
)

STYLE_FUNCTIONS: Mapping[str, StyleFunction] = MappingProxyType(
    {
        func.name: func
        for func in (
            space,
            font_size,
            color,
            font_family,
            font_weight,
            line_height,
            letter_spacing,
            width,
            border_radius,
            box_shadow,
        )
    }
)

# Fallback scales keyed by the CSS property a meta controls.
DEFAULT_SCALES: Mapping[str, tuple[Any, ...]] = MappingProxyType(
    {
        **{css: DEFAULT_SPACE for _, props in _SPACE_PROPS for css in props},
        "fontSize": DEFAULT_FONT_SIZES,
    }
)


def default_scale_for(meta: StyleMeta) -> tuple[Any, ...] | None:
    """Return the first built-in default scale for any of *meta*'s properties."""
    for css_property in meta.css_properties:
        scale = DEFAULT_SCALES.get(css_property)
        if scale:
            return scale
    return None
