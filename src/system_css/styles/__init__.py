from system_css.styles.base import Style, StyleFunction, StyleMeta
from system_css.styles.functions import DEFAULT_SCALES, STYLE_FUNCTIONS
from system_css.styles.registry import (
    DEFAULT_REGISTRY,
    StylePropDef,
    parse_prop_spec,
    resolve_style_functions,
)

__all__ = [
    "Style",
    "StyleFunction",
    "StyleMeta",
    "DEFAULT_SCALES",
    "STYLE_FUNCTIONS",
    "DEFAULT_REGISTRY",
    "StylePropDef",
    "parse_prop_spec",
    "resolve_style_functions",
]
