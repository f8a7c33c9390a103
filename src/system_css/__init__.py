"""system-css: utility-class stylesheets generated from design-token themes."""

from __future__ import annotations

__version__ = "0.1.0"

from system_css.errors import (  # noqa: E402
    SystemCSSError,
    ThemeError,
    ThemeLoadError,
    UnknownStyleFunctionError,
)
from system_css.generator import GenerationResult, generate_css, generate_stylesheet  # noqa: E402
from system_css.model.theme import Theme, generate_defaults_for, normalize_theme  # noqa: E402
from system_css.styles.registry import DEFAULT_REGISTRY, StylePropDef  # noqa: E402

__all__ = [
    "__version__",
    "SystemCSSError",
    "ThemeError",
    "ThemeLoadError",
    "UnknownStyleFunctionError",
    "GenerationResult",
    "generate_css",
    "generate_stylesheet",
    "Theme",
    "generate_defaults_for",
    "normalize_theme",
    "DEFAULT_REGISTRY",
    "StylePropDef",
]
