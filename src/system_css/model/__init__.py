from system_css.model.breakpoint import Breakpoint, build_breakpoints
from system_css.model.diagnostic import Diagnostic, Severity
from system_css.model.scale import (
    Scalar,
    ScaleEntry,
    ScaleMap,
    ScaleValue,
    flatten_scale,
    to_scale,
    to_scale_value,
)
from system_css.model.theme import Theme, generate_defaults_for, normalize_theme

__all__ = [
    "Breakpoint",
    "build_breakpoints",
    "Diagnostic",
    "Severity",
    "Scalar",
    "ScaleEntry",
    "ScaleMap",
    "ScaleValue",
    "flatten_scale",
    "to_scale",
    "to_scale_value",
    "Theme",
    "generate_defaults_for",
    "normalize_theme",
]
