"""Theme model and the normalizer that fills in default scales."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from system_css.errors import ThemeError
from system_css.stylesheet.format import px

# Space scale shared by the margin and padding families.
DEFAULT_SPACE: tuple[int, ...] = (0, 4, 8, 16, 32, 64, 128, 256, 512)

DEFAULT_BREAKPOINTS: tuple[str, ...] = ("40em", "52em", "64em")

# Themes written for style props usually only list widths, so names are
# supplied positionally.
DEFAULT_BREAKPOINT_NAMES: tuple[str, ...] = ("sm", "md", "lg", "xl", "xxl", "xxxl")

_RESERVED_KEYS = ("breakpoints", "breakpointNames")


@dataclass(frozen=True)
class Theme:
    """A normalized theme.

    Attributes:
        scales: Scale name to raw scale data (lists, dicts, scalars).
        breakpoints: Breakpoint widths in declared order.
        breakpoint_names: Names parallel to ``breakpoints``; may be shorter.
    """

    scales: Mapping[str, Any] = field(default_factory=dict)
    breakpoints: tuple[str, ...] = DEFAULT_BREAKPOINTS
    breakpoint_names: tuple[str, ...] = DEFAULT_BREAKPOINT_NAMES

    def get(self, path: str | None) -> Any:
        """Look up a dotted *path* in the theme's scales, or ``None``."""
        if not path:
            return None
        node: Any = self.scales
        for part in path.split("."):
            if isinstance(node, Mapping):
                node = node.get(part)
            elif isinstance(node, Sequence) and not isinstance(node, str) and part.isdigit():
                index = int(part)
                node = node[index] if index < len(node) else None
            else:
                return None
            if node is None:
                return None
        return node

    def to_dict(self) -> dict[str, Any]:
        data = dict(self.scales)
        data["breakpoints"] = list(self.breakpoints)
        data["breakpointNames"] = list(self.breakpoint_names)
        return data


def _as_strings(values: Any, key: str, convert=str) -> tuple[str, ...]:
    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
        raise ThemeError(f"Theme key {key!r} must be a list, got {type(values).__name__}")
    return tuple(str(convert(v)) for v in values)


def _optional_name(value: Any) -> str:
    return "" if value is None else str(value)


def normalize_theme(theme: Mapping[str, Any] | Theme | None = None) -> Theme:
    """Return a complete Theme, filling ``space`` and breakpoints from defaults.

    Top-level keys present in *theme* replace the defaults outright; nested
    scales are never merged.
    """
    if isinstance(theme, Theme):
        return theme
    if theme is None:
        theme = {}
    if not isinstance(theme, Mapping):
        raise ThemeError(f"Theme must be a mapping, got {type(theme).__name__}")

    scales = {k: v for k, v in theme.items() if k not in _RESERVED_KEYS}
    scales.setdefault("space", list(DEFAULT_SPACE))

    breakpoints = theme.get("breakpoints")
    names = theme.get("breakpointNames")
    return Theme(
        scales=scales,
        breakpoints=DEFAULT_BREAKPOINTS if breakpoints is None else _as_strings(breakpoints, "breakpoints", px),
        breakpoint_names=(
            DEFAULT_BREAKPOINT_NAMES if names is None else _as_strings(names, "breakpointNames", _optional_name)
        ),
    )


generate_defaults_for = normalize_theme
