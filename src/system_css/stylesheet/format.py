"""Selector and value formatting helpers."""

from __future__ import annotations

import math
import re
from typing import Any

_CAMEL_RE = re.compile(r"([a-z])([A-Z])")


def is_number(value: Any) -> bool:
    """True for finite ints and floats; booleans are not numbers."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def format_number(value: int | float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def px(value: Any) -> Any:
    """Add a ``px`` unit to finite non-zero numbers.

    Zero becomes a bare ``"0"``; anything else is returned unchanged.
    """
    if not is_number(value):
        return value
    if value == 0:
        return "0"
    return f"{format_number(value)}px"


def hyphenate(name: str) -> str:
    """Convert a camelCase CSS property name to hyphen-case."""
    return _CAMEL_RE.sub(lambda m: f"{m.group(1)}-{m.group(2).lower()}", name)


def class_name(key: str) -> str:
    return key.replace(".", "-")


def make_selector(prefix: str, key: str, breakpoint: str | None = None) -> str:
    """Build a utility-class selector: ``.m-2`` or ``.f-md-3``."""
    parts = [prefix, breakpoint, class_name(key)] if breakpoint else [prefix, class_name(key)]
    return "." + "-".join(parts)
