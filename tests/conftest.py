"""Shared fixtures for system-css tests."""

from __future__ import annotations

import pytest


@pytest.fixture
def small_theme() -> dict:
    return {
        "space": [0, 4, 8],
        "breakpoints": ["40em"],
        "breakpointNames": ["sm"],
    }


@pytest.fixture
def color_theme() -> dict:
    return {
        "colors": {
            "black": "#000",
            "blue": {"100": "#def", "500": "#07c"},
        },
        "breakpoints": ["40em", "52em"],
        "breakpointNames": ["sm", "md"],
    }
