"""Breakpoint builder: widths and names into ordered media-block descriptors."""

from __future__ import annotations

from dataclasses import dataclass, field

from system_css.model.theme import DEFAULT_BREAKPOINT_NAMES, Theme
from system_css.stylesheet.format import class_name
from system_css.stylesheet.model import MediaBlock


def media_params(width: str) -> str:
    return f"screen and (min-width: {width})"


@dataclass
class Breakpoint:
    """A named min-width threshold with the media block its rules go into."""

    name: str
    width: str
    block: MediaBlock = field(init=False)

    def __post_init__(self) -> None:
        self.block = MediaBlock(params=media_params(self.width))


def breakpoint_name(theme: Theme, index: int) -> str:
    """Name for the breakpoint at *index*: theme name, default name, or width."""
    if index < len(theme.breakpoint_names) and theme.breakpoint_names[index]:
        return theme.breakpoint_names[index]
    if index < len(DEFAULT_BREAKPOINT_NAMES):
        return DEFAULT_BREAKPOINT_NAMES[index]
    return class_name(theme.breakpoints[index])


def build_breakpoints(theme: Theme) -> list[Breakpoint | None]:
    """Return ``[None, *breakpoints]`` in the theme's declared order.

    ``None`` is the unconditional base case. Each Breakpoint gets a fresh,
    empty MediaBlock.
    """
    breakpoints: list[Breakpoint | None] = [None]
    for index, width in enumerate(theme.breakpoints):
        breakpoints.append(Breakpoint(name=breakpoint_name(theme, index), width=width))
    return breakpoints
