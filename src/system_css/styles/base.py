"""Style function protocol and the metadata describing each style prop."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Protocol

from system_css.model.scale import Scalar, ScaleMap


@dataclass(frozen=True)
class StyleMeta:
    """How one prop of a style family maps onto CSS.

    Attributes:
        prop: Prop name, also the default class stem (``mx``, ``bg``).
        css_properties: camelCase CSS properties the prop sets.
        theme_key: Dotted theme path holding this prop's scale.
        default_scale: Scale used when nothing else provides one.
        transform: Optional conversion applied to each scale value.
    """

    prop: str
    css_properties: tuple[str, ...]
    theme_key: str | None = None
    default_scale: tuple[Any, ...] = ()
    transform: Callable[[Any], Any] | None = None


class StyleFunction(Protocol):
    """Maps a prop and a scale key onto raw CSS property -> value pairs."""

    name: str
    metas: tuple[StyleMeta, ...]

    def __call__(self, prop: str, key: str | tuple[str, ...], scale: ScaleMap) -> dict[str, Any]: ...


@dataclass(frozen=True)
class Style:
    """A style family: a named group of metas sharing one lookup rule.

    The key is either a scale key (flat or dotted) or a key path tuple, and
    is resolved against the scale; string keys missing from the scale are
    used as raw CSS values.
    """

    name: str
    metas: tuple[StyleMeta, ...]

    def meta(self, prop: str) -> StyleMeta:
        for meta in self.metas:
            if meta.prop == prop:
                return meta
        raise KeyError(f"Style {self.name!r} has no prop {prop!r}")

    def __call__(self, prop: str, key: str | tuple[str, ...], scale: ScaleMap) -> dict[str, Any]:
        meta = self.meta(prop)
        found = scale.lookup_path(key) if isinstance(key, tuple) else scale.lookup(key)
        if found is None:
            if isinstance(key, tuple):
                return {}
            value: Any = key
        elif isinstance(found, Scalar):
            value = found.value
        else:
            # nested scale, not a concrete value
            return {}
        if meta.transform is not None:
            value = meta.transform(value)
        return {css_property: value for css_property in meta.css_properties}
