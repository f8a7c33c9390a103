"""Scale model: recursive Scalar / ScaleMap values and their flattening."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence, Union


@dataclass(frozen=True)
class Scalar:
    """A concrete token value (number or string)."""

    value: Any


@dataclass(frozen=True)
class ScaleMap:
    """An ordered collection of named scale values.

    Sequences become ScaleMaps keyed by index ("0", "1", ...), mappings keep
    their own keys in insertion order.
    """

    items: tuple[tuple[str, "ScaleValue"], ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __bool__(self) -> bool:
        return bool(self.items)

    def get(self, key: str) -> "ScaleValue | None":
        for name, value in self.items:
            if name == key:
                return value
        return None

    def lookup_path(self, path: tuple[str, ...]) -> "ScaleValue | None":
        """Follow *path* one key at a time from this scale."""
        node: ScaleValue | None = self
        for part in path:
            if not isinstance(node, ScaleMap):
                return None
            node = node.get(part)
        return node

    def lookup(self, key: str) -> "ScaleValue | None":
        """Find *key* as a flat key first, then as a dotted path."""
        found = self.get(key)
        if found is not None or "." not in key:
            return found
        return self.lookup_path(tuple(key.split(".")))


ScaleValue = Union[Scalar, ScaleMap]


@dataclass(frozen=True)
class ScaleEntry:
    """A flattened leaf of a scale: its key path and concrete value."""

    path: tuple[str, ...]
    value: Any

    @property
    def key(self) -> str:
        return ".".join(self.path)


def to_scale_value(raw: Any) -> ScaleValue | None:
    """Convert raw theme data (dicts, lists, scalars) into a ScaleValue.

    ``None`` converts to ``None`` and is dropped from enclosing collections.
    """
    if raw is None:
        return None
    if isinstance(raw, (Scalar, ScaleMap)):
        return raw
    if isinstance(raw, Mapping):
        pairs = ((str(k), to_scale_value(v)) for k, v in raw.items())
    elif isinstance(raw, Sequence) and not isinstance(raw, (str, bytes)):
        pairs = ((str(i), to_scale_value(v)) for i, v in enumerate(raw))
    else:
        return Scalar(raw)
    return ScaleMap(tuple((k, v) for k, v in pairs if v is not None))


def to_scale(raw: Any) -> ScaleMap:
    """Convert raw data into a top-level scale.

    Anything that is not a collection yields an empty scale.
    """
    value = to_scale_value(raw)
    if isinstance(value, ScaleMap):
        return value
    return ScaleMap()


def flatten_scale(scale: ScaleValue, prefix: tuple[str, ...] = ()) -> list[ScaleEntry]:
    """Flatten *scale* into one entry per leaf, keyed by its full path."""
    if isinstance(scale, Scalar):
        return [ScaleEntry(path=prefix, value=scale.value)]
    entries: list[ScaleEntry] = []
    for key, value in scale.items:
        entries.extend(flatten_scale(value, prefix + (key,)))
    return entries
