"""Stylesheet model: Declaration, Rule, MediaBlock and Stylesheet dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` pair inside a rule."""

    property: str  # hyphen-case, e.g. "margin-left"
    value: str
    important: bool = True


@dataclass(frozen=True)
class Rule:
    """A selector paired with its declarations, in output order."""

    selector: str  # ".m-2", ".f-md-3"
    declarations: tuple[Declaration, ...] = ()


@dataclass
class MediaBlock:
    """An ``@media`` block that rules are appended into."""

    params: str  # "screen and (min-width: 40em)"
    rules: list[Rule] = field(default_factory=list)

    def append(self, rule: Rule) -> None:
        self.rules.append(rule)

    def __len__(self) -> int:
        return len(self.rules)


Node = Union[Rule, MediaBlock]


@dataclass(frozen=True)
class Stylesheet:
    """Top-level nodes in output order: base rules, then media blocks."""

    nodes: tuple[Node, ...] = ()

    @property
    def rules(self) -> list[Rule]:
        """Base-case rules (outside any media block)."""
        return [n for n in self.nodes if isinstance(n, Rule)]

    @property
    def media_blocks(self) -> list[MediaBlock]:
        return [n for n in self.nodes if isinstance(n, MediaBlock)]

    def all_rules(self) -> list[Rule]:
        """Every rule, including those nested in media blocks, in output order."""
        rules: list[Rule] = []
        for node in self.nodes:
            if isinstance(node, MediaBlock):
                rules.extend(node.rules)
            else:
                rules.append(node)
        return rules

    def to_css(self) -> str:
        from system_css.stylesheet.serializer import render

        return render(self)
