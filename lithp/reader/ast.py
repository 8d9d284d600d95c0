"""Generic labelled syntax tree.

Nodes follow the parser-combinator convention of '|'-joined tags: a number
literal reached through the expr rule is tagged ``expr|number|regex``, a
compound expression ``expr|sexpr|>``, the root ``>``. Consumers test tags by
substring, never by equality, except for the bare ``regex`` anchors.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class AstNode:
    tag: str
    contents: str = ""
    children: list[AstNode] = field(default_factory=list)
    row: int = 1
    col: int = 1

    @property
    def children_num(self) -> int:
        return len(self.children)


def node_count(tree: AstNode) -> int:
    """Total number of nodes in the tree, the root included."""
    return 1 + sum(node_count(child) for child in tree.children)
