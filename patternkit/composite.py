"""Tree of labelled nodes and an indented printer for it."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

logger = logging.getLogger(__name__)


class NodeTree(Protocol):
    """A displayable node that may have child nodes."""

    def display(self) -> str: ...

    def components(self) -> Sequence[NodeTree]: ...


@dataclass(frozen=True)
class Leaf:
    """A node without children."""

    label: str

    def display(self) -> str:
        return self.label

    def components(self) -> Sequence[NodeTree]:
        return ()


@dataclass(frozen=True)
class Branch:
    """A node holding child nodes."""

    label: str
    children: Sequence[NodeTree] = field(default_factory=tuple)

    def display(self) -> str:
        return self.label

    def components(self) -> Sequence[NodeTree]:
        return self.children


def _walk(tree: NodeTree, prefix: str):
    yield prefix + tree.display()
    for child in tree.components():
        yield from _walk(child, prefix + " ")


def render_tree(tree: NodeTree) -> list[str]:
    """Return one line per node, indented one space more per level."""
    return list(_walk(tree, " "))


def print_tree(tree: NodeTree) -> None:
    """Log the rendered tree line by line."""
    for line in render_tree(tree):
        logger.info("%s", line)


def main(argv: Sequence[str] | None = None) -> None:
    """Print a small sample tree."""
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    b1 = Branch("branch1", (Leaf("l3"),))
    b0 = Branch("branch0", (Leaf("L0"), Leaf("L1"), b1))
    print_tree(b0)


if __name__ == "__main__":
    main()