"""Data models for the reconstructed route tree.

Frozen dataclasses built bottom-up during one directory walk.  A node's
display name is final when the node is created; parents never rename
their children.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from functools import cache

from pyuca import Collator

# Prefix for directory nodes in the tree view
FOLDER_MARKER = "📁 "


class RouterType(Enum):
    """Which Next.js file-system router a directory follows."""

    APP = "app"
    PAGES = "pages"


@dataclass(frozen=True, slots=True)
class RouteNode:
    """One directory or route file in the logical route tree.

    Attributes:
        name: Display name.  ``"/"`` for the root, folder-marked for
            directories, slug-resolved for dynamic segments.
        route_path: Fully-qualified URL when the node is reachable.
        children: Child nodes, sorted by name.
    """

    name: str
    route_path: str | None = None
    children: tuple[RouteNode, ...] = ()

    @property
    def is_route(self) -> bool:
        return self.route_path is not None

    def walk(self) -> Iterator[RouteNode]:
        """Yield this node and every descendant, depth-first pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def route_paths(self) -> list[str]:
        """All URLs in the subtree, in walk order."""
        return [node.route_path for node in self.walk() if node.route_path is not None]


@cache
def _collator() -> Collator:
    # Loads the Unicode collation table once per process
    return Collator()


def sort_nodes(nodes: Iterable[RouteNode]) -> tuple[RouteNode, ...]:
    """Order nodes by display name with the Unicode root collation.

    Letters compare without case first (``alpha`` before ``Zeta``), symbols before
    letters (``📁 blog`` before ``about``), independent of the process
    locale.
    """
    collator = _collator()
    return tuple(sorted(nodes, key=lambda node: collator.sort_key(node.name)))
