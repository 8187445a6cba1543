"""Text renderers for a built route tree.

Both renderers are read-only views over :class:`RouteNode`.

Tree view::

    / [http://localhost:3000]
    ├─ 📁 about [http://localhost:3000/about]
    └─ 📁 blog
       └─ 📁 :slug [http://localhost:3000/blog/:slug]

URL view prints one ``route_path`` per line, depth-first.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import TextIO

from nextroutes.routing.types import RouteNode

_TEE = "├─ "
_CORNER = "└─ "
_PIPE = "│  "
_SPACE = "   "


def _label(node: RouteNode) -> str:
    if not node.is_route:
        return node.name
    return f"{node.name} [{node.route_path}]"


def format_tree(node: RouteNode) -> Iterator[str]:
    """Yield the lines of the tree view, root first."""
    yield _label(node)
    yield from _format_children(node, prefix="")


def _format_children(node: RouteNode, prefix: str) -> Iterator[str]:
    last = len(node.children) - 1
    for i, child in enumerate(node.children):
        is_last = i == last
        yield prefix + (_CORNER if is_last else _TEE) + _label(child)
        if child.children:
            yield from _format_children(child, prefix + (_SPACE if is_last else _PIPE))


def iter_urls(node: RouteNode) -> Iterator[str]:
    """Yield every ``route_path`` in the tree, depth-first pre-order."""
    yield from node.route_paths()


def print_tree(node: RouteNode, file: TextIO | None = None) -> None:
    out = file or sys.stdout
    for line in format_tree(node):
        print(line, file=out)


def print_urls(node: RouteNode, file: TextIO | None = None) -> None:
    out = file or sys.stdout
    for url in iter_urls(node):
        print(url, file=out)
