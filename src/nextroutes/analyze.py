"""Route analysis entry point.

Picks a router type, builds the route tree, and prints it::

    tree = analyze_routes("app", AnalyzerConfig(tree_mode=True))
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import TextIO

from nextroutes.config import AnalyzerConfig
from nextroutes.render import print_tree, print_urls
from nextroutes.routing.app_router import build_app_tree
from nextroutes.routing.detect import detect_router_type
from nextroutes.routing.pages_router import build_pages_tree
from nextroutes.routing.types import RouteNode, RouterType

logger = logging.getLogger("nextroutes.analyze")

_Builder = Callable[[Path, str, Mapping[str, str]], RouteNode | None]

_BUILDERS: dict[RouterType, _Builder] = {
    RouterType.APP: build_app_tree,
    RouterType.PAGES: build_pages_tree,
}


def analyze_routes(
    directory: str | Path,
    config: AnalyzerConfig | None = None,
    *,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> RouteNode | None:
    """Analyze and print the routes of a Next.js app or pages directory.

    Args:
        directory: The ``app/`` or ``pages/`` directory.
        config: Output mode, host, forced router type and replacements.
            Defaults to ``AnalyzerConfig()``.
        out: Stream for the rendered routes (stdout by default).
        err: Stream for the "not found" diagnostic (stderr by default).

    Returns:
        The built route tree, or ``None`` if no routes were found.
    """
    config = config or AnalyzerConfig()
    path = Path(directory)

    router_type = config.router_type or detect_router_type(path)
    logger.debug("Analyzing %s as %s router", path, router_type.value)

    tree = _BUILDERS[router_type](path, config.host, config.replacements)
    if tree is None:
        print(
            f"Route structure not found. Please check your Next.js "
            f"{router_type.value} directory: {path}",
            file=err or sys.stderr,
        )
        return None

    if config.tree_mode:
        print_tree(tree, file=out)
    else:
        print_urls(tree, file=out)
    return tree
