"""Route tree builder for the Next.js App Router (``app/``).

A directory is a route when it holds a ``page.{js,jsx,ts,tsx}`` file.
Folders wrapped in ``(parens)`` are route groups: they show up in the
tree but contribute nothing to URLs.  ``_private`` folders and ``api``
are skipped.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from nextroutes.config import DEFAULT_HOST
from nextroutes.routing._listing import (
    API_SEGMENT,
    PAGE_FILE_RE,
    list_directory,
    logger,
    node_name,
    route_url,
)
from nextroutes.routing.segments import is_route_group
from nextroutes.routing.types import RouteNode, sort_nodes


def build_app_tree(
    directory: str | Path,
    host: str = DEFAULT_HOST,
    replacements: Mapping[str, str] | None = None,
) -> RouteNode | None:
    """Build the route tree rooted at an App Router directory.

    Args:
        directory: The ``app/`` directory (or any folder inside it).
        host: Base URL prepended to every route.
        replacements: Literal values for dynamic segment keys.

    Returns:
        The root :class:`RouteNode`, or ``None`` when the directory is
        missing or contains no routes.
    """
    return _walk_directory(
        Path(directory),
        host=host,
        replacements=replacements or {},
        parts=(),
        route_segments=(),
    )


def _walk_directory(
    directory: Path,
    *,
    host: str,
    replacements: Mapping[str, str],
    parts: tuple[str, ...],
    route_segments: tuple[str, ...],
) -> RouteNode | None:
    """Recursively build the node for one directory.

    Args:
        directory: Current directory being walked.
        host: Base URL.
        replacements: Slug substitution table, read-only.
        parts: Raw folder names from the root, route groups included.
        route_segments: Raw folder names that contribute to the URL.
    """
    if not directory.exists():
        return None

    try:
        entries = list_directory(directory)

        route_path = None
        if any(PAGE_FILE_RE.fullmatch(entry.name) and entry.is_file() for entry in entries):
            route_path = route_url(host, route_segments, replacements)

        children: list[RouteNode] = []
        for entry in entries:
            # _components, _lib and friends are private; api holds route handlers
            if entry.name.startswith("_") or entry.name == API_SEGMENT:
                continue
            if not entry.is_dir():
                continue

            next_segments = route_segments
            if not is_route_group(entry.name):
                next_segments = (*route_segments, entry.name)

            child = _walk_directory(
                entry,
                host=host,
                replacements=replacements,
                parts=(*parts, entry.name),
                route_segments=next_segments,
            )
            if child is not None:
                children.append(child)
    except OSError:
        logger.warning("Directory analysis error: %s", directory, exc_info=True)
        return None

    if route_path is None and not children:
        logger.debug("No routes under %s", directory)
        return None

    return RouteNode(
        name=node_name(parts, replacements),
        route_path=route_path,
        children=sort_nodes(children),
    )
