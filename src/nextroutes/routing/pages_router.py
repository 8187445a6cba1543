"""Route tree builder for the Next.js Pages Router (``pages/``).

Every script file is its own route, except ``index`` files, which make
their directory reachable.  A directory without an index file only
groups its children and has no URL of its own.  ``_app``, ``_document``
and other underscore entries are skipped.  Route files named ``api`` or
whose folder path contains ``api`` produce no leaf; index files still mark
their folder.  There is no route-group syntax here.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from nextroutes.config import DEFAULT_HOST
from nextroutes.routing._listing import (
    API_SEGMENT,
    INDEX_STEM,
    SCRIPT_FILE_RE,
    list_directory,
    logger,
    node_name,
    route_url,
)
from nextroutes.routing.segments import as_name
from nextroutes.routing.types import RouteNode, sort_nodes


def build_pages_tree(
    directory: str | Path,
    host: str = DEFAULT_HOST,
    replacements: Mapping[str, str] | None = None,
) -> RouteNode | None:
    """Build the route tree rooted at a Pages Router directory.

    Returns ``None`` when the directory is missing or holds no routes.
    """
    return _walk_directory(
        Path(directory),
        host=host,
        replacements=replacements or {},
        parts=(),
    )


def _walk_directory(
    directory: Path,
    *,
    host: str,
    replacements: Mapping[str, str],
    parts: tuple[str, ...],
) -> RouteNode | None:
    if not directory.exists():
        return None

    # Substring test on the joined path: rapid/ and api/ both count
    in_api = API_SEGMENT in "/".join(parts)
    has_index = False
    children: list[RouteNode] = []

    try:
        for entry in list_directory(directory):
            if entry.name.startswith("_"):
                continue

            if entry.is_dir():
                child = _walk_directory(
                    entry,
                    host=host,
                    replacements=replacements,
                    parts=(*parts, entry.name),
                )
                if child is not None:
                    children.append(child)
                continue

            match = SCRIPT_FILE_RE.fullmatch(entry.name)
            if match is None:
                continue

            stem = match.group(1)
            if stem == INDEX_STEM:
                has_index = True
            elif stem != API_SEGMENT and not in_api:
                children.append(
                    RouteNode(
                        name=as_name(stem, replacements),
                        route_path=route_url(host, (*parts, stem), replacements),
                    )
                )
    except OSError:
        logger.warning("Directory analysis error: %s", directory, exc_info=True)
        return None

    if not has_index and not children:
        logger.debug("No routes under %s", directory)
        return None

    return RouteNode(
        name=node_name(parts, replacements),
        route_path=route_url(host, parts, replacements) if has_index else None,
        children=sort_nodes(children),
    )
