"""Router directory resolution — finds the ``app/`` or ``pages/`` folder.

Shared by ``nextroutes`` when ``--dir`` is omitted (auto-detection) and
when it is given (validation).
"""

import logging
from pathlib import Path

from nextroutes.errors import RouterDirectoryNotFound
from nextroutes.routing.types import RouterType

logger = logging.getLogger("nextroutes.cli")

# Checked in order; the first existing directory wins
_CANDIDATES: tuple[tuple[tuple[str, ...], RouterType], ...] = (
    (("src", "app"), RouterType.APP),
    (("app",), RouterType.APP),
    (("src", "pages"), RouterType.PAGES),
    (("pages",), RouterType.PAGES),
)


def find_router_directory(start: str | Path) -> tuple[Path, RouterType] | None:
    """Locate the router directory of the project rooted at *start*.

    App Router locations are preferred over Pages Router ones, and
    ``src/`` over the project root.  Projects with both keep only the
    first match.

    Returns:
        ``(directory, router_type)`` or ``None`` if no candidate exists.
    """
    root = Path(start)
    for parts, router_type in _CANDIDATES:
        candidate = root.joinpath(*parts)
        if candidate.is_dir():
            logger.debug("Found %s router directory at %s", router_type.value, candidate)
            return candidate, router_type
    return None


def resolve_directory(path: str | Path) -> Path:
    """Resolve a user-supplied directory to an absolute path.

    Raises:
        RouterDirectoryNotFound: If the path is missing or not a directory.
    """
    resolved = Path(path).resolve()
    if not resolved.exists():
        raise RouterDirectoryNotFound(resolved, "Specified path does not exist")
    if not resolved.is_dir():
        raise RouterDirectoryNotFound(resolved, "Specified path is not a directory")
    return resolved
