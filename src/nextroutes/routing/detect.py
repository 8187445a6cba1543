"""Router type detection from a directory's name and contents."""

from __future__ import annotations

from pathlib import Path

from nextroutes.routing._listing import PAGE_FILE_RE, list_directory, logger
from nextroutes.routing.types import RouterType


def detect_router_type(directory: str | Path) -> RouterType:
    """Guess which router a directory follows.

    ``app`` and ``pages`` directories are recognised by name.  Otherwise
    any ``page.*`` file beneath the directory means App Router; the
    fallback is Pages Router.
    """
    path = Path(directory)
    if path.name == RouterType.APP.value:
        return RouterType.APP
    if path.name == RouterType.PAGES.value:
        return RouterType.PAGES

    if has_page_file(path):
        return RouterType.APP
    return RouterType.PAGES


def has_page_file(directory: Path) -> bool:
    """True if a ``page.*`` route file exists anywhere under *directory*.

    Unreadable directories count as having none.
    """
    try:
        entries = list_directory(directory)
        if any(PAGE_FILE_RE.fullmatch(entry.name) for entry in entries):
            return True
        return any(entry.is_dir() and has_page_file(entry) for entry in entries)
    except OSError:
        logger.debug("Skipping unreadable directory %s", directory)
        return False
