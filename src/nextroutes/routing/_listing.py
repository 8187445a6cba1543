"""Helpers shared by the App-style and Pages-style tree builders."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from pathlib import Path

from nextroutes.routing.segments import as_name
from nextroutes.routing.types import FOLDER_MARKER

logger = logging.getLogger("nextroutes.routing")

# Extensions Next.js treats as route modules
ROUTE_EXTENSIONS = ("js", "jsx", "ts", "tsx")

# App Router route definition file: page.js, page.tsx, ...
PAGE_FILE_RE = re.compile(rf"page\.(?:{'|'.join(ROUTE_EXTENSIONS)})")

# Pages Router route module: any script file, stem captured
SCRIPT_FILE_RE = re.compile(rf"(.+)\.(?:{'|'.join(ROUTE_EXTENSIONS)})")

INDEX_STEM = "index"
API_SEGMENT = "api"


def list_directory(directory: Path) -> list[Path]:
    """Return the entries of *directory*.

    Raises ``OSError`` when the directory cannot be read.
    """
    return list(directory.iterdir())


def node_name(parts: Sequence[str], replacements: Mapping[str, str]) -> str:
    """Display name for a directory node at relative path *parts*."""
    if not parts:
        return "/"
    return FOLDER_MARKER + as_name(parts[-1], replacements)


def route_url(host: str, segments: Sequence[str], replacements: Mapping[str, str]) -> str:
    """Join resolved *segments* onto *host*; no segments is the host itself."""
    route = "/".join(as_name(segment, replacements) for segment in segments)
    return f"{host}/{route}" if route else host
