"""Dynamic segment parsing for Next.js folder and file names.

Every raw segment is classified once into a :class:`SegmentKind`:

    about          Static
    [slug]         Dynamic            -> :slug
    [...slug]      CatchAll           -> :slug*
    [[...slug]]    OptionalCatchAll   -> :slug*?
    [[slug]]       OptionalDynamic    -> :slug?
    (marketing)    RouteGroup         (no URL component)

Display forms substitute a literal value when the replacement table has
a non-empty entry for the segment's key.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum


class SegmentKind(Enum):
    """Syntactic category of a path segment."""

    STATIC = "static"
    DYNAMIC = "dynamic"
    CATCH_ALL = "catch_all"
    OPTIONAL_CATCH_ALL = "optional_catch_all"
    OPTIONAL_DYNAMIC = "optional_dynamic"
    ROUTE_GROUP = "route_group"


# Ordered most specific first; the first match wins
_PATTERNS: tuple[tuple[re.Pattern[str], SegmentKind], ...] = (
    (re.compile(r"\[\[\.\.\.(.+)\]\]"), SegmentKind.OPTIONAL_CATCH_ALL),
    (re.compile(r"\[\.\.\.(.+)\]"), SegmentKind.CATCH_ALL),
    (re.compile(r"\[\[(.+)\]\]"), SegmentKind.OPTIONAL_DYNAMIC),
    (re.compile(r"\[(.+)\]"), SegmentKind.DYNAMIC),
    (re.compile(r"\((.*)\)"), SegmentKind.ROUTE_GROUP),
)

# Placeholder suffix per dynamic kind
_SUFFIXES: dict[SegmentKind, str] = {
    SegmentKind.DYNAMIC: "",
    SegmentKind.CATCH_ALL: "*",
    SegmentKind.OPTIONAL_CATCH_ALL: "*?",
    SegmentKind.OPTIONAL_DYNAMIC: "?",
}


@dataclass(frozen=True, slots=True)
class Segment:
    """A classified path segment.

    ``key`` is the bracketed parameter name for dynamic kinds, the group
    label for route groups, and empty for static segments.
    """

    raw: str
    kind: SegmentKind
    key: str = ""

    @property
    def is_dynamic(self) -> bool:
        return self.kind in _SUFFIXES

    def display(self, replacements: Mapping[str, str] | None = None) -> str:
        """Render the segment for node names and URLs."""
        if not self.is_dynamic:
            return self.raw
        if replacements:
            value = replacements.get(self.key)
            if value:
                return value
        return f":{self.key}{_SUFFIXES[self.kind]}"


def parse_segment(raw: str) -> Segment:
    """Classify a raw folder or file-stem name."""
    for pattern, kind in _PATTERNS:
        match = pattern.fullmatch(raw)
        if match:
            return Segment(raw=raw, kind=kind, key=match.group(1))
    return Segment(raw=raw, kind=SegmentKind.STATIC)


def as_name(raw: str, replacements: Mapping[str, str] | None = None) -> str:
    """Convert ``[slug]``-style names to ``:slug`` or a substituted value.

    Static names, route groups included, are returned unchanged.
    """
    return parse_segment(raw).display(replacements)


def is_route_group(raw: str) -> bool:
    """True for ``(group)`` folders, which add no URL component."""
    return raw.startswith("(") and raw.endswith(")")
