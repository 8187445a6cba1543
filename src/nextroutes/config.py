"""Analyzer configuration.

AnalyzerConfig is a frozen dataclass: immutable after creation, with one
explicit field per option.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from nextroutes.errors import ConfigurationError

if TYPE_CHECKING:
    from nextroutes.routing.types import RouterType

DEFAULT_HOST = "http://localhost:3000"


@dataclass(frozen=True, slots=True)
class AnalyzerConfig:
    """Options for one route analysis run. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AnalyzerConfig(tree_mode=True, replacements={"slug": "hello"})
    """

    # Output
    tree_mode: bool = False

    # URLs
    host: str = DEFAULT_HOST

    # None = detect from the directory
    router_type: RouterType | None = None

    # Dynamic segment key -> literal value
    replacements: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        from nextroutes.routing.types import RouterType

        host = self.host.rstrip("/")
        if not host:
            msg = f"host must be a non-empty URL, got {self.host!r}"
            raise ConfigurationError(msg)
        object.__setattr__(self, "host", host)

        if isinstance(self.router_type, str):
            try:
                object.__setattr__(self, "router_type", RouterType(self.router_type.lower()))
            except ValueError:
                choices = ", ".join(t.value for t in RouterType)
                msg = f"Unknown router type {self.router_type!r} (expected one of: {choices})"
                raise ConfigurationError(msg) from None

        object.__setattr__(self, "replacements", MappingProxyType(dict(self.replacements)))
