"""nextroutes exception hierarchy.

Shared across the analyzer, the tree builders, and the CLI so every
module raises and catches the same types.
"""

from pathlib import Path


class NextRoutesError(Exception):
    """Base for all nextroutes-specific errors."""


class ConfigurationError(NextRoutesError):
    """Raised when analyzer configuration is invalid.

    Typically raised from ``AnalyzerConfig.__post_init__``.
    """


class RouterDirectoryNotFound(NextRoutesError):  # noqa: N818
    """No app/pages directory could be located or the given path is unusable."""

    def __init__(self, path: str | Path, detail: str = "") -> None:
        self.path = Path(path)
        self.detail = detail or "Cannot find Next.js directory"
        super().__init__(f"{self.detail}: {self.path}")
