"""nextroutes — list the URL routes of a Next.js project from its files.

Reads ``app/`` or ``pages/`` without running anything and prints either
a flat URL list or an annotated directory tree.

Basic usage::

    from nextroutes import AnalyzerConfig, analyze_routes

    tree = analyze_routes("src/app", AnalyzerConfig(tree_mode=True))

Command line::

    nextroutes -t -r slug=hello
"""

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_HOST",
    "AnalyzerConfig",
    "ConfigurationError",
    "NextRoutesError",
    "RouteNode",
    "RouterDirectoryNotFound",
    "RouterType",
    "analyze_routes",
    "as_name",
    "build_app_tree",
    "build_pages_tree",
    "detect_router_type",
    "print_tree",
    "print_urls",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import nextroutes`` fast while providing a clean top-level API.
    """
    if name == "analyze_routes":
        from nextroutes.analyze import analyze_routes

        return analyze_routes

    if name in ("AnalyzerConfig", "DEFAULT_HOST"):
        import nextroutes.config

        return getattr(nextroutes.config, name)

    if name in ("NextRoutesError", "ConfigurationError", "RouterDirectoryNotFound"):
        import nextroutes.errors

        return getattr(nextroutes.errors, name)

    if name in ("print_tree", "print_urls"):
        import nextroutes.render

        return getattr(nextroutes.render, name)

    if name in (
        "RouteNode",
        "RouterType",
        "as_name",
        "build_app_tree",
        "build_pages_tree",
        "detect_router_type",
    ):
        import nextroutes.routing

        return getattr(nextroutes.routing, name)

    raise AttributeError(f"module 'nextroutes' has no attribute {name!r}")
