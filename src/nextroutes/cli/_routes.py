"""``nextroutes`` — list the routes of a Next.js project.

Resolves the router directory (``--dir`` or auto-detection), builds an
:class:`AnalyzerConfig` from the parsed arguments, and prints the routes.
"""

import argparse
import sys
from pathlib import Path

from nextroutes.analyze import analyze_routes
from nextroutes.cli._resolve import find_router_directory, resolve_directory
from nextroutes.config import AnalyzerConfig
from nextroutes.errors import NextRoutesError, RouterDirectoryNotFound


def run_routes(args: argparse.Namespace) -> None:
    """Print the routes for the directory described by *args*.

    Exits with code 1 when no directory is found, the configuration is
    invalid, or the directory holds no routes.
    """
    router_type = args.force
    try:
        if args.dir:
            directory = resolve_directory(args.dir)
        else:
            found = find_router_directory(Path.cwd())
            if found is None:
                raise RouterDirectoryNotFound(Path.cwd())
            directory, detected = found
            router_type = router_type or detected.value
            directory = resolve_directory(directory)

        config = AnalyzerConfig(
            tree_mode=args.tree,
            host=args.host,
            router_type=router_type,
            replacements=dict(args.replace),
        )
    except RouterDirectoryNotFound as exc:
        print(f"Error: {exc}", file=sys.stderr)
        if not args.dir:
            print(
                "Run from the Next.js project root or use -d to specify "
                "the app or pages directory.",
                file=sys.stderr,
            )
        raise SystemExit(1) from exc
    except NextRoutesError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if analyze_routes(directory, config) is None:
        raise SystemExit(1)
