"""nextroutes CLI — print the routes of a Next.js project.

Entry point registered as ``nextroutes`` in ``pyproject.toml``::

    [project.scripts]
    nextroutes = "nextroutes.cli:main"
"""

import argparse
import logging
import sys

from nextroutes.config import DEFAULT_HOST


def _replacement(value: str) -> tuple[str, str]:
    """Parse a ``key=value`` replacement argument."""
    key, sep, replacement = value.partition("=")
    if not sep or not key or not replacement:
        msg = f"expected KEY=VALUE, got {value!r}"
        raise argparse.ArgumentTypeError(msg)
    return key, replacement


def build_parser() -> argparse.ArgumentParser:
    # -h is the host flag, so help is --help only
    parser = argparse.ArgumentParser(
        prog="nextroutes",
        description="Show the routes of a Next.js app or pages directory.",
        add_help=False,
        epilog=(
            "examples:\n"
            "  nextroutes\n"
            "  nextroutes -t\n"
            "  nextroutes -h https://example.com\n"
            "  nextroutes -f pages\n"
            "  nextroutes -r brand=github -r category=coding"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-t",
        "--tree",
        action="store_true",
        help="Display routes in directory structure format",
    )
    parser.add_argument(
        "-h",
        "--host",
        default=DEFAULT_HOST,
        metavar="URL",
        help=f"Base host URL (default: {DEFAULT_HOST})",
    )
    parser.add_argument(
        "-d",
        "--dir",
        default=None,
        metavar="PATH",
        help="Next.js app or pages directory (default: auto-detect)",
    )
    parser.add_argument(
        "-f",
        "--force",
        type=str.lower,
        choices=("app", "pages"),
        default=None,
        help="Force router type",
    )
    parser.add_argument(
        "-r",
        "--replace",
        type=_replacement,
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Replace a dynamic route segment (e.g. slug=github); repeatable",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument("--help", action="help", help="Show this help message and exit")
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``nextroutes`` command."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    from nextroutes.cli._routes import run_routes

    run_routes(args)
