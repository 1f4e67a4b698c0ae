"""fieldstate CLI — registry validation and form preview.

Entry point registered as ``fieldstate`` in ``pyproject.toml``::

    [project.scripts]
    fieldstate = "fieldstate.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``fieldstate`` command."""
    parser = argparse.ArgumentParser(
        prog="fieldstate",
        description="fieldstate — live field state for composite forms.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    # -- fieldstate check --------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate a field registry file")
    check_parser.add_argument("model", help="Path to a JSON registry file")

    # -- fieldstate render -------------------------------------------------
    render_parser = subparsers.add_parser("render", help="Render a registry as an HTML form")
    render_parser.add_argument("model", help="Path to a JSON registry file")
    render_parser.add_argument(
        "--defaults",
        default=None,
        help='Default values as a JSON object (e.g. \'{"email": "a@b.com"}\')',
    )
    render_parser.add_argument("--action", default="", help="Form action URL")
    render_parser.add_argument("--submit-label", default="Submit", help="Submit button text")
    render_parser.add_argument(
        "--all-errors",
        action="store_true",
        help="Show errors for every field, not only touched ones",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        import logging

        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.command == "check":
        from fieldstate.cli._check import run_check

        run_check(args)
    elif args.command == "render":
        from fieldstate.cli._render import run_render

        run_render(args)
