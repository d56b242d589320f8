"""CLI entry point for slayd.

Usage:
    slayd init [filename]
    slayd build [input.yaml] [output.html]
    slayd <input.yaml> [output.html]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from slayd.builder import build_all, build_presentation, init_presentation
from slayd.config import get_settings
from slayd.errors import SlaydError
from slayd.logging import setup_logging

COMMANDS = {"init", "new", "build"}


def cmd_init(args: argparse.Namespace) -> int:
    """Create a new presentation template."""
    try:
        path = init_presentation(args.filename)
    except FileExistsError as e:
        print(f"Error: {e}", file=sys.stderr)
        print("Use a different filename or delete the existing file first.", file=sys.stderr)
        return 1

    print(f"Created {path}")
    print()
    print("Next steps:")
    print(f"  1. Edit {path} with your content")
    print(f"  2. Run: slayd {path}")
    print("  3. Open the generated HTML in your browser")
    return 0


def cmd_build(args: argparse.Namespace) -> int:
    """Build one presentation, or all of them in the current directory."""
    settings = get_settings()

    if args.input is None:
        summary = build_all(Path(), settings=settings)
        if not summary.built and not summary.failed:
            print("No YAML files found in current directory")
            return 0
        for result in summary.built:
            print(f"Built {result.output} ({result.slide_count} slides)")
        for path, reason in summary.failed:
            print(f"Error building {path}: {reason}", file=sys.stderr)
        print(f"Successfully built: {len(summary.built)}")
        if summary.failed:
            print(f"Failed: {len(summary.failed)}")
        return 0 if summary.ok else 1

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: Input file not found: {input_path}", file=sys.stderr)
        return 1

    try:
        result = build_presentation(input_path, args.output, settings=settings)
    except (SlaydError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Built {result.output} ({result.slide_count} slides)")
    return 0


def _global_options() -> argparse.ArgumentParser:
    """Options accepted both before and after the subcommand."""
    options = argparse.ArgumentParser(add_help=False)
    options.add_argument(
        "--log-level",
        default=argparse.SUPPRESS,
        help="Minimum log level (defaults to SLAYD_LOG_LEVEL or WARNING)",
    )
    return options


def build_parser() -> argparse.ArgumentParser:
    global_options = _global_options()
    parser = argparse.ArgumentParser(
        prog="slayd",
        description="Compile YAML slide decks into a single HTML presentation",
        epilog="Shorthand: 'slayd talk.yaml [out.html]' is the same as 'slayd build talk.yaml [out.html]'",
        parents=[global_options],
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        aliases=["new"],
        parents=[global_options],
        help="Create a new presentation template",
    )
    init_parser.add_argument(
        "filename",
        nargs="?",
        default="presentation.yaml",
        help="Template file to create (default: presentation.yaml)",
    )
    init_parser.set_defaults(func=cmd_init)

    # build subcommand
    build_cmd = subparsers.add_parser(
        "build",
        parents=[global_options],
        help="Build presentation(s); builds every YAML file in cwd without input",
    )
    build_cmd.add_argument("input", nargs="?", default=None, help="YAML presentation file")
    build_cmd.add_argument("output", nargs="?", default=None, help="HTML output file")
    build_cmd.set_defaults(func=cmd_build)

    return parser


def _expand_shorthand(argv: list[str]) -> list[str]:
    """Insert ``build`` before a bare file argument.

    Global options may come first, so the first positional argument is
    found by skipping options and the value that follows ``--log-level``.
    """
    index = 0
    while index < len(argv):
        arg = argv[index]
        if arg == "--log-level":
            index += 2
        elif arg.startswith("-"):
            index += 1
        elif arg in COMMANDS:
            return argv
        else:
            return [*argv[:index], "build", *argv[index:]]
    return argv


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    argv = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()

    if not argv:
        parser.print_help()
        return 1

    args = parser.parse_args(_expand_shorthand(argv))

    settings = get_settings()
    log_level = getattr(args, "log_level", None) or settings.log_level
    setup_logging(json_logs=settings.json_logs, log_level=log_level)

    result: int = args.func(args)
    return result


if __name__ == "__main__":
    sys.exit(main())
