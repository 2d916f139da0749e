"""CLI entry point for prettyfit.

This module acts as the central entry point for the project's CLI tools.
It formats JSON documents with the registered formatters and shows the
active configuration.
"""

import argparse
import subprocess
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from prettyfit.config import (
    EnvVar,
    get_default_width,
    get_environment,
    list_environment_variables,
)
from prettyfit.core import get_logger, setup_logging
from prettyfit.doc import verify_choices
from prettyfit.errors import PrettyFitError
from prettyfit.formatters import get_formatter, list_formatters

# Load environment variables from .env file
load_dotenv()

logger = get_logger("cli")


# =============================================================================
# Render Command
# =============================================================================


def _read_document(path: str) -> str:
    """Read a JSON document from a file, or from stdin for "-"."""
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def cmd_render(args: argparse.Namespace) -> int:
    """Handle the render command."""
    try:
        formatter = get_formatter(args.formatter)
    except KeyError as e:
        logger.error(e.args[0])
        return 1

    try:
        text = _read_document(args.path)
    except OSError as e:
        logger.error(f"Cannot read {args.path}: {e}")
        return 1

    width = get_default_width(args.width)
    try:
        with verify_choices(args.verify_choices or None):
            result = formatter.format(text, width, args.column)
    except ValidationError as e:
        logger.error(f"Invalid {formatter.name} document:\n{e}")
        return 1
    except PrettyFitError as e:
        logger.error(f"Layout error: {e}")
        return 1

    if result.has_overflow:
        logger.warning(
            f"{len(result.overflowing_lines)} line(s) exceed width {width}"
        )

    if args.output:
        args.output.write_text(result.text + "\n", encoding="utf-8")
        logger.info(f"Output saved to {args.output}")
    else:
        print(result.text)
    return 0


def handle_render_command(argv: list[str]) -> int:
    """Handle render command argument parsing."""
    parser = argparse.ArgumentParser(
        prog="python . render",
        description="Format a JSON document for a target width",
    )
    parser.add_argument(
        "formatter",
        type=str,
        help="Formatter name (see: python . formatters)",
    )
    parser.add_argument(
        "path",
        type=str,
        nargs="?",
        default="-",
        help="JSON document to format, '-' for stdin (default: -)",
    )
    parser.add_argument(
        "--width",
        "-w",
        type=int,
        default=None,
        help="Target line width (default: PRETTYFIT_WIDTH or 80)",
    )
    parser.add_argument(
        "--column",
        "-c",
        type=int,
        default=0,
        help="Columns already used on the first line (default: 0)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output file path",
    )
    parser.add_argument(
        "--verify-choices",
        action="store_true",
        help="Check that every choice offers two renderings of the same text",
    )

    args = parser.parse_args(argv)
    return cmd_render(args)


# =============================================================================
# Formatters Command
# =============================================================================


def cmd_formatters(_args: argparse.Namespace) -> int:
    """List registered formatters."""
    names = list_formatters()
    name_width = max(len(name) for name in names)
    print("Available formatters:")
    for name in names:
        print(f"  {name:<{name_width}}  {get_formatter(name).description}")
    return 0


def handle_formatters_command(argv: list[str]) -> int:
    """Handle formatters command argument parsing."""
    parser = argparse.ArgumentParser(
        prog="python . formatters",
        description="List registered document formatters",
    )
    args = parser.parse_args(argv)
    return cmd_formatters(args)


# =============================================================================
# Demo Command
# =============================================================================


def _parse_widths(value: str) -> list[int]:
    """Parse a comma separated list of widths ("80,40,20")."""
    try:
        widths = [int(part) for part in value.split(",") if part.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid width list: {value!r}")
    if not widths:
        raise argparse.ArgumentTypeError("at least one width is required")
    return widths


def cmd_demo(args: argparse.Namespace) -> int:
    """Render the built-in samples at several widths."""
    names = [args.formatter] if args.formatter else list_formatters()

    blocks: list[str] = []
    for name in names:
        try:
            formatter = get_formatter(name)
        except KeyError as e:
            logger.error(e.args[0])
            return 1

        sample = formatter.sample()
        for width in args.widths:
            result = formatter.render(sample, width)
            blocks.append(f"# {name} @ width {width}\n{result.text}")

    print("\n---\n".join(blocks))
    return 0


def handle_demo_command(argv: list[str]) -> int:
    """Handle demo command argument parsing."""
    parser = argparse.ArgumentParser(
        prog="python . demo",
        description="Render the built-in sample documents at several widths",
    )
    parser.add_argument(
        "formatter",
        type=str,
        nargs="?",
        default=None,
        help="Formatter to demonstrate (default: all)",
    )
    parser.add_argument(
        "--widths",
        type=_parse_widths,
        default=[80, 40, 20],
        help="Comma separated widths (default: 80,40,20)",
    )

    args = parser.parse_args(argv)
    return cmd_demo(args)


# =============================================================================
# Env Command
# =============================================================================


def cmd_env(args: argparse.Namespace) -> int:
    """Show configuration variables and their current values."""
    print("Environment Report")
    for env_var in list_environment_variables(args.category):
        config = env_var.value
        value = get_environment(env_var)
        print(f"\n  {config.name} = {value!r}")
        print(f"    {config.description}")
        print(f"    default: {config.default!r}, category: {config.category}")
    return 0


def handle_env_command(argv: list[str]) -> int:
    """Handle env command argument parsing."""
    parser = argparse.ArgumentParser(
        prog="python . env",
        description="Show prettyfit configuration variables",
    )
    parser.add_argument(
        "--category",
        type=str,
        default=None,
        choices=["layout", "debug"],
        help="Only show variables of this category",
    )
    args = parser.parse_args(argv)
    return cmd_env(args)


# =============================================================================
# Test Command
# =============================================================================


def cmd_test(extra_args: list[str]) -> int:
    """Run pytest with provided arguments.

    Usage:
        python . test                # Run all tests
        python . test --unit         # Run only unit tests
        python . test -k "fill"      # Run tests matching pattern
    """
    tier_markers = {
        "--unit": ["-m", "unit"],
        "--all": [],
    }

    pytest_args: list[str] = []
    remaining_args: list[str] = []

    for arg in extra_args:
        if arg in tier_markers:
            pytest_args.extend(tier_markers[arg])
        else:
            remaining_args.append(arg)

    cmd = [sys.executable, "-m", "pytest", *pytest_args, *remaining_args]
    logger.info(f"Running: {' '.join(cmd)}")

    try:
        return subprocess.call(cmd)
    except KeyboardInterrupt:
        return 130


# =============================================================================
# Main
# =============================================================================


def show_help() -> None:
    """Display CLI help message."""
    print("Usage: python . {command} [args]")
    print("\nCommands:")
    print("  render      Format a JSON document for a target width")
    print("  formatters  List registered document formatters")
    print("  demo        Render built-in samples at several widths")
    print("  env         Show configuration variables")
    print("  test        Run pytest (--unit for unit tests only)")
    print("\nExamples:")
    print("  python . render sexpr expr.json --width 40")
    print("  cat tree.json | python . render tree - -w 20")
    print("  python . demo c --widths 60,30")
    print("  python . env --category layout")


def main() -> int:
    """Main entry point for the CLI."""
    if len(sys.argv) < 2:
        show_help()
        return 1

    command = sys.argv[1]
    rest_args = sys.argv[2:]

    if command in ("-h", "--help"):
        show_help()
        return 0

    commands = {
        "render": lambda: handle_render_command(rest_args),
        "formatters": lambda: handle_formatters_command(rest_args),
        "demo": lambda: handle_demo_command(rest_args),
        "env": lambda: handle_env_command(rest_args),
        "test": lambda: cmd_test(rest_args),
    }

    if command in commands:
        setup_logging(get_environment(EnvVar.LOG_LEVEL))
        return commands[command]()

    logger.error(f"Unknown command: {command}")
    show_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
