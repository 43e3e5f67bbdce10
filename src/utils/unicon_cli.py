"""
unicon command line interface.

Converts a value between two units of the same family and prints the result.

Usage Examples:
    # Convert with the default two decimal places
    python -m src.utils.unicon_cli 100 from celsius to fahrenheit

    # Round to four decimal places
    python -m src.utils.unicon_cli --round=4 5 from pounds to grams

    # Keywords may come in either order and in any case
    python -m src.utils.unicon_cli 1024 TO kilobytes FROM bytes

    # List supported units
    python -m src.utils.unicon_cli --show
"""

import argparse
import sys
from typing import List, Optional, TextIO, Tuple

from src.services import unit_converter, unit_registry
from src.services.exceptions import ServiceError, ValidationError

from .config import get_config
from .constants import (
    APP_DESCRIPTION,
    APP_NAME,
    APP_VERSION,
    ERROR_INVALID_FORMAT,
    ERROR_MISSING_KEYWORDS,
    FAMILY_LABELS,
    FROM_KEYWORD,
    POSITIONAL_ARGUMENT_COUNT,
    TO_KEYWORD,
)
from .validators import validate_numeric_value, validate_round_places

HELP_HINT = "Use '-h, --help' for help."


def _normalize_negative_values(argv: List[str]) -> List[str]:
    """
    Complete negative values with a trailing point ("-7." -> "-7.0").

    argparse only treats "-7" or "-7.5" style strings as negative numbers;
    "-7." would otherwise be parsed as an unknown option.
    """
    return [
        f"{arg}0" if arg.startswith("-") and arg.endswith(".") and validate_numeric_value(arg)[0] else arg
        for arg in argv
    ]


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting with status 2."""

    def error(self, message):
        raise ValidationError([message])


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = _ArgumentParser(
        prog=APP_NAME,
        usage="%(prog)s [OPTIONS] VALUE from <UNIT> to <UNIT>",
        description=APP_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        epilog="""
Examples:
  unicon 100 from celsius to fahrenheit
  unicon -r 4 5 from pounds to grams
  unicon --show
""",
    )
    parser.add_argument(
        "-r",
        "--round",
        metavar="PLACES",
        dest="round_places",
        help="Round the result to the specified number of decimal places.",
    )
    parser.add_argument(
        "-s", "--show", action="store_true", help="Show the full table of supported units."
    )
    parser.add_argument(
        "-h", "--help", action="store_true", help="Display this help message and exit."
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Display version information and exit."
    )
    parser.add_argument("arguments", nargs="*", help=argparse.SUPPRESS)
    return parser


def format_version() -> str:
    """Version line (e.g., "unicon v0.1")."""
    return f"{APP_NAME} v{APP_VERSION}"


def format_unit_table() -> str:
    """
    Render the supported units grouped by family.

    Returns:
        Multi-line listing, one "\\t- Name" line per unit under each family label
    """
    lines = ["Supported units:"]
    for family, descriptors in unit_registry.list_by_family().items():
        lines.append(f"{FAMILY_LABELS[family]}:")
        lines.extend(f"\t- {descriptor.display_name}" for descriptor in descriptors)
    return "\n".join(lines)


def parse_round_places(raw: Optional[str]) -> int:
    """
    Resolve the number of decimal places.

    Args:
        raw: Value given to --round, or None when the option is absent

    Returns:
        Decimal places to use

    Raises:
        ValidationError: If raw is not a non-negative integer
    """
    if raw is None:
        return get_config().default_round_places

    is_valid, error = validate_round_places(raw)
    if not is_valid:
        raise ValidationError([error])
    return int(raw)


def parse_conversion(arguments: List[str]) -> Tuple[float, str, str]:
    """
    Split "VALUE from <UNIT> to <UNIT>" into its parts.

    The keywords are matched case-insensitively and may appear in either
    order after the value.

    Args:
        arguments: Positional command line arguments

    Returns:
        Tuple of (value, from unit name, to unit name)

    Raises:
        ValidationError: If the arguments do not follow the expected format
    """
    if len(arguments) != POSITIONAL_ARGUMENT_COUNT:
        raise ValidationError([ERROR_INVALID_FORMAT])

    raw_value = arguments[0]
    is_valid, error = validate_numeric_value(raw_value)
    if not is_valid:
        raise ValidationError([error])

    from_pos = None
    to_pos = None
    for i in range(1, len(arguments) - 1):
        keyword = arguments[i].lower()
        if keyword == FROM_KEYWORD:
            from_pos = i + 1
        elif keyword == TO_KEYWORD:
            to_pos = i + 1

    if from_pos is None or to_pos is None:
        raise ValidationError([ERROR_MISSING_KEYWORDS])

    return float(raw_value), arguments[from_pos], arguments[to_pos]


def run(
    argv: Optional[List[str]] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """
    Run the command line.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])
        stdout: Stream for results (defaults to sys.stdout)
        stderr: Stream for errors (defaults to sys.stderr)

    Returns:
        0 on success, 1 on any parse, lookup or conversion failure
    """
    if argv is None:
        argv = sys.argv[1:]
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    parser = build_parser()

    if not argv:
        print(parser.format_help(), file=stdout, end="")
        return 0

    try:
        args = parser.parse_intermixed_args(_normalize_negative_values(argv))

        if args.help:
            print(parser.format_help(), file=stdout, end="")
            return 0
        if args.version:
            print(format_version(), file=stdout)
            return 0
        if args.show:
            print(format_unit_table(), file=stdout)
            return 0

        places = parse_round_places(args.round_places)
        value, from_name, to_name = parse_conversion(args.arguments)

        from_unit = unit_registry.lookup(from_name)
        to_unit = unit_registry.lookup(to_name)
        print(
            unit_converter.format_conversion(value, from_unit, to_unit, places),
            file=stdout,
        )
        return 0

    except ServiceError as e:
        print(f"ERROR: {e}", file=stderr)
        print(HELP_HINT, file=stderr)
        return 1


def main():
    """Main CLI entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
