"""
Unified CLI entry point for Hanja-Hangul.

Usage:
    python -m hanja_hangul.cli <command> [options]

Available commands:
    convert  - Convert text given as arguments or on stdin
    serve    - Run the conversion web service

Examples:
    python -m hanja_hangul.cli convert "李씨는 女子다"
    echo "大韓民國" | python -m hanja_hangul.cli convert --fallback
    python -m hanja_hangul.cli serve --mode prod
"""

import argparse
import sys
from typing import List, Optional


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point with subcommand routing.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = argparse.ArgumentParser(
        prog="hanja_hangul.cli",
        description="Hanja-Hangul CLI - convert Hanja in text to Hangul",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m hanja_hangul.cli convert "李씨는 女子다"
  echo "大韓民國" | python -m hanja_hangul.cli convert --fallback
  python -m hanja_hangul.cli serve --mode prod
        """,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
        help="Command to execute",
    )

    subparsers.add_parser(
        "convert",
        help="Convert text given as arguments or on stdin",
        add_help=False,  # Let the delegated module handle help
    )
    subparsers.add_parser(
        "serve",
        help="Run the conversion web service",
        add_help=False,
    )

    args, remaining_args = parser.parse_known_args(argv)

    if args.command == "convert":
        from hanja_hangul.cli.convert import main as convert_main

        return convert_main(remaining_args)

    elif args.command == "serve":
        from hanja_hangul.cli.serve import main as serve_main

        return serve_main(remaining_args)

    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
