"""
CLI for one-off conversions.

Usage:
    python -m hanja_hangul.cli convert "李씨" "女子"
    cat article.txt | python -m hanja_hangul.cli convert --fallback
    python -m hanja_hangul.cli convert --data-dir ./tables "大韓民國"
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

from hanja_hangul.config import get_settings
from hanja_hangul.conversion import DictionaryLoadError, convert, load_dictionary
from hanja_hangul.utils.logging import get_logger

logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hanja_hangul.cli convert",
        description="Convert Hanja to Hangul. Reads stdin line by line when no "
        "TEXT is given.",
    )
    parser.add_argument("text", nargs="*", metavar="TEXT", help="Text to convert")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory with hanja_char.txt, dueum.txt, hanja_word.txt",
    )
    parser.add_argument(
        "--fallback",
        action="store_true",
        help="Print the fallback message instead of echoing unconvertible input",
    )
    return parser


def _iter_inputs(texts: List[str], stdin: TextIO) -> Iterable[str]:
    if texts:
        yield from texts
        return
    for line in stdin:
        yield line.rstrip("\r\n")


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    args = _build_parser().parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    try:
        dictionary = load_dictionary(args.data_dir)
    except DictionaryLoadError as e:
        logger.error("cli.dictionary_load_failed", error=str(e))
        return 1

    fallback = get_settings().fallback_message if args.fallback else None

    for text in _iter_inputs(args.text, stdin):
        result = convert(text, dictionary)
        stdout.write(result.text_or(fallback if fallback is not None else text))
        stdout.write("\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())
