"""
Dictionary loader for the three Hanja conversion tables.

Each table is line-oriented text in ``<field1>,<field2>`` form:

1. hanja_char.txt - single Hanja -> single Hangul (e.g. ``李,리``)
2. dueum.txt - Hangul -> Hangul initial-sound adjustment (e.g. ``리,이``)
3. hanja_word.txt - irregular Hanja words -> Hangul (e.g. ``女子,여자``)

Line rules shared by all three tables:
- A line must split on ``,`` into exactly two fields, otherwise it is skipped
- Fields are whitespace-trimmed
- A field that is empty after trimming causes the line to be skipped
- Duplicate keys: last write wins

For the character tables only the first character of each field is kept, so
multi-character fields are truncated silently.

The resulting ``Dictionary`` is built once at startup and shared read-only by
every conversion call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Dict, Iterator, Mapping, Optional, Tuple, Union

import structlog

from hanja_hangul.conversion.exceptions import DictionaryLoadError

if TYPE_CHECKING:
    from hanja_hangul.config import Settings

logger = structlog.get_logger(__name__)

# Bundled starter tables shipped inside the package
BUNDLED_DATA_DIR = Path(__file__).resolve().parent.parent / "data"

CHAR_TABLE_FILE = "hanja_char.txt"
INITIAL_SOUND_TABLE_FILE = "dueum.txt"
WORD_TABLE_FILE = "hanja_word.txt"

CharMap = Mapping[str, str]
InitialSoundMap = Mapping[str, str]
WordMap = Mapping[str, str]


def _frozen(mapping: Dict[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class Dictionary:
    """Read-only handle over the three lookup tables."""

    char_map: CharMap = field(default_factory=dict)
    initial_sound_map: InitialSoundMap = field(default_factory=dict)
    word_map: WordMap = field(default_factory=dict)

    def __post_init__(self) -> None:
        # frozen dataclass: bypass __setattr__ to swap in read-only views
        object.__setattr__(self, "char_map", _frozen(self.char_map))
        object.__setattr__(self, "initial_sound_map", _frozen(self.initial_sound_map))
        object.__setattr__(self, "word_map", _frozen(self.word_map))

    @property
    def is_empty(self) -> bool:
        return not (self.char_map or self.initial_sound_map or self.word_map)


@dataclass
class _ParseStats:
    entries: int = 0
    skipped: int = 0


def _iter_lines(text: str) -> Iterator[str]:
    """Split on ``\\n`` only, dropping a trailing ``\\r`` from each line."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    for line in lines:
        yield line[:-1] if line.endswith("\r") else line


def _iter_fields(text: str, stats: _ParseStats) -> Iterator[Tuple[str, str]]:
    """Yield trimmed, non-empty ``(field1, field2)`` pairs from ``text``."""
    for line in _iter_lines(text):
        parts = line.split(",")
        if len(parts) != 2:
            stats.skipped += 1
            continue

        key = parts[0].strip()
        value = parts[1].strip()
        if not key or not value:
            stats.skipped += 1
            continue

        yield key, value


def _parse_char_table(text: str, stats: _ParseStats) -> Dict[str, str]:
    result: Dict[str, str] = {}
    for key, value in _iter_fields(text, stats):
        result[key[0]] = value[0]
    stats.entries = len(result)
    return result


def _parse_word_table(text: str, stats: _ParseStats) -> Dict[str, str]:
    result: Dict[str, str] = {}
    for key, value in _iter_fields(text, stats):
        result[key] = value
    stats.entries = len(result)
    return result


def parse_char_table(text: str) -> Dict[str, str]:
    """
    Parse a character table (Hanja or initial-sound) into a char -> char dict.

    Only the first character of each trimmed field is kept.

    Args:
        text: Raw table content.

    Returns:
        Dict mapping single characters to single characters.

    Example:
        >>> parse_char_table("李,리\\n\\nbroken line\\n")
        {'李': '리'}
    """
    return _parse_char_table(text, _ParseStats())


def parse_word_table(text: str) -> Dict[str, str]:
    """
    Parse the irregular word table into a str -> str dict.

    Both fields are kept as full trimmed strings.

    Example:
        >>> parse_word_table("女子, 여자\\n")
        {'女子': '여자'}
    """
    return _parse_word_table(text, _ParseStats())


def build_dictionary(
    char_text: str,
    initial_sound_text: str,
    word_text: str,
) -> Dictionary:
    """
    Build a Dictionary from the three raw table blobs.

    Malformed lines are skipped and counted; they never raise.

    Args:
        char_text: Content of the Hanja -> Hangul character table.
        initial_sound_text: Content of the initial-sound adjustment table.
        word_text: Content of the irregular word table.

    Returns:
        Immutable Dictionary handle.
    """
    tables = {}
    for name, text, parser in (
        ("char", char_text, _parse_char_table),
        ("initial_sound", initial_sound_text, _parse_char_table),
        ("word", word_text, _parse_word_table),
    ):
        stats = _ParseStats()
        tables[name] = parser(text, stats)
        logger.debug(
            "dictionary.table_parsed",
            table=name,
            entry_count=stats.entries,
            skipped_lines=stats.skipped,
        )

    return Dictionary(
        char_map=tables["char"],
        initial_sound_map=tables["initial_sound"],
        word_map=tables["word"],
    )


def _read_table(file_path: Path) -> str:
    try:
        return file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        error_msg = f"Unable to read dictionary table {file_path}: {e}"
        logger.error(
            "dictionary.read_failed",
            file_path=str(file_path),
            error=str(e),
        )
        raise DictionaryLoadError(error_msg, path=file_path, cause=e) from e


def resolve_data_dir(
    data_dir: Optional[Union[str, Path]] = None,
    settings: Optional["Settings"] = None,
) -> Path:
    """
    Resolve the directory holding the three tables.

    Explicit argument first, then ``settings.data_dir`` (HH_DATA_DIR), then
    the bundled tables. A leading ``~`` is expanded.
    """
    if data_dir is not None:
        return Path(data_dir).expanduser()

    if settings is None:
        from hanja_hangul.config import get_settings

        settings = get_settings()

    if settings.data_dir:
        return Path(settings.data_dir).expanduser()
    return BUNDLED_DATA_DIR


def load_dictionary(
    data_dir: Optional[Union[str, Path]] = None,
    settings: Optional["Settings"] = None,
) -> Dictionary:
    """
    Load all three tables from ``data_dir`` and build the Dictionary.

    Args:
        data_dir: Directory containing hanja_char.txt, dueum.txt and
            hanja_word.txt. Defaults to the configured data directory or the
            tables bundled with the package.
        settings: Settings to take ``data_dir`` from when no directory is
            given. Defaults to get_settings().

    Returns:
        Immutable Dictionary handle, to be shared by all conversion calls.

    Raises:
        DictionaryLoadError: If any of the three tables cannot be read.
    """
    resolved_dir = resolve_data_dir(data_dir, settings)

    char_text = _read_table(resolved_dir / CHAR_TABLE_FILE)
    initial_sound_text = _read_table(resolved_dir / INITIAL_SOUND_TABLE_FILE)
    word_text = _read_table(resolved_dir / WORD_TABLE_FILE)

    dictionary = build_dictionary(char_text, initial_sound_text, word_text)

    logger.info(
        "dictionary.loaded",
        data_dir=str(resolved_dir),
        char_entries=len(dictionary.char_map),
        initial_sound_entries=len(dictionary.initial_sound_map),
        word_entries=len(dictionary.word_map),
    )
    return dictionary
