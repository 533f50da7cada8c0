"""Shared pytest fixtures: small in-memory dictionaries and table files."""

from __future__ import annotations

from pathlib import Path

import pytest

from hanja_hangul.config import get_settings
from hanja_hangul.conversion import Dictionary, build_dictionary

CHAR_TABLE = """李,리
女,녀
子,자
大,대
韓,한
民,민
國,국
六,륙
月,월
"""

INITIAL_SOUND_TABLE = """리,이
녀,여
륙,육
"""

WORD_TABLE = """女子,여자
六月,유월
"""


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Keep HH_* variables from the host environment out of each test."""
    for name in (
        "HH_DATA_DIR",
        "HH_STATIC_DIR",
        "HH_FALLBACK_MESSAGE",
        "HH_HTTP_HOST",
        "HH_HTTP_PORT",
        "HH_SSL_KEY",
        "ENVIRONMENT",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def dictionary() -> Dictionary:
    """Dictionary with a handful of characters, dueum rules and words."""
    return build_dictionary(CHAR_TABLE, INITIAL_SOUND_TABLE, WORD_TABLE)


@pytest.fixture
def empty_dictionary() -> Dictionary:
    return build_dictionary("", "", "")


@pytest.fixture
def tables_dir(tmp_path: Path) -> Path:
    """Directory holding the three table files in their on-disk names."""
    data_dir = tmp_path / "tables"
    data_dir.mkdir()
    (data_dir / "hanja_char.txt").write_text(CHAR_TABLE, encoding="utf-8")
    (data_dir / "dueum.txt").write_text(INITIAL_SOUND_TABLE, encoding="utf-8")
    (data_dir / "hanja_word.txt").write_text(WORD_TABLE, encoding="utf-8")
    return data_dir
