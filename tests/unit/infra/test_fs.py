from __future__ import annotations

"""
Unit tests for the FileSystem Infrastructure Layer.
"""

import os
from pathlib import Path

from deptree.infra.fs import canonicalize, is_file, normalize_path, path_exists, read_text


def test_canonicalize_relative_and_absolute(tmp_path: Path) -> None:
    anchor = str(tmp_path)

    assert canonicalize("src/../a.js", anchor) == os.path.join(anchor, "a.js")
    assert canonicalize("/abs/./x/../y.js", anchor) == os.path.normpath("/abs/y.js")
    assert canonicalize("a.js") == os.path.join(os.getcwd(), "a.js")


def test_normalize_path_fallback_and_home(tmp_path: Path) -> None:
    assert normalize_path("  ", str(tmp_path)) == str(tmp_path)
    assert normalize_path("~", "/unused") == os.path.abspath(os.path.expanduser("~"))


def test_existence_checks(tmp_path: Path) -> None:
    target = tmp_path / "a.js"
    target.write_text("", encoding="utf-8")

    assert path_exists(str(target)) is True
    assert path_exists(str(tmp_path)) is True
    assert path_exists(None) is False
    assert path_exists("") is False
    assert is_file(str(target)) is True
    assert is_file(str(tmp_path)) is False


def test_read_text(tmp_path: Path) -> None:
    target = tmp_path / "a.js"
    target.write_text("require('./b')", encoding="utf-8")

    assert read_text(str(target)) == "require('./b')"
    assert read_text(str(tmp_path / "ghost.js")) is None
