from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Builders for on-disk fixture projects.
3. An in-memory dependency graph with spy collaborators, used to check
   traversal properties independently of any source syntax.
"""

import os
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional
from unittest.mock import Mock

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Fixture Projects
# -----------------------------------------------------------------------------
@pytest.fixture
def make_files(tmp_path: Path) -> Callable[[Dict[str, str]], Path]:
    """
    Return a builder writing {relative path: content} below tmp_path.

    Returns:
        Callable: Builder returning the project root.
    """
    def _make(files: Dict[str, str]) -> Path:
        for rel, content in files.items():
            target = tmp_path / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return tmp_path

    return _make


class FakeGraph:
    """
    Dependency graph backed by empty files and spy collaborators.

    Every key of 'edges' becomes an empty file under 'root'. The extractor
    returns the edge list of a file; the resolver joins the specifier to
    the base directory, so unknown names resolve to paths that do not exist.
    """

    def __init__(self, root: Path, edges: Dict[str, List[str]]) -> None:
        self.root = str(root)
        self.edges = edges
        for name in edges:
            (root / name).write_text("", encoding="utf-8")

        self.extractor = Mock(side_effect=self._extract)
        self.resolver = Mock(side_effect=self._resolve)

    def path(self, name: str) -> str:
        return os.path.join(self.root, name)

    def extract_calls(self, name: str) -> int:
        target = self.path(name)
        return sum(1 for c in self.extractor.call_args_list if c.args[0] == target)

    def options(self, **extra) -> Dict:
        opts = {"extractor": self.extractor, "resolver": self.resolver}
        opts.update(extra)
        return opts

    def _extract(self, filename: str, config: Optional[Dict] = None) -> List[str]:
        return list(self.edges.get(os.path.basename(filename), []))

    def _resolve(self, specifier: str, filename: str, directory: str, config: Optional[Dict] = None) -> str:
        return os.path.normpath(os.path.join(directory, specifier))


@pytest.fixture
def fake_graph(tmp_path: Path) -> Callable[[Dict[str, List[str]]], FakeGraph]:
    """Return a FakeGraph factory rooted at tmp_path."""
    def _build(edges: Dict[str, List[str]]) -> FakeGraph:
        return FakeGraph(tmp_path, edges)

    return _build
