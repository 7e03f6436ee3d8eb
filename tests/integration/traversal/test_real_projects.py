from __future__ import annotations

"""
Integration tests for full traversals with the bundled collaborators.

Builds small on-disk projects (JavaScript, Python, SCSS) and walks them
through the public API, checking that extraction, resolution and the
traversal engine agree end to end.
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from deptree import ConfigurationError, dependency_tree, to_list
from deptree.core.extraction.extractor import extract_specifiers


@pytest.fixture
def js_project(make_files) -> Path:
    """
    Structure:
    /src
      a.js    -> ./b, ./c, lodash, ./missing
      b.js    -> ./d
      c.js    -> ./d, ./a (cycle)
      d.js
    /node_modules/lodash/index.js
    """
    return make_files({
        "src/a.js": (
            "import b from './b';\n"
            "const c = require('./c');\n"
            "import _ from 'lodash';\n"
            "import gone from './missing';\n"
        ),
        "src/b.js": "export * from './d';\n",
        "src/c.js": "require('./d');\nrequire('./a');\nrequire('path');\n",
        "src/d.js": "module.exports = 42;\n",
        "node_modules/lodash/index.js": "module.exports = {};\n",
    })


def test_js_project_list(js_project: Path) -> None:
    src = js_project / "src"
    sink: list = []

    result = to_list(str(src / "a.js"), str(js_project), non_existent=sink)

    assert result == [
        str(src / "d.js"),
        str(src / "b.js"),
        str(src / "c.js"),
        str(js_project / "node_modules" / "lodash" / "index.js"),
        str(src / "a.js"),
    ]
    assert sink == ["./missing"]


def test_js_project_tree_keys(js_project: Path) -> None:
    src = js_project / "src"

    tree = dependency_tree(str(src / "a.js"), str(js_project))

    a_node = tree[str(src / "a.js")]
    assert list(a_node.keys()) == [
        str(src / "b.js"),
        str(src / "c.js"),
        str(js_project / "node_modules" / "lodash" / "index.js"),
    ]
    assert list(a_node[str(src / "c.js")].keys()) == [str(src / "d.js"), str(src / "a.js")]


def test_js_project_filter_node_modules(js_project: Path) -> None:
    result = to_list(
        str(js_project / "src" / "a.js"),
        str(js_project),
        filter=lambda path, source: "node_modules" not in path,
    )

    assert all("node_modules" not in p for p in result)
    assert len(result) == 4


def test_each_file_is_extracted_once(js_project: Path) -> None:
    with patch(
        "deptree.core.traversal.context.extract_specifiers", wraps=extract_specifiers
    ) as spy:
        dependency_tree(str(js_project / "src" / "a.js"), str(js_project))

    scanned = [c.args[0] for c in spy.call_args_list]
    assert len(scanned) == len(set(scanned)) == 5


def test_relative_paths_and_legacy_root(js_project: Path, monkeypatch) -> None:
    monkeypatch.chdir(js_project)

    result = to_list("src/a.js", root=".")

    assert result[-1] == str(js_project / "src" / "a.js")


def test_python_project(make_files) -> None:
    root = make_files({
        "app/__init__.py": "",
        "app/main.py": "import os\nfrom . import models\nfrom .services.api import handler\n",
        "app/models.py": "from app.utils import helper\n",
        "app/services/__init__.py": "",
        "app/services/api.py": "from .. import models\nimport requests\n",
        "app/utils.py": "",
    })
    app = root / "app"
    sink: list = []

    result = to_list(str(app / "main.py"), str(root), non_existent=sink)

    assert result == [
        str(app / "utils.py"),
        str(app / "models.py"),
        str(app / "services" / "api.py"),
        str(app / "main.py"),
    ]
    assert sink == ["requests"]


def test_stylesheet_project(make_files) -> None:
    root = make_files({
        "styles/main.scss": "@use 'sass:math';\n@import 'variables', 'components/button';\n",
        "styles/_variables.scss": "$c: red;\n",
        "styles/components/_button.scss": "@import '../variables';\n",
    })
    styles = root / "styles"

    tree = dependency_tree(str(styles / "main.scss"), str(root))

    assert tree == {
        str(styles / "main.scss"): {
            str(styles / "_variables.scss"): {},
            str(styles / "components" / "_button.scss"): {str(styles / "_variables.scss"): {}},
        }
    }


def test_invalid_options_fail_before_work(tmp_path: Path) -> None:
    visited: dict = {}

    with pytest.raises(ConfigurationError, match="directory not given"):
        dependency_tree(str(tmp_path / "a.js"), visited=visited)

    assert visited == {}
