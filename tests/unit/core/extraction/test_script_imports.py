from __future__ import annotations

"""
Unit tests for JavaScript / TypeScript specifier extraction.

Verifies:
1. CommonJS, ES module, dynamic import and AMD syntaxes.
2. Comment stripping.
3. Node.js core and AMD loader-plugin filtering.
"""

import pytest

from deptree.core.extraction.script_imports import (
    extract_script_imports,
    is_core_module,
    strip_comments,
)

MODULE_SOURCE = """
const a = require('./a');
// const z = require('./commented');
/* import y from './block'; */
import b from "./b";
import './side-effect';
export { c } from './c';
const d = import('./d');
const fs = require('fs');
import path from 'node:path';
"""

AMD_SOURCE = """
define(['./x', 'text!./tpl.html', './y'], function (x, tpl, y) {
  require(['./lazy'], function (lazy) {});
});
"""


def test_module_syntaxes_in_source_order() -> None:
    assert extract_script_imports(MODULE_SOURCE) == ["./a", "./b", "./side-effect", "./c", "./d"]


def test_include_core_keeps_node_builtins() -> None:
    specifiers = extract_script_imports(MODULE_SOURCE, include_core=True)

    assert specifiers[-2:] == ["fs", "node:path"]


def test_amd_arrays_skip_loader_plugins_by_default() -> None:
    assert extract_script_imports(AMD_SOURCE) == ["./x", "./y", "./lazy"]


def test_amd_loader_plugins_kept_on_request() -> None:
    specifiers = extract_script_imports(AMD_SOURCE, skip_loader_plugins=False)

    assert specifiers == ["./x", "text!./tpl.html", "./y", "./lazy"]


def test_named_amd_module() -> None:
    assert extract_script_imports("define('widget', ['./z'], function (z) {});") == ["./z"]


def test_typescript_type_imports() -> None:
    source = "import type { User } from './models/user';\nexport * from './api';\n"

    assert extract_script_imports(source) == ["./models/user", "./api"]


def test_strip_comments_keeps_urls_in_strings() -> None:
    code = strip_comments("const u = 'http://example.com'; // trailing\n")

    assert "http://example.com" in code
    assert "trailing" not in code


def test_block_comment_marker_inside_string_is_not_a_comment() -> None:
    source = (
        "const pattern = 'lib/*.js';\n"
        "const a = require('./a');\n"
        "/** doc */\n"
        "const b = require('./b');\n"
    )

    assert extract_script_imports(source) == ["./a", "./b"]


def test_line_comment_marker_inside_string_is_not_a_comment() -> None:
    source = "const s = 'see //here'; const a = require('./a');"

    assert extract_script_imports(source) == ["./a"]


def test_template_and_escaped_strings_survive_stripping() -> None:
    source = (
        "const glob = `src/**/*.ts`;\n"
        'const q = "it\\"s // fine";\n'
        "import c from './c'; // import d from './d';\n"
    )

    assert extract_script_imports(source) == ["./c"]


def test_strip_comments_keeps_line_count() -> None:
    source = "a();\n/* one\n two */\nb(); // tail\n"

    assert strip_comments(source).count("\n") == source.count("\n")


@pytest.mark.parametrize(
    "spec,expected",
    [("fs", True), ("fs/promises", True), ("node:fs", True), ("./fs", False), ("lodash", False)],
)
def test_is_core_module(spec, expected) -> None:
    assert is_core_module(spec) is expected
