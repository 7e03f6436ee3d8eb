from __future__ import annotations

"""
JavaScript / TypeScript Specifier Extraction.

Pattern-based scanner recognizing the common module syntaxes: CommonJS
require calls, ES module import/export statements, dynamic imports and
AMD define/require dependency arrays. Comments are stripped first so
commented-out imports are not reported.
"""

import re
from typing import List, Tuple

from deptree.domain.constants import LOADER_PLUGIN_MARKER, NODE_CORE_MODULES

# -----------------------------------------------------------------------------
# REGEX CONSTANTS
# -----------------------------------------------------------------------------

# String literals are matched first so comment markers inside them survive
_COMMENT_OR_STRING_RX = re.compile(
    r"(?P<string>'(?:\\.|[^'\\\n])*'|\"(?:\\.|[^\"\\\n])*\"|`(?:\\.|[^`\\])*`)"
    r"|(?P<block>/\*.*?\*/)"
    r"|(?P<line>//[^\n]*)",
    re.DOTALL,
)

_SINGLE_SPECIFIER_PATTERNS: List[re.Pattern] = [
    # require('x')
    re.compile(r"\brequire\s*\(\s*(['\"`])(?P<spec>[^'\"`]+)\1\s*\)"),
    # import x from 'x' / export { y } from 'x' / import type { T } from 'x'
    re.compile(r"\b(?:import|export)\b[^'\";]*?\bfrom\s*(['\"])(?P<spec>[^'\"]+)\1"),
    # import 'x'
    re.compile(r"\bimport\s*(['\"])(?P<spec>[^'\"]+)\1"),
    # import('x')
    re.compile(r"\bimport\s*\(\s*(['\"`])(?P<spec>[^'\"`]+)\1\s*\)"),
]

# define(['a', 'b'], fn) / define('name', ['a'], fn) / require(['a'], fn)
_AMD_ARRAY_RX = re.compile(
    r"\b(?:define|require)\s*\(\s*(?:(['\"])[^'\"]*\1\s*,\s*)?\[(?P<list>[^\]]*)\]"
)
_QUOTED_RX = re.compile(r"(['\"])([^'\"]+)\1")


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def extract_script_imports(
        source: str,
        include_core: bool = False,
        skip_loader_plugins: bool = True,
) -> List[str]:
    """
    List the module specifiers referenced by a script, in source order.

    Args:
        source: JavaScript or TypeScript source code.
        include_core: Keep Node.js core modules ('fs', 'node:path', ...).
        skip_loader_plugins: Drop AMD loader-plugin specifiers ('text!x').

    Returns:
        List[str]: Raw specifiers.
    """
    code = strip_comments(source)
    found: List[Tuple[int, str]] = []

    for rx in _SINGLE_SPECIFIER_PATTERNS:
        for m in rx.finditer(code):
            found.append((m.start("spec"), m.group("spec")))

    for m in _AMD_ARRAY_RX.finditer(code):
        offset = m.start("list")
        for item in _QUOTED_RX.finditer(m.group("list")):
            found.append((offset + item.start(2), item.group(2)))

    found.sort(key=lambda pair: pair[0])

    specifiers: List[str] = []
    for _, spec in found:
        spec = spec.strip()
        if not spec:
            continue
        if skip_loader_plugins and LOADER_PLUGIN_MARKER in spec:
            continue
        if not include_core and is_core_module(spec):
            continue
        specifiers.append(spec)

    return specifiers


def strip_comments(source: str) -> str:
    """Remove block and line comments, keeping string literals and line structure."""
    return _COMMENT_OR_STRING_RX.sub(_drop_comment, source)


def _drop_comment(match: re.Match) -> str:
    if match.group("string") is not None:
        return match.group(0)
    if match.group("block") is not None:
        return "\n" * match.group(0).count("\n")
    return ""


def is_core_module(specifier: str) -> bool:
    """Check whether a specifier names a Node.js built-in module."""
    if specifier.startswith("node:"):
        return True
    return specifier.split("/", 1)[0] in NODE_CORE_MODULES
