from __future__ import annotations

"""
Python Import Extraction.

Parses Python source with the Abstract Syntax Tree (AST) module and lists
imported module names as written, in source order. Relative imports keep
their leading dots so the resolver can anchor them at the importing file.
"""

import ast
import sys
from typing import List, Tuple, Union

ImportNode = Union[ast.Import, ast.ImportFrom]


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def extract_python_imports(
        source: str,
        filename: str = "<unknown>",
        include_core: bool = False,
) -> List[str]:
    """
    List the module specifiers imported by a Python source file.

    - 'import a.b'            -> 'a.b'
    - 'from ..pkg import x'   -> '..pkg'
    - 'from . import x, y'    -> '.x', '.y'

    Imports nested in functions, classes or conditional blocks count as
    well. Standard-library modules are skipped unless 'include_core'.

    Args:
        source: Python source code.
        filename: Used in SyntaxError messages only.
        include_core: Keep standard-library imports.

    Returns:
        List[str]: Raw specifiers in source order.

    Raises:
        SyntaxError: If the source cannot be parsed.
    """
    tree = ast.parse(source, filename=filename)

    nodes: List[ImportNode] = [
        node for node in ast.walk(tree)
        if isinstance(node, (ast.Import, ast.ImportFrom))
    ]
    nodes.sort(key=_position)

    specifiers: List[str] = []
    for node in nodes:
        for specifier in _specifiers_of(node):
            if not include_core and is_stdlib_module(specifier):
                continue
            specifiers.append(specifier)

    return specifiers


def is_stdlib_module(specifier: str) -> bool:
    """Check whether an absolute dotted name belongs to the standard library."""
    if specifier.startswith("."):
        return False
    top_level = specifier.split(".", 1)[0]
    return top_level in sys.stdlib_module_names


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _position(node: ast.AST) -> Tuple[int, int]:
    return getattr(node, "lineno", 0), getattr(node, "col_offset", 0)


def _specifiers_of(node: ImportNode) -> List[str]:
    """Translate one import statement into raw specifiers."""
    if isinstance(node, ast.Import):
        return [alias.name for alias in node.names]

    dots = "." * (node.level or 0)
    if node.module:
        return [f"{dots}{node.module}"]

    # 'from . import a, b' may name submodules of the package
    names = [f"{dots}{alias.name}" for alias in node.names if alias.name != "*"]
    return names or [dots]
