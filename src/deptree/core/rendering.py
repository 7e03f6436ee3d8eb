from __future__ import annotations

"""
Tree Renderer.

Converts dependency trees into JSON-safe mappings and visual ASCII
representations. Tree results may share subtrees and, when the import
graph is cyclic, contain circular references; both renderers stop at a
node that is already on the current ancestor chain.
"""

from typing import Any, Dict, List, Set

from deptree.domain.tree_models import Tree

CIRCULAR_MARKER = " (circular)"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def to_serializable(tree: Tree) -> Dict[str, Any]:
    """
    Produce an acyclic deep copy of a tree suitable for json.dumps.

    A node re-entered along its own ancestor chain is emitted as an empty
    mapping. Non-mapping values (e.g. a pre-seeded flat list) become a
    mapping of their items to empty mappings.

    Args:
        tree: Tree result, possibly with shared or circular subtrees.

    Returns:
        Dict[str, Any]: Plain nested dictionaries.
    """
    return _copy_node(tree, set())


def render_tree_lines(tree: Tree) -> List[str]:
    """
    Transform a tree result into ASCII lines.

    Top-level keys are printed flush left; their dependencies use the
    standard connectors (├──, └──) in traversal order.

    Args:
        tree: Tree result, usually {entry: subtree}.

    Returns:
        List[str]: One line per rendered node.
    """
    lines: List[str] = []
    for entry, node in tree.items():
        lines.append(entry)
        children = _as_mapping(node)
        _render_children(children, lines, "", {id(tree), id(node)})
    return lines

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _as_mapping(node: Any) -> Dict[str, Any]:
    if isinstance(node, dict):
        return node
    if isinstance(node, (list, tuple)):
        return {str(item): {} for item in node}
    return {}


def _copy_node(node: Any, ancestors: Set[int]) -> Dict[str, Any]:
    if not isinstance(node, dict):
        return _as_mapping(node)
    if id(node) in ancestors:
        return {}

    ancestors.add(id(node))
    try:
        return {key: _copy_node(value, ancestors) for key, value in node.items()}
    finally:
        ancestors.discard(id(node))


def _render_children(
        node: Dict[str, Any],
        lines: List[str],
        prefix: str,
        ancestors: Set[int],
) -> None:
    entries = list(node.keys())
    total = len(entries)

    for i, entry in enumerate(entries):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "
        child = node[entry]

        # Cycle: the child is one of the nodes currently being rendered
        if isinstance(child, dict) and id(child) in ancestors:
            lines.append(f"{prefix}{connector}{entry}{CIRCULAR_MARKER}")
            continue

        lines.append(f"{prefix}{connector}{entry}")
        new_prefix = prefix + ("    " if is_last else "│   ")
        if isinstance(child, dict):
            ancestors.add(id(child))
            _render_children(child, lines, new_prefix, ancestors)
            ancestors.discard(id(child))
        else:
            _render_children(_as_mapping(child), lines, new_prefix, ancestors)
