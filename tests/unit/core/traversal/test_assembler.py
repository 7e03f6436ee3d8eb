from __future__ import annotations

"""
Unit tests for the Result Assemblers.

Verifies:
1. Tree assembly fills the cached placeholder in place.
2. List assembly concatenates, deduplicates and appends the file last.
3. Top-level wrapping of both shapes.
"""

from deptree.core.traversal.assembler import ListAssembler, TreeAssembler, create_assembler
from deptree.domain.tree_models import FileCompletion


def _event(filename, *pairs) -> FileCompletion:
    return FileCompletion(
        filename=filename,
        dependencies=tuple(dep for dep, _ in pairs),
        sub_results=tuple(pairs),
    )


def test_create_assembler_selects_shape() -> None:
    assert isinstance(create_assembler(False), TreeAssembler)
    assert isinstance(create_assembler(True), ListAssembler)


def test_empty_results_are_fresh_objects() -> None:
    tree, flat = TreeAssembler(), ListAssembler()

    assert tree.empty() == {} and tree.empty() is not tree.empty()
    assert flat.empty() == [] and flat.empty() is not flat.empty()


def test_tree_assemble_fills_placeholder() -> None:
    assembler = TreeAssembler()
    placeholder = assembler.placeholder()
    b_tree = {"/p/d.js": {}}

    result = assembler.assemble(_event("/p/a.js", ("/p/b.js", b_tree), ("/p/c.js", {})), placeholder)

    assert result is placeholder
    assert result == {"/p/b.js": {"/p/d.js": {}}, "/p/c.js": {}}
    assert result["/p/b.js"] is b_tree


def test_tree_finalize_wraps_entry() -> None:
    assert TreeAssembler().finalize("/p/a.js", {"/p/b.js": {}}) == {"/p/a.js": {"/p/b.js": {}}}


def test_list_assemble_is_post_order() -> None:
    assembler = ListAssembler()
    placeholder = assembler.placeholder()

    result = assembler.assemble(
        _event("/p/a.js", ("/p/b.js", ["/p/d.js", "/p/b.js"]), ("/p/c.js", ["/p/d.js", "/p/c.js"])),
        placeholder,
    )

    assert result is placeholder
    assert result == ["/p/d.js", "/p/b.js", "/p/c.js", "/p/a.js"]


def test_list_assemble_moves_own_path_to_the_end() -> None:
    """A cyclic or pre-seeded sub-list may already contain the file itself."""
    assembler = ListAssembler()

    result = assembler.assemble(
        _event("/p/a.js", ("/p/b.js", ["/p/a.js", "/p/b.js"])),
        assembler.placeholder(),
    )

    assert result == ["/p/b.js", "/p/a.js"]


def test_list_finalize_deduplicates() -> None:
    result = ListAssembler().finalize("/p/a.js", ["/p/b.js", "/p/c.js", "/p/b.js", "/p/a.js"])

    assert result == ["/p/b.js", "/p/c.js", "/p/a.js"]


def test_list_settle_rebuilds_stale_entries_in_place() -> None:
    """b <-> c: c was assembled while b was still in progress."""
    assembler = ListAssembler()
    c_list = ["/p/c.js"]
    entries = {"/p/b.js": ["/p/c.js", "/p/b.js"], "/p/c.js": c_list}
    completions = {
        "/p/b.js": _event("/p/b.js", ("/p/c.js", c_list)),
        "/p/c.js": _event("/p/c.js", ("/p/b.js", [])),
    }

    assembler.settle(["/p/c.js"], completions, entries)

    assert entries["/p/c.js"] is c_list
    assert c_list == ["/p/b.js", "/p/c.js"]
    assert entries["/p/b.js"] == ["/p/c.js", "/p/b.js"]


def test_list_settle_splices_memoized_lists() -> None:
    entries = {
        "/p/x.js": ["/seed/y.js", "/p/x.js"],
        "/p/c.js": ["/p/c.js"],
    }
    completions = {"/p/c.js": _event("/p/c.js", ("/p/x.js", entries["/p/x.js"]))}

    ListAssembler().settle(["/p/c.js"], completions, entries)

    assert entries["/p/c.js"] == ["/seed/y.js", "/p/x.js", "/p/c.js"]
    assert entries["/p/x.js"] == ["/seed/y.js", "/p/x.js"]


def test_tree_settle_leaves_entries_untouched() -> None:
    b_node: dict = {}
    entries = {"/p/b.js": b_node}

    TreeAssembler().settle(["/p/b.js"], {"/p/b.js": _event("/p/b.js")}, entries)

    assert entries == {"/p/b.js": {}}
    assert entries["/p/b.js"] is b_node
