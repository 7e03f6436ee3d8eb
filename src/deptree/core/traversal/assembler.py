from __future__ import annotations

"""
Result Assemblers.

Two independent renderers of the same walk. The traversal engine emits one
FileCompletion event per canonical path; an assembler folds the event into
that file's result:

- TreeAssembler: nested mapping, dependency path -> dependency's subtree.
- ListAssembler: deduplicated post-order list, dependencies first and the
  file itself last.

Both fill the placeholder object that was stored in the visited cache when
the file entered IN_PROGRESS, so a caller that captured the placeholder
during a cycle ends up holding the completed result.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Set

from deptree.core.traversal.bookkeeping import dedupe_preserving_order
from deptree.domain.tree_models import DependencyList, FileCompletion, Tree


class ResultAssembler(ABC):
    """
    Abstract base class for result-shape builders.
    """

    @abstractmethod
    def empty(self) -> Any:
        """Result returned for a file that does not exist on disk."""

    @abstractmethod
    def placeholder(self) -> Any:
        """Provisional result stored while a file is IN_PROGRESS."""

    @abstractmethod
    def assemble(self, event: FileCompletion, placeholder: Any) -> Any:
        """
        Build the final result of a completed file.

        Args:
            event: Completion event carrying the dependency sub-results.
            placeholder: The provisional object stored for this file.

        Returns:
            Any: The final result (the placeholder, filled in place).
        """

    @abstractmethod
    def finalize(self, filename: str, result: Any) -> Any:
        """Wrap the entry file's result into the top-level output shape."""

    def settle(
            self,
            stale: List[str],
            completions: Dict[str, FileCompletion],
            entries: Dict[str, Any],
    ) -> None:
        """
        Rebuild cached results assembled from an IN_PROGRESS sub-result.

        Called once, after the entry file completes. Shapes that fill
        placeholders by reference are already final and need nothing here.

        Args:
            stale: Files whose result was built from a provisional entry.
            completions: Completion events of this run, by canonical path.
            entries: The visited cache mapping, updated in place.
        """


# -----------------------------------------------------------------------------
# TREE SHAPE
# -----------------------------------------------------------------------------

class TreeAssembler(ResultAssembler):
    """Nested mapping of canonical path -> subtree."""

    def empty(self) -> Tree:
        return {}

    def placeholder(self) -> Tree:
        return {}

    def assemble(self, event: FileCompletion, placeholder: Tree) -> Tree:
        for dependency, sub_result in event.sub_results:
            placeholder[dependency] = sub_result
        return placeholder

    def finalize(self, filename: str, result: Tree) -> Dict[str, Tree]:
        return {filename: result}


# -----------------------------------------------------------------------------
# LIST SHAPE
# -----------------------------------------------------------------------------

class ListAssembler(ResultAssembler):
    """
    Post-order flat list: every dependency precedes its dependents.
    """

    def empty(self) -> DependencyList:
        return []

    def placeholder(self) -> DependencyList:
        return []

    def assemble(self, event: FileCompletion, placeholder: DependencyList) -> DependencyList:
        combined: List[str] = []
        for _, sub_result in event.sub_results:
            combined.extend(sub_result)

        # A pre-seeded or cyclic sub-list may already mention this file
        ordered = [p for p in dedupe_preserving_order(combined) if p != event.filename]
        ordered.append(event.filename)

        placeholder[:] = ordered
        return placeholder

    def finalize(self, filename: str, result: DependencyList) -> DependencyList:
        return dedupe_preserving_order(result)

    def settle(
            self,
            stale: List[str],
            completions: Dict[str, FileCompletion],
            entries: Dict[str, Any],
    ) -> None:
        """
        Recompute the lists of files that copied a cycle member's
        provisional (incomplete) list, so that a reused visited cache
        holds every reachable file for them.

        Each list is rebuilt by a post-order walk over the edges recorded
        during this run. Files memoized before the run contribute their
        cached list as-is.
        """
        for filename in stale:
            entries[filename][:] = _post_order(filename, completions, entries)


def _post_order(
        filename: str,
        completions: Dict[str, FileCompletion],
        entries: Dict[str, Any],
) -> DependencyList:
    """Deduplicated post-order of everything reachable from 'filename'."""
    ordered: DependencyList = []
    entered: Set[str] = set()

    def visit(path: str) -> None:
        entered.add(path)
        event = completions.get(path)
        if event is not None:
            for dependency in event.dependencies:
                if dependency not in entered:
                    visit(dependency)
        else:
            for item in entries.get(path) or []:
                if item not in entered:
                    entered.add(item)
                    ordered.append(item)
        ordered.append(path)

    visit(filename)
    return ordered


def create_assembler(is_list_form: bool) -> ResultAssembler:
    """Select the assembler for the requested output shape."""
    return ListAssembler() if is_list_form else TreeAssembler()
