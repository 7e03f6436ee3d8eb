from __future__ import annotations

"""
Visited Cache and Cycle Guard.

Wraps the caller-owned visited mapping (canonical path -> result) with an
explicit tri-state tag per path. A path is marked IN_PROGRESS, with a
placeholder result, before its dependencies are walked; any re-entry while
it is in progress returns the placeholder instead of descending again.
This bounds the walk by the number of distinct files, whatever cycles the
import graph contains.
"""

import logging
from typing import Any, Dict, Iterator, Optional

from deptree.domain.errors import CycleGuardError
from deptree.domain.tree_models import VisitState

logger = logging.getLogger(__name__)


class VisitedCache:
    """
    Memoization store shared by every recursive call of one traversal.

    Entries already present in the caller's mapping at construction time
    are treated as DONE: they are returned as-is and never re-extracted.
    """

    def __init__(self, entries: Optional[Dict[str, Any]] = None) -> None:
        """
        Args:
            entries: Optional caller-owned mapping, mutated in place.
        """
        self.entries: Dict[str, Any] = entries if entries is not None else {}
        self._states: Dict[str, VisitState] = {
            path: VisitState.DONE for path in self.entries
        }
        if self._states:
            logger.debug(f"Visited cache pre-seeded with {len(self._states)} entries")

    def state(self, path: str) -> VisitState:
        """Return the visit state of a canonical path."""
        return self._states.get(path, VisitState.UNSEEN)

    def lookup(self, path: str) -> Any:
        """
        Return the current entry of a path that is IN_PROGRESS or DONE.

        Raises:
            CycleGuardError: If the path was never visited.
        """
        if self.state(path) is VisitState.UNSEEN:
            raise CycleGuardError(f"no cache entry for unseen path: {path}")
        return self.entries[path]

    def begin(self, path: str, placeholder: Any) -> None:
        """
        Transition UNSEEN -> IN_PROGRESS, storing the provisional result.

        Raises:
            CycleGuardError: If the path was already visited.
        """
        current = self.state(path)
        if current is not VisitState.UNSEEN:
            raise CycleGuardError(f"cannot begin {path}: already {current.value}")
        self.entries[path] = placeholder
        self._states[path] = VisitState.IN_PROGRESS

    def finish(self, path: str, result: Any) -> None:
        """
        Transition IN_PROGRESS -> DONE, storing the final result.

        Raises:
            CycleGuardError: If the path is not currently in progress.
        """
        current = self.state(path)
        if current is not VisitState.IN_PROGRESS:
            raise CycleGuardError(f"cannot finish {path}: state is {current.value}")
        self.entries[path] = result
        self._states[path] = VisitState.DONE

    def __contains__(self, path: object) -> bool:
        return path in self._states

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)
