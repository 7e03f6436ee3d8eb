from __future__ import annotations

"""
Traversal Bookkeeping Hooks.

The two optional hooks invoked at fixed points of the walk: the filter
predicate (after resolution and existence checks, before recursion) and
the non-existent sink (whenever a specifier fails to resolve to an
existing file).
"""

import logging
from typing import Callable, List, Optional, Sequence

logger = logging.getLogger(__name__)

FilterPredicate = Callable[[str, str], bool]


# -----------------------------------------------------------------------------
# FILTER HOOK
# -----------------------------------------------------------------------------

def apply_filter(
        predicate: Optional[FilterPredicate],
        candidates: Sequence[str],
        source_file: str,
) -> List[str]:
    """
    Keep the candidate dependencies accepted by the filter predicate.

    A rejected path is dropped exactly like a path that never existed: it
    is not recursed into, never cached and never reported.

    Args:
        predicate: Callable (resolved path, source file) -> bool, or None.
        candidates: Resolved, existing dependency paths of 'source_file'.
        source_file: Canonical path of the file being walked.

    Returns:
        List[str]: Surviving paths, in their original order.
    """
    if predicate is None:
        return list(candidates)

    kept = [path for path in candidates if predicate(path, source_file)]
    logger.debug(f"Filter kept {len(kept)} of {len(candidates)} dependencies of {source_file}")
    return kept


# -----------------------------------------------------------------------------
# NON-EXISTENT SINK
# -----------------------------------------------------------------------------

class NonExistentSink:
    """
    Collects raw specifiers that did not resolve to an existing file.

    The caller's list is appended to during the walk, duplicates included,
    and deduplicated in place once the whole traversal has completed.
    """

    def __init__(self, target: Optional[List[str]] = None) -> None:
        self.items: List[str] = target if target is not None else []

    def record(self, specifier: str) -> None:
        """Append one unresolved raw specifier."""
        self.items.append(specifier)

    def dedupe(self) -> List[str]:
        """
        Remove repeated specifiers in place, preserving first-seen order.

        Returns:
            List[str]: The same (now deduplicated) list object.
        """
        self.items[:] = dedupe_preserving_order(self.items)
        return self.items

    def __len__(self) -> int:
        return len(self.items)


def dedupe_preserving_order(items: Sequence[str]) -> List[str]:
    """Return 'items' without repeats, keeping each first occurrence."""
    seen = set()
    out: List[str] = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        out.append(item)
    return out
