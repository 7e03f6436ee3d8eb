from __future__ import annotations

"""
Dependency Graph Data Models.

Provides the recursive result types produced by a traversal, the visit
states tracked per canonical path, and the completion event emitted by
the traversal engine once a file's dependencies are fully walked.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple

# -----------------------------------------------------------------------------
# RESULT SHAPES
# -----------------------------------------------------------------------------

Tree = Dict[str, "Tree"]
DependencyList = List[str]


# -----------------------------------------------------------------------------
# CYCLE GUARD STATES
# -----------------------------------------------------------------------------

class VisitState(Enum):
    """
    Lifecycle of a canonical path within a single traversal run.

    A path moves from UNSEEN to IN_PROGRESS before its dependencies are
    walked, and from IN_PROGRESS to DONE once its result is assembled.
    There is no transition back.
    """
    UNSEEN = "unseen"
    IN_PROGRESS = "in_progress"
    DONE = "done"


# -----------------------------------------------------------------------------
# TRAVERSAL EVENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileCompletion:
    """
    Emitted once per canonical path when its dependency walk finishes.

    Attributes:
        filename: Canonical path of the completed file.
        dependencies: Surviving direct dependencies, in extraction order.
        sub_results: Pairs of (dependency path, result returned for it).
    """
    filename: str
    dependencies: Tuple[str, ...] = ()
    sub_results: Tuple[Tuple[str, Any], ...] = field(default=(), repr=False)
