from __future__ import annotations

"""
Traversal Result Data Models.

Defines the result object and factory functions used to communicate a
completed (or rejected) traversal from the API facade to the interface
layer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TraversalResult:
    """
    Unified result object of a complete traversal run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        filename: Canonical entry file.
        directory: Base directory handed to the resolver.
        is_list_form: Whether the list shape was requested.
        tree: Nested dependency mapping (tree shape only).
        dependencies: Post-order flat list (list shape only).
        non_existent: Deduplicated raw specifiers that failed to resolve.
        visited_count: Number of entries in the visited cache after the run.
        summary: Technical execution summary.
    """
    ok: bool
    error: str

    filename: str
    directory: str
    is_list_form: bool

    tree: Dict[str, Any] = field(default_factory=dict)
    dependencies: List[str] = field(default_factory=list)
    non_existent: List[str] = field(default_factory=list)
    visited_count: int = 0

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        summary_extra: Optional[Dict[str, Any]] = None
) -> TraversalResult:
    """
    Create a failed traversal result instance.

    Args:
        error: Detailed error description.
        cfg: The configuration used during the failed run.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        TraversalResult: An immutable error result object.
    """
    return TraversalResult(
        ok=False,
        error=error,
        filename=cfg.get("filename", ""),
        directory=cfg.get("directory", ""),
        is_list_form=bool(cfg.get("list_form", False)),
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        filename: str,
        directory: str,
        result: Any,
        non_existent: List[str],
        visited_count: int,
        summary_extra: Optional[Dict[str, Any]] = None
) -> TraversalResult:
    """
    Create a successful traversal result instance.

    Args:
        cfg: Final configuration used during execution.
        filename: Canonical entry file.
        directory: Absolute base directory.
        result: Tree mapping or flat list, depending on the requested shape.
        non_existent: Deduplicated unresolved specifiers.
        visited_count: Size of the visited cache.
        summary_extra: Final execution metrics.

    Returns:
        TraversalResult: An immutable success result object.
    """
    is_list_form = bool(cfg.get("list_form", False))
    return TraversalResult(
        ok=True,
        error="",
        filename=filename,
        directory=directory,
        is_list_form=is_list_form,
        tree={} if is_list_form else result,
        dependencies=list(result) if is_list_form else [],
        non_existent=list(non_existent),
        visited_count=visited_count,
        summary=summary_extra or {},
    )
