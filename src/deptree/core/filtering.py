from __future__ import annotations

"""
Dependency Filtering Engine.

Implements regex-based exclusion logic and turns it into the filter
predicate consumed by the traversal engine. A rejected path is never
walked, so excluding a directory also hides everything only reachable
through it.
"""

import re
from typing import Callable, List, Optional

# -----------------------------------------------------------------------------
# CONFIGURATION DEFAULTS
# -----------------------------------------------------------------------------

def default_exclude_patterns() -> List[str]:
    """
    Get the default exclusion regex list.

    Returns:
        List[str]: Empty; nothing is filtered unless requested.
    """
    return []

# -----------------------------------------------------------------------------
# PATTERN COMPILATION AND MATCHING
# -----------------------------------------------------------------------------

def compile_patterns(patterns: List[str]) -> List[re.Pattern]:
    """
    Transform raw regex strings into compiled Pattern objects.

    Malformed regex strings are discarded instead of aborting the run.

    Args:
        patterns: List of raw regex strings.

    Returns:
        List[re.Pattern]: Compiled regex objects.
    """
    compiled: List[re.Pattern] = []
    for p in patterns:
        try:
            compiled.append(re.compile(p))
        except re.error:
            continue
    return compiled


def matches_any(name: str, compiled_patterns: List[re.Pattern]) -> bool:
    """
    Verify if a string matches at least one compiled regex pattern.

    Args:
        name: Path to evaluate.
        compiled_patterns: Pre-compiled regex objects.

    Returns:
        bool: True if any match is found, False otherwise.
    """
    return any(rx.search(name) for rx in compiled_patterns)

# -----------------------------------------------------------------------------
# FILTER PREDICATES
# -----------------------------------------------------------------------------

def build_exclude_filter(patterns: Optional[List[str]]) -> Optional[Callable[[str, str], bool]]:
    """
    Build a traversal filter rejecting paths that match any pattern.

    Args:
        patterns: Raw exclusion regexes, searched anywhere in the resolved path.

    Returns:
        Optional[Callable[[str, str], bool]]: Predicate (path, source) -> keep,
        or None when no valid pattern was given.
    """
    compiled = compile_patterns(patterns or [])
    if not compiled:
        return None

    def _keep(path: str, source_file: str) -> bool:
        return not matches_any(path, compiled)

    return _keep
