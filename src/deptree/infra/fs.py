from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path canonicalization, existence checks and fail-safe text reads
used by the traversal engine and the bundled collaborators. Acts as a thin
abstraction over the 'os' module so every component agrees on what a
canonical path is.
"""

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def canonicalize(path: str, cwd: Optional[str] = None) -> str:
    """
    Resolve a file path into its canonical (absolute, normalized) form.

    Relative inputs are anchored at 'cwd', or at the process working
    directory when no anchor is given.

    Args:
        path: Raw file path, absolute or relative.
        cwd: Optional anchor directory for relative paths.

    Returns:
        str: Absolute normalized path.
    """
    base = cwd or os.getcwd()
    return os.path.normpath(os.path.join(base, path))


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is blank.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)

# -----------------------------------------------------------------------------
# FILESYSTEM VALIDATION API
# -----------------------------------------------------------------------------

def path_exists(path: Optional[str]) -> bool:
    """Check whether a resolved path points at something on disk."""
    return bool(path) and os.path.exists(path)


def is_file(path: Optional[str]) -> bool:
    """Check whether a path points at a regular file."""
    return bool(path) and os.path.isfile(path)


def read_text(path: str) -> Optional[str]:
    """
    Read a source file as UTF-8 text.

    Args:
        path: Absolute path of the file.

    Returns:
        Optional[str]: File content, or None if it cannot be read or decoded.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Could not read '{os.path.basename(path)}': {e}")
        return None
