from __future__ import annotations

"""
Specifier Extraction Service.

Default extractor used by the traversal engine: reads a file, picks the
scanner for its extension family and returns the raw dependency
specifiers in source order. Fault-tolerant by contract: unreadable files,
unsupported extensions and syntax errors all yield an empty list.
"""

import logging
import os
from typing import Any, Dict, List, Optional

from deptree.core.extraction.python_imports import extract_python_imports
from deptree.core.extraction.script_imports import extract_script_imports
from deptree.core.extraction.stylesheet_imports import extract_stylesheet_imports
from deptree.domain.constants import (
    FAMILY_PYTHON,
    FAMILY_SCRIPT,
    FAMILY_STYLESHEET,
    detect_family,
)
from deptree.infra.fs import read_text

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def extract_specifiers(filename: str, config: Optional[Dict[str, Any]] = None) -> List[str]:
    """
    Extract the raw dependency specifiers of a source file.

    Recognized 'config' keys:
        include_core: Keep standard-library / Node.js core modules (default False).
        skip_loader_plugins: Drop AMD 'plugin!resource' specifiers (default True).

    Args:
        filename: Absolute path of the file to scan.
        config: Optional extractor settings.

    Returns:
        List[str]: Raw specifiers, or an empty list on any failure.
    """
    cfg = config or {}
    family = detect_family(filename)
    if family is None:
        logger.debug(f"No extractor for '{os.path.basename(filename)}'")
        return []

    source = read_text(filename)
    if source is None:
        return []

    include_core = bool(cfg.get("include_core", False))

    if family == FAMILY_PYTHON:
        try:
            return extract_python_imports(source, filename, include_core=include_core)
        except (SyntaxError, ValueError) as e:
            logger.debug(f"Syntax error in {filename}: {e}")
            return []

    if family == FAMILY_SCRIPT:
        return extract_script_imports(
            source,
            include_core=include_core,
            skip_loader_plugins=bool(cfg.get("skip_loader_plugins", True)),
        )

    if family == FAMILY_STYLESHEET:
        return extract_stylesheet_imports(source)

    return []
