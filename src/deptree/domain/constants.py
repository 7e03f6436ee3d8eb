from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Centralizes the file extension families understood by the bundled
extractor and resolver, together with the suffixes probed when a
specifier omits its extension.
"""

import os
from typing import Dict, FrozenSet, List, Optional

# -----------------------------------------------------------------------------
# EXTENSION FAMILIES
# -----------------------------------------------------------------------------

PYTHON_EXTENSIONS: FrozenSet[str] = frozenset({".py", ".pyi"})

SCRIPT_EXTENSIONS: FrozenSet[str] = frozenset({
    ".js", ".jsx", ".mjs", ".cjs", ".ts", ".tsx",
})

STYLESHEET_EXTENSIONS: FrozenSet[str] = frozenset({
    ".css", ".scss", ".sass", ".less", ".styl",
})

FAMILY_PYTHON = "python"
FAMILY_SCRIPT = "script"
FAMILY_STYLESHEET = "stylesheet"

# -----------------------------------------------------------------------------
# RESOLUTION DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_PROBE_SUFFIXES: Dict[str, List[str]] = {
    FAMILY_PYTHON: [".py", ".pyi"],
    FAMILY_SCRIPT: [".js", ".jsx", ".mjs", ".cjs", ".ts", ".tsx", ".d.ts", ".json"],
    FAMILY_STYLESHEET: [".scss", ".sass", ".less", ".styl", ".css"],
}

INDEX_BASENAMES: Dict[str, List[str]] = {
    FAMILY_PYTHON: ["__init__.py", "__init__.pyi"],
    FAMILY_SCRIPT: ["index.js", "index.jsx", "index.ts", "index.tsx", "index.mjs", "index.cjs"],
    FAMILY_STYLESHEET: ["index.scss", "_index.scss", "index.css"],
}

DEFAULT_MODULE_DIRS: List[str] = ["node_modules"]

PACKAGE_ENTRY_FIELDS: List[str] = ["module", "main"]

# AMD loader plugins are written as "plugin!resource"
LOADER_PLUGIN_MARKER = "!"

NODE_CORE_MODULES: FrozenSet[str] = frozenset({
    "assert", "async_hooks", "buffer", "child_process", "cluster", "console",
    "constants", "crypto", "dgram", "diagnostics_channel", "dns", "domain",
    "events", "fs", "http", "http2", "https", "inspector", "module", "net",
    "os", "path", "perf_hooks", "process", "punycode", "querystring",
    "readline", "repl", "stream", "string_decoder", "sys", "timers", "tls",
    "trace_events", "tty", "url", "util", "v8", "vm", "wasi", "worker_threads",
    "zlib",
})


def detect_family(filename: str) -> Optional[str]:
    """
    Classify a file into an extension family.

    Args:
        filename: Path or basename of the file.

    Returns:
        Optional[str]: One of the FAMILY_* identifiers, or None if unsupported.
    """
    _, ext = os.path.splitext(filename)
    ext = ext.lower()
    if ext in PYTHON_EXTENSIONS:
        return FAMILY_PYTHON
    if ext in SCRIPT_EXTENSIONS:
        return FAMILY_SCRIPT
    if ext in STYLESHEET_EXTENSIONS:
        return FAMILY_STYLESHEET
    return None
