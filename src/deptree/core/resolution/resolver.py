from __future__ import annotations

"""
Specifier Resolution Service.

Default resolver used by the traversal engine: turns a raw specifier,
seen in a given source file, into an absolute path of an existing file.

- Python sources: dotted module names, with leading dots climbing from
  the importing package; absolute names are searched under the base
  directory and the configured 'python_paths'.
- Script and stylesheet sources: relative paths against the importing
  file; alias tables and path mappings for bare specifiers; then the base
  directory and the configured module directories (package.json aware).

Returns None whenever nothing on disk matches. Never raises for
unresolvable input.
"""

import json
import logging
import os
from typing import Any, Dict, Iterable, List, Optional

from deptree.domain.constants import (
    DEFAULT_MODULE_DIRS,
    DEFAULT_PROBE_SUFFIXES,
    FAMILY_PYTHON,
    FAMILY_SCRIPT,
    FAMILY_STYLESHEET,
    INDEX_BASENAMES,
    PACKAGE_ENTRY_FIELDS,
    detect_family,
)
from deptree.infra.fs import is_file

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def resolve_specifier(
        specifier: str,
        filename: str,
        directory: str,
        config: Optional[Dict[str, Any]] = None,
) -> Optional[str]:
    """
    Resolve a raw specifier to an absolute file path.

    Recognized 'config' keys:
        aliases: Mapping of bare prefix -> target path (relative to 'directory').
        paths: Mapping of 'prefix/*' patterns -> list of target patterns.
        base_url: Directory (relative to 'directory') the 'paths' targets start from.
        module_dirs: Package directories searched for bare specifiers.
        extensions: Suffixes probed when a specifier omits its extension.
        python_paths: Extra roots (relative to 'directory') for absolute Python imports.

    Args:
        specifier: Dependency reference as written in the source file.
        filename: Absolute path of the file containing the reference.
        directory: Base directory for non-relative specifiers.
        config: Optional resolver settings.

    Returns:
        Optional[str]: Absolute path of an existing file, or None.
    """
    cfg = config or {}
    family = detect_family(filename) or FAMILY_SCRIPT

    if family == FAMILY_PYTHON:
        resolved = _resolve_python(specifier, filename, directory, cfg)
    else:
        resolved = _resolve_path_like(specifier, filename, directory, cfg, family)

    if resolved is None:
        logger.debug(f"Unresolved '{specifier}' from {filename}")
        return None
    return os.path.abspath(resolved)


# -----------------------------------------------------------------------------
# PYTHON MODULES
# -----------------------------------------------------------------------------

def _resolve_python(
        specifier: str,
        filename: str,
        directory: str,
        cfg: Dict[str, Any],
) -> Optional[str]:
    """Resolve a dotted (possibly relative) Python module name."""
    suffixes = _suffixes(cfg, FAMILY_PYTHON)
    level = len(specifier) - len(specifier.lstrip("."))
    name = specifier[level:]
    parts = name.split(".") if name else []

    if level:
        base = os.path.dirname(filename)
        for _ in range(level - 1):
            base = os.path.dirname(base)

        found = _find_python_module(base, parts, suffixes)
        # 'from . import name' where name is defined in the package itself
        if found is None and len(parts) == 1:
            package = _find_python_module(base, [], suffixes)
            if package and os.path.abspath(package) != os.path.abspath(filename):
                found = package
        return found

    roots = [directory] + [os.path.join(directory, p) for p in cfg.get("python_paths", [])]
    for root in roots:
        found = _find_python_module(root, parts, suffixes)
        if found:
            return found
    return None


def _find_python_module(base: str, parts: List[str], suffixes: List[str]) -> Optional[str]:
    """Locate 'parts' below 'base' as a module file or a package."""
    target = os.path.join(base, *parts) if parts else base

    if parts:
        for suffix in suffixes:
            if is_file(target + suffix):
                return target + suffix

    for index in INDEX_BASENAMES[FAMILY_PYTHON]:
        candidate = os.path.join(target, index)
        if is_file(candidate):
            return candidate
    return None


# -----------------------------------------------------------------------------
# PATH-LIKE SPECIFIERS (SCRIPTS AND STYLESHEETS)
# -----------------------------------------------------------------------------

def _resolve_path_like(
        specifier: str,
        filename: str,
        directory: str,
        cfg: Dict[str, Any],
        family: str,
) -> Optional[str]:
    """Resolve a relative path, alias, mapped path or bare package name."""
    suffixes = _suffixes(cfg, family)
    source_dir = os.path.dirname(filename)

    if _is_relative(specifier):
        base = specifier if os.path.isabs(specifier) else os.path.join(source_dir, specifier)
        return _probe(os.path.normpath(base), suffixes, family)

    for candidate in _mapped_candidates(specifier, directory, cfg):
        found = _probe(candidate, suffixes, family)
        if found:
            return found

    # Preprocessors resolve bare imports next to the importing stylesheet
    search_roots = [source_dir, directory] if family == FAMILY_STYLESHEET else [directory]
    for root in search_roots:
        found = _probe(os.path.join(root, specifier), suffixes, family)
        if found:
            return found

    for module_dir in cfg.get("module_dirs", DEFAULT_MODULE_DIRS):
        found = _resolve_package(os.path.join(directory, module_dir, specifier), suffixes, family)
        if found:
            return found

    return None


def _mapped_candidates(specifier: str, directory: str, cfg: Dict[str, Any]) -> List[str]:
    """Expand webpack-style aliases and tsconfig-style path mappings."""
    candidates: List[str] = []

    aliases: Dict[str, str] = cfg.get("aliases") or {}
    # Longest alias wins ('@app/utils' before '@app')
    for alias in sorted(aliases, key=len, reverse=True):
        if specifier == alias or specifier.startswith(alias + "/"):
            rest = specifier[len(alias):].lstrip("/")
            candidates.append(os.path.join(directory, aliases[alias], rest))

    base_dir = os.path.join(directory, cfg.get("base_url", ""))
    paths: Dict[str, Iterable[str]] = cfg.get("paths") or {}
    for pattern, targets in paths.items():
        if isinstance(targets, str):
            targets = [targets]
        if "*" in pattern:
            prefix, suffix = pattern.split("*", 1)
            if not (specifier.startswith(prefix) and specifier.endswith(suffix)):
                continue
            if len(specifier) < len(prefix) + len(suffix):
                continue
            star = specifier[len(prefix):len(specifier) - len(suffix)]
            candidates.extend(os.path.join(base_dir, t.replace("*", star)) for t in targets)
        elif specifier == pattern:
            candidates.extend(os.path.join(base_dir, t) for t in targets)

    return [os.path.normpath(c) for c in candidates]


def _resolve_package(package_path: str, suffixes: List[str], family: str) -> Optional[str]:
    """Resolve a package directory through its package.json entry fields."""
    manifest = os.path.join(package_path, "package.json")
    if is_file(manifest):
        for entry in _package_entries(manifest):
            found = _probe(os.path.normpath(os.path.join(package_path, entry)), suffixes, family)
            if found:
                return found
    return _probe(package_path, suffixes, family)


def _package_entries(manifest: str) -> List[str]:
    """Read the entry point fields of a package.json, in priority order."""
    try:
        with open(manifest, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.debug(f"Ignoring unreadable manifest {manifest}: {e}")
        return []

    if not isinstance(data, dict):
        return []
    return [data[k] for k in PACKAGE_ENTRY_FIELDS if isinstance(data.get(k), str)]


def _probe(base: str, suffixes: List[str], family: str) -> Optional[str]:
    """
    Return the first existing file among 'base', 'base' + suffix, the
    Sass '_partial' variants (stylesheets only) and 'base'/index files.
    """
    candidates = [base] + [base + s for s in suffixes]

    if family == FAMILY_STYLESHEET:
        head, tail = os.path.split(base)
        if tail and not tail.startswith("_"):
            partial = os.path.join(head, "_" + tail)
            candidates += [partial] + [partial + s for s in suffixes]

    for candidate in candidates:
        if is_file(candidate):
            return candidate

    if os.path.isdir(base):
        for index in INDEX_BASENAMES.get(family, []):
            candidate = os.path.join(base, index)
            if is_file(candidate):
                return candidate
    return None


# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _is_relative(specifier: str) -> bool:
    return (
        specifier in (".", "..")
        or specifier.startswith(("./", "../"))
        or os.path.isabs(specifier)
    )


def _suffixes(cfg: Dict[str, Any], family: str) -> List[str]:
    configured = cfg.get("extensions")
    if configured:
        return list(configured)
    return list(DEFAULT_PROBE_SUFFIXES[family])
