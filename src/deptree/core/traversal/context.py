from __future__ import annotations

"""
Traversal Context.

One context is built per top-level call and threaded through every
recursive invocation. It owns the shared mutable state of the run (visited
cache, non-existent sink) and the collaborators and hooks used at fixed
points of the walk. Nothing about a run is stored on modules or functions,
so independent traversals cannot interfere.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from deptree.core.extraction.extractor import extract_specifiers
from deptree.core.resolution.resolver import resolve_specifier
from deptree.core.traversal.bookkeeping import FilterPredicate, NonExistentSink
from deptree.core.traversal.cycle_guard import VisitedCache
from deptree.domain.errors import ConfigurationError
from deptree.infra.fs import canonicalize

logger = logging.getLogger(__name__)

Extractor = Callable[[str, Dict[str, Any]], List[str]]
Resolver = Callable[[str, str, str, Dict[str, Any]], Optional[str]]


@dataclass
class TraversalContext:
    """
    Per-run configuration and shared state.

    Attributes:
        filename: Canonical path of the entry file.
        directory: Absolute base directory for non-relative specifiers.
        cache: Visited cache wrapping the caller's mapping.
        sink: Non-existent sink wrapping the caller's list.
        is_list_form: Whether the flat list shape was requested.
        filter: Optional predicate (resolved path, source file) -> bool.
        resolver_config: Opaque settings passed verbatim to the resolver.
        extractor_config: Opaque settings passed verbatim to the extractor.
        extractor: Callable (file, extractor_config) -> raw specifiers.
        resolver: Callable (specifier, file, directory, resolver_config) -> path.
        cwd: Anchor for relative paths.
    """
    filename: str
    directory: str
    cache: VisitedCache
    sink: NonExistentSink
    is_list_form: bool = False
    filter: Optional[FilterPredicate] = None
    resolver_config: Dict[str, Any] = field(default_factory=dict)
    extractor_config: Dict[str, Any] = field(default_factory=dict)
    extractor: Extractor = extract_specifiers
    resolver: Resolver = resolve_specifier
    cwd: str = ""

    @classmethod
    def from_options(
            cls,
            filename: Optional[str] = None,
            directory: Optional[str] = None,
            *,
            root: Optional[str] = None,
            visited: Optional[Dict[str, Any]] = None,
            non_existent: Optional[List[str]] = None,
            filter: Optional[FilterPredicate] = None,
            resolver_config: Optional[Dict[str, Any]] = None,
            extractor_config: Optional[Dict[str, Any]] = None,
            is_list_form: bool = False,
            extractor: Optional[Extractor] = None,
            resolver: Optional[Resolver] = None,
            cwd: Optional[str] = None,
    ) -> TraversalContext:
        """
        Validate caller options and build the context of one run.

        All checks happen before any filesystem access, so a rejected call
        leaves the caller's cache and sink untouched.

        Raises:
            ConfigurationError: On a missing entry file or directory, or a
                non-callable filter, extractor or resolver.
        """
        if not filename:
            raise ConfigurationError("filename not given")

        directory = directory or root
        if not directory:
            raise ConfigurationError("directory not given")

        if filter is not None and not callable(filter):
            raise ConfigurationError("filter must be a function")
        if extractor is not None and not callable(extractor):
            raise ConfigurationError("extractor must be a function")
        if resolver is not None and not callable(resolver):
            raise ConfigurationError("resolver must be a function")

        anchor = cwd or os.getcwd()
        canonical = canonicalize(filename, anchor)
        logger.debug(f"given filename: {filename}, resolved filename: {canonical}")

        return cls(
            filename=canonical,
            directory=canonicalize(directory, anchor),
            cache=VisitedCache(visited),
            sink=NonExistentSink(non_existent),
            is_list_form=bool(is_list_form),
            filter=filter,
            resolver_config=resolver_config if resolver_config is not None else {},
            extractor_config=extractor_config if extractor_config is not None else {},
            extractor=extractor or extract_specifiers,
            resolver=resolver or resolve_specifier,
            cwd=anchor,
        )

    def canonicalize(self, path: str) -> str:
        """Resolve a path against this run's anchor directory."""
        return canonicalize(path, self.cwd)
