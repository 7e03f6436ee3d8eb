from __future__ import annotations

"""
Dependency Traversal Facade.

Public entry points of the library:

- dependency_tree / to_list: direct calls with keyword options; raise
  ConfigurationError on invalid input.
- run_traversal: dict-driven facade used by the CLI; validates a raw
  configuration and reports configuration errors through the result object.
"""

import logging
from typing import Any, Dict, List, Optional

from deptree.core.filtering import build_exclude_filter
from deptree.core.traversal.bookkeeping import FilterPredicate
from deptree.core.traversal.context import Extractor, Resolver, TraversalContext
from deptree.core.traversal.engine import TraversalEngine
from deptree.core.validator import validate_config
from deptree.domain.config import load_resolver_config
from deptree.domain.errors import ConfigurationError
from deptree.domain.traversal_models import (
    TraversalResult,
    create_error_result,
    create_success_result,
)
from deptree.infra.fs import normalize_path

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# LIBRARY API
# -----------------------------------------------------------------------------

def dependency_tree(
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
) -> Any:
    """
    Compute the dependencies reachable from an entry file.

    Args:
        filename: Entry file, absolute or relative to 'cwd'.
        directory: Base directory used to resolve non-relative specifiers.
        root: Legacy alias of 'directory'.
        visited: Optional caller-owned cache (canonical path -> result),
            mutated in place and reusable across calls of the same shape.
        non_existent: Optional caller-owned list receiving the raw
            specifiers that failed to resolve (deduplicated after the run).
        filter: Optional predicate (resolved path, source file) -> keep.
        resolver_config: Settings passed verbatim to the resolver.
        extractor_config: Settings passed verbatim to the extractor.
        is_list_form: Return the post-order list instead of the tree.
        extractor: Replacement for the bundled specifier extractor.
        resolver: Replacement for the bundled path resolver.
        cwd: Anchor for relative paths (defaults to the process cwd).

    Returns:
        Any: {entry: subtree} in tree form, a list of paths in list form;
             {} or [] when the entry file does not exist. Cyclic imports
             make the tree self-referencing, so json.dumps() rejects it;
             serialize it through deptree.core.rendering.to_serializable().

    Raises:
        ConfigurationError: On invalid options, before any work starts.
    """
    context = TraversalContext.from_options(
        filename,
        directory,
        root=root,
        visited=visited,
        non_existent=non_existent,
        filter=filter,
        resolver_config=resolver_config,
        extractor_config=extractor_config,
        is_list_form=is_list_form,
        extractor=extractor,
        resolver=resolver,
        cwd=cwd,
    )
    return TraversalEngine(context).run()


def to_list(filename: Optional[str] = None, directory: Optional[str] = None, **options: Any) -> List[str]:
    """
    Same as dependency_tree, always returning the post-order list.

    The entry file is last; every file appears after all of its
    dependencies and at most once.
    """
    options["is_list_form"] = True
    return dependency_tree(filename, directory, **options)


# -----------------------------------------------------------------------------
# CONFIGURATION-DRIVEN FACADE
# -----------------------------------------------------------------------------

def run_traversal(config: Any) -> TraversalResult:
    """
    Validate a raw configuration and execute a complete traversal.

    Workflow:
    1. Coerce and normalize the configuration (warnings are logged).
    2. Load the optional resolver configuration file; inline
       'resolver_config' keys override the file's keys.
    3. Build the exclusion filter and the extractor settings.
    4. Walk the graph and package the outcome.

    Args:
        config: Raw configuration dictionary (see get_default_config).

    Returns:
        TraversalResult: Success result, or an error result when the
                         configuration is rejected.
    """
    cfg, warnings = validate_config(config, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    try:
        resolver_config: Dict[str, Any] = {}
        if cfg["resolver_config_path"]:
            resolver_config.update(load_resolver_config(normalize_path(cfg["resolver_config_path"], ".")))
        resolver_config.update(cfg["resolver_config"])

        # '~' and '$VAR' are expanded; an empty directory stays unset
        directory = normalize_path(cfg["directory"], ".") if cfg["directory"] else None

        extractor_config = {
            "include_core": cfg["include_core"],
            "skip_loader_plugins": cfg["skip_loader_plugins"],
        }

        non_existent: List[str] = []
        context = TraversalContext.from_options(
            cfg["filename"] or None,
            directory,
            non_existent=non_existent,
            filter=build_exclude_filter(cfg["exclude_patterns"]),
            resolver_config=resolver_config,
            extractor_config=extractor_config,
            is_list_form=cfg["list_form"],
        )
    except ConfigurationError as e:
        logger.error(f"Traversal rejected: {e}")
        return create_error_result(str(e), cfg)

    engine = TraversalEngine(context)
    result = engine.run()

    summary = {
        "files_walked": len(engine.completed),
        "non_existent_count": len(non_existent),
        "exclude_patterns": list(cfg["exclude_patterns"]),
    }
    logger.debug(f"Traversal summary: {summary}")

    return create_success_result(
        cfg,
        filename=context.filename,
        directory=context.directory,
        result=result,
        non_existent=non_existent,
        visited_count=len(context.cache),
        summary_extra=summary,
    )
