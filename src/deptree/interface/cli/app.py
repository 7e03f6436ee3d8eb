from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: initialization of logging, merging of
command-line overrides into the default configuration, traversal
execution, and result rendering (JSON tree, ASCII tree or bundle order).
"""

import json
import sys
from typing import Any, Dict, List, Optional

from deptree.core.api import run_traversal
from deptree.core.rendering import render_tree_lines, to_serializable
from deptree.domain.config import get_default_config
from deptree.domain.traversal_models import TraversalResult
from deptree.infra.logging import LoggingConfig, configure_logging, get_logger
from deptree.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failure, 2 configuration
             error, 130 interrupted).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console on stderr, optional rotating file)
    log_level = "DEBUG" if args.debug else "WARNING"
    logging_conf = LoggingConfig(level=log_level, console=True, log_file=args.log_file)
    configure_logging(logging_conf)

    logger.debug("CLI execution initiated. Resolving configuration...")

    # 3. Map and merge command-line overrides
    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(get_default_config(), overrides)

    # 4. Traversal phase (run_traversal validates and normalizes the config)
    try:
        result = run_traversal(raw_conf)
    except KeyboardInterrupt:
        logger.warning("Traversal interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return 130
    except Exception as e:
        msg = f"Traversal failed: {e}"
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 1

    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return 2

    # 5. Output rendering phase
    if args.json_output:
        print(json.dumps(result_to_dict(result), ensure_ascii=False, indent=2))
    elif result.is_list_form:
        for path in result.dependencies:
            print(path)
    elif args.pretty:
        for line in render_tree_lines(result.tree):
            print(line)
    else:
        print(json.dumps(to_serializable(result.tree), ensure_ascii=False, indent=2))

    if args.show_non_existent and result.non_existent:
        _print_non_existent(result.non_existent)

    return 0

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Perform a shallow merge of override values into the base configuration.

    Only known keys are merged, and None means 'not given on the command line'.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    keys_to_merge = [
        "filename", "directory", "resolver_config_path",
        "list_form", "exclude_patterns",
        "include_core", "skip_loader_plugins", "show_non_existent",
    ]
    for k in keys_to_merge:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def result_to_dict(result: TraversalResult) -> Dict[str, Any]:
    """
    Convert a TraversalResult into a JSON-safe dictionary.

    dataclasses.asdict cannot be used: cyclic imports produce circular
    references inside the tree.
    """
    return {
        "ok": result.ok,
        "error": result.error,
        "filename": result.filename,
        "directory": result.directory,
        "is_list_form": result.is_list_form,
        "tree": to_serializable(result.tree),
        "dependencies": list(result.dependencies),
        "non_existent": list(result.non_existent),
        "visited_count": result.visited_count,
        "summary": dict(result.summary),
    }


def _print_non_existent(specifiers: List[str]) -> None:
    print(f"{len(specifiers)} specifier(s) could not be resolved:", file=sys.stderr)
    for spec in specifiers:
        print(f"  - {spec}", file=sys.stderr)

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
