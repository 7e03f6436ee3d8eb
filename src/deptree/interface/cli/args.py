from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema, including help messages,
argument types, and defaults. Provides logic to translate raw argparse
namespaces into domain-compatible configuration overrides.
"""

import argparse
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the deptree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="deptree",
        description="Print the dependency tree (or bundle order) of a source file.",
    )

    # --- Entry Point ---
    p.add_argument(
        "filename",
        help="Entry file whose dependencies are traversed.",
    )
    p.add_argument(
        "-d", "--directory",
        dest="directory",
        default=None,
        help="Base directory for non-relative specifiers (default: cwd).",
    )
    p.add_argument(
        "-c", "--resolver-config",
        dest="resolver_config_path",
        default=None,
        help="JSON file with resolver settings (aliases, paths, module_dirs...).",
    )

    # --- Output Shape ---
    p.add_argument(
        "--list-form",
        action="store_true",
        help="Print the post-order list (dependencies first), one path per line.",
    )
    p.add_argument(
        "--pretty",
        action="store_true",
        help="Print the tree as ASCII art instead of JSON.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the complete traversal result as JSON.",
    )
    p.add_argument(
        "--show-non-existent",
        action="store_true",
        help="Report specifiers that could not be resolved on stderr.",
    )

    # --- Traversal Filters ---
    p.add_argument(
        "--exclude",
        dest="exclude_patterns",
        default=None,
        help="Comma-separated regexes; matching paths are not traversed.",
    )
    p.add_argument(
        "--include-core",
        action="store_true",
        help="Keep standard library and Node.js core modules.",
    )
    p.add_argument(
        "--keep-loader-plugins",
        action="store_true",
        help="Keep AMD loader plugin specifiers such as 'text!tpl.html'.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this file (rotated).",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a domain configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["filename"] = args.filename
    overrides["directory"] = args.directory
    overrides["resolver_config_path"] = args.resolver_config_path

    if args.list_form:
        overrides["list_form"] = True
    if args.exclude_patterns:
        overrides["exclude_patterns"] = _split_csv(args.exclude_patterns)
    if args.include_core:
        overrides["include_core"] = True
    if args.keep_loader_plugins:
        overrides["skip_loader_plugins"] = False
    if args.show_non_existent:
        overrides["show_non_existent"] = True

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """
    Convert a comma-separated string into a list of sanitized strings.
    """
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
