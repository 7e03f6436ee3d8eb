from __future__ import annotations

"""
Configuration Domain Management.

Provides the default runtime configuration consumed by the CLI facade and
loads the optional JSON resolver configuration (aliases, path mappings,
extra module roots) handed verbatim to the resolver.
"""

import json
import logging
import os
from typing import Any, Dict

from deptree.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration (Session State).
    This dictionary drives the behavior of the traversal facade.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Entry point
        "filename": "",
        "directory": os.getcwd(),

        # Output shape
        "list_form": False,

        # Filtering
        "exclude_patterns": [],

        # Extraction
        "include_core": False,
        "skip_loader_plugins": True,

        # Resolution
        "resolver_config": {},
        "resolver_config_path": "",

        # Diagnostics
        "show_non_existent": False,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_resolver_config(path: str) -> Dict[str, Any]:
    """
    Read a JSON resolver configuration from disk.

    An explicitly requested file that cannot be used is a configuration
    error: the traversal must not start with a half-applied alias table.

    Args:
        path: Location of the JSON document.

    Returns:
        Dict[str, Any]: The parsed configuration object.

    Raises:
        ConfigurationError: If the file is missing, unreadable or not an object.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"cannot read resolver config '{path}': {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"resolver config '{path}' must contain a JSON object")

    logger.debug(f"Resolver configuration loaded from {path}")
    return data
