from __future__ import annotations

from deptree.core.api import dependency_tree, to_list
from deptree.domain.errors import ConfigurationError
from deptree.domain.tree_models import VisitState

__all__ = [
    "dependency_tree",
    "to_list",
    "ConfigurationError",
    "VisitState",
]
