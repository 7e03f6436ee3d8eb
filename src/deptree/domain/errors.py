from __future__ import annotations

"""
Domain Exceptions.

Errors raised to callers of the traversal API. Everything else that can go
wrong during a walk (unreadable files, unresolvable specifiers) degrades to
an empty contribution instead of an exception.
"""


class ConfigurationError(ValueError):
    """Invalid traversal options detected before any file is visited."""


class CycleGuardError(RuntimeError):
    """Illegal visit-state transition on the visited cache."""
