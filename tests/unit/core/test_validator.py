from __future__ import annotations

"""
Unit tests for the Configuration Validator.

Verifies:
1. Type coercion (String to Bool/List).
2. Default value injection.
3. Strict mode validation.
"""

import os

import pytest

from deptree.core.validator import validate_config


def test_validate_none_returns_defaults() -> None:
    """Passing None should return the full default configuration."""
    cfg, warnings = validate_config(None)

    assert cfg["list_form"] is False
    assert cfg["skip_loader_plugins"] is True
    assert cfg["exclude_patterns"] == []
    assert len(warnings) == 1


def test_validate_empty_dict_returns_defaults() -> None:
    cfg, warnings = validate_config({})

    assert cfg["filename"] == ""
    assert cfg["directory"] == os.getcwd()
    assert cfg["resolver_config"] == {}
    assert warnings == []


def test_validate_converts_strings_to_bools() -> None:
    cfg, warnings = validate_config({
        "list_form": "yes",
        "include_core": "0",
        "show_non_existent": 1,
        "skip_loader_plugins": "off",
    })

    assert cfg["list_form"] is True
    assert cfg["include_core"] is False
    assert cfg["show_non_existent"] is True
    assert cfg["skip_loader_plugins"] is False
    assert len(warnings) == 4


def test_validate_csv_and_list_items() -> None:
    cfg, _ = validate_config({"exclude_patterns": "node_modules, dist ,"})
    assert cfg["exclude_patterns"] == ["node_modules", "dist"]

    cfg, warnings = validate_config({"exclude_patterns": ["vendor", 3, "  "]})
    assert cfg["exclude_patterns"] == ["vendor"]
    assert any("exclude_patterns[1]" in w for w in warnings)


def test_validate_strings_are_stripped_with_fallback() -> None:
    cfg, warnings = validate_config({"filename": "  src/a.js ", "directory": "   ", "resolver_config_path": 5})

    assert cfg["filename"] == "src/a.js"
    assert cfg["directory"] == os.getcwd()
    assert cfg["resolver_config_path"] == ""
    assert len(warnings) == 1


def test_validate_resolver_config_must_be_a_mapping() -> None:
    cfg, warnings = validate_config({"resolver_config": ["aliases"]})

    assert cfg["resolver_config"] == {}
    assert warnings


def test_validate_strict_mode_raises() -> None:
    with pytest.raises(TypeError):
        validate_config({"list_form": "maybe"}, strict=True)
    with pytest.raises(TypeError):
        validate_config("not a dict", strict=True)
